"""
Conteneur de services
=====================

Assemble store, identités, sessions, catalogue et moteur de personnages.
`main.py` construit un conteneur à l'import et le garde dans `app.state` ;
les tests construisent le leur sur un fichier temporaire et le substituent.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cardzones.config.settings import settings
from .catalog import Catalog
from .character_engine import CharacterEngine
from .identity import IdentityStore
from .sessions import InMemorySessionStore, SessionManager, SessionStore
from .store import JsonStore


@dataclass
class Services:
    store: JsonStore
    identity: IdentityStore
    sessions: SessionManager
    catalog: Catalog
    characters: CharacterEngine


def build_services(
    db_path: Optional[Path] = None,
    session_store: Optional[SessionStore] = None,
) -> Services:
    store = JsonStore(Path(db_path or settings.db_path))
    identity = IdentityStore(store)
    catalog = Catalog(store)
    return Services(
        store=store,
        identity=identity,
        sessions=SessionManager(identity, session_store or InMemorySessionStore()),
        catalog=catalog,
        characters=CharacterEngine(store, catalog),
    )
