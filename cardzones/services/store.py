"""
Service: store.py
Rôle:
- Détenir l'unique document JSON : `users`, `games`, `classes`, `cards`,
  `characters` et les compteurs d'ids monotones (`nextIds`).
- Chaque opération relit tout le document, le modifie, puis le réécrit.

Concurrence:
- `transaction()` tient un RLock global au store pendant le cycle
  lecture-modification-écriture : les écrivains du processus sont sérialisés.
  Entre processus, la dernière écriture gagne.
- Le document n'est sauvegardé que si le bloc se termine sans erreur : une
  opération en échec ne persiste rien.

Limites:
- Les entiers stockés tiennent sur 64 bits signés (limite d'orjson) :
  `STORED_INT_MIN` / `STORED_INT_MAX`.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from threading import RLock
from typing import Any, Dict, Iterator

from cardzones.config.settings import settings
from .io_utils import read_json, write_json

logger = logging.getLogger(__name__)

ID_KEYS = ("gameId", "classId", "cardId", "characterId")
STORED_INT_MIN = -(2 ** 63)
STORED_INT_MAX = 2 ** 63 - 1


def default_document(admin_username: str | None = None) -> Dict[str, Any]:
    admin = admin_username or settings.BOOTSTRAP_ADMIN
    return {
        "users": [{"username": admin, "passwordHash": None, "role": "admin"}],
        "games": [],
        "classes": [],
        "cards": [],
        "characters": [],
        "nextIds": {key: 1 for key in ID_KEYS},
    }


@dataclass
class JsonStore:
    path: Path
    _lock: RLock = field(default_factory=RLock, init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def load(self) -> Dict[str, Any]:
        """Lit tout le document (document par défaut si le fichier manque)."""
        with self._lock:
            doc = read_json(self.path)
            if doc is None:
                logger.info("Initialising empty store", extra={"store_path": str(self.path)})
                doc = default_document()
                write_json(self.path, doc)
            for key in ("users", "games", "classes", "cards", "characters"):
                doc.setdefault(key, [])
            ids = doc.setdefault("nextIds", {})
            for key in ID_KEYS:
                ids.setdefault(key, 1)
            return doc

    def save(self, doc: Dict[str, Any]) -> None:
        with self._lock:
            write_json(self.path, doc)

    @contextmanager
    def transaction(self) -> Iterator[Dict[str, Any]]:
        """
        Lecture-modification-écriture sous le verrou du store.
        Le document n'est réécrit que si le bloc sort sans erreur.
        """
        with self._lock:
            doc = self.load()
            yield doc
            try:
                self.save(doc)
            except OSError:
                logger.exception("Store write failed", extra={"store_path": str(self.path)})
                raise


def next_id(doc: Dict[str, Any], key: str) -> int:
    """Alloue le prochain id pour `key` (parmi ID_KEYS) dans un document chargé."""
    ids = doc.setdefault("nextIds", {})
    value = int(ids.get(key, 1))
    ids[key] = value + 1
    return value
