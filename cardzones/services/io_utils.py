"""
Utilitaires IO JSON basés sur orjson.
- read_json(Path)  -> Any | None (None si fichier manquant)
- write_json(Path, data) -> écriture binaire (dossiers créés si besoin)

Attention:
- orjson renvoie/attend des bytes ; lecture/écriture en mode binaire.
- write_json sérialise AVANT de toucher au disque (un échec d'encodage ne
  laisse aucun fichier), puis passe par un fichier temporaire voisin et
  `replace` : un lecteur ne voit jamais un document à moitié écrit.
- orjson refuse les entiers hors 64 bits (TypeError).
"""
import orjson as json
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """Lit un fichier JSON (ou None s'il n'existe pas)."""
    if not path.exists():
        return None
    with path.open("rb") as f:
        return json.loads(f.read())


def write_json(path: Path, data: Any) -> None:
    """Écrit un fichier JSON indenté, en remplaçant l'ancien contenu d'un coup."""
    payload = json.dumps(data, option=json.OPT_INDENT_2)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    with tmp.open("wb") as f:
        f.write(payload)
    tmp.replace(path)
