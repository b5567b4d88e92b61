"""
Zones d'un personnage.

Forme stockée :
    {"hand": [id, ...], "active": [{"cardId": id, "counter": n}, ...],
     "discard": [id, ...], "lost": [id, ...]}

L'ordre d'insertion est l'ordre d'affichage. Seule la zone active enveloppe
ses entrées, pour porter le compteur.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional


class Zone(str, Enum):
    HAND = "hand"
    ACTIVE = "active"
    DISCARD = "discard"
    LOST = "lost"


Zones = Dict[str, List[Any]]


def empty_zones() -> Zones:
    return {z.value: [] for z in Zone}


def entry_card_id(zone: Zone, entry: Any) -> Any:
    if zone is Zone.ACTIVE:
        return entry.get("cardId")
    return entry


def find_active(zones: Zones, card_id: int) -> Optional[Dict[str, Any]]:
    for entry in zones[Zone.ACTIVE.value]:
        if entry.get("cardId") == card_id:
            return entry
    return None


def take_card(zones: Zones, zone: Zone, card_id: int) -> bool:
    """Retire la première occurrence de `card_id` dans `zone`. False si absente."""
    container = zones[zone.value]
    for index, entry in enumerate(container):
        if entry_card_id(zone, entry) == card_id:
            del container[index]
            return True
    return False


def put_card(zones: Zones, zone: Zone, card_id: int) -> None:
    """Ajoute en fin de `zone` ; l'entrée en zone active remet le compteur à 0."""
    if zone is Zone.ACTIVE:
        zones[zone.value].append({"cardId": card_id, "counter": 0})
    else:
        zones[zone.value].append(card_id)
