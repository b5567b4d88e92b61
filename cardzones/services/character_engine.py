"""
Service: character_engine.py
Rôle:
- Créer et lister les personnages, en produire la vue d'affichage.
- Piloter la machine à états des zones : choix de la main, déplacements
  entre zones, compteurs des cartes actives.

Autorisation (toute opération sur un personnage):
- personnage inconnu -> NotFound
- acteur ni propriétaire ni admin -> Forbidden
- puis les contrôles propres à l'opération (famille InvalidInput)

Chaque mutation est une transaction du store : elle s'applique en entier et
est persistée, ou elle lève et le document reste intact.

Limites:
- `level` et `delta` doivent tenir dans les entiers stockables (64 bits) ;
  un compteur qui sortirait de cette plage est refusé (InvalidInput).
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .catalog import Catalog
from .errors import (
    CardNotActive,
    CardNotInZone,
    Forbidden,
    InvalidCardSelection,
    InvalidHandSize,
    InvalidInput,
    NotFound,
)
from .store import STORED_INT_MAX, STORED_INT_MIN, JsonStore, next_id
from .zones import Zone, empty_zones, find_active, put_card, take_card

logger = logging.getLogger(__name__)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_storable_int(value: Any) -> bool:
    return _is_int(value) and STORED_INT_MIN <= value <= STORED_INT_MAX


def _summary(ch: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": ch["id"],
        "name": ch.get("name", ""),
        "gameId": ch["gameId"],
        "classId": ch["classId"],
        "level": ch["level"],
    }


def can_access(actor: Dict[str, Any], ch: Dict[str, Any]) -> bool:
    return actor.get("role") == "admin" or ch.get("username") == actor.get("username")


class CharacterEngine:
    def __init__(self, store: JsonStore, catalog: Catalog):
        self.store = store
        self.catalog = catalog

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _authorized(doc: Dict[str, Any], character_id: int, actor: Dict[str, Any]) -> Dict[str, Any]:
        ch = None
        for candidate in doc["characters"]:
            if candidate.get("id") == character_id:
                ch = candidate
                break
        if ch is None:
            raise NotFound("Character not found")
        if not can_access(actor, ch):
            raise Forbidden()
        zones = ch.setdefault("zones", empty_zones())
        for zone in Zone:
            zones.setdefault(zone.value, [])
        return ch

    # ------------------------------------------------------------------
    # Personnages
    # ------------------------------------------------------------------
    def list_characters(self, actor: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Personnages de l'acteur (tous pour un admin)."""
        doc = self.store.load()
        return [_summary(ch) for ch in doc["characters"] if can_access(actor, ch)]

    def create_character(
        self,
        actor: Dict[str, Any],
        name: str,
        game_id: int,
        class_id: int,
        level: int,
    ) -> Dict[str, Any]:
        if not name or not _is_int(game_id) or not _is_int(class_id):
            raise InvalidInput()
        if not _is_storable_int(level) or level < 0:
            raise InvalidInput()
        with self.store.transaction() as doc:
            game = Catalog.find_game(doc, game_id)
            cls = Catalog.find_class(doc, class_id)
            if game is None or cls is None or cls.get("gameId") != game_id:
                raise InvalidInput("Invalid game or class")
            ch = {
                "id": next_id(doc, "characterId"),
                "username": actor["username"],
                "name": name,
                "gameId": game_id,
                "classId": class_id,
                "level": level,
                "zones": empty_zones(),
            }
            doc["characters"].append(ch)
        logger.info("Character created", extra={"character_id": ch["id"], "username": actor["username"]})
        return _summary(ch)

    def get_character_view(self, character_id: int, actor: Dict[str, Any]) -> Dict[str, Any]:
        """
        Vue dénormalisée : entrées des zones résolues contre les cartes de la
        classe. Les ids qui ne se résolvent plus dans le catalogue sont omis
        de la vue (perte assumée) ; les zones stockées ne sont pas modifiées.
        `handSize` vaut None si la classe a disparu.
        """
        doc = self.store.load()
        ch = self._authorized(doc, character_id, actor)
        class_cards = {c["id"]: c for c in Catalog.eligible_cards(doc, class_id=ch["classId"])}
        cls = Catalog.find_class(doc, ch["classId"])

        def card_info(card_id: Any) -> Optional[Dict[str, Any]]:
            card = class_cards.get(card_id)
            if card is None:
                return None
            return {"id": card["id"], "name": card["name"], "level": card["level"], "image": card.get("image", "")}

        zones: Dict[str, List[Dict[str, Any]]] = {}
        for zone in Zone:
            resolved = []
            for entry in ch["zones"][zone.value]:
                if zone is Zone.ACTIVE:
                    info = card_info(entry.get("cardId"))
                    if info is not None:
                        info["counter"] = entry.get("counter", 0)
                else:
                    info = card_info(entry)
                if info is not None:
                    resolved.append(info)
            zones[zone.value] = resolved

        view = _summary(ch)
        view["handSize"] = cls["handSize"] if cls else None
        view["zones"] = zones
        return view

    # ------------------------------------------------------------------
    # Machine à états des zones
    # ------------------------------------------------------------------
    def commit_hand(self, character_id: int, actor: Dict[str, Any], card_ids: List[int]) -> None:
        """
        Remplace la main par `card_ids` (ordre conservé) et vide les autres
        zones. Un nouveau choix après le début de partie est un reset complet.
        Les doublons passent tant que chaque id satisfait le contrôle catalogue.
        """
        if not isinstance(card_ids, list):
            raise InvalidInput()
        with self.store.transaction() as doc:
            ch = self._authorized(doc, character_id, actor)
            cls = Catalog.find_class(doc, ch["classId"])
            if cls is None:
                raise InvalidInput("Invalid class")
            hand_size = cls["handSize"]
            if len(card_ids) != hand_size:
                raise InvalidHandSize(f"Hand must contain exactly {hand_size} cards")
            valid_ids = {c["id"] for c in Catalog.eligible_cards(doc, ch["classId"], ch["level"])}
            for cid in card_ids:
                if not _is_int(cid) or cid not in valid_ids:
                    raise InvalidCardSelection()
            zones = empty_zones()
            zones[Zone.HAND.value] = list(card_ids)
            ch["zones"] = zones
        logger.info("Hand committed", extra={"character_id": character_id, "hand_size": hand_size})

    def move_card(
        self,
        character_id: int,
        actor: Dict[str, Any],
        card_id: int,
        from_zone: Zone | str,
        to_zone: Zone | str,
    ) -> None:
        """
        Déplace une carte d'une zone à une autre. Toute paire de zones est
        acceptée ; la carte doit seulement être présente dans `from_zone`.
        L'entrée en zone active démarre le compteur à 0. Une boucle sur la
        même zone ne change rien.
        """
        try:
            source, target = Zone(from_zone), Zone(to_zone)
        except ValueError:
            raise InvalidInput() from None
        if not _is_int(card_id):
            raise InvalidInput()
        with self.store.transaction() as doc:
            ch = self._authorized(doc, character_id, actor)
            if source is target:
                return
            zones = ch["zones"]
            if not take_card(zones, source, card_id):
                raise CardNotInZone()
            put_card(zones, target, card_id)
        logger.info(
            "Card moved",
            extra={"character_id": character_id, "card_id": card_id, "from_zone": source.value, "to_zone": target.value},
        )

    def adjust_counter(self, character_id: int, actor: Dict[str, Any], card_id: int, delta: int) -> int:
        """Ajoute `delta` au compteur d'une carte active, plancher à 0. Renvoie la nouvelle valeur."""
        if not _is_int(card_id) or not _is_storable_int(delta):
            raise InvalidInput()
        with self.store.transaction() as doc:
            ch = self._authorized(doc, character_id, actor)
            entry = find_active(ch["zones"], card_id)
            if entry is None:
                raise CardNotActive()
            counter = max(0, int(entry.get("counter", 0)) + delta)
            if counter > STORED_INT_MAX:
                raise InvalidInput("Counter out of range")
            entry["counter"] = counter
        logger.debug("Counter adjusted", extra={"character_id": character_id, "card_id": card_id, "counter": counter})
        return counter
