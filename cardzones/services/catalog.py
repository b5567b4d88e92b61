"""
Service: catalog.py
Rôle:
- Référentiel partagé : jeux, classes (taille de main fixe) et cartes
  (rattachées à une classe, avec un niveau).
- Lecture pour les joueurs et le moteur de personnages ; création réservée
  au seed et aux tests (pas d'endpoint HTTP d'administration).

Format stocké (document JSON) :
- game  : {id, name}
- class : {id, gameId, name, handSize}
- card  : {id, classId, name, level, image}
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from .errors import InvalidInput
from .store import JsonStore, next_id


def _by_id(items: List[Dict[str, Any]], item_id: int) -> Optional[Dict[str, Any]]:
    for item in items:
        if item.get("id") == item_id:
            return item
    return None


class Catalog:
    def __init__(self, store: JsonStore):
        self.store = store

    # -----------------------------
    # Lecture
    # -----------------------------
    def list_games(self) -> List[Dict[str, Any]]:
        return self.store.load()["games"]

    def list_classes(self, game_id: Optional[int] = None) -> List[Dict[str, Any]]:
        classes = self.store.load()["classes"]
        if game_id is not None:
            classes = [c for c in classes if c.get("gameId") == game_id]
        return classes

    def list_cards(self, class_id: Optional[int] = None, max_level: Optional[int] = None) -> List[Dict[str, Any]]:
        """Cartes filtrées par classe et/ou par niveau maximal (inclus)."""
        return self.eligible_cards(self.store.load(), class_id, max_level)

    @staticmethod
    def eligible_cards(
        doc: Dict[str, Any],
        class_id: Optional[int] = None,
        max_level: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        cards = doc["cards"]
        if class_id is not None:
            cards = [c for c in cards if c.get("classId") == class_id]
        if max_level is not None:
            cards = [c for c in cards if c.get("level", 0) <= max_level]
        return cards

    @staticmethod
    def find_class(doc: Dict[str, Any], class_id: int) -> Optional[Dict[str, Any]]:
        return _by_id(doc["classes"], class_id)

    @staticmethod
    def find_game(doc: Dict[str, Any], game_id: int) -> Optional[Dict[str, Any]]:
        return _by_id(doc["games"], game_id)

    # -----------------------------
    # Création (seed / tests)
    # -----------------------------
    def create_game(self, name: str) -> Dict[str, Any]:
        if not name:
            raise InvalidInput("Name required")
        with self.store.transaction() as doc:
            game = {"id": next_id(doc, "gameId"), "name": name}
            doc["games"].append(game)
        return game

    def create_class(self, game_id: int, name: str, hand_size: int) -> Dict[str, Any]:
        if not name or not isinstance(hand_size, int) or hand_size <= 0:
            raise InvalidInput()
        with self.store.transaction() as doc:
            if _by_id(doc["games"], game_id) is None:
                raise InvalidInput("Invalid game")
            cls = {"id": next_id(doc, "classId"), "gameId": game_id, "name": name, "handSize": hand_size}
            doc["classes"].append(cls)
        return cls

    def create_card(self, class_id: int, name: str, level: int, image: str = "") -> Dict[str, Any]:
        if not name or not isinstance(level, int) or level < 0:
            raise InvalidInput()
        with self.store.transaction() as doc:
            if _by_id(doc["classes"], class_id) is None:
                raise InvalidInput("Invalid class")
            card = {
                "id": next_id(doc, "cardId"),
                "classId": class_id,
                "name": name,
                "level": level,
                "image": image or "",
            }
            doc["cards"].append(card)
        return card
