"""
Models / character.py
Rôle:
- Corps de requête des opérations sur les personnages (création, main,
  déplacement, compteur).
- Projections renvoyées au client (résumé et vue détaillée par zone).

Notes:
- Les identifiants de carte et `delta` sont des entiers stricts : "3", 1.5
  ou true sont refusés (400).
- `fromZone` / `toZone` sont validés contre l'énumération des quatre zones.
- `level` et `delta` sont bornés aux entiers 64 bits signés (limite du store).
"""
from pydantic import BaseModel, Field, StrictInt
from typing import Dict, List, Optional

from cardzones.services.store import STORED_INT_MAX, STORED_INT_MIN
from cardzones.services.zones import Zone


class CharacterCreate(BaseModel):
    name: str = Field(min_length=1)
    gameId: int
    classId: int
    level: int = Field(ge=0, le=STORED_INT_MAX)


class HandIn(BaseModel):
    cardIds: List[StrictInt]


class MoveIn(BaseModel):
    cardId: StrictInt
    fromZone: Zone
    toZone: Zone


class CounterIn(BaseModel):
    cardId: StrictInt
    delta: StrictInt = Field(ge=STORED_INT_MIN, le=STORED_INT_MAX)


class CharacterSummary(BaseModel):
    id: int
    name: str
    gameId: int
    classId: int
    level: int


class CardView(BaseModel):
    id: int
    name: str
    level: int
    image: str = ""
    counter: Optional[int] = None  # seulement pour la zone active


class CharacterView(CharacterSummary):
    handSize: Optional[int] = None
    zones: Dict[str, List[CardView]]


class CounterOut(BaseModel):
    success: bool = True
    counter: int
