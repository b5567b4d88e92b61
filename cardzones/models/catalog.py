"""
Models / catalog.py
Rôle:
- Vues API du référentiel (jeux, classes, cartes), champs en camelCase comme
  dans le document stocké.
"""
from pydantic import BaseModel


class Game(BaseModel):
    id: int
    name: str


class CharacterClass(BaseModel):
    id: int
    gameId: int
    name: str
    handSize: int


class Card(BaseModel):
    id: int
    classId: int
    name: str
    level: int
    image: str = ""
