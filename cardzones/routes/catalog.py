"""
Module routes/catalog.py
Rôle:
- Lecture du référentiel pour les joueurs connectés (choix du jeu/de la classe
  à la création, cartes éligibles lors du choix de la main).

Filtres:
- /api/classes?gameId=<id>
- /api/cards?classId=<id>&level=<niveau max inclus>
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from cardzones.deps.auth import current_user, get_services
from cardzones.models.catalog import Card, CharacterClass, Game
from cardzones.services.container import Services

router = APIRouter(prefix="/api", tags=["catalog"], dependencies=[Depends(current_user)])


@router.get("/games", response_model=List[Game])
def list_games(services: Services = Depends(get_services)):
    return services.catalog.list_games()


@router.get("/classes", response_model=List[CharacterClass])
def list_classes(
    gameId: Optional[int] = Query(default=None, description="Filtre par jeu"),
    services: Services = Depends(get_services),
):
    return services.catalog.list_classes(game_id=gameId)


@router.get("/cards", response_model=List[Card])
def list_cards(
    classId: Optional[int] = Query(default=None, description="Filtre par classe"),
    level: Optional[int] = Query(default=None, description="Niveau maximal (inclus)"),
    services: Services = Depends(get_services),
):
    return services.catalog.list_cards(class_id=classId, max_level=level)
