"""
Module routes/characters.py
Rôle:
- Personnages du joueur connecté (l'admin voit et modifie tout).
- Choix de la main, déplacements entre zones, compteurs des cartes actives.

Codes:
- 401 sans session, 403 si le personnage appartient à un autre joueur,
  404 si l'id est inconnu.
- 400 pour toute donnée invalide : mauvais nombre de cartes, carte hors
  classe/niveau, zone inconnue, carte absente de la zone source, delta non
  entier, carte non active.

Remarque:
- Aucune règle d'adjacence entre zones n'est appliquée ici : seule la présence
  de la carte dans la zone source compte.
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from cardzones.deps.auth import current_user, get_services
from cardzones.models.auth import SuccessOut
from cardzones.models.character import (
    CharacterCreate,
    CharacterSummary,
    CharacterView,
    CounterIn,
    CounterOut,
    HandIn,
    MoveIn,
)
from cardzones.services.container import Services

router = APIRouter(prefix="/api/characters", tags=["characters"])


@router.get("", response_model=List[CharacterSummary])
def list_characters(
    user: Dict[str, Any] = Depends(current_user),
    services: Services = Depends(get_services),
):
    return services.characters.list_characters(user)


@router.post("", response_model=CharacterSummary)
def create_character(
    data: CharacterCreate,
    user: Dict[str, Any] = Depends(current_user),
    services: Services = Depends(get_services),
):
    """Crée un personnage vierge (toutes zones vides) ; la classe doit appartenir au jeu."""
    return services.characters.create_character(user, data.name, data.gameId, data.classId, data.level)


@router.get("/{character_id}", response_model=CharacterView, response_model_exclude_none=True)
def get_character(
    character_id: int,
    user: Dict[str, Any] = Depends(current_user),
    services: Services = Depends(get_services),
):
    """Vue détaillée : cartes résolues par zone + `handSize` de la classe."""
    return services.characters.get_character_view(character_id, user)


@router.post("/{character_id}/hand", response_model=SuccessOut)
def commit_hand(
    character_id: int,
    data: HandIn,
    user: Dict[str, Any] = Depends(current_user),
    services: Services = Depends(get_services),
):
    services.characters.commit_hand(character_id, user, data.cardIds)
    return SuccessOut()


@router.post("/{character_id}/move", response_model=SuccessOut)
def move_card(
    character_id: int,
    data: MoveIn,
    user: Dict[str, Any] = Depends(current_user),
    services: Services = Depends(get_services),
):
    services.characters.move_card(character_id, user, data.cardId, data.fromZone, data.toZone)
    return SuccessOut()


@router.post("/{character_id}/counter", response_model=CounterOut)
def adjust_counter(
    character_id: int,
    data: CounterIn,
    user: Dict[str, Any] = Depends(current_user),
    services: Services = Depends(get_services),
):
    counter = services.characters.adjust_counter(character_id, user, data.cardId, data.delta)
    return CounterOut(counter=counter)
