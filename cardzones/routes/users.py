"""
Routes admin des utilisateurs.

Seul le reset du mot de passe vit ici : il efface le mot de passe (le
prochain login en définira un nouveau) et révoque toutes les sessions de
l'utilisateur.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from cardzones.deps.auth import admin_required, get_services
from cardzones.services.container import Services

router = APIRouter(
    prefix="/api/users",
    tags=["admin"],
    dependencies=[Depends(admin_required)],
)


@router.post("/{username}/reset")
def reset_credential(username: str, services: Services = Depends(get_services)):
    """404 si l'utilisateur est inconnu."""
    evicted = services.sessions.reset_credential(username)
    return {"success": True, "sessions_revoked": evicted}
