"""
Module routes/health.py
Rôle:
- Endpoint de santé (service OK + lecture du store).
"""
from fastapi import APIRouter, Depends

from cardzones.config.settings import settings
from cardzones.deps.auth import get_services
from cardzones.services.container import Services

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(services: Services = Depends(get_services)):
    """Renvoie un OK minimal avec le nom du service et l'état du document."""
    doc = services.store.load()
    return {
        "ok": True,
        "service": settings.APP_NAME,
        "characters": len(doc["characters"]),
    }
