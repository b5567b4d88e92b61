"""
Dépendances d'authentification
==============================

Objectif
--------
Dépendances FastAPI qui résolvent le cookie de session en utilisateur :
- `current_user` : tout utilisateur authentifié, 401 sinon.
- `admin_required` : idem, plus 403 si le rôle n'est pas `admin`.

Intégrations
------------
- Le conteneur de services vit dans `app.state.services` (voir `main.py`).
- Nom du cookie : `settings.SESSION_COOKIE_NAME` (HttpOnly, SameSite=Lax).

Notes
-----
- Les erreurs sont des sous-classes de `ServiceError` ; les handlers
  enregistrés dans `main.py` les rendent avec leur code HTTP.
"""
from __future__ import annotations

from typing import Any, Dict

from fastapi import Depends, Request

from cardzones.config.settings import settings
from cardzones.services.container import Services


def get_services(request: Request) -> Services:
    return request.app.state.services


def session_token(request: Request) -> str | None:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def current_user(
    request: Request,
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    """Résout le cookie de session (Unauthenticated si absent, inconnu ou périmé)."""
    return services.sessions.resolve(session_token(request))


def admin_required(
    user: Dict[str, Any] = Depends(current_user),
    services: Services = Depends(get_services),
) -> Dict[str, Any]:
    services.sessions.require_role(user, "admin")
    return user
