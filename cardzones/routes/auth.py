"""
Routes d'authentification
=========================

- POST /api/login  : vérifie les identifiants et POSE le cookie de session.
                     Si le mot de passe n'est pas encore défini, ce premier
                     login le définit (longueur minimale imposée).
- POST /api/logout : révoque le jeton côté serveur et EFFACE le cookie.
- GET  /api/user   : profil de l'utilisateur connecté.

Cookie
------
- HttpOnly (inaccessible au JavaScript), SameSite=Lax, Path=/.
- Secure uniquement hors DEBUG.
- Pas de TTL : la session vit jusqu'au logout, au reset du mot de passe ou
  au redémarrage du processus.

Codes
-----
- 400 : identifiants invalides ou mot de passe trop court au premier login.
- 401 : pas de session valide (GET /api/user).
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, Response

from cardzones.config.settings import settings
from cardzones.deps.auth import current_user, get_services, session_token
from cardzones.models.auth import LoginIn, SuccessOut, UserOut
from cardzones.services.container import Services

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=SuccessOut)
def login(p: LoginIn, response: Response, services: Services = Depends(get_services)):
    """Authentifie l'utilisateur et pose le cookie de session."""
    token = services.sessions.login(p.username, p.password)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        samesite="lax",
        secure=not settings.DEBUG,
        path="/",
    )
    return SuccessOut()


@router.post("/logout", response_model=SuccessOut)
def logout(request: Request, response: Response, services: Services = Depends(get_services)):
    services.sessions.logout(session_token(request))
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")
    return SuccessOut()


@router.get("/user", response_model=UserOut)
def me(user: Dict[str, Any] = Depends(current_user)):
    return UserOut(username=user["username"], role=user["role"])
