"""
Service: sessions.py
Rôle:
- Émettre et résoudre des jetons de session opaques liés à un username.
- Contrôler l'accès par rôle.

Stockage:
- `SessionStore` est le point d'extension (create / resolve / revoke / revoke_by_user).
- `InMemorySessionStore` garde les jetons en mémoire du processus uniquement :
  un redémarrage supprime toutes les sessions et impose un nouveau login.
"""
from __future__ import annotations

import logging
import secrets
from threading import RLock
from typing import Any, Dict, Optional, Protocol

from .errors import Forbidden, InvalidCredentials, Unauthenticated
from .identity import IdentityStore

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    def create(self, username: str) -> str: ...

    def resolve(self, token: str) -> Optional[str]: ...

    def revoke(self, token: str) -> None: ...

    def revoke_by_user(self, username: str) -> int: ...


class InMemorySessionStore:
    """Table jeton -> username protégée par un verrou."""

    def __init__(self) -> None:
        self._tokens: Dict[str, str] = {}
        self._lock = RLock()

    def create(self, username: str) -> str:
        token = secrets.token_hex(16)
        with self._lock:
            self._tokens[token] = username
        return token

    def resolve(self, token: str) -> Optional[str]:
        with self._lock:
            return self._tokens.get(token)

    def revoke(self, token: str) -> None:
        with self._lock:
            self._tokens.pop(token, None)

    def revoke_by_user(self, username: str) -> int:
        with self._lock:
            stale = [t for t, name in self._tokens.items() if name == username]
            for token in stale:
                del self._tokens[token]
            return len(stale)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)


class SessionManager:
    def __init__(self, identity: IdentityStore, sessions: SessionStore):
        self.identity = identity
        self.sessions = sessions

    def login(self, username: str, password: Optional[str]) -> str:
        """
        Authentifie et émet un jeton de session.

        - Utilisateur inconnu -> InvalidCredentials.
        - Mot de passe non défini -> le mot de passe présenté devient le
          mot de passe (politique de longueur, InvalidInput sinon).
        - Mot de passe défini -> vérification bcrypt, InvalidCredentials
          en cas d'échec.
        """
        user = self.identity.get_user(username)
        if user is None:
            logger.info("Login rejected: unknown user", extra={"username": username})
            raise InvalidCredentials()

        if user.get("passwordHash") is None:
            self.identity.set_credential(user["username"], password)
            logger.info("Credential enrolled on first login", extra={"username": username})
        elif not self.identity.verify_credential(user, password):
            logger.info("Login rejected: bad password", extra={"username": username})
            raise InvalidCredentials()

        token = self.sessions.create(user["username"])
        logger.info("Login succeeded", extra={"username": username})
        return token

    def resolve(self, token: Optional[str]) -> Dict[str, Any]:
        if not token:
            raise Unauthenticated()
        username = self.sessions.resolve(token)
        if username is None:
            raise Unauthenticated()
        user = self.identity.get_user(username)
        if user is None:
            # utilisateur disparu du store : on retire le jeton orphelin
            self.sessions.revoke(token)
            logger.info("Evicted stale session", extra={"username": username})
            raise Unauthenticated()
        return user

    @staticmethod
    def require_role(user: Dict[str, Any], role: str) -> None:
        if user.get("role") != role:
            raise Forbidden()

    def reset_credential(self, username: str) -> int:
        """Efface le mot de passe et révoque toutes les sessions de l'utilisateur."""
        self.identity.clear_credential(username)
        evicted = self.sessions.revoke_by_user(username)
        logger.info("Credential reset", extra={"username": username, "evicted_sessions": evicted})
        return evicted

    def logout(self, token: Optional[str]) -> None:
        if token:
            self.sessions.revoke(token)
