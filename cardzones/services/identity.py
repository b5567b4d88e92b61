"""
Service: identity.py
Rôle:
- Fiches utilisateur (`username`, `passwordHash`, `role`) dans le store JSON.
- Cycle de vie du mot de passe : non défini (None) -> défini au premier login
  -> de nouveau non défini après un reset admin.

Sécurité:
- Hash bcrypt (salé, coût inclus dans le hash).
- Vérification via `bcrypt.checkpw`, comparaison à temps constant.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import bcrypt

from cardzones.config.settings import settings
from .errors import InvalidInput, NotFound
from .store import JsonStore

logger = logging.getLogger(__name__)

ROLES = ("admin", "player")
# bcrypt ne lit que les 72 premiers octets
_BCRYPT_MAX_BYTES = 72


def hash_password(pw: str) -> str:
    return bcrypt.hashpw(pw.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # hash stocké malformé ou mot de passe trop long
        return False


def _find(doc: Dict[str, Any], username: str) -> Optional[Dict[str, Any]]:
    for user in doc["users"]:
        if user.get("username") == username:
            return user
    return None


class IdentityStore:
    def __init__(self, store: JsonStore, min_password_length: int | None = None):
        self.store = store
        self.min_password_length = (
            settings.MIN_PASSWORD_LENGTH if min_password_length is None else min_password_length
        )

    def get_user(self, username: str) -> Optional[Dict[str, Any]]:
        if not username:
            return None
        return _find(self.store.load(), username)

    def create_user(self, username: str, role: str) -> Dict[str, Any]:
        """Ajoute un utilisateur sans mot de passe (le premier login le définira)."""
        name = (username or "").strip()
        if not name or role not in ROLES:
            raise InvalidInput()
        with self.store.transaction() as doc:
            if _find(doc, name):
                raise InvalidInput("Username already exists")
            user = {"username": name, "passwordHash": None, "role": role}
            doc["users"].append(user)
        logger.info("User created", extra={"username": name, "role": role})
        return {"username": name, "role": role}

    def check_password_policy(self, password: Optional[str]) -> str:
        if not isinstance(password, str) or len(password) < self.min_password_length:
            raise InvalidInput(f"Password must be at least {self.min_password_length} characters")
        if len(password.encode("utf-8")) > _BCRYPT_MAX_BYTES:
            raise InvalidInput(f"Password must be at most {_BCRYPT_MAX_BYTES} bytes")
        return password

    def set_credential(self, username: str, password: str) -> Dict[str, Any]:
        """
        Enregistre le mot de passe d'un utilisateur qui n'en a pas encore.
        - NotFound si l'utilisateur est inconnu,
        - InvalidInput si la politique n'est pas respectée ou si un mot de
          passe est déjà défini.
        """
        self.check_password_policy(password)
        with self.store.transaction() as doc:
            user = _find(doc, username)
            if user is None:
                raise NotFound("User not found")
            if user.get("passwordHash") is not None:
                raise InvalidInput("Credential already set")
            user["passwordHash"] = hash_password(password)
            return dict(user)

    def verify_credential(self, user: Dict[str, Any], password: Optional[str]) -> bool:
        hashed = user.get("passwordHash")
        if not (isinstance(hashed, str) and isinstance(password, str)):
            return False
        return verify_password(password, hashed)

    def clear_credential(self, username: str) -> None:
        with self.store.transaction() as doc:
            user = _find(doc, username)
            if user is None:
                raise NotFound("User not found")
            user["passwordHash"] = None
