"""
Erreurs de service.

Tout échec remonté à l'appelant est une `ServiceError` portant le code HTTP
associé et un `kind` stable. Les clients se basent sur le code ou le `kind`,
jamais sur le texte du message.
"""
from __future__ import annotations


class ServiceError(Exception):
    status_code = 500
    kind = "internal_error"
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"error": self.message, "kind": self.kind}


class Unauthenticated(ServiceError):
    """Pas de session, jeton inconnu, ou jeton d'un utilisateur disparu."""

    status_code = 401
    kind = "unauthenticated"
    default_message = "Unauthorized"


class Forbidden(ServiceError):
    """Authentifié, mais mauvais rôle ou pas propriétaire de la ressource."""

    status_code = 403
    kind = "forbidden"
    default_message = "Forbidden"


class NotFound(ServiceError):
    status_code = 404
    kind = "not_found"
    default_message = "Not found"


class InvalidInput(ServiceError):
    status_code = 400
    kind = "invalid_input"
    default_message = "Invalid data"


class InvalidCredentials(ServiceError):
    # 400 et non 401 : un login raté ne doit pas ressembler à une session absente.
    status_code = 400
    kind = "invalid_credentials"
    default_message = "Invalid username or password"


class InvalidHandSize(InvalidInput):
    kind = "invalid_hand_size"


class InvalidCardSelection(InvalidInput):
    kind = "invalid_card_selection"
    default_message = "Invalid card selection"


class CardNotInZone(InvalidInput):
    kind = "card_not_in_zone"
    default_message = "Card not found in source zone"


class CardNotActive(InvalidInput):
    kind = "card_not_active"
    default_message = "Card not in active zone"
