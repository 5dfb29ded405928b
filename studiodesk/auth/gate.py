"""Username/password check against the fixed staff allow-list."""
from __future__ import annotations

import logging
from typing import Dict, Iterable

from studiodesk.core.models import SessionUser

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid identity credentials. Access denied."

# Plain-text allow-list; there is no hashing, lockout or expiry.
DEFAULT_USERS = (
    {"username": "SystemAdmin", "password": "Admin00", "name": "System Admin", "role": "Root Admin"},
    {"username": "creative", "password": "password", "name": "Creative Lead", "role": "Director"},
)


class InvalidCredentialsError(ValueError):
    """Raised for any failed login, without saying which field was wrong."""

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS_MESSAGE)


def authenticate(
    username: str, password: str, users: Iterable[Dict[str, str]] = DEFAULT_USERS
) -> SessionUser:
    """Return the session profile for an exact username/password match."""

    for user in users:
        if user["username"] == username and user["password"] == password:
            logger.info("Session started for %s", user["name"])
            return SessionUser(username=user["username"], name=user["name"], role=user["role"])

    logger.warning("Rejected login attempt")
    raise InvalidCredentialsError()
