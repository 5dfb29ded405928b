"""Authentication gate for the back office."""
from studiodesk.auth.gate import (
    DEFAULT_USERS,
    INVALID_CREDENTIALS_MESSAGE,
    InvalidCredentialsError,
    authenticate,
)

__all__ = [
    "DEFAULT_USERS",
    "INVALID_CREDENTIALS_MESSAGE",
    "InvalidCredentialsError",
    "authenticate",
]
