from .config import Settings, get_settings, reset_settings
from .exceptions import (
    EmployeeBackendError,
    DuplicateEmail,
    InvalidCredentials,
    MissingToken,
    InvalidToken,
    PersistenceFailure,
)
from .security import (
    hash_password,
    verify_password,
    create_jwt_token,
    decode_jwt_token,
    TokenClaims,
    TokenService,
)

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "EmployeeBackendError",
    "DuplicateEmail",
    "InvalidCredentials",
    "MissingToken",
    "InvalidToken",
    "PersistenceFailure",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "decode_jwt_token",
    "TokenClaims",
    "TokenService",
]
