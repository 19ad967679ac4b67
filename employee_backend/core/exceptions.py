"""
Exception hierarchy for the employee backend.

Use cases and repositories raise these; the API layer maps each kind to an
HTTP status. Every exception carries an internal message plus a
user-facing message that is safe to return to clients.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class EmployeeBackendError(Exception):
    """Base exception for all employee backend errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "Internal server error"
        self.details = details or {}


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class DuplicateEmail(EmployeeBackendError):
    """Raised on signup when the email is already registered."""

    def __init__(self, email: str):
        super().__init__(
            f"User with email {email} already exists",
            user_message="Email already registered",
            details={"email": email},
        )
        self.email = email


class InvalidCredentials(EmployeeBackendError):
    """Raised on login for an unknown email or a wrong password."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, user_message="Invalid credentials")


class MissingToken(EmployeeBackendError):
    """Raised when a protected operation is called without a bearer token."""

    def __init__(self):
        super().__init__("No bearer token presented", user_message="Access denied")


class InvalidToken(EmployeeBackendError):
    """Raised when a token fails signature or format checks."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message, user_message="Invalid token")


# -----------------------------------------------------------------------------
# Persistence
# -----------------------------------------------------------------------------


class PersistenceFailure(EmployeeBackendError):
    """Raised when the database rejects or fails an operation."""

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(
            message,
            user_message="Internal server error",
            details={"operation": operation} if operation else None,
        )
        self.operation = operation
