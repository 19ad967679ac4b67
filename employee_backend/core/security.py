# Standard library imports
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .exceptions import InvalidToken, MissingToken

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72
EMAIL_CLAIM = "email"


def _password_bytes(plain_password: str) -> bytes:
    return plain_password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


def hash_password(plain_password: str, rounds: int = 10) -> str:
    """
    Hash a plain password using bcrypt

    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt work factor (log2 of the iteration count)

    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(_password_bytes(plain_password), salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if passwords match, False otherwise (including malformed hashes)
    """
    try:
        return bcrypt.checkpw(
            _password_bytes(plain_password),
            hashed_password.encode("utf-8")
        )
    except (ValueError, TypeError, AttributeError):
        return False


def create_jwt_token(
    payload: Dict[str, Any],
    secret_key: str,
    algorithm: str = "HS256",
    expire_minutes: int = 0,
) -> str:
    """
    Create a signed JWT token

    Args:
        payload: Dictionary containing token claims (e.g., email)
        secret_key: Signing secret
        algorithm: Signing algorithm
        expire_minutes: Lifetime in minutes; 0 issues a token without exp

    Returns:
        Encoded JWT token string
    """
    token_payload = dict(payload)
    if expire_minutes > 0:
        issued_at = int(time.time())
        token_payload["iat"] = issued_at
        token_payload["exp"] = issued_at + expire_minutes * 60

    return jwt.encode(token_payload, secret_key, algorithm=algorithm)


def decode_jwt_token(token: str, secret_key: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """
    Decode and validate a JWT token

    Args:
        token: The JWT token string to decode
        secret_key: Signing secret the token must verify against
        algorithm: Expected signing algorithm

    Returns:
        Dictionary containing decoded token claims

    Raises:
        InvalidToken: If the token is malformed, tampered, foreign or expired
    """
    try:
        return jwt.decode(token, secret_key, algorithms=[algorithm])
    except InvalidTokenError as e:
        raise InvalidToken(f"Invalid token: {str(e)}") from e


@dataclass(frozen=True)
class TokenClaims:
    """Authenticated principal decoded from a bearer token"""
    email: str


class TokenService:
    """Issues and verifies bearer tokens with an explicitly injected secret"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 0) -> None:
        if not secret_key:
            raise ValueError("Token signing secret is required")
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def issue_token(self, email: str) -> str:
        """Sign a token binding the given email"""
        return create_jwt_token(
            {EMAIL_CLAIM: email},
            self._secret_key,
            algorithm=self._algorithm,
            expire_minutes=self._expire_minutes,
        )

    def verify_token(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a bearer token without any I/O

        Raises:
            MissingToken: If no token was presented
            InvalidToken: If the token does not verify or lacks an email claim
        """
        if not token:
            raise MissingToken()

        payload = decode_jwt_token(token, self._secret_key, algorithm=self._algorithm)
        email = payload.get(EMAIL_CLAIM)
        if not isinstance(email, str) or not email:
            raise InvalidToken("Invalid authentication payload: missing email")
        return TokenClaims(email=email)
