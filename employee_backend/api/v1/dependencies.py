# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.verify_token import VerifyTokenUseCase
from ...core.exceptions import InvalidToken, MissingToken
from ...core.security import TokenClaims
from ...di.container import get_container


# auto_error=False so a missing header reaches MissingToken instead of FastAPI's own 403
security_scheme = HTTPBearer(auto_error=False)


async def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> TokenClaims:
    """
    FastAPI dependency gating protected endpoints on a valid bearer token

    Args:
        credentials: HTTP Bearer token credentials, if any were sent

    Returns:
        TokenClaims of the authenticated principal

    Raises:
        HTTPException: 401 when no token was sent, 403 when it does not verify
    """
    token: Optional[str] = credentials.credentials if credentials else None

    container = get_container()
    verify_token_use_case = container.get(VerifyTokenUseCase)

    try:
        return verify_token_use_case.execute(token)
    except MissingToken as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exception.user_message,
            headers={"WWW-Authenticate": "Bearer"},
        )
    except InvalidToken as exception:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=exception.user_message,
        )
