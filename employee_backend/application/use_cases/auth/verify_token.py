# Standard library imports
from typing import Optional

# Local application imports
from ....core.security import TokenClaims, TokenService


class VerifyTokenUseCase:
    """Use case gating protected operations on a valid bearer token (no I/O)"""

    def __init__(self, token_service: TokenService) -> None:
        self.token_service = token_service

    def execute(self, token: Optional[str]) -> TokenClaims:
        """
        Verify a bearer token

        Args:
            token: Raw token, or None when the request carried none

        Returns:
            TokenClaims identifying the authenticated principal

        Raises:
            MissingToken: If no token was presented
            InvalidToken: If the token fails verification
        """
        return self.token_service.verify_token(token)
