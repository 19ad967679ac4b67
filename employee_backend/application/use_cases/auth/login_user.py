# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.exceptions import InvalidCredentials
from ....core.security import TokenService, verify_password
from ....domain.repositories.user_repository import UserRepository
from ...dto.auth_dto import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Use case for authenticating a user and issuing a bearer token"""

    def __init__(self, user_repository: UserRepository, token_service: TokenService) -> None:
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """
        Authenticate user and issue a token

        Args:
            request: Login request with email and password

        Returns:
            TokenResponse carrying the signed token

        Raises:
            InvalidCredentials: Unknown email or wrong password (indistinguishable)
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            logger.info("Login rejected: unknown email")
            raise InvalidCredentials()

        password_ok = await asyncio.to_thread(verify_password, request.password, user.hashed_password)
        if not password_ok:
            logger.info("Login rejected: password mismatch")
            raise InvalidCredentials()

        return TokenResponse(token=self.token_service.issue_token(user.email))
