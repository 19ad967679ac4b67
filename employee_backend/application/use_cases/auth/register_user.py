# Standard library imports
import asyncio
import logging

# Local application imports
from ....core.exceptions import DuplicateEmail
from ....core.security import hash_password
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ...dto.auth_dto import SignupRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository, bcrypt_rounds: int = 10) -> None:
        self.user_repository = user_repository
        self.bcrypt_rounds = bcrypt_rounds

    async def execute(self, request: SignupRequest) -> UserResponse:
        """
        Register a new user

        Args:
            request: Signup request with email and password

        Returns:
            UserResponse with created user information (never the hash)

        Raises:
            DuplicateEmail: If user with email already exists
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise DuplicateEmail(request.email)

        # bcrypt is CPU bound; keep it off the event loop
        hashed_password = await asyncio.to_thread(hash_password, request.password, self.bcrypt_rounds)

        new_user = User(
            id=None,  # Will be set by repository
            email=request.email,
            hashed_password=hashed_password,
        )

        saved_user = await self.user_repository.create(new_user)
        logger.info(f"Registered user {saved_user.email}")

        return UserResponse(
            id=saved_user.id or "",
            email=saved_user.email,
        )
