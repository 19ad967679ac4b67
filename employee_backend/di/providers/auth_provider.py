from typing import TYPE_CHECKING
from ...core.config import Settings
from ...core.security import TokenService
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...application.use_cases.auth.verify_token import VerifyTokenUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Authentication provider - registers the token service and auth use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the token service as a singleton and all authentication
        use cases as on-demand factories.
        """
        settings: Settings = container.get(Settings)

        container.register_singleton(
            TokenService,
            TokenService(
                secret_key=settings.jwt_secret_key,
                algorithm=settings.jwt_algorithm,
                expire_minutes=settings.jwt_expire_minutes,
            )
        )

        container.register_factory(
            RegisterUserUseCase,
            lambda: RegisterUserUseCase(
                user_repository=container.get(UserRepository),
                bcrypt_rounds=settings.bcrypt_rounds,
            )
        )

        container.register_factory(
            LoginUserUseCase,
            lambda: LoginUserUseCase(
                user_repository=container.get(UserRepository),
                token_service=container.get(TokenService),
            )
        )

        container.register_factory(
            VerifyTokenUseCase,
            lambda: VerifyTokenUseCase(
                token_service=container.get(TokenService)
            )
        )
