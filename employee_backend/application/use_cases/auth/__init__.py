from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .verify_token import VerifyTokenUseCase

__all__ = ["RegisterUserUseCase", "LoginUserUseCase", "VerifyTokenUseCase"]
