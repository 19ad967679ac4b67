# Standard library imports
import logging

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.auth_dto import SignupRequest, LoginRequest, TokenResponse, MessageResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...core.exceptions import DuplicateEmail, InvalidCredentials
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authentication"])


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(request: SignupRequest) -> MessageResponse:
    """
    Register a new user

    Args:
        request: Signup request with email and password

    Returns:
        MessageResponse acknowledging the registration
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)

    try:
        await register_use_case.execute(request)
    except DuplicateEmail as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.user_message
        )
    except Exception as e:
        logger.error(f"Signup failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )
    return MessageResponse(message="User registered successfully")


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest) -> TokenResponse:
    """
    Authenticate user and get a bearer token

    Args:
        request: Login request with email and password

    Returns:
        TokenResponse with the signed token
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)

    try:
        return await login_use_case.execute(request)
    except InvalidCredentials as exception:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exception.user_message
        )
    except Exception as e:
        logger.error(f"Login failed: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )
