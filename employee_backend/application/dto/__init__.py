from .auth_dto import SignupRequest, LoginRequest, TokenResponse, MessageResponse
from .user_dto import UserResponse
from .employee_dto import EmployeeResponse, EmployeeCreatedResponse

__all__ = [
    "SignupRequest",
    "LoginRequest",
    "TokenResponse",
    "MessageResponse",
    "UserResponse",
    "EmployeeResponse",
    "EmployeeCreatedResponse",
]
