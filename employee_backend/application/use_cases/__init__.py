from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    VerifyTokenUseCase,
)
from .employee import (
    CreateEmployeeUseCase,
    ListEmployeesUseCase,
    UpdateEmployeeUseCase,
    DeleteEmployeeUseCase,
)

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "VerifyTokenUseCase",
    "CreateEmployeeUseCase",
    "ListEmployeesUseCase",
    "UpdateEmployeeUseCase",
    "DeleteEmployeeUseCase",
]
