from .create_employee import CreateEmployeeUseCase
from .list_employees import ListEmployeesUseCase
from .update_employee import UpdateEmployeeUseCase
from .delete_employee import DeleteEmployeeUseCase

__all__ = [
    "CreateEmployeeUseCase",
    "ListEmployeesUseCase",
    "UpdateEmployeeUseCase",
    "DeleteEmployeeUseCase",
]
