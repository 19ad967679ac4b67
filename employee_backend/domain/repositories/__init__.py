from .user_repository import UserRepository
from .employee_repository import EmployeeRepository

__all__ = ["UserRepository", "EmployeeRepository"]
