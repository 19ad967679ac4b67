"""Constants for domain model field names"""

from .user_fields import UserFields
from .employee_fields import EmployeeFields

__all__ = [
    "UserFields",
    "EmployeeFields",
]
