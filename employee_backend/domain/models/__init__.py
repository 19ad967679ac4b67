from .user import User
from .employee import UNSET, Employee
from .employee_query import (
    DEFAULT_PAGE_SIZE,
    EmployeeFilter,
    EmployeeQuery,
    Pagination,
    SortDirection,
    SortSpec,
)

__all__ = [
    "User",
    "Employee",
    "UNSET",
    "DEFAULT_PAGE_SIZE",
    "EmployeeFilter",
    "EmployeeQuery",
    "Pagination",
    "SortDirection",
    "SortSpec",
]
