from abc import ABC, abstractmethod
from typing import Any, Dict, List
from ..models.employee import Employee
from ..models.employee_query import EmployeeQuery


class EmployeeRepository(ABC):
    """Repository interface - defines contract for employee data access"""

    @abstractmethod
    async def create(self, employee: Employee) -> Employee:
        """Insert a new employee and return it with its generated ID"""
        pass

    @abstractmethod
    async def list(self, query: EmployeeQuery) -> List[Employee]:
        """Return one page of employees matching the query"""
        pass

    @abstractmethod
    async def update(self, employee_id: str, fields: Dict[str, Any]) -> int:
        """Merge fields into an employee; returns the matched count (0 is not an error)"""
        pass

    @abstractmethod
    async def delete(self, employee_id: str) -> int:
        """Delete an employee; returns the deleted count (0 is not an error)"""
        pass
