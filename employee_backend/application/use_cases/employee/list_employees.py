# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.repositories.employee_repository import EmployeeRepository
from ...dto.employee_dto import EmployeeResponse
from ...services.employee_query_builder import EmployeeQueryBuilder


class ListEmployeesUseCase:
    """Use case for listing one page of employees"""

    def __init__(
        self,
        employee_repository: EmployeeRepository,
        query_builder: EmployeeQueryBuilder,
    ) -> None:
        self.employee_repository = employee_repository
        self.query_builder = query_builder

    async def execute(
        self,
        page: Optional[str] = None,
        department: Optional[str] = None,
        first_name: Optional[str] = None,
        sort_by_salary: Optional[str] = None,
    ) -> List[EmployeeResponse]:
        """
        List employees matching raw request parameters

        Returns:
            At most one page of EmployeeResponse objects; empty past the end
        """
        query = self.query_builder.build(
            page=page,
            department=department,
            first_name=first_name,
            sort_by_salary=sort_by_salary,
        )
        employees = await self.employee_repository.list(query)

        return [
            EmployeeResponse.model_validate({"_id": employee.id or "", **employee.to_fields()})
            for employee in employees
        ]
