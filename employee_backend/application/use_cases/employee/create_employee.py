# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.employee_repository import EmployeeRepository
from ....domain.models.employee import Employee
from ...dto.employee_dto import EmployeeResponse

logger = logging.getLogger(__name__)


class CreateEmployeeUseCase:
    """Use case for creating an employee record"""

    def __init__(self, employee_repository: EmployeeRepository) -> None:
        self.employee_repository = employee_repository

    async def execute(self, record: Dict[str, Any], created_by: str) -> EmployeeResponse:
        """
        Create a new employee

        Args:
            record: Free-form employee record (no schema validation)
            created_by: Email of the authenticated principal, for the audit log

        Returns:
            EmployeeResponse with the stored record and its generated ID
        """
        employee = Employee.from_fields(record)
        saved_employee = await self.employee_repository.create(employee)

        logger.info(f"Employee {saved_employee.id} created by {created_by}")

        return EmployeeResponse.model_validate(
            {"_id": saved_employee.id or "", **saved_employee.to_fields()}
        )
