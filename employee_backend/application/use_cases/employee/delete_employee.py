# Standard library imports
import logging

# Local application imports
from ....domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class DeleteEmployeeUseCase:
    """Use case for deleting an employee"""

    def __init__(self, employee_repository: EmployeeRepository) -> None:
        self.employee_repository = employee_repository

    async def execute(self, employee_id: str, deleted_by: str) -> None:
        deleted = await self.employee_repository.delete(employee_id)
        if deleted:
            logger.info(f"Employee {employee_id} deleted by {deleted_by}")
        else:
            logger.warning(f"Delete by {deleted_by} matched no employee with ID {employee_id}")
