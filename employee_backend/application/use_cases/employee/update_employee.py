# Standard library imports
import logging
from typing import Any, Dict

# Local application imports
from ....domain.repositories.employee_repository import EmployeeRepository

logger = logging.getLogger(__name__)


class UpdateEmployeeUseCase:
    """Use case for merging fields into an employee"""

    def __init__(self, employee_repository: EmployeeRepository) -> None:
        self.employee_repository = employee_repository

    async def execute(self, employee_id: str, fields: Dict[str, Any], updated_by: str) -> None:
        """
        Update an employee

        An unknown ID is not an error: nothing is written and the call
        still succeeds.
        """
        matched = await self.employee_repository.update(employee_id, fields)
        if matched:
            logger.info(f"Employee {employee_id} updated by {updated_by}")
        else:
            logger.warning(f"Update by {updated_by} matched no employee with ID {employee_id}")
