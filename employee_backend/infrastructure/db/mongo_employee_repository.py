# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import PersistenceFailure
from ...domain.repositories.employee_repository import EmployeeRepository
from ...domain.models.employee import Employee
from ...domain.models.employee_query import EmployeeFilter, EmployeeQuery
from ...domain.constants import EmployeeFields

logger = logging.getLogger(__name__)


class MongoEmployeeRepository(EmployeeRepository):
    """MongoDB implementation of EmployeeRepository"""

    def __init__(self, employee_collection: AsyncIOMotorCollection) -> None:
        self.employee_collection = employee_collection

    async def create(self, employee: Employee) -> Employee:
        """
        Insert a new employee document

        Args:
            employee: Employee domain model (ID ignored)

        Returns:
            Employee with the generated ID set
        """
        if not employee:
            raise ValueError("Employee cannot be None")

        document = employee.to_fields()
        try:
            result = await self.employee_collection.insert_one(document)
        except PyMongoError as e:
            raise PersistenceFailure(f"Error creating employee: {str(e)}", operation="insert_employee") from e

        return Employee.from_fields(document, employee_id=str(result.inserted_id))

    async def list(self, query: EmployeeQuery) -> List[Employee]:
        """
        Return one page of employees

        Salary ties are broken by _id so consecutive pages never overlap.
        """
        mongo_filter = self._build_filter(query.filter)
        sort_keys = [
            (query.sort.field, int(query.sort.direction)),
            (EmployeeFields.MONGO_ID, ASCENDING),
        ]

        try:
            cursor = (
                self.employee_collection.find(mongo_filter)
                .sort(sort_keys)
                .skip(query.pagination.offset)
                .limit(query.pagination.limit)
            )
            employees: List[Employee] = []
            async for document in cursor:
                employees.append(self._document_to_employee(document))
            return employees
        except PyMongoError as e:
            raise PersistenceFailure(f"Error listing employees: {str(e)}", operation="find_employees") from e

    async def update(self, employee_id: str, fields: Dict[str, Any]) -> int:
        object_id = self._to_object_id(employee_id)
        if object_id is None:
            return 0

        updates = {k: v for k, v in fields.items() if k not in EmployeeFields.RESERVED}
        if not updates:
            # $set with an empty document is rejected by the server
            return 0

        try:
            result = await self.employee_collection.update_one(
                {EmployeeFields.MONGO_ID: object_id},
                {"$set": updates},
            )
        except PyMongoError as e:
            raise PersistenceFailure(f"Error updating employee: {str(e)}", operation="update_employee") from e
        return result.matched_count

    async def delete(self, employee_id: str) -> int:
        object_id = self._to_object_id(employee_id)
        if object_id is None:
            return 0

        try:
            result = await self.employee_collection.delete_one({EmployeeFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise PersistenceFailure(f"Error deleting employee: {str(e)}", operation="delete_employee") from e
        return result.deleted_count

    @staticmethod
    def _to_object_id(employee_id: str) -> Optional[ObjectId]:
        """Parse an employee ID; malformed IDs match nothing"""
        if not employee_id:
            return None
        try:
            return ObjectId(employee_id)
        except (InvalidId, ValueError, TypeError):
            logger.debug(f"Ignoring malformed employee ID: {employee_id!r}")
            return None

    @staticmethod
    def _build_filter(employee_filter: EmployeeFilter) -> Dict[str, Any]:
        mongo_filter: Dict[str, Any] = {}
        if employee_filter.department is not None:
            mongo_filter[EmployeeFields.DEPARTMENT] = employee_filter.department
        if employee_filter.first_name_pattern is not None:
            mongo_filter[EmployeeFields.FIRST_NAME] = {
                "$regex": employee_filter.first_name_pattern,
                "$options": "i",
            }
        return mongo_filter

    def _document_to_employee(self, document: Dict[str, Any]) -> Employee:
        """Convert MongoDB document to Employee domain model"""
        if not document or EmployeeFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Employee.from_fields(document, employee_id=str(document[EmployeeFields.MONGO_ID]))
