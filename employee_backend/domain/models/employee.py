# Standard library imports
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# Local application imports
from ..constants import EmployeeFields


class _Unset:
    """Marks a known field the client did not send (as opposed to an explicit null)"""

    def __repr__(self) -> str:
        return "UNSET"


UNSET: Any = _Unset()


@dataclass
class Employee:
    """
    Pure domain model for Employee entity.

    Only first name, department and salary are known to the query engine;
    every other attribute a client sends is carried through untouched in
    ``attributes``. No field is required. Known fields the client left out
    hold ``UNSET``; an explicit null is kept as ``None`` and stored.
    """
    id: Optional[str]
    first_name: Any = UNSET
    department: Any = UNSET
    salary: Any = UNSET
    attributes: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any], employee_id: Optional[str] = None) -> "Employee":
        """Build an employee from a free-form record, dropping reserved id keys"""
        known = {EmployeeFields.FIRST_NAME, EmployeeFields.DEPARTMENT, EmployeeFields.SALARY}
        return cls(
            id=employee_id,
            first_name=fields.get(EmployeeFields.FIRST_NAME, UNSET),
            department=fields.get(EmployeeFields.DEPARTMENT, UNSET),
            salary=fields.get(EmployeeFields.SALARY, UNSET),
            attributes={
                key: value
                for key, value in fields.items()
                if key not in known and key not in EmployeeFields.RESERVED
            },
        )

    def to_fields(self) -> Dict[str, Any]:
        """Flatten back to the camelCase record shape, skipping known fields never sent"""
        fields: Dict[str, Any] = dict(self.attributes)
        if self.first_name is not UNSET:
            fields[EmployeeFields.FIRST_NAME] = self.first_name
        if self.department is not UNSET:
            fields[EmployeeFields.DEPARTMENT] = self.department
        if self.salary is not UNSET:
            fields[EmployeeFields.SALARY] = self.salary
        return fields
