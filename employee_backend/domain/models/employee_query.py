"""Request-scoped query value consumed by EmployeeRepository.list"""

# Standard library imports
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

# Local application imports
from ..constants import EmployeeFields

DEFAULT_PAGE_SIZE = 5


class SortDirection(IntEnum):
    ASCENDING = 1
    DESCENDING = -1


@dataclass(frozen=True)
class EmployeeFilter:
    """Exact department match and/or case-insensitive first name pattern"""
    department: Optional[str] = None
    # Already regex-escaped; matched as a case-insensitive substring
    first_name_pattern: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.department is None and self.first_name_pattern is None


@dataclass(frozen=True)
class SortSpec:
    direction: SortDirection = SortDirection.DESCENDING
    field: str = EmployeeFields.SALARY


@dataclass(frozen=True)
class Pagination:
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError("Page must be >= 1")
        if self.page_size < 1:
            raise ValueError("Page size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size


@dataclass(frozen=True)
class EmployeeQuery:
    filter: EmployeeFilter = field(default_factory=EmployeeFilter)
    sort: SortSpec = field(default_factory=SortSpec)
    pagination: Pagination = field(default_factory=Pagination)
