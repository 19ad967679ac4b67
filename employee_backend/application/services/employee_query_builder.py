"""
Employee list query construction.

Turns raw, untrusted query-string values into a fully resolved
EmployeeQuery. Building never fails: anything malformed falls back to a
default instead of raising.
"""
# Standard library imports
import re
from typing import Optional

# Local application imports
from ...domain.models.employee_query import (
    DEFAULT_PAGE_SIZE,
    EmployeeFilter,
    EmployeeQuery,
    Pagination,
    SortDirection,
    SortSpec,
)

ASCENDING_SORT_VALUE = "asc"

# Largest value a Mongo skip can carry (signed 64-bit)
MAX_SKIP = 2**63 - 1
# Longer digit runs are past any reachable page and never converted with int()
MAX_PAGE_DIGITS = 18

# Leading integer, the way most query-string parsers read "3", " 7" or "2abc"
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def max_page_for(page_size: int) -> int:
    """Highest page whose offset still fits in a Mongo skip"""
    return MAX_SKIP // page_size + 1


MAX_PAGE = max_page_for(DEFAULT_PAGE_SIZE)


def parse_page(raw_page: Optional[str], page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """
    Parse a page number.

    Absent, non-numeric and zero values become 1. Negative values are
    clamped to 1 so the offset can never go below zero, and huge values
    are clamped to the last page a Mongo skip can address.
    """
    if raw_page is None:
        return 1
    match = _LEADING_INT.match(str(raw_page))
    if match is None:
        return 1

    digits = match.group(1)
    negative = digits.startswith("-")
    magnitude = digits.lstrip("+-").lstrip("0") or "0"
    max_page = max_page_for(page_size)
    if len(magnitude) > MAX_PAGE_DIGITS:
        return 1 if negative else max_page

    page = -int(magnitude) if negative else int(magnitude)
    return min(max(1, page), max_page)


def build_first_name_pattern(raw_first_name: str) -> str:
    """Escape user text so it only ever matches literally"""
    return re.escape(raw_first_name)


class EmployeeQueryBuilder:
    """Builds EmployeeQuery values from request parameters"""

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size < 1:
            raise ValueError("Page size must be >= 1")
        self.page_size = page_size

    def build(
        self,
        page: Optional[str] = None,
        department: Optional[str] = None,
        first_name: Optional[str] = None,
        sort_by_salary: Optional[str] = None,
    ) -> EmployeeQuery:
        """
        Build a query from raw request parameters

        Args:
            page: 1-based page number as text
            department: Exact department to match
            first_name: Text the first name must contain (case-insensitive)
            sort_by_salary: "asc" for ascending salary, anything else descending

        Returns:
            EmployeeQuery with filter, sort and pagination resolved
        """
        employee_filter = EmployeeFilter(
            department=department if department else None,
            first_name_pattern=build_first_name_pattern(first_name) if first_name else None,
        )

        direction = (
            SortDirection.ASCENDING
            if sort_by_salary == ASCENDING_SORT_VALUE
            else SortDirection.DESCENDING
        )

        return EmployeeQuery(
            filter=employee_filter,
            sort=SortSpec(direction=direction),
            pagination=Pagination(page=parse_page(page, self.page_size), page_size=self.page_size),
        )
