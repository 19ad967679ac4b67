# Standard library imports
import logging
from typing import Any, Dict, List, Optional

# External package imports
from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

# Local application imports
from ...application.dto.auth_dto import MessageResponse
from ...application.dto.employee_dto import EmployeeCreatedResponse, EmployeeResponse
from ...application.use_cases.employee.create_employee import CreateEmployeeUseCase
from ...application.use_cases.employee.list_employees import ListEmployeesUseCase
from ...application.use_cases.employee.update_employee import UpdateEmployeeUseCase
from ...application.use_cases.employee.delete_employee import DeleteEmployeeUseCase
from ...core.security import TokenClaims
from ...di.container import get_container
from .dependencies import get_current_principal

logger = logging.getLogger(__name__)

router = APIRouter(tags=["employees"])


def _internal_error(action: str, error: Exception) -> HTTPException:
    logger.error(f"Error {action}: {error}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error"
    )


@router.post("", response_model=EmployeeCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(
    record: Dict[str, Any] = Body(...),
    principal: TokenClaims = Depends(get_current_principal),
) -> EmployeeCreatedResponse:
    """
    Create an employee from a free-form record

    Args:
        record: Employee attributes (firstName, department, salary, ...)
        principal: Authenticated caller (from dependency)

    Returns:
        EmployeeCreatedResponse with the generated ID
    """
    container = get_container()
    create_employee_use_case = container.get(CreateEmployeeUseCase)

    try:
        employee = await create_employee_use_case.execute(record, created_by=principal.email)
    except Exception as e:
        raise _internal_error("creating employee", e)
    return EmployeeCreatedResponse(message="Employee created successfully", id=employee.id)


@router.get("", response_model=List[EmployeeResponse])
async def list_employees(
    page: Optional[str] = Query(default=None),
    department: Optional[str] = Query(default=None),
    first_name: Optional[str] = Query(default=None, alias="firstName"),
    sort_by_salary: Optional[str] = Query(default=None, alias="sortBySalary"),
) -> List[EmployeeResponse]:
    """
    List one page (5 records) of employees

    Open to unauthenticated callers. Parameters are taken as raw text;
    malformed values fall back to defaults.
    """
    container = get_container()
    list_employees_use_case = container.get(ListEmployeesUseCase)

    try:
        return await list_employees_use_case.execute(
            page=page,
            department=department,
            first_name=first_name,
            sort_by_salary=sort_by_salary,
        )
    except Exception as e:
        raise _internal_error("listing employees", e)


@router.put("/{employee_id}", response_model=MessageResponse)
async def update_employee(
    employee_id: str,
    fields: Dict[str, Any] = Body(...),
    principal: TokenClaims = Depends(get_current_principal),
) -> MessageResponse:
    """
    Merge fields into an employee

    Succeeds even when no employee has this ID.
    """
    container = get_container()
    update_employee_use_case = container.get(UpdateEmployeeUseCase)

    try:
        await update_employee_use_case.execute(employee_id, fields, updated_by=principal.email)
    except Exception as e:
        raise _internal_error(f"updating employee {employee_id}", e)
    return MessageResponse(message="Employee updated successfully")


@router.delete("/{employee_id}", response_model=MessageResponse)
async def delete_employee(
    employee_id: str,
    principal: TokenClaims = Depends(get_current_principal),
) -> MessageResponse:
    """
    Delete an employee

    Succeeds even when no employee has this ID.
    """
    container = get_container()
    delete_employee_use_case = container.get(DeleteEmployeeUseCase)

    try:
        await delete_employee_use_case.execute(employee_id, deleted_by=principal.email)
    except Exception as e:
        raise _internal_error(f"deleting employee {employee_id}", e)
    return MessageResponse(message="Employee deleted successfully")
