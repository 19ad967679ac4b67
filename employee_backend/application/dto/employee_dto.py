from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EmployeeResponse(BaseModel):
    """
    DTO for an employee record.

    Records are free-form: every stored attribute is passed through as an
    extra field next to the ``_id``.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(alias="_id")


class EmployeeCreatedResponse(BaseModel):
    """DTO for employee creation response"""
    message: str
    id: Optional[str] = None
