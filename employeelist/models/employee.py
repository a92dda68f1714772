"""
Employee models.
Stored record, request payloads and response shapes.
"""
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Any, Optional, Union
from datetime import datetime

from employeelist.utils.normalize_fields import scalar_to_text


class Employee(BaseModel):
    """Employee record as returned by the API."""

    id: str = Field(..., description="Store-assigned identifier")
    name: str = Field(..., min_length=1)
    location: str = ""
    position: str = ""
    salary: Union[int, float] = 0

    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None

    model_config = ConfigDict(extra="ignore")


class EmployeePayload(BaseModel):
    """Fields accepted in create and update bodies."""

    name: Optional[str] = None
    location: Optional[str] = None
    position: Optional[str] = None
    salary: Any = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("name", "location", "position", mode="before")
    @classmethod
    def cast_scalars(cls, v: Any) -> Any:
        """Accept numbers and booleans for text fields ({"name": 123} -> "123")."""
        return scalar_to_text(v)


class EmployeeCreate(EmployeePayload):
    """
    Employee creation request.

    ``name`` is optional here so that its absence is reported as
    "Name is required" by the service rather than as a schema error.
    ``salary`` is accepted as any JSON value and coerced by the service.
    """


class EmployeeUpdate(EmployeePayload):
    """
    Employee partial update request.

    Only fields present in the request body are applied; presence is
    read from ``model_fields_set``, so an explicit ``""`` or ``null``
    is distinguishable from an omitted field.
    """


class EmployeeDeleteResponse(BaseModel):
    """Employee delete response."""

    message: str
    id: str
