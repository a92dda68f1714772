"""
Pydantic models package.
"""
from .employee import (
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeDeleteResponse
)

__all__ = [
    "Employee",
    "EmployeeCreate",
    "EmployeeUpdate",
    "EmployeeDeleteResponse",
]
