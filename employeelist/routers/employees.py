"""
Employee list router.
CRUD endpoints for /api/employeelist.
"""
from fastapi import APIRouter, Depends, status
from typing import List
import logging

from employeelist.models.employee import (
    Employee,
    EmployeeCreate,
    EmployeeUpdate,
    EmployeeDeleteResponse
)
from employeelist.services import EmployeeService
from employeelist.utils.dependencies import get_employee_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("", response_model=List[Employee])
@router.get("/", response_model=List[Employee], include_in_schema=False)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service)
) -> List[Employee]:
    """All employees, newest first."""
    return await service.list_employees()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service)
) -> Employee:
    return await service.get_employee(employee_id)


@router.post("", response_model=Employee, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=Employee, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_employee(
    data: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service)
) -> Employee:
    """Create employee; name is required."""
    return await service.create_employee(data)


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    data: EmployeeUpdate,
    service: EmployeeService = Depends(get_employee_service)
) -> Employee:
    """Partial update: only the fields sent are changed."""
    return await service.update_employee(employee_id, data)


@router.delete("/{employee_id}", response_model=EmployeeDeleteResponse)
async def delete_employee(
    employee_id: str,
    service: EmployeeService = Depends(get_employee_service)
) -> EmployeeDeleteResponse:
    deleted_id = await service.delete_employee(employee_id)
    return EmployeeDeleteResponse(message="Employee deleted successfully", id=deleted_id)
