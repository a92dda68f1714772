"""
FastAPI dependencies for dependency injection.
Provides the database handle, repositories and services to routes.
"""
from fastapi import Depends, Request
import logging

from employeelist.database import Database, Collections
from employeelist.repositories import EmployeeRepository
from employeelist.services import EmployeeService

logger = logging.getLogger(__name__)


def get_database(request: Request) -> Database:
    """
    Dependency returning the Database opened by the application lifespan.

    Usage:
        @router.get("/health")
        async def health(db: Database = Depends(get_database)):
            ...
    """
    return request.app.state.database


def get_employee_repository(db: Database = Depends(get_database)) -> EmployeeRepository:
    return EmployeeRepository(db.collection(Collections.EMPLOYEES))


def get_employee_service(
    repo: EmployeeRepository = Depends(get_employee_repository)
) -> EmployeeService:
    return EmployeeService(repo)
