"""
Repository package.
Provides data access layer for all entities.
"""
from .base_repository import BaseRepository
from .employee_repository import EmployeeRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
]
