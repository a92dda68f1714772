"""
Custom exceptions package.
"""
from employeelist.exceptions.custom_exceptions import (
    AppError,
    ValidationError,
    InvalidIdentifierError,
    NotFoundError,
    DatabaseError,
    validate_required_text
)

__all__ = [
    "AppError",
    "ValidationError",
    "InvalidIdentifierError",
    "NotFoundError",
    "DatabaseError",
    "validate_required_text"
]
