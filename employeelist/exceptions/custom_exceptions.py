"""
Custom exceptions for the application.
Provides specific exception types for the employee API error taxonomy.
"""
from typing import Optional, Any, Dict


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppError):
    """Validation error (400)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class InvalidIdentifierError(AppError):
    """Malformed record identifier (400)."""

    def __init__(self, resource: str, identifier: Any):
        super().__init__(
            f"Invalid {resource.lower()} id",
            status_code=400,
            details={"resource": resource, "identifier": str(identifier)}
        )


class NotFoundError(AppError):
    """Resource not found error (404)."""

    def __init__(self, resource: str, identifier: Optional[str] = None):
        super().__init__(
            f"{resource} not found",
            status_code=404,
            details={"resource": resource, "identifier": identifier}
        )


class DatabaseError(AppError):
    """Database operation error (500)."""

    def __init__(self, message: str = "Database operation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=500, details=details)


# Validation helpers
def validate_required_text(data: Dict[str, Any], field: str) -> str:
    """
    Validate that a text field is present and not blank.

    Args:
        data: Data dictionary to validate
        field: Field name

    Returns:
        The field value

    Raises:
        ValidationError: If the field is missing, null or blank
    """
    value = data.get(field)
    if value is None or not str(value).strip():
        raise ValidationError(
            f"{field.capitalize()} is required",
            details={"field": field}
        )
    return value
