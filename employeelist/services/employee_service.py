"""
Employee service.
Business logic for the employee list: validation, normalization and
mapping of store outcomes to application errors.
"""
from typing import List, Dict, Any
import logging

from pymongo.errors import PyMongoError

from employeelist.repositories.employee_repository import EmployeeRepository
from employeelist.exceptions import (
    NotFoundError,
    InvalidIdentifierError,
    DatabaseError,
    validate_required_text
)
from employeelist.models.employee import (
    Employee,
    EmployeeCreate,
    EmployeeUpdate
)
from employeelist.utils.normalize_fields import coerce_salary, text_or_empty

logger = logging.getLogger(__name__)

RESOURCE = "Employee"


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, employee_repo: EmployeeRepository):
        """
        Initialize employee service.

        Args:
            employee_repo: Employee repository instance
        """
        self.employee_repo = employee_repo

    def _validate_id(self, employee_id: str) -> None:
        if not self.employee_repo.is_valid_id(employee_id):
            raise InvalidIdentifierError(RESOURCE, employee_id)

    async def list_employees(self) -> List[Employee]:
        """
        List all employees, newest first.

        Raises:
            DatabaseError: If the store fails
        """
        try:
            documents = await self.employee_repo.find_newest_first()
        except PyMongoError as e:
            logger.error(f"Failed to list employees: {e}", exc_info=True)
            raise DatabaseError("Failed to fetch employee list") from e

        return [Employee(**doc) for doc in documents]

    async def get_employee(self, employee_id: str) -> Employee:
        """
        Get employee by ID.

        Args:
            employee_id: Employee ID

        Returns:
            Employee record

        Raises:
            InvalidIdentifierError: If the ID is malformed
            NotFoundError: If employee not found
            DatabaseError: If the store fails
        """
        self._validate_id(employee_id)

        try:
            document = await self.employee_repo.find_by_id(employee_id)
        except PyMongoError as e:
            logger.error(f"Failed to fetch employee {employee_id}: {e}", exc_info=True)
            raise DatabaseError("Failed to fetch employee") from e

        if not document:
            raise NotFoundError(RESOURCE, employee_id)

        return Employee(**document)

    async def create_employee(self, employee_data: EmployeeCreate) -> Employee:
        """
        Create a new employee.

        Missing location/position become "" and a missing salary becomes 0.

        Raises:
            ValidationError: If name is missing or salary is not numeric
            DatabaseError: If the store fails
        """
        payload = employee_data.model_dump()
        name = validate_required_text(payload, "name")

        employee_doc: Dict[str, Any] = {
            "name": name,
            "location": text_or_empty(employee_data.location),
            "position": text_or_empty(employee_data.position),
            "salary": coerce_salary(employee_data.salary)
        }

        logger.info(f"Creating employee: {name}")

        try:
            created = await self.employee_repo.create(employee_doc)
        except PyMongoError as e:
            logger.error(f"Failed to create employee: {e}", exc_info=True)
            raise DatabaseError("Failed to create employee") from e

        logger.info(f"✅ Employee created: {created['id']}")

        return Employee(**created)

    async def update_employee(
        self,
        employee_id: str,
        update_data: EmployeeUpdate
    ) -> Employee:
        """
        Apply a partial update.

        Only fields present in the request are written. A present ``name``
        must be non-blank; a present ``salary`` is coerced to a number.

        Raises:
            InvalidIdentifierError: If the ID is malformed
            ValidationError: If the new values break the record invariants
            NotFoundError: If employee not found
            DatabaseError: If the store fails
        """
        self._validate_id(employee_id)

        update_dict = update_data.model_dump(exclude_unset=True)

        if "name" in update_dict:
            validate_required_text(update_dict, "name")
        for field in ("location", "position"):
            if field in update_dict:
                update_dict[field] = text_or_empty(update_dict[field])
        if "salary" in update_dict:
            update_dict["salary"] = coerce_salary(update_dict["salary"])

        logger.info(f"Updating employee {employee_id}: fields={sorted(update_dict)}")

        try:
            updated = await self.employee_repo.update(employee_id, update_dict)
        except PyMongoError as e:
            logger.error(f"Failed to update employee {employee_id}: {e}", exc_info=True)
            raise DatabaseError("Failed to update employee") from e

        if not updated:
            raise NotFoundError(RESOURCE, employee_id)

        logger.info(f"✅ Employee updated: {employee_id}")

        return Employee(**updated)

    async def delete_employee(self, employee_id: str) -> str:
        """
        Permanently delete an employee.

        Returns:
            The removed employee ID

        Raises:
            InvalidIdentifierError: If the ID is malformed
            NotFoundError: If employee not found
            DatabaseError: If the store fails
        """
        self._validate_id(employee_id)

        logger.warning(f"Deleting employee: {employee_id}")

        try:
            deleted = await self.employee_repo.delete(employee_id)
        except PyMongoError as e:
            logger.error(f"Failed to delete employee {employee_id}: {e}", exc_info=True)
            raise DatabaseError("Failed to delete employee") from e

        if not deleted:
            raise NotFoundError(RESOURCE, employee_id)

        return deleted["id"]
