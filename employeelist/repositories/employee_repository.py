"""
Employee repository.
Data access layer for employee operations.
"""
from typing import List, Dict, Any
import logging

from pymongo import DESCENDING

from .base_repository import BaseRepository, CREATED_AT

logger = logging.getLogger(__name__)

# _id breaks ties between records created in the same millisecond
NEWEST_FIRST = [(CREATED_AT, DESCENDING), ("_id", DESCENDING)]


class EmployeeRepository(BaseRepository):
    """Repository for employee operations."""

    async def find_newest_first(self) -> List[Dict[str, Any]]:
        """Return every employee, most recently created first."""
        return await self.find_all(sort=NEWEST_FIRST)

    async def ensure_indexes(self) -> str:
        """
        Create the index backing the list ordering.

        Returns:
            Index name
        """
        name = await self.collection.create_index(NEWEST_FIRST)
        logger.info(f"✅ Index ensured on {self.collection.name}: {name}")
        return name
