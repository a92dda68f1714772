"""
Create the MongoDB indexes used by the employee list.

Run with: python -m employeelist.scripts.create_indexes
"""
import asyncio
import logging

from employeelist.config import settings
from employeelist.database import Database, Collections
from employeelist.repositories import EmployeeRepository
from employeelist.utils.logger import setup_logging

logger = logging.getLogger(__name__)


async def create_indexes() -> str:
    """Create all indexes; returns the employee index name."""
    database = Database(settings.MONGO_URI, settings.DB_NAME, settings.MONGO_TIMEOUT_MS)
    await database.connect()

    try:
        repo = EmployeeRepository(database.collection(Collections.EMPLOYEES))
        return await repo.ensure_indexes()
    finally:
        await database.close()


if __name__ == "__main__":
    setup_logging()
    asyncio.run(create_indexes())
