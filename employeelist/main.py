"""
FastAPI application entry point.

Assembles the employee list API: logging, MongoDB lifecycle, exception
handlers, CORS, the /api routers and the frontend fallback.

Run with:
    uvicorn employeelist.main:app --host 0.0.0.0 --port 3000
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from employeelist.config import Settings, settings as default_settings
from employeelist.database import Database, Collections
from employeelist.middleware import add_exception_handlers
from employeelist.repositories import EmployeeRepository
from employeelist.routers import employees, health, create_frontend_router
from employeelist.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    config = config or default_settings
    setup_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database = Database(config.MONGO_URI, config.DB_NAME, config.MONGO_TIMEOUT_MS)
        await database.connect()
        app.state.database = database

        try:
            await EmployeeRepository(database.collection(Collections.EMPLOYEES)).ensure_indexes()
        except PyMongoError as e:
            logger.warning(f"Could not ensure indexes: {e}")

        logger.info(f"🚀 {config.PROJECT_NAME} started")
        try:
            yield
        finally:
            await database.close()

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.API_VERSION,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    add_exception_handlers(app)

    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(employees.router, prefix="/api/employeelist", tags=["employees"])
    # Catch-all, keep last
    app.include_router(create_frontend_router(config.STATIC_DIR))

    return app


app = create_app()
