"""
API routers.
"""
from . import employees, health
from .frontend import create_frontend_router

__all__ = ["employees", "health", "create_frontend_router"]
