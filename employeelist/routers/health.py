"""
Health check router.
"""
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from employeelist.database import Database
from employeelist.utils.dependencies import get_database

router = APIRouter()


@router.get("/health")
async def health(db: Database = Depends(get_database)) -> JSONResponse:
    """Report service status and MongoDB reachability."""
    if await db.ping():
        return JSONResponse(status_code=200, content={"status": "healthy", "database": "connected"})
    return JSONResponse(status_code=503, content={"status": "unhealthy", "database": "disconnected"})
