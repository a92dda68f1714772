"""
Frontend router.
Serves the built frontend bundle and falls back to its index.html so that
client-side routes resolve. Must be included after the API routers.
"""
from pathlib import Path
import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

logger = logging.getLogger(__name__)

INDEX_FILE = "index.html"


def create_frontend_router(static_dir: str) -> APIRouter:
    """
    Build the catch-all router for ``static_dir``.

    Args:
        static_dir: Directory holding the frontend build (index.html and assets)
    """
    router = APIRouter()
    root = Path(static_dir).resolve()

    @router.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str) -> FileResponse:
        # Unknown API paths get a JSON 404, never the frontend document
        if full_path == "api" or full_path.startswith("api/"):
            raise HTTPException(status_code=404)

        if full_path:
            candidate = (root / full_path).resolve()
            if candidate.is_relative_to(root) and candidate.is_file():
                return FileResponse(candidate)

        index = root / INDEX_FILE
        if not index.is_file():
            logger.warning(f"Frontend entry document missing: {index}")
            raise HTTPException(status_code=404, detail="Frontend not available")

        return FileResponse(index)

    return router
