"""
Server launcher.
Runs the FastAPI application with uvicorn on the configured host and port.

Command: python -m employeelist
"""
import uvicorn

from employeelist.config import settings


def main() -> None:
    uvicorn.run(
        "employeelist.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None
    )


if __name__ == "__main__":
    main()
