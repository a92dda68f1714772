"""
Logging configuration for the employee list service.

Log lines carry the service name and, when emitted by the error
handlers, the request method, path and status code. Output is either a
single-line text format or one JSON object per line (LOG_FORMAT=json).
"""
import logging
import sys
import json
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pathlib import Path

from employeelist.config import Settings, settings as default_settings

# Attributes passed through ``extra=`` by the request handlers
REQUEST_FIELDS = ("method", "path", "status_code")

# Driver and server loggers that are chatty at INFO
QUIET_LOGGERS = ("uvicorn.access", "motor", "pymongo", "pymongo.serverSelection", "asyncio")


def _request_context(record: logging.LogRecord) -> Dict[str, Any]:
    return {key: getattr(record, key) for key in REQUEST_FIELDS if hasattr(record, key)}


class JSONFormatter(logging.Formatter):
    """One JSON object per record, tagged with the service name."""

    def __init__(self, service: str):
        super().__init__()
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "service": self.service,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(_request_context(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable line; request context is appended in brackets."""

    def __init__(self):
        super().__init__(
            fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _request_context(record)
        if not context:
            return line

        request = " ".join(str(context[key]) for key in REQUEST_FIELDS if key in context)
        first, _, rest = line.partition("\n")
        return f"{first} [{request}]" + (f"\n{rest}" if rest else "")


def build_handlers(config: Settings) -> List[logging.Handler]:
    """Console handler plus an optional file handler, sharing one formatter."""
    if config.LOG_FORMAT.lower() == "json":
        formatter: logging.Formatter = JSONFormatter(config.PROJECT_NAME)
    else:
        formatter = TextFormatter()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.LOG_FILE:
        log_file_path = Path(config.LOG_FILE)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(config: Optional[Settings] = None) -> None:
    """
    Replace the root logger's handlers according to the settings.
    Called by ``create_app`` and by the maintenance scripts.
    """
    config = config or default_settings
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    for handler in build_handlers(config):
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.info(f"✅ Logging configured: level={config.LOG_LEVEL}, format={config.LOG_FORMAT}")
