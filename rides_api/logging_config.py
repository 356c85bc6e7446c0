"""
Logging setup.

Three sinks are configured:

* console   -- plain ``LEVEL: message`` lines
* all.log   -- every record as a JSON line
* error.log -- ERROR and above as JSON lines
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from pathlib import Path

from rides_api.config import Settings


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object with a UTC timestamp."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def build_logging_config(settings: Settings) -> dict:
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    }
    if settings.log_to_file:
        log_dir = Path(settings.log_dir)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "json",
            "filename": str(log_dir / "all.log"),
            "delay": True,
        }
        handlers["error_file"] = {
            "class": "logging.FileHandler",
            "formatter": "json",
            "level": "ERROR",
            "filename": str(log_dir / "error.log"),
            "delay": True,
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "simple": {"format": "%(levelname)s: %(message)s"},
            "json": {"()": JsonFormatter},
        },
        "handlers": handlers,
        "root": {
            "level": settings.log_level.upper(),
            "handlers": list(handlers),
        },
    }


def configure_logging(settings: Settings) -> None:
    if settings.log_to_file:
        Path(settings.log_dir).mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(settings))
