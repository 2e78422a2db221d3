"""Logging configuration"""

import logging
import sys
from logging.config import dictConfig
from typing import Any

from dockerflow import logging as dockerflow_logging

from adaptive_images.config import settings

# Loggers writing to the configured console handler.
SERVICE_LOGGERS = ("adaptive_images", "request.summary")

# Warns once per mangled resolution cookie.
RESOLVER_LOGGER = "adaptive_images.resolver.resolver"


def configure_logging() -> None:
    """Route service logs to MozLog JSON or to a rich console handler."""
    match settings.logging.format:
        case "mozlog":
            handler = "console-mozlog"
        case "pretty":
            handler = "console-pretty"
        case _:
            raise ValueError(
                f"Invalid log format: {settings.logging.format}."
                f" Should either be 'mozlog' or 'pretty'."
            )

    if settings.current_env.lower() == "production" and handler != "console-mozlog":
        raise ValueError("Log format must be 'mozlog' in production")

    loggers: dict[str, Any] = {
        name: _service_logger(handler, settings.logging.level) for name in SERVICE_LOGGERS
    }
    # Propagates to the `adaptive_images` handler.
    loggers[RESOLVER_LOGGER] = {"level": settings.logging.resolver_level, "propagate": True}
    loggers["uvicorn.error"] = {
        "handlers": ["uvicorn-error-handler"],
        "level": "ERROR",
        "propagate": False,
    }

    dictConfig(
        {
            "version": 1,
            "formatters": {
                "text": {"format": "%(message)s"},
                "json": {"()": GCPCompatibleJSONFormatter, "logger_name": "adaptive_images"},
            },
            "handlers": {
                "console-mozlog": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": sys.stdout,
                },
                "console-pretty": {
                    "class": "rich.logging.RichHandler",
                    "formatter": "text",
                },
                "uvicorn-error-handler": {
                    "class": "logging.StreamHandler",
                    "formatter": "text",
                    "stream": sys.stderr,
                },
            },
            "loggers": loggers,
        }
    )


def _service_logger(handler: str, level: str) -> dict[str, Any]:
    """Return the dictConfig entry of a logger writing to `handler`."""
    return {
        "handlers": [handler],
        "level": level,
        "propagate": settings.logging.can_propagate,
    }


class GCPCompatibleJSONFormatter(dockerflow_logging.JsonLogFormatter):
    """MozLog formatter adding the numeric `severity` field read by GCP."""

    STACKDRIVER_LEVEL_MAP = {
        logging.CRITICAL: 600,
        logging.ERROR: 500,
        logging.WARNING: 400,
        logging.INFO: 200,
        logging.DEBUG: 100,
        logging.NOTSET: 0,
    }

    def convert_record(self, record):
        """Add `severity` to the MozLog record."""
        out = super().convert_record(record)
        out["severity"] = self.STACKDRIVER_LEVEL_MAP.get(record.levelno, 0)
        return out
