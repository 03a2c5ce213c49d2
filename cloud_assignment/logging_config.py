"""Logging setup shared by the app and the uvicorn server."""

from __future__ import annotations

import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)-5s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Send every record to stdout, uvicorn's loggers included.

    uvicorn's lifecycle chatter is held back to warnings unless running at
    DEBUG, so a normal start prints only the service's own notice.
    """
    level = level.upper()
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": LOG_FORMAT},
            },
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "uvicorn.error": {"level": "DEBUG" if level == "DEBUG" else "WARNING"},
            },
            "root": {"level": level, "handlers": ["stdout"]},
        }
    )
