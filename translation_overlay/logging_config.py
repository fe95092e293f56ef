"""Logging configuration helpers for the overlay server."""

from __future__ import annotations

import logging.config
import os
from pathlib import Path
from typing import Any, Dict

_logging_configured = False


def configure_logging(force: bool = False) -> None:
    """Setup uvicorn-compatible logging with a rotating file handler."""
    global _logging_configured
    if _logging_configured and not force:
        return

    log_dir = Path(os.getenv("OVERLAY_LOG_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    log_level = os.getenv("OVERLAY_LOG_LEVEL", "INFO").upper()
    log_path = log_dir / os.getenv("OVERLAY_LOG_FILE", "overlay.log")

    logging_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "()": "uvicorn.logging.DefaultFormatter",
                "fmt": "%(asctime)s %(levelprefix)s %(name)s: %(message)s",
                "use_colors": None,
            },
            "access": {
                "()": "uvicorn.logging.AccessFormatter",
                "fmt": "%(levelprefix)s %(client_addr)s - \"%(request_line)s\" %(status_code)s",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "formatter": "default",
                "filename": str(log_path),
                "maxBytes": 5 * 1024 * 1024,
                "backupCount": 5,
                "encoding": "utf-8",
                "delay": True,
            },
            "access_stream": {
                "class": "logging.StreamHandler",
                "formatter": "access",
                "stream": "ext://sys.stdout",
            },
        },
        "loggers": {
            "translation_overlay": {
                "handlers": ["default", "file"],
                "level": log_level,
                "propagate": False,
            },
            "uvicorn.error": {
                "handlers": ["default", "file"],
                "level": log_level,
                "propagate": False,
            },
            "uvicorn.access": {
                "handlers": ["access_stream"],
                "level": log_level,
                "propagate": False,
            },
        },
        "root": {
            "handlers": ["default"],
            "level": "WARNING",
        },
    }

    logging.config.dictConfig(logging_config)
    _logging_configured = True


__all__ = ["configure_logging"]
