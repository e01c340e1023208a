# src/repo_snapshot/logging_conf.py
from __future__ import annotations
import logging
import logging.config
from typing import Optional

from .config import settings


def _logging_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "basic": {
                "format": "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "basic",
                "level": level,
            },
        },
        "loggers": {
            "": {"handlers": ["console"], "level": level},
            "uvicorn": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.error": {"handlers": ["console"], "level": level, "propagate": False},
            "uvicorn.access": {"handlers": ["console"], "level": level, "propagate": False},
            "app": {"handlers": ["console"], "level": level, "propagate": False},
            # GitPython logs every command it runs at DEBUG
            "git": {"level": "WARNING"},
        },
    }


def setup_logging(level: Optional[str] = None) -> None:
    logging.config.dictConfig(_logging_config((level or settings.log_level).upper()))
