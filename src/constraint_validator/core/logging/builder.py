# src/constraint_validator/core/logging/builder.py
"""
Logging builder: create and apply a dictConfig logging configuration from Settings.

This module:
 - builds a dictConfig-compatible mapping from Settings (formatters, filters, handlers, loggers)
 - applies it with `setup_logging(settings)`

Configuration knobs (on the Settings object):
 - LOG_TO_STDOUT, LOG_DIR, LOG_FORMAT, LOG_LEVEL, ENV
"""

from __future__ import annotations

import logging
import logging.config
from pathlib import Path

from constraint_validator.utils.metadata import get_project_name

from .formatters import JsonFormatter, ColorFormatter
from .filters import RequestIdFilter
from .handlers import (
    get_console_handler,
    get_file_handler,
    get_error_file_handler,
    get_error_console_handler,
)

# Settings type only (avoid calling get_settings() here to prevent import-time side effects)
from constraint_validator.config.settings import Settings  # type: ignore


def _file_logging_enabled(settings: Settings) -> bool:
    return (not settings.LOG_TO_STDOUT) and bool(settings.LOG_DIR)


def make_dict_config(settings: Settings) -> dict:
    """
    Build the dictConfig mapping using the provided settings.

    The returned mapping includes:
      - formatters: "standard" (color in text mode, plain otherwise) and "json"
      - filters: "request_id"
      - handlers: console, plus file/error_file or error_console depending on LOG_TO_STDOUT
      - loggers: root, constraint_validator
    """
    formatters = {
        "standard": {
            "()": ColorFormatter if settings.LOG_FORMAT == "text" else logging.Formatter,
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(request_id)s | %(message)s",
        },
        "json": {
            "()": JsonFormatter,
            "env": settings.ENV,
            "service": get_project_name() or "constraint-validator",
        },
    }

    filters = {
        "request_id": {"()": RequestIdFilter},
    }

    handlers: dict[str, dict] = {"console": get_console_handler(settings)}

    if _file_logging_enabled(settings):
        handlers["file"] = get_file_handler(settings)
        handlers["error_file"] = get_error_file_handler(settings)
    else:
        handlers["error_console"] = get_error_console_handler(settings)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": formatters,
        "filters": filters,
        "handlers": handlers,
        "loggers": {
            "": {
                "handlers": list(handlers.keys()),
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
            # Package loggers follow the root level but can be tuned separately here.
            "constraint_validator": {
                "level": settings.LOG_LEVEL,
                "propagate": True,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """
    Initialize logging using settings.

    Steps:
      1. Ensure LOG_DIR exists when writing files.
      2. Apply dictConfig(make_dict_config(settings)).
      3. Register a RequestIdFilter on the root logger so %(request_id)s never KeyErrors.
    """
    if _file_logging_enabled(settings):
        Path(settings.LOG_DIR).mkdir(parents=True, exist_ok=True)

    logging.config.dictConfig(make_dict_config(settings))

    logging.getLogger().addFilter(RequestIdFilter())
