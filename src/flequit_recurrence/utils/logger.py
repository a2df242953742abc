"""Logging for the command line and the rescheduler.

All records go to one rotating file, ``flequit-recur.log``, in the platformdirs
user log directory. Components log through children of the
``flequit_recurrence`` logger so the file shows where a record came from.
The level defaults to INFO and can be raised or lowered with the
``FLEQUIT_RECUR_LOG_LEVEL`` environment variable.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

APP_LOGGER_NAME = "flequit_recurrence"
LOG_FILE_NAME = "flequit-recur.log"
LOG_LEVEL_ENV = "FLEQUIT_RECUR_LOG_LEVEL"

_ROTATE_AT_BYTES = 5 * 1024 * 1024
_ROTATED_FILES_KEPT = 3

_logger: logging.Logger | None = None


def _level_from_env() -> int:
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _log_path() -> Path:
    log_dir = Path(user_log_dir(APP_LOGGER_NAME))
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / LOG_FILE_NAME


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler)
        and handler.baseFilename == target
        for handler in logger.handlers
    )


def _file_handler(path: Path) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=_ROTATE_AT_BYTES,
        backupCount=_ROTATED_FILES_KEPT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def get_logger(component: str | None = None) -> logging.Logger:
    """Return the application logger, or its child for ``component``.

    The file handler is attached once, on first use.
    """
    global _logger
    if _logger is None:
        app_logger = logging.getLogger(APP_LOGGER_NAME)
        app_logger.setLevel(_level_from_env())
        path = _log_path()
        if not _has_file_handler(app_logger, path):
            app_logger.addHandler(_file_handler(path))
        app_logger.propagate = False
        _logger = app_logger

    if component:
        return _logger.getChild(component)
    return _logger
