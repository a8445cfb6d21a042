# motorent/utils/logger.py
"""
Centralised logging configuration for the entire application.
Logs to console and, unless LOG_TO_FILE is off, to a rotating file in LOG_DIR.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from motorent.config import settings

LOG_LEVEL = settings.LOG_LEVEL.upper()
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))

_configured = False


def _log_dir() -> str:
    if os.path.isabs(settings.LOG_DIR):
        return settings.LOG_DIR
    return os.path.join(PROJECT_ROOT, settings.LOG_DIR)


def _configure_root_logger():
    global _configured
    if _configured:
        return
    _configured = True

    fmt = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root = logging.getLogger()
    root.setLevel(LOG_LEVEL)

    console = logging.StreamHandler()
    console.setLevel(LOG_LEVEL)
    console.setFormatter(fmt)
    root.addHandler(console)

    if settings.LOG_TO_FILE:
        log_dir = _log_dir()
        os.makedirs(log_dir, exist_ok=True)
        # Keeps last 10 × 5MB log files
        file_handler = RotatingFileHandler(
            filename=os.path.join(log_dir, "motorent.log"),
            maxBytes=5 * 1024 * 1024,
            backupCount=10,
            encoding="utf-8",
        )
        file_handler.setLevel(LOG_LEVEL)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a named logger. Call this at the top of every module."""
    _configure_root_logger()
    return logging.getLogger(name)
