"""Logging setup shared by the engine, data layer and API.

`get_logger` hands out stdlib loggers that write to stderr and to a
size-rotated `app.log`. The log directory and default level come from the
`LOG_DIR` and `LOG_LEVEL` environment variables.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3


def _level_from_env() -> int:
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


DEFAULT_LEVEL = _level_from_env()

_handlers: Optional[List[logging.Handler]] = None


def _shared_handlers() -> List[logging.Handler]:
    """Stream and rotating file handlers, created on first use."""
    global _handlers
    if _handlers is None:
        log_dir = os.getenv("LOG_DIR") or os.path.join(os.path.dirname(__file__), "..", "logs")
        os.makedirs(log_dir, exist_ok=True)
        formatter = logging.Formatter(LOG_FORMAT)
        stream = logging.StreamHandler()
        rotating = RotatingFileHandler(
            os.path.join(log_dir, "app.log"), maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8",
        )
        for handler in (stream, rotating):
            handler.setFormatter(formatter)
        _handlers = [stream, rotating]
    return _handlers


def get_logger(name: str = __name__, level: int = DEFAULT_LEVEL) -> logging.Logger:
    """Return the named logger, attaching the shared handlers once.

    Module loggers are named after their module (`services.meal_allocator`)
    and do not propagate, so each record is written exactly once.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        for handler in _shared_handlers():
            logger.addHandler(handler)
        logger.propagate = False
    return logger
