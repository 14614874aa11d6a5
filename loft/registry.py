"""Process-wide named loggers."""

from __future__ import annotations

import threading
from typing import Dict

from loft.logger import DEFAULT_NAME, Logger


_LOGGERS: Dict[str, Logger] = {}
_LOCK = threading.Lock()


def get_logger(name: str = DEFAULT_NAME) -> Logger:
    """Return the shared logger for ``name``, creating it on first use."""
    name = name or DEFAULT_NAME
    with _LOCK:
        logger = _LOGGERS.get(name)
        if logger is None:
            logger = Logger(name)
            _LOGGERS[name] = logger
        return logger


def reset_loggers() -> None:
    """Forget every shared logger."""
    with _LOCK:
        _LOGGERS.clear()
