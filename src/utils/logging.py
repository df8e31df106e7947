"""Logger factory shared by ingestion and reporting layers."""

from __future__ import annotations

import logging

from src.config import LOG_LEVEL

_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def get_logger(name: str) -> logging.Logger:
    """Return a module logger with a single stream handler on the package root."""
    root = logging.getLogger('src')
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL)
    return logging.getLogger(name)
