"""Logging helpers for metadata registration.

The registry logs one DEBUG record per registered fragment and a WARNING for
questionable input such as unknown response statuses. ``configure_logging``
routes those records as described by the ``logging`` section of
``.apimeta.yml``.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import LoggingConfig

ROOT_LOGGER = "apimeta"

_CONSOLE_FORMAT = "[%(name)s] %(levelname)s %(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``apimeta`` logger or one of its children (``apimeta.registry``)."""
    root = logging.getLogger(ROOT_LOGGER)
    return root.getChild(name) if name else root


def configure_logging(settings: Optional[LoggingConfig] = None) -> logging.Logger:
    """Attach handlers for ``settings`` to the ``apimeta`` logger.

    The console only shows warnings unless ``verbose`` is set. A ``log_file``
    always receives the full registration trail at DEBUG level.
    """
    settings = settings or LoggingConfig()
    console_level = logging.DEBUG if settings.verbose else logging.WARNING

    logger = get_logger()
    logger.propagate = False
    _reset_handlers(logger)
    logger.addHandler(_handler(logging.StreamHandler(), console_level, _CONSOLE_FORMAT))

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(settings.log_file, encoding="utf-8")
        logger.addHandler(_handler(file_handler, logging.DEBUG, _FILE_FORMAT))
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(console_level)
    return logger


def _handler(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
