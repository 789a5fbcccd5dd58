from __future__ import annotations

import logging
from typing import Iterator

import pytest

from apimeta.registry import MetadataRegistry, set_default_registry


@pytest.fixture
def registry() -> MetadataRegistry:
    """Provide an isolated registry so tests never touch the default one."""
    return MetadataRegistry()


@pytest.fixture
def restore_logger() -> Iterator[logging.Logger]:
    """Undo handler and level changes made to the ``apimeta`` logger."""
    logger = logging.getLogger("apimeta")
    level, propagate = logger.level, logger.propagate
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def restore_default_registry() -> Iterator[None]:
    previous = set_default_registry(MetadataRegistry())
    yield
    set_default_registry(previous)
