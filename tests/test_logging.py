"""Tests for apimeta.logging."""

from __future__ import annotations

import logging
from pathlib import Path

from apimeta.config import LoggingConfig
from apimeta.logging import configure_logging, get_logger
from apimeta.models import ElementRef
from apimeta.options import ResponseOptions
from apimeta.registry import MetadataRegistry


def list_cats() -> None:
    pass


def test_get_logger_is_namespaced() -> None:
    assert get_logger().name == "apimeta"
    assert get_logger("registry").name == "apimeta.registry"


def test_default_console_shows_warnings_only(restore_logger: logging.Logger) -> None:
    logger = configure_logging()

    assert logger is restore_logger
    assert logger.level == logging.WARNING
    assert [handler.level for handler in logger.handlers] == [logging.WARNING]
    assert logger.propagate is False


def test_verbose_reconfiguration_does_not_duplicate_handlers(
    restore_logger: logging.Logger,
) -> None:
    configure_logging(LoggingConfig(verbose=True))
    logger = configure_logging(LoggingConfig(verbose=True))

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_log_file_receives_registration_trail(
    tmp_path: Path, restore_logger: logging.Logger
) -> None:
    log_file = tmp_path / "logs" / "apimeta.log"
    configure_logging(LoggingConfig(log_file=log_file))

    MetadataRegistry().describe_response(
        ElementRef.for_method(list_cats), ResponseOptions(status=200)
    )
    for handler in restore_logger.handlers:
        handler.flush()

    assert restore_logger.level == logging.DEBUG
    assert restore_logger.handlers[0].level == logging.WARNING
    text = log_file.read_text(encoding="utf-8")
    assert "apimeta.registry" in text
    assert "Registered 200 response" in text
