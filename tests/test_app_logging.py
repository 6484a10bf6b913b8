"""Tests for logging configuration."""

import logging

from fitness_point.api.app import create_app
from fitness_point.app_logging import LOG_FORMAT, configure_logging
from fitness_point.containers import AppContainer


def test_configure_logging_installs_single_handler() -> None:
    logger = logging.getLogger("fitness_point")
    logger.handlers.clear()

    configure_logging()
    configure_logging("debug")

    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_create_app_applies_configured_level(container: AppContainer) -> None:
    logger = logging.getLogger("fitness_point")
    container.settings.log_level = "warning"

    create_app(container)

    assert logger.level == logging.WARNING
    configure_logging()
