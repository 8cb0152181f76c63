"""Tests for logging configuration."""

import logging

from nutrition_calculator.app_logging import LOGGER_NAME, configure_logging


def test_configure_logging_idempotent() -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()

    configure_logging()
    first_count = len(logger.handlers)

    configure_logging(debug=True)
    second_count = len(logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert logger.propagate is False


def test_configure_logging_level_follows_debug() -> None:
    logger = logging.getLogger(LOGGER_NAME)

    configure_logging(debug=False)
    assert logger.level == logging.WARNING

    configure_logging(debug=True)
    assert logger.level == logging.INFO
