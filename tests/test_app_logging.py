"""Tests for logging configuration."""

import logging

import pytest

from meal_catalog.app_logging import LOG_FORMAT, LOGGER_NAME, configure_logging


@pytest.fixture
def clean_logger():
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()
    configure_logging()


def test_repeat_calls_keep_single_handler_and_update_level(
    clean_logger: logging.Logger,
) -> None:
    configure_logging("warning")
    logger = configure_logging("debug")

    assert logger is clean_logger
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_handler_uses_catalog_format(clean_logger: logging.Logger) -> None:
    logger = configure_logging()

    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
