"""Unit tests for logging setup."""

import logging

import pytest

from bookstore.infrastructure.config import Settings, configure_logging


@pytest.fixture
def restore_bookstore_logger():
    logger = logging.getLogger("bookstore")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestSettings:

    def test_defaults(self):
        settings = Settings()
        assert settings.store_name == "Quantum book store"
        assert settings.log_level == "INFO"


class TestConfigureLogging:

    def test_installs_single_prefixed_handler(self, restore_bookstore_logger):
        configure_logging(Settings(store_name="Corner Books", log_level="WARNING"))
        configure_logging(Settings(store_name="Corner Books", log_level="WARNING"))

        logger = restore_bookstore_logger
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
        assert logger.handlers[0].formatter._fmt == "Corner Books: %(message)s"

    def test_records_carry_store_prefix(self, restore_bookstore_logger):
        configure_logging(Settings(store_name="Corner Books", log_level="INFO"))
        record = logging.LogRecord(
            "bookstore.catalog", logging.INFO, __file__, 1, "Added book - Dune", None, None
        )
        formatted = restore_bookstore_logger.handlers[0].format(record)
        assert formatted == "Corner Books: Added book - Dune"
