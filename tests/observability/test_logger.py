"""
Test suite for logging configuration.

System role: Verification of centralized logging setup
"""

import logging

import pytest

from newsdigest.observability import configure_logging, get_logger


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put back the root handlers and level replaced by configure_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_should_install_single_stdout_handler(self) -> None:
        configure_logging("DEBUG")
        configure_logging("DEBUG")

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_unknown_level_should_default_to_info(self) -> None:
        configure_logging("chatty")

        assert logging.getLogger().level == logging.INFO

    def test_noisy_libraries_should_be_capped(self) -> None:
        configure_logging("DEBUG")

        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_get_logger_should_return_named_logger(self) -> None:
        assert get_logger("newsdigest.workers").name == "newsdigest.workers"
