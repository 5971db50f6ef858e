"""Tests for the logging setup."""

import logging

import pytest

from srevent_api.app.core.config import Settings
from srevent_api.app.core.logging_config import CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME, setup_logging


@pytest.fixture
def root_logger():
    """Restore the root logger's level and handlers after the test."""
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def _named(root, name):
    return [handler for handler in root.handlers if handler.get_name() == name]


def test_console_handler_installed_once(root_logger):
    setup_logging(Settings(log_level="debug", log_file=None))
    setup_logging(Settings(log_level="warning", log_file=None))
    assert len(_named(root_logger, CONSOLE_HANDLER_NAME)) == 1
    assert root_logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging(Settings(log_level="chatty", log_file=None))
    assert root_logger.level == logging.INFO


def test_driver_logs_stay_quiet(root_logger):
    setup_logging(Settings(log_level="DEBUG", log_file=None))
    assert logging.getLogger("pymongo").level == logging.WARNING


def test_file_handler(root_logger, tmp_path):
    log_file = tmp_path / "api.log"
    setup_logging(Settings(log_level="INFO", log_file=str(log_file)))
    [handler] = _named(root_logger, FILE_HANDLER_NAME)
    logging.getLogger("srevent_api.test").info("written to file")
    handler.flush()
    assert "[INFO] srevent_api.test: written to file" in log_file.read_text(encoding="utf-8")
