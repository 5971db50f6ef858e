"""
Logging configuration for the API process.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger.  The handlers are named, so a
second call, for example from another ``create_app`` in the same
process, finds them and only re‑applies the level.  pymongo's own
loggers (command, connection, server selection) are kept at WARNING so
that ``LOG_LEVEL=DEBUG`` shows the application rather than the driver.
"""

import logging
from pathlib import Path

from .config import Settings


CONSOLE_HANDLER_NAME = "srevent.console"
FILE_HANDLER_NAME = "srevent.file"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from ``settings.log_level`` and ``settings.log_file``.

    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    logging.getLogger("pymongo").setLevel(logging.WARNING)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if settings.log_file and not _has_handler(root, FILE_HANDLER_NAME):
        file_handler = logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        file_handler.set_name(FILE_HANDLER_NAME)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
