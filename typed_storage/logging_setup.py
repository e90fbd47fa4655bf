from __future__ import annotations

import logging
import sys
from pathlib import Path

from .settings import Settings

LOGGER_NAME = "typed_storage"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str | int = logging.INFO, log_file: Path | None = None) -> logging.Handler:
    """
    Attach a handler to the typed_storage logger and return it.

    Logs go to log_file when given, otherwise to stderr. The root logger is left alone.
    """
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler


def setup_logging_from_settings(settings: Settings) -> logging.Handler:
    return setup_logging(settings.log_level, settings.log_file)


def teardown_logging(handler: logging.Handler) -> None:
    logging.getLogger(LOGGER_NAME).removeHandler(handler)
    handler.close()
