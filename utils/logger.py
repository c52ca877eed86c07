# -*- coding: utf-8 -*-
"""
Logging configuration.

One application logger, named after Config.APP_NAME, writes every record
to a rotating file and INFO (or LOG_LEVEL) and above to stdout. Modules log
through children: get_logger(__name__).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def logger_name(app_name: str) -> str:
    """"Landlord Listings" -> "landlord_listings"."""
    return "_".join(app_name.lower().split())


def _file_handler(config) -> RotatingFileHandler:
    config.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        config.LOG_PATH,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _console_handler(config) -> logging.StreamHandler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def setup_logger() -> logging.Logger:
    """
    Setup application logger with file and console handlers.

    Calling it again replaces the handlers, so a changed LOG_PATH takes
    effect.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    logger = logging.getLogger(logger_name(Config.APP_NAME))
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_file_handler(Config))
    logger.addHandler(_console_handler(Config))

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
