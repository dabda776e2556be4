"""
Logging configuration for the client packages.

Handlers are attached to the ``api``, ``models`` and ``utils`` package
loggers rather than the root logger, so embedding applications keep control
of their own logging. Response bodies are only logged at DEBUG by
``api.client``; they reach the console only when the console level is
DEBUG, but the optional log file always records them.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

CLIENT_LOGGERS = ('api', 'models', 'utils')
APP_LOGGER = 'spacetraders_client'


def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  app_logger: str = APP_LOGGER) -> logging.Logger:
    """
    Setup logging for the client packages and the calling application.

    Args:
        level: Console logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path; receives everything down to DEBUG
        app_logger: Name of the caller's own logger, configured alongside

    Returns:
        The application logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logger_level = logging.DEBUG if log_file else numeric_level
    for name in CLIENT_LOGGERS + (app_logger,):
        logger = logging.getLogger(name)
        for old_handler in logger.handlers[:]:
            logger.removeHandler(old_handler)
            old_handler.close()
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(logger_level)
        logger.propagate = False

    return logging.getLogger(app_logger)
