"""
Logging setup for the Job Application Tracker.

Everything goes through the root logger: SQL statement echo and the HTTP
access log are switched on by level here rather than by their libraries'
own handlers, so they share one format and one destination.
"""
import logging
import sys
from typing import List, Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

SQL_LOGGER = "sqlalchemy.engine"
ACCESS_LOGGER = "uvicorn.access"
REQUESTS_LOGGER = "urllib3"


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", log_file: Optional[str] = None,
                  sql_echo: bool = False, access_log: bool = False) -> None:
    """
    Configure application-wide logging settings.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        sql_echo: Log every SQL statement (DATABASE_ECHO)
        access_log: Keep uvicorn's per-request access lines (DEBUG)
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in _build_handlers(log_file):
        root_logger.addHandler(handler)

    # SQLAlchemy logs statements at INFO on sqlalchemy.engine
    logging.getLogger(SQL_LOGGER).setLevel(logging.INFO if sql_echo else logging.WARNING)
    logging.getLogger(ACCESS_LOGGER).setLevel(logging.INFO if access_log else logging.WARNING)
    logging.getLogger(REQUESTS_LOGGER).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
