"""
Logging setup for the URL store.

Store modules only ever call ``logging.getLogger(__name__)``; this module
decides where those records go, using the ``log_*`` settings unless told
otherwise. Only the ``url_store`` logger is touched, never the root logger.
"""

import logging
import sys
from typing import Optional

from url_store.config import settings


LOGGER_NAME = "url_store"

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)

# Marks handlers installed here, so a second setup replaces only those
_OWNED = "_url_store_handler"


def _formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return logging.Formatter(JSON_FORMAT)
    return logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def _own(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    setattr(handler, _OWNED, True)
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: Optional[bool] = None,
) -> logging.Logger:
    """Configure the ``url_store`` logger.
    
    Args:
        level: Level name; defaults to settings.log_level
        log_file: Extra file destination; defaults to settings.log_file
        json_format: JSON lines output; defaults to settings.log_json
        
    Returns:
        The configured ``url_store`` logger
    """
    level = level or settings.log_level
    log_file = log_file if log_file is not None else settings.log_file
    json_format = settings.log_json if json_format is None else json_format

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    formatter = _formatter(json_format)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(numeric_level)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_own(logging.StreamHandler(sys.stdout), numeric_level, formatter))
    if log_file:
        logger.addHandler(_own(logging.FileHandler(log_file), numeric_level, formatter))

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Logger under the ``url_store`` hierarchy (or the package logger itself)."""
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
