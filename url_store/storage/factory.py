"""
Build URL stores from settings.

This is the startup path: it applies the logging settings and opens a
store. Unlike a cached singleton, every call opens a new store; the caller
owns it, passes it to whoever needs it and closes it at shutdown.
"""

import logging
from typing import Optional

from url_store.config import settings
from url_store.logging_config import setup_logging
from url_store.storage.store import URLStore


logger = logging.getLogger(__name__)


def open_url_store(location: Optional[str] = None, echo: Optional[bool] = None) -> URLStore:
    """
    Open a URL store, falling back to settings for anything not given.
    
    Args:
        location: Storage location (default: settings.database_url)
        echo: SQL echo (default: settings.database_echo)
        
    Returns:
        A ready URLStore
        
    Raises:
        InitializationError: the location could not be opened
    """
    if location is None:
        location = settings.database_url
    if echo is None:
        echo = settings.database_echo
    
    setup_logging()
    logger.debug("Opening URL store at %s", location)
    return URLStore(location, echo=echo)
