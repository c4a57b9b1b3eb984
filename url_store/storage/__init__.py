"""
Storage module for alias -> URL mappings.

URLStore is the only backend: SQLAlchemy handles the dialect, the store
handles the error taxonomy.
"""

from .exceptions import (
    URLStoreError,
    InitializationError,
    AliasExistsError,
    NotFoundError,
    StorageError,
)
from .store import URLStore
from .factory import open_url_store

__all__ = [
    "URLStore",
    "open_url_store",
    "URLStoreError",
    "InitializationError",
    "AliasExistsError",
    "NotFoundError",
    "StorageError",
]
