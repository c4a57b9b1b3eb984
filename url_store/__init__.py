"""
url_store: persistence layer mapping short aliases to target URLs.

Typical use:

    from url_store import open_url_store, NotFoundError

    store = open_url_store("links.db")
    store.save("https://example.com", "ex1")
"""

from url_store.schemas import Record, format_records
from url_store.storage import (
    URLStore,
    open_url_store,
    URLStoreError,
    InitializationError,
    AliasExistsError,
    NotFoundError,
    StorageError,
)

__version__ = "1.0.0"

__all__ = [
    "URLStore",
    "open_url_store",
    "Record",
    "format_records",
    "URLStoreError",
    "InitializationError",
    "AliasExistsError",
    "NotFoundError",
    "StorageError",
]
