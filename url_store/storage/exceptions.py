"""
Errors raised by the URL store.

Every error names the store operation it came from, so callers can tell
a failed lookup from a failed insert without inspecting tracebacks.

- InitializationError: opening the location or creating the schema failed
- AliasExistsError:    alias already taken (pick another alias)
- NotFoundError:       no record with that alias (treat as absent)
- StorageError:        anything else the database reported
"""

from typing import Optional


class URLStoreError(Exception):
    """Base class for all URL store errors."""

    def __init__(self, op: str, detail: str):
        self.op = op
        self.detail = detail
        super().__init__(f"{op}: {detail}")


class InitializationError(URLStoreError):
    """Storage location could not be opened or the schema not created."""


class StorageError(URLStoreError):
    """Database failure other than a uniqueness conflict or a miss."""


class AliasExistsError(URLStoreError):
    """Alias is already mapped to a URL."""

    def __init__(self, op: str, alias: str):
        self.alias = alias
        super().__init__(op, f"alias {alias!r} already exists")


class NotFoundError(URLStoreError):
    """No record has the requested alias."""

    def __init__(self, op: str, alias: Optional[str] = None):
        self.alias = alias
        super().__init__(op, f"alias {alias!r} not found")
