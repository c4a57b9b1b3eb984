"""
Test configuration and fixtures for the URL store.
Every test gets its own database file, so tests never see each other's data.
"""

import pytest

from url_store.storage import URLStore


@pytest.fixture(scope="function")
def db_path(tmp_path):
    """Path of a not-yet-created SQLite database file."""
    return str(tmp_path / "test.db")


@pytest.fixture(scope="function")
def store(db_path):
    """
    A ready URL store backed by a fresh database file.
    Closed after the test.
    """
    url_store = URLStore(db_path)
    try:
        yield url_store
    finally:
        url_store.close()
