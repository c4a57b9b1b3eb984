"""
Database plumbing for the URL store.

Engines and sessions are created per store instance; there is no
module-level engine, so every store owns its own connection pool.
"""

from .connection import Base, resolve_database_url, create_db_engine, create_session_factory

__all__ = [
    "Base",
    "resolve_database_url",
    "create_db_engine",
    "create_session_factory",
]
