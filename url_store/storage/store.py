"""
SQL-backed alias -> URL store.

One store instance owns one engine (and its connection pool) and is meant
to be created once at startup and shared by every caller. It keeps no
locks and no cache: each operation is a single statement in its own
short-lived session, so isolation and blocking are the database's job.
"""

import logging
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from url_store.database.connection import (
    Base,
    create_db_engine,
    create_session_factory,
)
from url_store.models.url import URL
from url_store.schemas.url import Record
from url_store.storage.exceptions import (
    AliasExistsError,
    InitializationError,
    NotFoundError,
    StorageError,
)


logger = logging.getLogger(__name__)

OP_INIT = "storage.sqlite.New"
OP_SAVE = "storage.sqlite.Save"
OP_GET = "storage.sqlite.GetByAlias"
OP_DELETE = "storage.sqlite.DeleteByAlias"
OP_LIST = "storage.sqlite.ListAll"

# Driver messages for unique-constraint violations (SQLite, PostgreSQL)
_UNIQUE_VIOLATION_MARKERS = (
    "UNIQUE constraint failed",
    "duplicate key value violates unique constraint",
)


def _is_unique_violation(exc: IntegrityError) -> bool:
    """True if the integrity error is a UNIQUE violation (not NOT NULL/CHECK)."""
    orig = exc.orig
    if getattr(orig, "sqlite_errorname", None) == "SQLITE_CONSTRAINT_UNIQUE":
        return True
    if getattr(orig, "pgcode", None) == "23505":
        return True
    message = str(orig)
    return any(marker in message for marker in _UNIQUE_VIOLATION_MARKERS)


class URLStore:
    """
    Persistent alias -> URL mapping.

    Constructing a store opens the location and makes sure the schema
    exists; a constructed store is ready for every operation.

    Example:
        with URLStore("links.db") as store:
            store.save("https://example.com", "ex1")
            store.get_by_alias("ex1")  # "https://example.com"
    """

    def __init__(self, location: str, echo: bool = False):
        """
        Open (or create) the store at `location`.

        Args:
            location: SQLite file path, ":memory:" or an SQLAlchemy database URL
            echo: Log every SQL statement (debugging only)

        Raises:
            InitializationError: location unusable or schema creation failed
        """
        self.location = location
        try:
            self.engine: Engine = create_db_engine(location, echo=echo)
        except (SQLAlchemyError, ImportError) as e:
            # ImportError: dialect known, DBAPI driver not installed
            raise InitializationError(OP_INIT, f"cannot open {location!r}: {e}") from e

        self._session_factory = create_session_factory(self.engine)
        self._init_database()
        logger.info("URL store ready at %s", location)

    def _init_database(self):
        """Create the url table and alias index if they don't exist."""
        try:
            # checkfirst: safe against an already initialized location
            Base.metadata.create_all(bind=self.engine, checkfirst=True)
        except SQLAlchemyError as e:
            self.engine.dispose()
            raise InitializationError(
                OP_INIT, f"cannot create schema at {self.location!r}: {e}"
            ) from e

    def save(self, url: str, alias: str) -> int:
        """
        Store a new alias -> URL mapping.

        Args:
            url: Redirect target (syntax is not validated here)
            alias: Unique, non-empty alias

        Returns:
            The id assigned to the new record

        Raises:
            AliasExistsError: alias already mapped; the existing record is untouched
            StorageError: any other failure, including empty values
        """
        with self._session_factory() as session:
            record = URL(url=url, alias=alias)
            session.add(record)
            try:
                session.commit()
            except IntegrityError as e:
                session.rollback()
                if _is_unique_violation(e):
                    logger.warning("Alias already exists: %s", alias)
                    raise AliasExistsError(OP_SAVE, alias) from e
                raise StorageError(OP_SAVE, str(e.orig)) from e
            except SQLAlchemyError as e:
                session.rollback()
                raise StorageError(OP_SAVE, str(e)) from e

            logger.info("Saved alias %s -> %s (id=%s)", alias, url, record.id)
            return record.id

    def get_by_alias(self, alias: str) -> str:
        """
        Look up the URL for an alias (exact, case-sensitive match).

        Raises:
            NotFoundError: no record has this alias
            StorageError: the query failed
        """
        try:
            with self._session_factory() as session:
                url = session.scalar(select(URL.url).where(URL.alias == alias))
        except SQLAlchemyError as e:
            raise StorageError(OP_GET, str(e)) from e

        if url is None:
            logger.warning("Alias not found: %s", alias)
            raise NotFoundError(OP_GET, alias)

        logger.debug("Resolved alias %s -> %s", alias, url)
        return url

    def delete_by_alias(self, alias: str) -> None:
        """
        Delete the record with this alias.

        A DELETE matching nothing is not an error to the database, so the
        affected row count decides between success and NotFoundError.

        Raises:
            NotFoundError: no record had this alias
            StorageError: the statement failed
        """
        stmt = (
            delete(URL)
            .where(URL.alias == alias)
            .execution_options(synchronize_session=False)
        )
        with self._session_factory() as session:
            try:
                deleted = session.execute(stmt).rowcount
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                raise StorageError(OP_DELETE, str(e)) from e

        if deleted == 0:
            logger.warning("Nothing to delete for alias: %s", alias)
            raise NotFoundError(OP_DELETE, alias)

        logger.info("Deleted alias %s", alias)

    def list_all(self) -> List[Record]:
        """
        Return every stored record.

        Order is whatever the database returns. An empty store gives an
        empty list; a failed scan raises StorageError and nothing partial
        is returned.
        """
        try:
            with self._session_factory() as session:
                records = [
                    Record.model_validate(row)
                    for row in session.scalars(select(URL))
                ]
        except SQLAlchemyError as e:
            raise StorageError(OP_LIST, str(e)) from e

        logger.debug("Listed %d records", len(records))
        return records

    def close(self):
        """Release pooled connections. Call once at shutdown."""
        self.engine.dispose()
        logger.info("URL store at %s closed", self.location)

    def __enter__(self) -> "URLStore":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
