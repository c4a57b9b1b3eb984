from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool


Base = declarative_base()

MEMORY_LOCATION = ":memory:"


def resolve_database_url(location: str) -> str:
    """
    Turn a storage location into an SQLAlchemy database URL.
    
    Accepts:
    - A full database URL ("sqlite:///./links.db", "postgresql://...")
    - ":memory:" for a throwaway in-process SQLite database
    - Anything else is treated as a SQLite file path
    """
    if location == MEMORY_LOCATION:
        return "sqlite://"
    if "://" in location:
        return location
    return f"sqlite:///{location}"


def create_db_engine(location: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given storage location.
    
    SQLite connections may be used from any thread (the store is shared
    between request handlers). An in-memory database lives only as long as
    its connection, so it gets a pool of exactly one connection: the pool
    never closes it, and hands it to one session at a time while other
    callers wait (up to pool_timeout) for it to be checked back in.
    
    Raises:
        sqlalchemy.exc.ArgumentError: location is not a usable URL
        sqlalchemy.exc.NoSuchModuleError: unknown dialect/driver
        ImportError: the dialect's DBAPI driver is not installed
    """
    url = make_url(resolve_database_url(location))
    
    if url.get_backend_name() != "sqlite":
        return create_engine(url, echo=echo)
    
    connect_args = {"check_same_thread": False}
    if url.database in (None, "", MEMORY_LOCATION):
        return create_engine(
            url,
            echo=echo,
            connect_args=connect_args,
            poolclass=QueuePool,
            pool_size=1,
            max_overflow=0,
        )
    return create_engine(url, echo=echo, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory bound to ``engine``; objects stay readable after commit."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )
