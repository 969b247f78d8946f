"""Database engine construction and request-scoped store access."""

from pathlib import Path

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool


def _is_memory_database(url: str) -> bool:
    database = make_url(url).database
    return database in (None, "", ":memory:")


def create_store_engine(url: str, pool_size: int = 5) -> Engine:
    """Create the engine backing the store.

    File and server databases get a fixed-size pool with no overflow and no
    checkout timeout: once every connection is in use, callers wait for one
    to be returned instead of failing.

    Args:
        url: SQLAlchemy database URL.
        pool_size: Number of pooled connections.

    Returns:
        A configured SQLAlchemy engine.
    """
    is_sqlite = make_url(url).get_backend_name() == "sqlite"
    connect_args = {"check_same_thread": False} if is_sqlite else {}

    if is_sqlite and _is_memory_database(url):
        # One shared connection, otherwise every checkout sees an empty database
        return create_engine(
            url,
            connect_args=connect_args,
            poolclass=StaticPool,
            echo=False,
        )

    return create_engine(
        url,
        connect_args=connect_args,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=None,
        echo=False,
    )


def store_file_exists(url: str) -> bool:
    """Return True if the URL points to an SQLite file that is already on disk.

    Non-SQLite databases are assumed to exist already.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return True
    if _is_memory_database(url):
        return False
    return Path(parsed.database).exists()


def get_store(request: Request):
    """Dependency that provides the store opened by the application lifespan."""
    return request.app.state.store
