"""Database session management.

Provides session factory for SQLite database access with proper
thread-safety for FastAPI concurrency.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Generator

from sqlalchemy import Engine, create_engine, event, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from mediadesk.config import DEFAULT_DB_PATH
from mediadesk.db.schema import Base

# Module-level engine cache for connection pooling
_engine_cache: dict[str, Engine] = {}

# Module-level session factory cache
_session_factory_cache: dict[str, sessionmaker] = {}


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _configure_connection(dbapi_connection, connection_record) -> None:
    # SQLite ignores ON DELETE CASCADE unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Built-in lower() folds ASCII only; ilike compiles to lower(x) LIKE lower(y)
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def _is_memory_url(url: str) -> bool:
    return make_url(url).database in (None, "", ":memory:")


def build_engine(url: str) -> Engine:
    """Create a SQLite engine with foreign keys and Unicode lower() enabled.

    File databases use the default connection pool, so each request's
    session gets its own connection. In-memory databases (tests, with
    "sqlite:///:memory:") use StaticPool so every session sees the same
    database.

    Args:
        url: SQLAlchemy database URL.

    Returns:
        SQLAlchemy engine instance.
    """
    kwargs = {}
    if _is_memory_url(url):
        kwargs["poolclass"] = StaticPool

    engine = create_engine(
        url,
        echo=False,
        connect_args={"check_same_thread": False},
        **kwargs,
    )
    event.listen(engine, "connect", _configure_connection)
    return engine


def get_engine(db_path: Path | None = None) -> Engine:
    """Get SQLAlchemy engine for the database.

    Engines are cached by resolved db_path to enable connection pooling.
    Subsequent calls with the same path return the cached engine.

    Args:
        db_path: Path to SQLite database file. Defaults to data/mediadesk.db.

    Returns:
        SQLAlchemy engine instance (cached).
    """
    if db_path is None:
        db_path = DEFAULT_DB_PATH

    db_path = Path(db_path)
    cache_key = str(db_path.resolve())

    if cache_key in _engine_cache:
        return _engine_cache[cache_key]

    # Create parent directories only when creating a new engine
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = build_engine(f"sqlite:///{db_path}")
    _engine_cache[cache_key] = engine

    return engine


def _get_session_factory(db_path: Path | None = None) -> sessionmaker:
    """Get cached session factory for the database."""
    if db_path is None:
        db_path = DEFAULT_DB_PATH

    db_path = Path(db_path)
    cache_key = str(db_path.resolve())

    if cache_key in _session_factory_cache:
        return _session_factory_cache[cache_key]

    engine = get_engine(db_path)
    factory = sessionmaker(bind=engine)
    _session_factory_cache[cache_key] = factory

    return factory


def get_session(db_path: Path | None = None) -> Session:
    """Get a database session.

    Note: Caller is responsible for closing the session. For automatic
    resource management, use get_db_session() context manager instead.

    Args:
        db_path: Path to SQLite database file.

    Returns:
        SQLAlchemy Session instance.
    """
    factory = _get_session_factory(db_path)
    return factory()


@contextmanager
def get_db_session(db_path: Path | None = None) -> Generator[Session, None, None]:
    """Context manager for database sessions with automatic cleanup.

    Commits on successful exit, rolls back on exception, and always
    closes the session.

    Args:
        db_path: Path to SQLite database file.

    Yields:
        SQLAlchemy Session instance.
    """
    session = get_session(db_path)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(db_path: Path | None = None) -> None:
    """Initialize database schema.

    Call this once during application startup to create tables.

    Args:
        db_path: Path to SQLite database file.
    """
    engine = get_engine(db_path)
    Base.metadata.create_all(engine)
