"""
Database Configuration.

SQLAlchemy engine and session management for the local SQLite store.
Uses lazy initialization so importing this module never touches disk.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from notes_app.core.logging import get_logger
from notes_app.models.base import Base

if TYPE_CHECKING:
    from notes_app.repositories.base import KeyValueStorage

logger = get_logger(__name__)

# Module-level state for lazy initialization
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _create_engine() -> Engine:
    """Create SQLAlchemy engine from storage.yaml."""
    from notes_app.core.config import get_app_config, get_database_url

    storage_config = get_app_config().storage
    url = get_database_url()

    db_path = Path(url.removeprefix("sqlite:///"))
    db_path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(url, echo=storage_config.echo)
    logger.debug("Database engine created", extra={"path": str(db_path)})
    return engine


def get_engine() -> Engine:
    """
    Get the database engine, creating it on first use.

    Returns:
        SQLAlchemy engine instance
    """
    global _engine
    if _engine is None:
        _engine = _create_engine()
        init_db(_engine)
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """
    Get the session factory, creating it on first use.

    Returns:
        SQLAlchemy session factory
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(get_engine(), expire_on_commit=False)
    return _session_factory


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(engine)


def reset_engine() -> None:
    """Dispose the cached engine and session factory."""
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def build_storage() -> "KeyValueStorage":
    """
    Build the key-value storage selected in storage.yaml.

    Returns:
        A KeyValueStorage implementation
    """
    from notes_app.core.config import get_app_config
    from notes_app.repositories.storage import MemoryStorage, SqlStorage

    backend = get_app_config().storage.backend
    logger.debug("Building storage", extra={"backend": backend})
    if backend == "memory":
        return MemoryStorage()
    return SqlStorage(get_session_factory())
