"""
Key-Value Storage Backends.

MemoryStorage keeps values in a dict (tests, throwaway sessions).
SqlStorage keeps them in the storage_entries table through SQLAlchemy.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from notes_app.core.exceptions import StorageError
from notes_app.core.logging import get_logger
from notes_app.models.storage_entry import StorageEntry
from notes_app.repositories.base import KeyValueStorage

logger = get_logger(__name__)


class MemoryStorage(KeyValueStorage):
    """In-process storage backed by a dict."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SqlStorage(KeyValueStorage):
    """
    Storage persisted in a relational database.

    Every call opens its own session and commits before returning, so a
    completed set() is durable.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        try:
            with self._session_factory() as session:
                entry = session.get(StorageEntry, key)
                return entry.value if entry is not None else None
        except SQLAlchemyError as e:
            logger.error("Storage read failed", extra={"key": key, "error": str(e)})
            raise StorageError(f"Failed to read key: {key}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with self._session_factory() as session:
                entry = session.get(StorageEntry, key)
                if entry is None:
                    session.add(StorageEntry(key=key, value=value))
                else:
                    entry.value = value
                session.commit()
        except SQLAlchemyError as e:
            logger.error("Storage write failed", extra={"key": key, "error": str(e)})
            raise StorageError(f"Failed to write key: {key}") from e

    def delete(self, key: str) -> None:
        try:
            with self._session_factory() as session:
                entry = session.get(StorageEntry, key)
                if entry is not None:
                    session.delete(entry)
                    session.commit()
        except SQLAlchemyError as e:
            logger.error("Storage delete failed", extra={"key": key, "error": str(e)})
            raise StorageError(f"Failed to delete key: {key}") from e
