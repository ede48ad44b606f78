"""
Unit Tests for Key-Value Storage Backends.

MemoryStorage and SqlStorage must behave identically.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from notes_app.core.exceptions import StorageError
from notes_app.repositories.storage import MemoryStorage, SqlStorage


@pytest.fixture(params=["memory", "sql"])
def storage(request, sql_session_factory):
    if request.param == "memory":
        return MemoryStorage()
    return SqlStorage(sql_session_factory)


class TestStorageContract:
    """Behaviour shared by every backend."""

    def test_missing_key_returns_none(self, storage):
        assert storage.get("absent") is None

    def test_set_then_get(self, storage):
        storage.set("k", "v")

        assert storage.get("k") == "v"

    def test_set_overwrites(self, storage):
        storage.set("k", "first")
        storage.set("k", "second")

        assert storage.get("k") == "second"

    def test_delete(self, storage):
        storage.set("k", "v")

        storage.delete("k")

        assert storage.get("k") is None

    def test_delete_missing_key_is_ignored(self, storage):
        storage.delete("absent")

        assert storage.get("absent") is None


class TestMemoryStorage:
    """Tests specific to MemoryStorage."""

    def test_initial_values_are_copied(self):
        initial = {"k": "v"}
        storage = MemoryStorage(initial)
        storage.set("k", "changed")

        assert initial == {"k": "v"}


class TestSqlStorage:
    """Tests specific to SqlStorage."""

    def test_values_survive_new_storage_instance(self, sql_session_factory):
        SqlStorage(sql_session_factory).set("k", "durable")

        assert SqlStorage(sql_session_factory).get("k") == "durable"

    def test_database_errors_are_wrapped(self):
        session = MagicMock()
        session.__enter__.return_value = session
        session.get.side_effect = OperationalError("SELECT", {}, Exception("locked"))
        factory = MagicMock(return_value=session)

        with pytest.raises(StorageError) as exc_info:
            SqlStorage(factory).get("k")

        assert exc_info.value.code == "SYS_STORAGE_ERROR"
