"""
Unit Tests for Note Repository.

The repository is exercised over MemoryStorage and a mocked failing
storage.
"""

import json
from unittest.mock import MagicMock

import pytest

from notes_app.core.exceptions import StorageError
from notes_app.repositories.note import DEFAULT_KEY, NoteRepository
from notes_app.repositories.storage import MemoryStorage
from notes_app.schemas.note import Note


class TestNoteRepositoryLoad:
    """Tests for loading the collection."""

    def test_absent_key_returns_none(self, note_repo):
        assert note_repo.load() is None

    def test_returns_saved_notes(self, note_repo):
        notes = [Note(id="1", title="a", content="b", updated=3)]
        note_repo.save(notes)

        assert note_repo.load() == notes

    def test_malformed_document_returns_none(self):
        repo = NoteRepository(MemoryStorage({DEFAULT_KEY: '[{"id": 1}]'}))

        assert repo.load() is None

    def test_read_failure_returns_none(self):
        storage = MagicMock()
        storage.get.side_effect = StorageError("disk gone")

        assert NoteRepository(storage).load() is None


class TestNoteRepositorySave:
    """Tests for saving the collection."""

    def test_save_overwrites_whole_collection(self, note_repo, memory_storage):
        note_repo.save([Note(id="1", title="a", updated=1), Note(id="2", title="b", updated=2)])
        note_repo.save([Note(id="3", title="c", updated=3)])

        assert [n["id"] for n in json.loads(memory_storage.get(DEFAULT_KEY))] == ["3"]

    def test_save_uses_configured_key(self, memory_storage):
        repo = NoteRepository(memory_storage, key="other")

        repo.save([])

        assert memory_storage.get("other") == "[]"
        assert memory_storage.get(DEFAULT_KEY) is None

    def test_write_failure_propagates(self):
        storage = MagicMock()
        storage.set.side_effect = StorageError("read-only")

        with pytest.raises(StorageError):
            NoteRepository(storage).save([])
