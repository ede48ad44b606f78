"""
Integration Test Fixtures.

Fixtures for integration tests - real SQLite storage, the Click entry
point, and the Textual app.
"""

from unittest.mock import patch

import pytest
import structlog
from click.testing import CliRunner

from notes_app.repositories.note import NoteRepository
from notes_app.repositories.storage import MemoryStorage
from notes_app.services.note import NoteService
from notes_app.services.session import NotesSession


@pytest.fixture
def shared_storage() -> MemoryStorage:
    """Storage shared across CLI invocations within one test."""
    return MemoryStorage()


@pytest.fixture
def cli_runner(shared_storage):
    """
    Click runner whose sessions use shared in-memory storage.

    Logging setup is stubbed so tests never write to logs/, and structlog
    discards output so log lines never reach the captured CLI output.
    """

    def make_session() -> NotesSession:
        session = NotesSession(NoteService(NoteRepository(shared_storage)))
        session.start()
        return session

    structlog.configure(logger_factory=structlog.ReturnLoggerFactory())
    try:
        with patch("cli.get_notes_session", side_effect=make_session), \
             patch("cli.setup_logging"):
            yield CliRunner()
    finally:
        structlog.reset_defaults()


@pytest.fixture
def tui_session(clock) -> NotesSession:
    """Seeded session for driving the TUI."""
    session = NotesSession(NoteService(NoteRepository(MemoryStorage()), clock=clock))
    session.start()
    return session
