"""
Root Pytest Fixtures.

Shared fixtures available to all test types.

Tests never touch the configured data/notes.db: unit tests use
MemoryStorage, integration tests use a SQLite file under tmp_path.
"""

from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from notes_app.core.database import init_db
from notes_app.repositories.note import NoteRepository
from notes_app.repositories.storage import MemoryStorage
from notes_app.services.note import NoteService
from notes_app.services.session import NotesSession

# 2024-06-10 06:13:20 UTC
BASE_TIME_MS = 1_718_000_000_000


class FakeClock:
    """Controllable epoch-millisecond clock."""

    def __init__(self, now: int = BASE_TIME_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int = 1000) -> int:
        self.now += ms
        return self.now


# =============================================================================
# Clock / Storage Fixtures
# =============================================================================


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at BASE_TIME_MS."""
    return FakeClock()


@pytest.fixture
def memory_storage() -> MemoryStorage:
    """Empty in-memory key-value storage."""
    return MemoryStorage()


@pytest.fixture
def note_repo(memory_storage: MemoryStorage) -> NoteRepository:
    """Note repository over in-memory storage."""
    return NoteRepository(memory_storage)


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def note_service(note_repo: NoteRepository, clock: FakeClock) -> NoteService:
    """NoteService with a fake clock, not yet loaded."""
    return NoteService(note_repo, clock=clock)


@pytest.fixture
def loaded_service(note_service: NoteService) -> NoteService:
    """NoteService loaded with the two seed notes."""
    note_service.load()
    return note_service


@pytest.fixture
def notes_session(loaded_service: NoteService) -> NotesSession:
    """Session over a seeded store."""
    return NotesSession(loaded_service)


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def sql_session_factory(tmp_path) -> Generator[sessionmaker[Session], None, None]:
    """
    Session factory bound to a fresh SQLite file.

    The engine is disposed after the test.
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'notes.db'}")
    init_db(engine)
    yield sessionmaker(engine, expire_on_commit=False)
    engine.dispose()
