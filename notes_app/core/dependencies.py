"""
Application Dependencies.

Builds the object graph (storage → repository → service → session)
from configuration. Front ends call these instead of wiring by hand.
"""

from notes_app.core.config import get_app_config
from notes_app.core.database import build_storage
from notes_app.core.logging import get_logger
from notes_app.repositories.base import KeyValueStorage
from notes_app.repositories.note import NoteRepository
from notes_app.services.note import NoteService
from notes_app.services.session import NotesSession

logger = get_logger(__name__)


def get_note_service(storage: KeyValueStorage | None = None) -> NoteService:
    """
    Create a note service over the configured storage.

    Args:
        storage: Storage to use instead of the configured backend
    """
    key = get_app_config().storage.key
    repo = NoteRepository(storage if storage is not None else build_storage(), key=key)
    return NoteService(repo)


def get_notes_session(storage: KeyValueStorage | None = None) -> NotesSession:
    """Create a session with its store already loaded."""
    session = NotesSession(get_note_service(storage))
    session.start()
    logger.debug("Session started", extra={"notes": len(session.notes)})
    return session
