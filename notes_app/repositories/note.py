"""
Note Repository.

Reads and writes the whole note collection as one JSON document under a
single storage key.
"""

from pydantic import ValidationError as PydanticValidationError

from notes_app.core.exceptions import StorageError
from notes_app.core.logging import get_logger
from notes_app.repositories.base import KeyValueStorage
from notes_app.schemas.note import Note, dump_notes, load_notes

logger = get_logger(__name__)

DEFAULT_KEY = "notes_data"


class NoteRepository:
    """
    Persistence collaborator for the note store.

    The collection is the unit of persistence: save() always writes every
    note, load() always returns every note.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_KEY) -> None:
        self.storage = storage
        self.key = key

    def load(self) -> list[Note] | None:
        """
        Load the persisted collection.

        Returns:
            The stored notes, or None when nothing usable is stored.
            Read failures and malformed documents are logged and
            reported as None.
        """
        try:
            raw = self.storage.get(self.key)
        except StorageError as e:
            logger.warning("Could not read notes", extra={"key": self.key, "error": e.message})
            return None

        if raw is None:
            return None

        try:
            notes = load_notes(raw)
        except PydanticValidationError as e:
            logger.warning(
                "Discarding malformed notes document",
                extra={"key": self.key, "errors": e.error_count()},
            )
            return None

        logger.debug("Notes loaded", extra={"key": self.key, "count": len(notes)})
        return notes

    def save(self, notes: list[Note]) -> None:
        """
        Overwrite the persisted collection.

        Raises:
            StorageError: If the backend cannot write
        """
        self.storage.set(self.key, dump_notes(notes))
        logger.debug("Notes saved", extra={"key": self.key, "count": len(notes)})
