"""
Note Service.

Business logic layer for notes. Owns the canonical note collection,
applies edits, and writes the whole collection back through the
repository after every mutation.
"""

from collections.abc import Callable

from notes_app.core.exceptions import NotFoundError
from notes_app.core.utils import generate_id, now_ms
from notes_app.repositories.note import NoteRepository
from notes_app.schemas.note import EDITABLE_FIELDS, Note, NoteField
from notes_app.services.base import BaseService
from notes_app.services.selection import display_order

DEFAULT_TITLE = "Untitled"

DAY_MS = 86_400_000
HALF_DAY_MS = 43_200_000


def seed_notes(now: int) -> list[Note]:
    """
    Demonstration notes used to initialize an empty store.

    Timestamps are offset from now so the newer note sorts first.
    """
    return [
        Note(
            id="1",
            title="Welcome to Notes!",
            content="Click any note or create a new one to get started.",
            updated=now - DAY_MS,
        ),
        Note(
            id="2",
            title="React minimal notes",
            content="This is a simple React notes app.",
            updated=now - HALF_DAY_MS,
        ),
    ]


class NoteService(BaseService):
    """
    Store for the note collection.

    New notes are inserted at the front. Edits replace the note in place,
    keeping its position and id.
    """

    def __init__(
        self,
        repo: NoteRepository,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[[int], str] = generate_id,
    ) -> None:
        super().__init__()
        self.repo = repo
        self._clock = clock
        self._id_factory = id_factory
        self._notes: list[Note] = []

    @property
    def notes(self) -> list[Note]:
        """Snapshot of the collection in stored order."""
        return list(self._notes)

    def load(self) -> list[Note]:
        """
        Load the persisted collection.

        Falls back to the seed notes, persisting them immediately, when
        nothing usable is stored.

        Returns:
            The loaded collection
        """
        stored = self.repo.load()
        if stored is None:
            self._log_operation("Initializing store with seed notes")
            self._notes = seed_notes(self._clock())
            self.persist()
        else:
            self._notes = stored
            self._log_debug("Store loaded", count=len(stored))
        return self.notes

    def create(self) -> str:
        """
        Create an empty note at the front of the collection.

        Returns:
            The new note's id
        """
        now = self._clock()
        existing = {note.id for note in self._notes}
        note_id = self._id_factory(now)
        while note_id in existing:
            note_id = self._id_factory(now)

        note = Note(id=note_id, title=DEFAULT_TITLE, content="", updated=now)
        self._notes.insert(0, note)
        self._log_operation("Note created", note_id=note_id)
        self.persist()
        return note_id

    def get_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        index = self._index_of(note_id)
        if index is None:
            raise NotFoundError("Note not found")
        return self._notes[index]

    def update_field(self, note_id: str, field: NoteField, value: str) -> Note | None:
        """
        Replace one editable field of a note and bump its timestamp.

        Args:
            note_id: Note ID to update
            field: "title" or "content"
            value: New value

        Returns:
            The updated note, or None if no note has that id

        Raises:
            ValidationError: If field is not editable
        """
        self._validate_choice(field, "field", EDITABLE_FIELDS)

        index = self._index_of(note_id)
        if index is None:
            self._log_debug("Update ignored, note not found", note_id=note_id)
            return None

        current = self._notes[index]
        updated = current.model_copy(
            update={field: value, "updated": max(self._clock(), current.updated)},
        )
        self._notes[index] = updated
        self._log_debug("Note updated", note_id=note_id, field=field)
        self.persist()
        return updated

    def delete(self, note_id: str, selected_id: str | None = None) -> str | None:
        """
        Delete a note.

        Args:
            note_id: Note ID to delete
            selected_id: Currently selected note, if any

        Returns:
            The id that should be selected afterwards. When the selected
            note is deleted this is the first remaining note in display
            order (None if the store is now empty); otherwise selected_id.
        """
        index = self._index_of(note_id)
        if index is None:
            self._log_debug("Delete ignored, note not found", note_id=note_id)
            return selected_id

        del self._notes[index]
        self._log_operation("Note deleted", note_id=note_id)
        self.persist()

        if note_id != selected_id:
            return selected_id
        remaining = display_order(self._notes)
        return remaining[0].id if remaining else None

    def persist(self) -> None:
        """Write the whole collection to storage."""
        self.repo.save(self._notes)

    def _index_of(self, note_id: str) -> int | None:
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        return None
