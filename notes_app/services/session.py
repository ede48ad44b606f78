"""
Notes Session.

Application context tying the note store to transient view state.
Front ends (TUI, CLI) forward user intents here and read the derived
views back; nothing in ViewState is ever persisted.
"""

from collections.abc import Callable
from dataclasses import dataclass

from notes_app.core.logging import get_logger
from notes_app.schemas.note import Note, NoteField
from notes_app.services.note import NoteService
from notes_app.services.selection import filtered_sorted, selected_note

logger = get_logger(__name__)


@dataclass
class ViewState:
    """Ephemeral UI state."""

    selected_id: str | None = None
    search: str = ""
    sidebar_open: bool = True


class NotesSession:
    """
    Intent handler for a single user session.

    Derived views are recomputed on every access, so they always reflect
    the latest collection and view state.
    """

    def __init__(self, service: NoteService, state: ViewState | None = None) -> None:
        self.service = service
        self.state = state or ViewState()

    def start(self) -> list[Note]:
        """Load the store."""
        return self.service.load()

    @property
    def notes(self) -> list[Note]:
        return self.service.notes

    @property
    def selected_note(self) -> Note | None:
        return selected_note(self.service.notes, self.state.selected_id)

    @property
    def visible_notes(self) -> list[Note]:
        return filtered_sorted(self.service.notes, self.state.search)

    def select(self, note_id: str) -> None:
        self.state.selected_id = note_id
        self.state.sidebar_open = False

    def create(self) -> str:
        note_id = self.service.create()
        self.select(note_id)
        return note_id

    def edit(self, field: NoteField, value: str) -> Note | None:
        """Update a field of the selected note. No-op without a selection."""
        if self.selected_note is None:
            return None
        return self.service.update_field(self.state.selected_id, field, value)

    def request_delete(self, note_id: str, confirm: Callable[[], bool]) -> bool:
        """
        Delete a note after confirmation.

        Args:
            note_id: Note to delete
            confirm: Blocking yes/no prompt

        Returns:
            True if the deletion went ahead
        """
        if not confirm():
            logger.debug("Delete declined", extra={"note_id": note_id})
            return False
        self.apply_delete(note_id)
        return True

    def apply_delete(self, note_id: str) -> None:
        """Delete a note whose deletion has already been confirmed."""
        self.state.selected_id = self.service.delete(note_id, self.state.selected_id)

    def set_search(self, text: str) -> None:
        self.state.search = text

    def toggle_sidebar(self) -> None:
        self.state.sidebar_open = not self.state.sidebar_open

    def close_sidebar(self) -> None:
        self.state.sidebar_open = False
