"""
Notes TUI — Two-Pane Terminal Interface.

Sidebar with every note, a searchable list ordered by recency, and an
editor for the selected note. All state changes go through NotesSession;
this module only renders and forwards intents.

Usage:
    python tui.py
    python cli.py --service tui
"""

from __future__ import annotations

import sys

from rich.text import Text
from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    ListItem,
    ListView,
    Static,
    TextArea,
)

from notes_app.core.logging import get_logger, log_with_source
from notes_app.core.utils import format_timestamp
from notes_app.schemas.note import Note, NoteField
from notes_app.services.session import NotesSession

logger = get_logger(__name__)

EMPTY_EDITOR_MESSAGE = "Select a note or create a new one to begin."


class ConfirmScreen(ModalScreen[bool]):
    """Blocking yes/no prompt."""

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, message: str) -> None:
        super().__init__()
        self._message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="dialog"):
            yield Label(self._message, id="confirm-message")
            with Horizontal(id="confirm-buttons"):
                yield Button("Delete", variant="error", id="confirm-yes")
                yield Button("Cancel", id="confirm-no")

    @on(Button.Pressed)
    def on_choice(self, event: Button.Pressed) -> None:
        self.dismiss(event.button.id == "confirm-yes")

    def action_cancel(self) -> None:
        self.dismiss(False)


class NoteListItem(ListItem):
    """One row in a note list."""

    def __init__(self, note: Note, selected: bool = False) -> None:
        super().__init__(
            Label(Text(note.display_title), classes="note-title"),
            Label(Text(format_timestamp(note.updated)), classes="note-time"),
            name=note.id,
            classes="selected" if selected else "",
        )
        self.note_id = note.id


class NotesTUI(App):
    """Terminal front end for the note store."""

    TITLE = "Notes"
    SUB_TITLE = "Minimal notes"

    CSS = """
    #app-main {
        height: 1fr;
    }

    #sidebar {
        width: 30;
        background: $panel;
        border-right: solid $primary;
    }

    #sidebar-header {
        text-style: bold;
        padding: 1 2;
    }

    #new-note {
        width: 100%;
        margin: 0 1 1 1;
    }

    #notes-panel {
        width: 36;
        border-right: solid $primary;
    }

    #search {
        margin: 1 1;
    }

    ListView {
        height: 1fr;
    }

    NoteListItem {
        padding: 0 1;
    }

    NoteListItem.selected {
        background: $accent 30%;
        text-style: bold;
    }

    .note-time {
        color: $text-muted;
    }

    .empty-message {
        color: $text-muted;
        text-align: center;
        width: 100%;
        padding: 2 0;
    }

    #editor {
        width: 1fr;
    }

    #editor-header {
        height: auto;
        padding: 0 1;
    }

    #editor-title {
        width: 1fr;
    }

    #editor-content {
        height: 1fr;
    }

    ConfirmScreen {
        align: center middle;
    }

    #dialog {
        width: 44;
        height: auto;
        padding: 1 2;
        border: thick $error;
        background: $surface;
    }

    #confirm-buttons {
        height: auto;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+n", "new_note", "New Note", priority=True),
        Binding("ctrl+d", "delete_note", "Delete", priority=True),
        Binding("ctrl+b", "toggle_sidebar", "Sidebar", priority=True),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, session: NotesSession) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="app-main"):
            with Vertical(id="sidebar"):
                yield Static("Notes", id="sidebar-header")
                yield Button("+ New Note", id="new-note", variant="warning")
                yield ListView(id="sidebar-list")
                yield Static("No notes", id="sidebar-empty", classes="empty-message")
            with Vertical(id="notes-panel"):
                yield Input(placeholder="Search notes...", id="search")
                yield ListView(id="note-list")
                yield Static("No notes found", id="list-empty", classes="empty-message")
            with Vertical(id="editor"):
                with Horizontal(id="editor-header"):
                    yield Input(placeholder="Title", id="editor-title")
                    yield Button("Delete", variant="error", id="delete")
                yield TextArea(id="editor-content")
                yield Static(EMPTY_EDITOR_MESSAGE, id="editor-empty", classes="empty-message")
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_views(load_editor=True)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def refresh_views(self, load_editor: bool = False) -> None:
        """Re-render lists, sidebar, and (optionally) editor contents."""
        self._refresh_lists()
        self._refresh_editor(load_editor)
        self.query_one("#sidebar").display = self.session.state.sidebar_open

    def _refresh_lists(self) -> None:
        selected_id = self.session.state.selected_id

        all_notes = self.session.notes
        sidebar_list = self.query_one("#sidebar-list", ListView)
        sidebar_list.clear()
        sidebar_list.extend(NoteListItem(n, n.id == selected_id) for n in all_notes)
        self.query_one("#sidebar-empty").display = not all_notes

        visible = self.session.visible_notes
        note_list = self.query_one("#note-list", ListView)
        note_list.clear()
        note_list.extend(NoteListItem(n, n.id == selected_id) for n in visible)
        self.query_one("#list-empty").display = not visible

    def _refresh_editor(self, load_values: bool) -> None:
        note = self.session.selected_note
        has_note = note is not None

        self.query_one("#editor-header").display = has_note
        self.query_one("#editor-content").display = has_note
        self.query_one("#editor-empty").display = not has_note

        if has_note and load_values:
            # Loading a note is not an edit.
            with self.prevent(Input.Changed, TextArea.Changed):
                self.query_one("#editor-title", Input).value = note.title
                self.query_one("#editor-content", TextArea).text = note.content

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def action_new_note(self) -> None:
        note_id = self.session.create()
        log_with_source(logger, "tui", "info", "Note created", note_id=note_id)
        self.refresh_views(load_editor=True)
        self.query_one("#editor-title", Input).focus()

    def action_delete_note(self) -> None:
        note = self.session.selected_note
        if note is None:
            return

        def finish(confirmed: bool | None) -> None:
            if not confirmed:
                return
            self.session.apply_delete(note.id)
            log_with_source(logger, "tui", "info", "Note deleted", note_id=note.id)
            self.refresh_views(load_editor=True)

        self.push_screen(ConfirmScreen("Delete this note?"), finish)

    def action_toggle_sidebar(self) -> None:
        self.session.toggle_sidebar()
        self.query_one("#sidebar").display = self.session.state.sidebar_open

    @on(Button.Pressed, "#new-note")
    def on_new_note_pressed(self) -> None:
        self.action_new_note()

    @on(Button.Pressed, "#delete")
    def on_delete_pressed(self) -> None:
        self.action_delete_note()

    @on(ListView.Selected)
    def on_note_selected(self, event: ListView.Selected) -> None:
        if not isinstance(event.item, NoteListItem):
            return
        self.session.select(event.item.note_id)
        log_with_source(logger, "tui", "debug", "Note selected", note_id=event.item.note_id)
        self.refresh_views(load_editor=True)

    @on(Input.Changed, "#search")
    def on_search_changed(self, event: Input.Changed) -> None:
        self.session.set_search(event.value)
        self._refresh_lists()

    @on(Input.Changed, "#editor-title")
    def on_title_changed(self, event: Input.Changed) -> None:
        self._edit("title", event.value)

    @on(TextArea.Changed, "#editor-content")
    def on_content_changed(self, event: TextArea.Changed) -> None:
        self._edit("content", event.text_area.text)

    def _edit(self, field: NoteField, value: str) -> None:
        note = self.session.selected_note
        if note is None or getattr(note, field) == value:
            return
        self.session.edit(field, value)
        self._refresh_lists()


def main() -> None:
    from notes_app.core.config import validate_project_root
    from notes_app.core.dependencies import get_notes_session
    from notes_app.core.logging import setup_logging

    validate_project_root()
    debug = "--debug" in sys.argv
    setup_logging(level="DEBUG" if debug else None, enable_console=False)
    app = NotesTUI(get_notes_session())
    app.run()


if __name__ == "__main__":
    main()
