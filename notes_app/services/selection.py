"""
Note Selectors.

Read-only views derived from the note collection and transient view state.
Pure functions: they never mutate their inputs.
"""

from collections.abc import Iterable

from notes_app.schemas.note import Note


def selected_note(notes: Iterable[Note], selected_id: str | None) -> Note | None:
    """Return the note with the given id, or None."""
    if selected_id is None:
        return None
    for note in notes:
        if note.id == selected_id:
            return note
    return None


def matches(note: Note, term: str) -> bool:
    """
    Case-insensitive substring match against title or content.

    The term is used as given; surrounding whitespace is significant.
    """
    if not term:
        return True
    needle = term.lower()
    if needle in note.title.lower():
        return True
    return bool(note.content) and needle in note.content.lower()


def filtered_sorted(notes: Iterable[Note], search: str = "") -> list[Note]:
    """
    Notes matching the search term, most recently updated first.

    Notes with equal timestamps keep their collection order.
    """
    result = [note for note in notes if matches(note, search)]
    # sorted() is stable, so equal timestamps keep input order
    return sorted(result, key=lambda note: note.updated, reverse=True)


def display_order(notes: Iterable[Note]) -> list[Note]:
    """All notes, most recently updated first."""
    return filtered_sorted(notes, "")
