# Pydantic schemas package
from notes_app.schemas.note import (
    EDITABLE_FIELDS,
    Note,
    NoteField,
    dump_notes,
    load_notes,
)

__all__ = [
    "EDITABLE_FIELDS",
    "Note",
    "NoteField",
    "dump_notes",
    "load_notes",
]
