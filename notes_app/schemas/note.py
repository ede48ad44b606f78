"""
Note Schemas.

Pydantic model for a note and helpers for its persisted form: the whole
collection is stored as one JSON array of
``{"id": str, "title": str, "content": str, "updated": int}`` objects.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

NoteField = Literal["title", "content"]

EDITABLE_FIELDS: frozenset[str] = frozenset({"title", "content"})

NO_TITLE = "(No Title)"


class Note(BaseModel):
    """
    A single user-authored note.

    Instances are immutable; edits produce a new Note with the same id.
    """

    id: str = Field(description="Note unique identifier")
    title: str = Field(default="", description="Note title")
    content: str = Field(default="", description="Note content")
    updated: int = Field(description="Last modification time, epoch milliseconds")

    model_config = ConfigDict(frozen=True)

    @field_validator("title", "content", mode="before")
    @classmethod
    def _none_as_empty(cls, value: str | None) -> str:
        # Older documents may carry null content.
        return "" if value is None else value

    @property
    def display_title(self) -> str:
        """Title as shown in lists."""
        return self.title or NO_TITLE


_notes_adapter = TypeAdapter(list[Note])


def dump_notes(notes: list[Note]) -> str:
    """Serialize a collection to its JSON array form."""
    return _notes_adapter.dump_json(notes).decode("utf-8")


def load_notes(raw: str | bytes) -> list[Note]:
    """
    Parse a JSON array into a collection.

    Raises:
        pydantic.ValidationError: If the document is not a valid note array
    """
    return _notes_adapter.validate_json(raw)
