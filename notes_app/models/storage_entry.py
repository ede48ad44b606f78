"""
Storage Entry Model.

One row per key of the local key-value store. The whole note collection
lives in a single row as a JSON document.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from notes_app.models.base import Base, TimestampMixin


class StorageEntry(TimestampMixin, Base):
    """Key-value pair persisted in the local database."""

    __tablename__ = "storage_entries"

    key: Mapped[str] = mapped_column(
        String(255),
        primary_key=True,
    )
    value: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<StorageEntry(key={self.key!r}, size={len(self.value)})>"
