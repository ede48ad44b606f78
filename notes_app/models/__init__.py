# SQLAlchemy models package
from notes_app.models.base import Base
from notes_app.models.storage_entry import StorageEntry

__all__ = ["Base", "StorageEntry"]
