"""
Minimal Notes.

- core/: Configuration, logging, exceptions, storage engine
- models/: SQLAlchemy models backing the key-value storage
- schemas/: Pydantic models for notes and their persisted form
- repositories/: Key-value storage collaborators and the note repository
- services/: Note store, selectors, and the view session
"""
