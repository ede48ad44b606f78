"""
Base Repository.

The key-value storage interface every persistence backend implements.
"""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """
    Durable string-to-string storage.

    Implementations overwrite on set and return None for missing keys.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
