"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol


class ContactSlot(Protocol):
    """Durable key-value slot holding the serialized contact collection."""

    def read(self, key: str) -> bytes | None:
        """Return the bytes stored under key, or None if nothing was ever written."""
        ...

    def write(self, key: str, data: bytes) -> None:
        """Replace the value under key. Raises PersistenceError (or OSError) on failure."""
        ...
