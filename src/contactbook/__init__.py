"""
contactbook core: clean-architecture layout.

- domain: the Contact entity and errors. No outer dependencies.
- application: ContactStore, the ContactSlot port, codec, ContactEditor, ContactView.
- infrastructure: adapters (InMemorySlot, FileSlot) and phone formatting.
"""

from contactbook.application import (
    ContactEditor,
    ContactSlot,
    ContactStore,
    ContactView,
)
from contactbook.domain import (
    Contact,
    ContactStoreError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from contactbook.infrastructure import FileSlot, InMemorySlot

__all__ = [
    "Contact",
    "ContactEditor",
    "ContactSlot",
    "ContactStore",
    "ContactStoreError",
    "ContactView",
    "FileSlot",
    "InMemorySlot",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
]
