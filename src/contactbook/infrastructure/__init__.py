"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.file_slot import FileSlot
from contactbook.infrastructure.memory_slot import InMemorySlot
from contactbook.infrastructure.phone import format_phone

__all__ = [
    "FileSlot",
    "InMemorySlot",
    "format_phone",
]
