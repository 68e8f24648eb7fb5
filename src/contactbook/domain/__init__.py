"""Domain layer: the Contact entity and the error taxonomy. No dependencies on outer layers."""

from contactbook.domain.entities import Contact, new_contact_id
from contactbook.domain.errors import (
    ContactStoreError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)

__all__ = [
    "Contact",
    "ContactStoreError",
    "NotFoundError",
    "PersistenceError",
    "ValidationError",
    "new_contact_id",
]
