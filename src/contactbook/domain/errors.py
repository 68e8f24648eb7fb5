"""Error taxonomy for the contact store."""


class ContactStoreError(Exception):
    """Base class for every error raised by the contact store."""


class ValidationError(ContactStoreError, ValueError):
    """A required contact field is missing or blank."""

    def __init__(self, field: str, message: str | None = None) -> None:
        self.field = field
        super().__init__(message or f"Contact {field} must be non-empty.")


class NotFoundError(ContactStoreError, LookupError):
    """No contact has the given id."""

    def __init__(self, contact_id: str) -> None:
        self.contact_id = contact_id
        super().__init__(f"No contact with id {contact_id!r}.")


class PersistenceError(ContactStoreError):
    """Durable read or write failed, or the persisted data is corrupt."""
