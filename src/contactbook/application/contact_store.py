"""Contact store: create, update, delete and search, mirrored to a durable slot on every mutation."""

import logging

from contactbook.application.codec import decode_contacts, encode_contacts
from contactbook.application.ports import ContactSlot
from contactbook.domain import (
    Contact,
    NotFoundError,
    PersistenceError,
    ValidationError,
    new_contact_id,
)

logger = logging.getLogger(__name__)

DEFAULT_SLOT_KEY = "contacts"


def _clean(value: str | None) -> str:
    return value.strip() if isinstance(value, str) else ""


def _clean_image(image: str | None) -> str | None:
    if image is not None and not isinstance(image, str):
        raise ValidationError("image", "Contact image must be a string or None.")
    return _clean(image) or None


def _require(name: str, phone: str) -> None:
    if not name:
        raise ValidationError("name")
    if not phone:
        raise ValidationError("phone")


class ContactStore:
    """Owns the contact collection. Callers only ever receive snapshots.

    Every mutation builds the new collection, writes it to the slot, and only
    then replaces the in-memory copy. A failed write leaves memory as it was
    and raises PersistenceError.
    """

    def __init__(self, slot: ContactSlot, *, key: str = DEFAULT_SLOT_KEY) -> None:
        self._slot = slot
        self._key = key
        self._contacts: list[Contact] = []
        self._loaded = False

    def load(self) -> list[Contact]:
        """Read the persisted collection. Missing or corrupt data starts empty."""
        try:
            data = self._slot.read(self._key)
            contacts = decode_contacts(data) if data else []
        except (PersistenceError, OSError) as exc:
            logger.warning("Could not load contacts from slot %r, starting empty: %s", self._key, exc)
            contacts = []
        self._contacts = contacts
        self._loaded = True
        logger.debug("Loaded %d contacts from slot %r", len(contacts), self._key)
        return list(self._contacts)

    def create(self, name: str, phone: str, image: str | None = None) -> Contact:
        """Append a new contact with a fresh id and persist."""
        self._ensure_loaded()
        name, phone = _clean(name), _clean(phone)
        _require(name, phone)

        existing = {c.id for c in self._contacts}
        contact_id = new_contact_id()
        while contact_id in existing:
            contact_id = new_contact_id()

        contact = Contact(id=contact_id, name=name, phone=phone, image=_clean_image(image))
        self._commit([*self._contacts, contact])
        logger.debug("Created contact %s", contact.id)
        return contact

    def update(
        self, contact_id: str, name: str, phone: str, image: str | None = None
    ) -> Contact:
        """Replace name, phone and image of the matching contact, keeping its position."""
        self._ensure_loaded()
        index = self._index_of(contact_id)
        if index is None:
            raise NotFoundError(contact_id)
        name, phone = _clean(name), _clean(phone)
        _require(name, phone)

        updated = self._contacts[index].with_fields(name, phone, _clean_image(image))
        contacts = list(self._contacts)
        contacts[index] = updated
        self._commit(contacts)
        logger.debug("Updated contact %s", contact_id)
        return updated

    def delete(self, contact_id: str) -> None:
        """Remove the matching contact if present. Unknown ids are a no-op."""
        self._ensure_loaded()
        contacts = [c for c in self._contacts if c.id != contact_id]
        removed = len(contacts) != len(self._contacts)
        self._commit(contacts)
        if removed:
            logger.debug("Deleted contact %s", contact_id)

    def search(self, query: str) -> list[Contact]:
        """Return contacts whose name contains query (case-insensitive), in stored order."""
        self._ensure_loaded()
        if not query:
            return list(self._contacts)
        needle = query.lower()
        return [c for c in self._contacts if needle in c.name.lower()]

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def _index_of(self, contact_id: str) -> int | None:
        for i, contact in enumerate(self._contacts):
            if contact.id == contact_id:
                return i
        return None

    def _commit(self, contacts: list[Contact]) -> None:
        data = encode_contacts(contacts)
        try:
            self._slot.write(self._key, data)
        except (PersistenceError, OSError) as exc:
            logger.error("Could not write contacts to slot %r: %s", self._key, exc)
            if isinstance(exc, PersistenceError):
                raise
            raise PersistenceError(f"Could not write contacts: {exc}") from exc
        self._contacts = contacts
