"""Serialized form of the contact collection: a UTF-8 JSON array of flat records."""

import json
from collections.abc import Iterable
from typing import Any

from contactbook.domain import Contact, PersistenceError, ValidationError

_REQUIRED_FIELDS = ("id", "name", "phone")


def contact_to_record(contact: Contact) -> dict[str, Any]:
    return {
        "id": contact.id,
        "name": contact.name,
        "phone": contact.phone,
        "image": contact.image,
    }


def contact_from_record(record: Any) -> Contact:
    """Build a Contact from one decoded record. Raises PersistenceError if malformed."""
    if not isinstance(record, dict):
        raise PersistenceError(f"Contact record must be an object, got {type(record).__name__}.")
    for name in _REQUIRED_FIELDS:
        value = record.get(name)
        if not isinstance(value, str):
            raise PersistenceError(f"Contact record field {name!r} must be a string.")
    image = record.get("image")
    if image is not None and not isinstance(image, str):
        raise PersistenceError("Contact record field 'image' must be a string or null.")
    if image is not None and not image.strip():
        image = None
    try:
        return Contact(
            id=record["id"],
            name=record["name"],
            phone=record["phone"],
            image=image,
        )
    except ValidationError as exc:
        raise PersistenceError(f"Invalid contact record: {exc}") from exc


def encode_contacts(contacts: Iterable[Contact]) -> bytes:
    records = [contact_to_record(c) for c in contacts]
    return json.dumps(records, ensure_ascii=False).encode("utf-8")


def decode_contacts(data: bytes) -> list[Contact]:
    """Parse the persisted collection. Raises PersistenceError on corrupt data."""
    try:
        payload = json.loads(data.decode("utf-8"))
    except (ValueError, RecursionError) as exc:
        raise PersistenceError(f"Persisted contacts are not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise PersistenceError("Persisted contacts must be a JSON array.")

    contacts = []
    seen: set[str] = set()
    for record in payload:
        contact = contact_from_record(record)
        if contact.id in seen:
            raise PersistenceError(f"Duplicate contact id {contact.id!r} in persisted data.")
        seen.add(contact.id)
        contacts.append(contact)
    return contacts
