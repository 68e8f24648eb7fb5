"""Application layer: the contact store, its ports, codec, and presentation helpers. Depends only on domain."""

from contactbook.application.codec import (
    contact_from_record,
    contact_to_record,
    decode_contacts,
    encode_contacts,
)
from contactbook.application.contact_editor import ContactEditor
from contactbook.application.contact_store import DEFAULT_SLOT_KEY, ContactStore
from contactbook.application.dto import DEFAULT_AVATAR, ContactView
from contactbook.application.ports import ContactSlot

__all__ = [
    "DEFAULT_AVATAR",
    "DEFAULT_SLOT_KEY",
    "ContactEditor",
    "ContactSlot",
    "ContactStore",
    "ContactView",
    "contact_from_record",
    "contact_to_record",
    "decode_contacts",
    "encode_contacts",
]
