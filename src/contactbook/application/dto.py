"""Read-only view of a contact for the presentation layer."""

from collections.abc import Callable
from dataclasses import dataclass

from contactbook.domain import Contact

DEFAULT_AVATAR = "assets/avatar.png"


@dataclass(frozen=True)
class ContactView:
    """One contact as rendered in a list row: display phone and avatar resolved."""

    contact_id: str
    name: str
    phone: str
    display_phone: str
    avatar: str
    has_photo: bool

    @classmethod
    def from_contact(
        cls,
        contact: Contact,
        *,
        phone_formatter: Callable[[str], str | None] | None = None,
        default_avatar: str = DEFAULT_AVATAR,
    ) -> "ContactView":
        display_phone = phone_formatter(contact.phone) if phone_formatter else None
        return cls(
            contact_id=contact.id,
            name=contact.name,
            phone=contact.phone,
            display_phone=display_phone or contact.phone,
            avatar=contact.image or default_avatar,
            has_photo=bool(contact.image),
        )
