"""Domain entities: Contact."""

import uuid
from dataclasses import dataclass, field

from contactbook.domain.errors import ValidationError


def new_contact_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Contact:
    """
    One entry of the contact list.
    Immutable: an update produces a new Contact with the same id.
    image is an opaque URI/path of a local photo; None means the default avatar.
    """

    id: str = field(default_factory=new_contact_id)
    name: str = field(default="")
    phone: str = field(default="")
    image: str | None = None

    def __post_init__(self):
        for name in ("id", "name", "phone"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(name)
        if self.image is not None and not isinstance(self.image, str):
            raise ValidationError("image", "Contact image must be a string or None.")

    def with_fields(self, name: str, phone: str, image: str | None) -> "Contact":
        """Return a copy with name, phone and image replaced; id is kept."""
        return Contact(id=self.id, name=name, phone=phone, image=image)
