"""Add/edit form flow on top of ContactStore. One form per editor instance."""

from contactbook.application.contact_store import ContactStore
from contactbook.domain import Contact, NotFoundError

_UNSET = object()


class ContactEditor:
    """Holds the in-progress form: empty -> filled -> submit -> stored.

    When editing_id is set, submit updates that contact; otherwise it creates
    a new one. The form is only reset after a successful submit (or cancel),
    so a rejected submit keeps what the user typed.
    """

    def __init__(self, store: ContactStore) -> None:
        self._store = store
        self.name = ""
        self.phone = ""
        self.image: str | None = None
        self.editing_id: str | None = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def begin_edit(self, contact_id: str) -> Contact:
        """Fill the form from a stored contact."""
        for contact in self._store.search(""):
            if contact.id == contact_id:
                self.name = contact.name
                self.phone = contact.phone
                self.image = contact.image
                self.editing_id = contact.id
                return contact
        raise NotFoundError(contact_id)

    def set_fields(
        self,
        name: str | None = None,
        phone: str | None = None,
        image: object = _UNSET,
    ) -> None:
        """Update form fields. image=None clears the photo; omit it to keep the current one."""
        if name is not None:
            self.name = name
        if phone is not None:
            self.phone = phone
        if image is not _UNSET:
            self.image = image

    def clear_image(self) -> None:
        self.image = None

    def submit(self) -> Contact:
        """Create or update from the form. Raises ValidationError on blank name/phone."""
        if self.editing_id is None:
            contact = self._store.create(self.name, self.phone, self.image)
        else:
            try:
                contact = self._store.update(
                    self.editing_id, self.name, self.phone, self.image
                )
            except NotFoundError:
                self.editing_id = None
                raise
        self.cancel()
        return contact

    def cancel(self) -> None:
        self.name = ""
        self.phone = ""
        self.image = None
        self.editing_id = None
