"""Tests for the Contact entity's construction-time checks."""

import pytest

from contactbook.domain import Contact, ValidationError


def test_contact_gets_generated_id() -> None:
    a = Contact(name="Ana", phone="555-1")
    b = Contact(name="Ana", phone="555-1")
    assert a.id and b.id and a.id != b.id
    assert a.image is None


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"id": "1", "name": "", "phone": "1"}, "name"),
        ({"id": "1", "name": "Ana", "phone": "  "}, "phone"),
        ({"id": " ", "name": "Ana", "phone": "1"}, "id"),
        ({"id": "1", "name": 5, "phone": "1"}, "name"),
        ({"id": "1", "name": "Ana", "phone": None}, "phone"),
        ({"id": 7, "name": "Ana", "phone": "1"}, "id"),
        ({"id": "1", "name": "Ana", "phone": "1", "image": 3}, "image"),
    ],
)
def test_invalid_fields_raise_validation_error(kwargs, field) -> None:
    with pytest.raises(ValidationError) as exc_info:
        Contact(**kwargs)
    assert exc_info.value.field == field


def test_with_fields_keeps_id() -> None:
    contact = Contact(id="1", name="Ana", phone="555-1", image="file:///a.jpg")
    updated = contact.with_fields("Ana K.", "555-9", None)
    assert updated == Contact(id="1", name="Ana K.", phone="555-9")
