"""Unit tests for ContactEditor: the add/edit form flow over ContactStore."""

import pytest

from contactbook.application import ContactEditor, ContactStore
from contactbook.domain import NotFoundError, ValidationError
from contactbook.infrastructure import InMemorySlot


def _editor() -> tuple[ContactEditor, ContactStore]:
    store = ContactStore(InMemorySlot())
    store.load()
    return ContactEditor(store), store


def test_submit_new_contact_creates_and_resets_form() -> None:
    editor, store = _editor()
    editor.set_fields(name="Ana", phone="555-1", image="file:///ana.jpg")

    contact = editor.submit()

    assert contact.name == "Ana"
    assert contact.image == "file:///ana.jpg"
    assert store.search("") == [contact]
    assert (editor.name, editor.phone, editor.image) == ("", "", None)
    assert not editor.is_editing


def test_submit_with_blank_fields_keeps_form_and_stores_nothing() -> None:
    editor, store = _editor()
    editor.set_fields(name="Ana")

    with pytest.raises(ValidationError):
        editor.submit()

    assert editor.name == "Ana"
    assert store.search("") == []


def test_edit_existing_contact_updates_in_place() -> None:
    editor, store = _editor()
    ana = store.create("Ana", "555-1", "file:///ana.jpg")
    ben = store.create("Ben", "555-2")

    editor.begin_edit(ana.id)
    assert editor.is_editing
    assert (editor.name, editor.phone, editor.image) == ("Ana", "555-1", "file:///ana.jpg")

    editor.set_fields(name="Ana K.")
    updated = editor.submit()

    assert updated.id == ana.id
    assert updated.image == "file:///ana.jpg"
    assert store.search("") == [updated, ben]
    assert not editor.is_editing


def test_clear_image_falls_back_to_default_avatar() -> None:
    editor, store = _editor()
    ana = store.create("Ana", "555-1", "file:///ana.jpg")

    editor.begin_edit(ana.id)
    editor.clear_image()
    assert editor.submit().image is None


def test_set_fields_without_image_keeps_current_photo() -> None:
    editor, _ = _editor()
    editor.set_fields(image="file:///x.jpg")
    editor.set_fields(name="Ana", phone="1")
    assert editor.image == "file:///x.jpg"


def test_begin_edit_unknown_id_raises() -> None:
    editor, _ = _editor()
    with pytest.raises(NotFoundError):
        editor.begin_edit("missing")
    assert not editor.is_editing


def test_submit_after_contact_was_deleted_stops_editing() -> None:
    editor, store = _editor()
    ana = store.create("Ana", "555-1")
    editor.begin_edit(ana.id)
    store.delete(ana.id)

    with pytest.raises(NotFoundError):
        editor.submit()
    assert not editor.is_editing
    assert editor.name == "Ana"


def test_cancel_discards_form_without_touching_store() -> None:
    editor, store = _editor()
    ana = store.create("Ana", "555-1")
    editor.begin_edit(ana.id)
    editor.set_fields(name="Changed")

    editor.cancel()

    assert not editor.is_editing
    assert editor.name == ""
    assert store.search("") == [ana]
