"""Tests for attribute delegation via tracked()."""

import pytest

from entity_timestamps import Timestamps, TrackedField, UnboundFieldError, tracked


class Note:
    title = tracked()
    body = tracked()

    def __init__(self, timestamps: Timestamps, title: str, body: str) -> None:
        self.timestamps = timestamps
        self.title = timestamps.track(title)
        self.body = timestamps.track(body, "edited_at")


def test_install_binds_attribute_name(timestamps):
    note = Note(timestamps, "t", "b")

    assert Note.title.field_of(note).name == "title"
    assert Note.body.field_of(note).timestamp_key == "edited_at"


def test_installation_records_nothing(timestamps):
    note = Note(timestamps, "t", "b")

    assert note.title == "t"
    assert note.body == "b"
    assert len(note.timestamps) == 0


def test_attribute_write_goes_through_tracker(timestamps):
    note = Note(timestamps, "t", "b")

    note.title = "t2"

    assert note.title == "t2"
    assert note.timestamps["title"] == note.timestamps.updated_at
    assert "edited_at" not in note.timestamps


def test_explicit_key_ignores_attribute_name(timestamps):
    note = Note(timestamps, "t", "b")

    note.body = "b2"

    assert "edited_at" in note.timestamps
    assert "body" not in note.timestamps


def test_class_access_returns_descriptor():
    assert isinstance(Note.title, tracked)
    assert Note.title.name == "title"


def test_instances_do_not_share_fields(clock):
    first = Note(Timestamps.new(clock=clock), "a", "a")
    second = Note(Timestamps.new(clock=clock), "b", "b")

    first.title = "a2"

    assert second.title == "b"
    assert "title" not in second.timestamps


def test_access_before_install_raises():
    class Draft:
        title = tracked()

    draft = Draft()

    with pytest.raises(UnboundFieldError, match="Draft.title has no tracked field"):
        draft.title
    with pytest.raises(UnboundFieldError):
        draft.title = "x"
    assert not hasattr(draft, "title")


def test_field_of_returns_installed_tracker(timestamps):
    note = Note(timestamps, "t", "b")

    field = Note.title.field_of(note)

    assert isinstance(field, TrackedField)
    assert field.read() == "t"
    assert field.timestamps is timestamps


def test_unnamed_descriptor_cannot_install(timestamps):
    loose = tracked()

    class Holder:
        pass

    with pytest.raises(UnboundFieldError, match="class attribute"):
        loose.__set__(Holder(), timestamps.track(0))
