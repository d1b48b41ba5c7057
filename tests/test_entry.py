import dataclasses

import pytest

from flatini import Entry, from_dict, to_dict


def test_entry_defaults():
    assert Entry() == Entry("", "", "")


def test_entry_frozen():
    entry = Entry("s", "k", "v")

    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.value = "w"


def test_to_dict():
    entries = [
        Entry("", "top", "1"),
        Entry("a", "x", "1"),
        Entry("a", "x", "2"),
        Entry("b", "y", "3"),
    ]

    assert to_dict(entries) == {"": {"top": "1"}, "a": {"x": "2"}, "b": {"y": "3"}}


def test_from_dict():
    config = {"": {"top": "1"}, "empty": {}, "a": {"x": "2", "y": "3"}}

    assert from_dict(config) == [
        Entry("", "top", "1"),
        Entry("a", "x", "2"),
        Entry("a", "y", "3"),
    ]
