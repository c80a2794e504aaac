"""Tests for Event."""

from bubbletree.model import Event

from .conftest import Leaf, Root


def test_event_starts_path_at_origin():
    leaf = Leaf()
    event = Event(leaf)
    assert event.origin is leaf
    assert event.path == ["Leaf"]
    assert event.cancelled is False


def test_kind_defaults_to_mutation():
    assert Event(Leaf()).kind == "mutation"
    assert Event(Leaf(), "change").kind == "change"


def test_stop_propagation_sets_flag():
    event = Event(Root(), "custom", "x", 1)
    event.stop_propagation()
    assert event.cancelled is True
    assert event.property == "x"
    assert event.value == 1
    assert event.path == ["root"]


def test_events_compare_by_identity():
    leaf = Leaf()
    assert Event(leaf) != Event(leaf)
