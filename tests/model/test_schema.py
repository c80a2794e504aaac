"""Tests for reading model declarations."""

from array import array
from dataclasses import dataclass

import pytest

from bubbletree.model import Field, Node
from bubbletree.model.schema import declared_fields, is_binary_leaf, is_suppressed, suppressed_fields


class Base(Node):
    __fields__ = ("a", "b")
    __no_propagate__ = {"b": True, "c": True}
    c = Field(default=None)


class Child(Base):
    __fields__ = ("d", "a")
    __no_propagate__ = {"c": False}
    e = Field(default=None, propagate=False)


@dataclass
class Record(Child):
    f: int = 0


def test_fields_merge_base_first():
    assert declared_fields(Base) == ("a", "b", "c")
    assert declared_fields(Child) == ("a", "b", "c", "d", "e")


def test_dataclass_fields_are_declared():
    assert declared_fields(Record) == ("a", "b", "c", "d", "e", "f")


def test_plain_node_declares_nothing():
    assert declared_fields(Node) == ()


def test_suppression_child_overrides():
    assert is_suppressed(Base, "b")
    assert is_suppressed(Base, "c")
    assert is_suppressed(Child, "b")
    assert not is_suppressed(Child, "c")
    assert is_suppressed(Child, "e")
    assert not is_suppressed(Child, "a")


def test_suppression_map_is_read_only():
    merged = suppressed_fields(Child)
    assert dict(merged) == {"b": True, "c": False, "e": True}
    with pytest.raises(TypeError):
        merged["a"] = True


def test_binary_leaves():
    assert is_binary_leaf(b"x")
    assert is_binary_leaf(bytearray(b"x"))
    assert is_binary_leaf(memoryview(b"x"))
    assert is_binary_leaf(array("d", [1.0, 2.0]))
    assert not is_binary_leaf("x")
    assert not is_binary_leaf([1, 2])
    assert not is_binary_leaf(None)


def test_redeclared_field_reenables_propagation():
    class Hidden(Node):
        x = Field(default=None, propagate=False)

    class Shown(Hidden):
        x = Field(default=None)

    assert is_suppressed(Hidden, "x")
    assert not is_suppressed(Shown, "x")
