"""Read model declarations: declared fields, suppression and binary leaves.

A model type declares its fields in any mix of three ways, all merged
along the MRO with base classes first:

- ``__fields__ = ("name", ...)`` on the class
- ``Field`` descriptors in the class body
- dataclass fields

``__no_propagate__ = {"name": True}`` hides a field from injection.
Subclasses override their bases, so ``{"name": False}`` re-enables it.
"""

from __future__ import annotations

import dataclasses
from array import array
from functools import cache
from types import MappingProxyType
from typing import Any, Mapping

BINARY_LEAF_TYPES = (bytes, bytearray, memoryview, array)


def _own_fields(cls: type) -> list[str]:
    from bubbletree.model.fields import Field

    names = list(cls.__dict__.get("__fields__", ()))
    names.extend(k for k, v in cls.__dict__.items() if isinstance(v, Field))
    if "__dataclass_fields__" in cls.__dict__:
        names.extend(f.name for f in dataclasses.fields(cls))
    return names


@cache
def declared_fields(cls: type) -> tuple[str, ...]:
    """Public field names declared by cls and its bases, in declaration order."""
    seen: dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        for name in _own_fields(klass):
            if not name.startswith("_"):
                seen.setdefault(name, None)
    return tuple(seen)


@cache
def suppressed_fields(cls: type) -> Mapping[str, bool]:
    """Merged no-propagate map for cls. More derived classes win."""
    from bubbletree.model.fields import Field

    merged: dict[str, bool] = {}
    for klass in reversed(cls.__mro__):
        for name, value in klass.__dict__.items():
            if isinstance(value, Field):
                merged[name] = not value.propagate
        merged.update(klass.__dict__.get("__no_propagate__", {}))
    return MappingProxyType(merged)


def is_suppressed(cls: type, name: str) -> bool:
    return bool(suppressed_fields(cls).get(name, False))


def is_binary_leaf(value: Any) -> bool:
    """True for flat binary payloads, which never contain nodes."""
    return isinstance(value, BINARY_LEAF_TYPES)
