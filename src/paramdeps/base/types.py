"""Type tags for per-key rules.

Tags are flags so a rule can accept several kinds: ``SCALAR | UNDEF``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import IntFlag
from typing import Any


class ParamType(IntFlag):
    """The kinds of value a parameter may hold."""

    SCALAR = 1
    ARRAYREF = 2
    HASHREF = 4
    CODEREF = 8
    UNDEF = 16
    OBJECT = 32
    BOOLEAN = SCALAR | UNDEF


SCALAR = ParamType.SCALAR
ARRAYREF = ParamType.ARRAYREF
HASHREF = ParamType.HASHREF
CODEREF = ParamType.CODEREF
UNDEF = ParamType.UNDEF
OBJECT = ParamType.OBJECT
BOOLEAN = ParamType.BOOLEAN

TYPE_TAGS: tuple[str, ...] = (
    "SCALAR",
    "ARRAYREF",
    "HASHREF",
    "CODEREF",
    "UNDEF",
    "OBJECT",
    "BOOLEAN",
)

# Single-kind tags in the order they are reported in error messages.
_KINDS: tuple[ParamType, ...] = (
    ParamType.SCALAR,
    ParamType.ARRAYREF,
    ParamType.HASHREF,
    ParamType.CODEREF,
    ParamType.UNDEF,
    ParamType.OBJECT,
)


def type_of(value: Any) -> ParamType:
    """Classify *value* into exactly one single-kind tag.

    Examples:
        >>> type_of("x") is ParamType.SCALAR
        True
        >>> type_of([1]) is ParamType.ARRAYREF
        True
        >>> type_of(None) is ParamType.UNDEF
        True
    """
    if value is None:
        return ParamType.UNDEF
    if isinstance(value, (str, bytes, int, float)):
        return ParamType.SCALAR
    if isinstance(value, (list, tuple)):
        return ParamType.ARRAYREF
    if isinstance(value, Mapping):
        return ParamType.HASHREF
    if callable(value) and not isinstance(value, type):
        return ParamType.CODEREF
    return ParamType.OBJECT


def describe(tag: ParamType) -> str:
    """Render a tag as the lowercase names of its kinds, space separated."""
    return " ".join(kind.name.lower() for kind in _KINDS if kind & tag)
