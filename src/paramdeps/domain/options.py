"""Combinator options — the things a combinator counts matches over.

An option is either a parameter name (present in the params or not) or a
nested predicate (true or false on the same params). Which one is decided
once, when the combinator is built.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from paramdeps.errors import CombinatorSpecError

PredicateFn = Callable[[Mapping[str, Any]], Any]


@dataclass(frozen=True)
class NameRef:
    """Matches when *name* is a key of the params, whatever its value."""

    name: str

    def matches(self, params: Mapping[str, Any]) -> bool:
        return self.name in params

    def __repr__(self) -> str:
        return repr(self.name)


@dataclass(frozen=True)
class PredicateRef:
    """Matches when the wrapped predicate is truthy for the params."""

    predicate: PredicateFn

    def matches(self, params: Mapping[str, Any]) -> bool:
        return bool(self.predicate(params))

    def __repr__(self) -> str:
        return repr(self.predicate)


Option = NameRef | PredicateRef


def is_predicate(value: Any) -> bool:
    """True for callables other than classes."""
    return callable(value) and not isinstance(value, type)


def to_option(value: Any) -> Option | None:
    """Classify *value*, or return None if it is neither a name nor a predicate.

    Examples:
        >>> to_option("alpha")
        'alpha'
        >>> to_option([1, 2]) is None
        True
    """
    if isinstance(value, str):
        return NameRef(value)
    if is_predicate(value):
        return PredicateRef(value)
    return None


def parse_options(combinator: str, values: tuple[Any, ...]) -> tuple[Option, ...]:
    """Classify every argument given to *combinator*.

    Raises:
        CombinatorSpecError: Some argument is neither a name nor a predicate.
    """
    options: list[Option] = []
    for value in values:
        option = to_option(value)
        if option is None:
            msg = f"{combinator} takes only names and predicates"
            raise CombinatorSpecError(msg)
        options.append(option)
    return tuple(options)
