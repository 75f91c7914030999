"""Predicate values built by the combinators.

A :class:`Predicate` is a plain callable ``params -> bool`` closed over its
options and a count rule. It holds no state, so it can be evaluated any
number of times and shared freely, including as an option of another
predicate.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from paramdeps.domain.options import Option


class CountRule(StrEnum):
    """How the number of matching options decides the result."""

    EXACTLY = "exactly"
    AT_LEAST_ONE = "at_least_one"


@dataclass(frozen=True, eq=False)
class Predicate:
    """Result of a combinator call.

    Attributes:
        name: The combinator that built it (``"all_of"``, ...).
        options: Names and nested predicates, in the order given.
        rule: Counting rule applied to the matches.
        desired: Match count required by :attr:`CountRule.EXACTLY`.
    """

    name: str
    options: tuple[Option, ...]
    rule: CountRule
    desired: int = 0

    def __call__(self, params: Mapping[str, Any]) -> bool:
        if self.rule is CountRule.AT_LEAST_ONE:
            # Stops at the first match.
            return any(option.matches(params) for option in self.options)
        matches = sum(1 for option in self.options if option.matches(params))
        return matches == self.desired

    def __repr__(self) -> str:
        return f"{self.name}({', '.join(repr(option) for option in self.options)})"


def count_of(name: str, options: tuple[Option, ...], desired: int) -> Predicate:
    """Predicate that is true when exactly *desired* options match."""
    return Predicate(name, options, CountRule.EXACTLY, desired)


def at_least_one_of(name: str, options: tuple[Option, ...]) -> Predicate:
    """Predicate that is true as soon as one option matches; false when there are none."""
    return Predicate(name, options, CountRule.AT_LEAST_ONE)
