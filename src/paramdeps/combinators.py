"""Dependency combinators.

Each combinator takes parameter names and/or other predicates and returns a
:class:`~paramdeps.domain.predicates.Predicate` over the call's params.
They nest freely; this requires ``alpha`` and forbids ``bar`` and ``baz``
alongside it::

    all_of("alpha", none_of("bar", "baz"))

Importing from this module gives the combinators alone, for use with a
different per-key validator::

    from paramdeps.combinators import *
"""

from __future__ import annotations

from paramdeps.domain.options import PredicateFn, parse_options
from paramdeps.domain.predicates import Predicate, at_least_one_of, count_of
from paramdeps.exports import COMBINATOR_EXPORTS

__all__ = list(COMBINATOR_EXPORTS)


def none_of(*options: str | PredicateFn) -> Predicate:
    """True when none of *options* match. ``none_of()`` is always true."""
    parsed = parse_options("none_of", options)
    return count_of("none_of", parsed, 0)


def one_of(*options: str | PredicateFn) -> Predicate:
    """True when exactly one of *options* matches. ``one_of()`` is always false."""
    parsed = parse_options("one_of", options)
    return count_of("one_of", parsed, 1)


def all_of(*options: str | PredicateFn) -> Predicate:
    """True when every one of *options* matches. ``all_of()`` is always true."""
    parsed = parse_options("all_of", options)
    return count_of("all_of", parsed, len(parsed))


def any_of(*options: str | PredicateFn) -> Predicate:
    """True when at least one of *options* matches.

    Options are tried left to right and evaluation stops at the first
    match, so later nested predicates may never run. ``any_of()`` is always
    false.
    """
    parsed = parse_options("any_of", options)
    return at_least_one_of("any_of", parsed)
