"""Export tiers for ``paramdeps``.

``from paramdeps import *`` brings in the base surface, ``validate`` and the
combinators. The ``of`` tag lists the combinators alone, which is what
:mod:`paramdeps.combinators` exports.
"""

from __future__ import annotations

from paramdeps.base.types import TYPE_TAGS

BASE_EXPORTS: tuple[str, ...] = (
    *TYPE_TAGS,
    "ParamType",
    "ParamSpec",
    "validate_params",
    "ParamsError",
    "CombinatorSpecError",
    "ParamSpecError",
    "ParamsValidationError",
    "DependencyValidationError",
)

COMBINATOR_EXPORTS: tuple[str, ...] = ("all_of", "any_of", "none_of", "one_of")

DEFAULT_EXPORTS: tuple[str, ...] = (*BASE_EXPORTS, "validate", *COMBINATOR_EXPORTS)

EXPORT_TAGS: dict[str, tuple[str, ...]] = {
    "all": DEFAULT_EXPORTS,
    "of": COMBINATOR_EXPORTS,
    "types": TYPE_TAGS,
}
