"""The two-phase ``validate`` gate.

Phase one checks each argument against its own rule via
:func:`paramdeps.base.validate_params`. Phase two runs the dependency
predicates against the names the caller actually passed.

Usage::

    def foo(**kwargs):
        validate(
            kwargs,
            {
                "alpha": {"type": ARRAYREF, "optional": True},
                "beta": {"type": ARRAYREF, "optional": True},
                "bar": {"type": SCALAR, "optional": True},
                "baz": {"type": SCALAR, "optional": True},
            },
            any_of("alpha", "beta", all_of("bar", "baz")),
        )

INVARIANT: Per-key errors propagate untouched. A dependency failure always
carries the same message and never says which predicate failed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from paramdeps.base.validator import CallArgs, to_param_map, validate_params
from paramdeps.config.settings import ValidateSettings, get_settings
from paramdeps.domain.options import PredicateFn, is_predicate
from paramdeps.errors import CombinatorSpecError, DependencyValidationError

logger = logging.getLogger(__name__)


def validate(
    args: CallArgs,
    spec: Mapping[str, Any],
    *predicates: PredicateFn,
    called: str | None = None,
    settings: ValidateSettings | None = None,
) -> None:
    """Validate a call's arguments per key, then against *predicates*.

    Args:
        args: The call's named arguments, as a mapping or a flat list of
            alternating names and values.
        spec: Parameter name -> per-key rule.
        *predicates: Dependency checks, each called with the params and
            expected to return a truthy value. Usually built with
            ``all_of``/``any_of``/``none_of``/``one_of``.
        called: Caller name used in per-key error messages.
        settings: Overrides the process-wide settings.

    Raises:
        CombinatorSpecError: A trailing argument is not a predicate.
        ParamSpecError: A rule in *spec* is malformed.
        ParamsValidationError: An argument failed its per-key rule.
        DependencyValidationError: A predicate returned false.
    """
    for predicate in predicates:
        if not is_predicate(predicate):
            msg = "validate takes only predicates after the spec"
            raise CombinatorSpecError(msg)

    if settings is None:
        settings = get_settings()
    called = called or settings.called

    validate_params(args, spec, called=called, settings=settings)

    # Presence is judged on what the caller passed, not on filled-in defaults.
    params = MappingProxyType(to_param_map(args, called))
    for index, predicate in enumerate(predicates):
        if not predicate(params):
            logger.debug("Dependency check %d failed in call to %s: %r", index, called, predicate)
            raise DependencyValidationError()
