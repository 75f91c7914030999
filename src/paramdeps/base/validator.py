"""Per-key validation engine.

Checks each named argument against its own rule in isolation: presence,
type tag, class, pattern and callbacks. Relationships between keys are
handled one layer up, in :mod:`paramdeps.dispatch`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from paramdeps.base.spec import ParamSpec, coerce_spec
from paramdeps.base.types import describe, type_of
from paramdeps.config.settings import ValidateSettings, get_settings
from paramdeps.errors import ParamsValidationError

logger = logging.getLogger(__name__)

CallArgs = Mapping[str, Any] | Sequence[Any]


def to_param_map(args: CallArgs, called: str) -> dict[str, Any]:
    """Build a name -> value dict from a mapping or a flat name/value list.

    Later duplicates in a flat list win, as when building a hash from it.
    """
    if isinstance(args, Mapping):
        return dict(args)
    if isinstance(args, (str, bytes)) or not isinstance(args, Sequence):
        msg = f"Arguments to {called} must be a mapping or a list of name/value pairs"
        raise ParamsValidationError(msg)
    if len(args) % 2:
        msg = f"Odd number of parameters in call to {called} when named parameters were expected"
        raise ParamsValidationError(msg)
    params: dict[str, Any] = {}
    for i in range(0, len(args), 2):
        name = args[i]
        if not isinstance(name, str):
            msg = (
                f"Parameter names in call to {called} must be strings, "
                f"not {type(name).__name__} at position {i}"
            )
            raise ParamsValidationError(msg)
        params[name] = args[i + 1]
    return params


def _check_value(name: str, value: Any, rule: ParamSpec, params: Mapping[str, Any], called: str) -> None:
    if rule.type is not None:
        kind = type_of(value)
        if not kind & rule.type:
            msg = (
                f"The '{name}' parameter ({value!r}) to {called} was a '{describe(kind)}', "
                f"which is not one of the allowed types: {describe(rule.type)}"
            )
            raise ParamsValidationError(msg, param=name)

    if rule.isa is not None and not isinstance(value, rule.isa):
        msg = f"The '{name}' parameter ({value!r}) to {called} was not a '{rule.isa.__name__}'"
        raise ParamsValidationError(msg, param=name)

    if rule.regex is not None and (value is None or not rule.regex.search(str(value))):
        msg = f"The '{name}' parameter ({value!r}) to {called} did not pass regex check"
        raise ParamsValidationError(msg, param=name)

    for label, callback in rule.callbacks.items():
        if not callback(value, params):
            msg = f"The '{name}' parameter ({value!r}) to {called} did not pass the '{label}' callback"
            raise ParamsValidationError(msg, param=name)


def validate_params(
    args: CallArgs,
    spec: Mapping[str, Any],
    *,
    called: str | None = None,
    settings: ValidateSettings | None = None,
) -> dict[str, Any]:
    """Validate *args* key by key against *spec*.

    Args:
        args: The call's named arguments, as a mapping or a flat list of
            alternating names and values.
        spec: Parameter name -> rule (``ParamSpec``, dict or bool).
        called: Caller name used in error messages.
        settings: Overrides the process-wide :class:`ValidateSettings`.

    Returns:
        A new dict of the validated parameters with defaults filled in.

    Raises:
        ParamSpecError: A rule in *spec* is malformed.
        ParamsValidationError: An argument failed its rule.
    """
    if settings is None:
        settings = get_settings()
    called = called or settings.called

    rules = coerce_spec(spec)
    params = to_param_map(args, called)

    if not settings.no_validation:
        if not settings.allow_extra:
            extra = sorted(str(k) for k in params if k not in rules)
            if extra:
                noun, verb = ("parameter", "was") if len(extra) == 1 else ("parameters", "were")
                msg = (
                    f"The following {noun} {verb} passed in the call to {called} "
                    f"but {verb} not listed in the validation options: {' '.join(extra)}"
                )
                raise ParamsValidationError(msg, param=extra[0])

        missing = [name for name, rule in rules.items() if name not in params and not rule.is_optional]
        if missing:
            noun = "parameter" if len(missing) == 1 else "parameters"
            names = " ".join(f"'{name}'" for name in missing)
            msg = f"Mandatory {noun} {names} missing in call to {called}"
            raise ParamsValidationError(msg, param=missing[0])

        for name, rule in rules.items():
            if name in params:
                _check_value(name, params[name], rule, params, called)
    else:
        logger.debug("Per-key validation disabled for %s", called)

    result = dict(params)
    for name, rule in rules.items():
        if name not in result and rule.has_default:
            result[name] = rule.default
    return result
