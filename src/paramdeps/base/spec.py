"""Per-key rule model.

A validation spec maps each parameter name to a rule. A rule is either a
:class:`ParamSpec`, a plain dict with the same fields, or a bare bool
(``True`` = mandatory, ``False`` = optional).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from paramdeps.base.types import ParamType
from paramdeps.errors import ParamSpecError

# Module-level alias: inside ParamSpec the name `type` is a field.
AnyClass = type[Any]


class ParamSpec(BaseModel):
    """Rule for a single named parameter.

    Attributes:
        type: Accepted kinds of value; None accepts anything.
        optional: Whether the parameter may be omitted.
        default: Value filled in when the parameter is omitted. Setting a
            default makes the parameter optional.
        isa: Class the value must be an instance of.
        regex: Pattern the value's ``str()`` must match (``re.search``).
        callbacks: Named checks called as ``fn(value, params)``; each must
            return a truthy value.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: ParamType | None = None
    optional: bool = False
    default: Any = None
    isa: AnyClass | None = None
    regex: re.Pattern[str] | None = None
    callbacks: dict[str, Callable[..., Any]] = Field(default_factory=dict)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> ParamType | None:
        if value is None or isinstance(value, ParamType):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return ParamType(value)
        msg = f"type must be a ParamType tag, not {value!r}"
        raise ValueError(msg)

    @property
    def has_default(self) -> bool:
        return "default" in self.model_fields_set

    @property
    def is_optional(self) -> bool:
        return self.optional or self.has_default


def coerce_rule(name: str, rule: Any) -> ParamSpec:
    """Normalize one spec entry into a :class:`ParamSpec`."""
    if isinstance(rule, ParamSpec):
        return rule
    if isinstance(rule, bool):
        return ParamSpec(optional=not rule)
    if isinstance(rule, Mapping):
        try:
            return ParamSpec.model_validate(dict(rule))
        except ValidationError as exc:
            msg = f"Invalid validation rule for '{name}': {exc}"
            raise ParamSpecError(msg) from exc
    msg = f"Validation rule for '{name}' must be a ParamSpec, dict or bool, not {type(rule).__name__}"
    raise ParamSpecError(msg)


def coerce_spec(spec: Mapping[str, Any]) -> dict[str, ParamSpec]:
    """Normalize a whole spec mapping, preserving key order."""
    if not isinstance(spec, Mapping):
        msg = f"Validation spec must be a mapping, not {type(spec).__name__}"
        raise ParamSpecError(msg)
    return {name: coerce_rule(name, rule) for name, rule in spec.items()}
