"""Per-key validation — type tags, rule model, and the engine.

This layer knows nothing about dependency combinators and can be used on
its own.
"""

from paramdeps.base.spec import ParamSpec
from paramdeps.base.types import (
    ARRAYREF,
    BOOLEAN,
    CODEREF,
    HASHREF,
    OBJECT,
    SCALAR,
    UNDEF,
    ParamType,
)
from paramdeps.base.validator import validate_params

__all__ = [
    "ARRAYREF",
    "BOOLEAN",
    "CODEREF",
    "HASHREF",
    "OBJECT",
    "SCALAR",
    "UNDEF",
    "ParamSpec",
    "ParamType",
    "validate_params",
]
