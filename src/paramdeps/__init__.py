"""paramdeps — per-key parameter validation plus cross-key dependency checks.

Example::

    from paramdeps import ARRAYREF, SCALAR, all_of, any_of, validate

    def foo(**kwargs):
        validate(
            kwargs,
            {
                "alpha": {"type": ARRAYREF, "optional": True},
                "beta": {"type": ARRAYREF, "optional": True},
                "gamma": {"type": ARRAYREF, "optional": True},
                "bar": {"type": SCALAR, "optional": True},
                "baz": {"type": SCALAR, "optional": True},
            },
            any_of("alpha", "beta", "gamma", all_of("bar", "baz")),
        )
"""

from paramdeps.base import (
    ARRAYREF,
    BOOLEAN,
    CODEREF,
    HASHREF,
    OBJECT,
    SCALAR,
    UNDEF,
    ParamSpec,
    ParamType,
    validate_params,
)
from paramdeps.combinators import all_of, any_of, none_of, one_of
from paramdeps.dispatch import validate
from paramdeps.errors import (
    CombinatorSpecError,
    DependencyValidationError,
    ParamsError,
    ParamSpecError,
    ParamsValidationError,
)
from paramdeps.exports import DEFAULT_EXPORTS

__version__ = "1.0.0"

__all__ = list(DEFAULT_EXPORTS)
