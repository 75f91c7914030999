"""Exception hierarchy for paramdeps.

Three failure kinds, all raised (never returned):

- Construction time: a combinator or the dispatcher got an argument that is
  neither a name nor a predicate (:class:`CombinatorSpecError`), or a per-key
  rule is malformed (:class:`ParamSpecError`).
- Per-key: a single parameter failed its rule (:class:`ParamsValidationError`).
- Dependency: a cross-key predicate returned false
  (:class:`DependencyValidationError`).
"""

from __future__ import annotations

DEPENDENCY_FAILURE_MESSAGE = "code-ref checking failed"


class ParamsError(Exception):
    """Root of every error raised by paramdeps."""


class CombinatorSpecError(ParamsError, TypeError):
    """A combinator or ``validate`` received something that is not a name or predicate."""


class ParamSpecError(ParamsError, TypeError):
    """A per-key validation rule is malformed."""


class ParamsValidationError(ParamsError, ValueError):
    """A call argument failed its per-key rule.

    Attributes:
        param: The offending parameter name, or None when the failure is
            about the argument list as a whole.
    """

    def __init__(self, message: str, *, param: str | None = None) -> None:
        super().__init__(message)
        self.param = param


class DependencyValidationError(ParamsError, ValueError):
    """A dependency predicate rejected the parameter set.

    The message is fixed and does not say which predicate failed.
    """

    def __init__(self, *args: object) -> None:
        # Arguments are accepted for unpickling and ignored.
        super().__init__(DEPENDENCY_FAILURE_MESSAGE)
