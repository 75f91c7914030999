"""Validation settings — env vars and explicit overrides in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the caller
  2. Env vars     — ``PARAMDEPS_*`` prefix
  3. Code defaults

Uses Pydantic Settings v2. The process-wide instance is built lazily and
cached by :func:`get_settings`; call ``get_settings.cache_clear()`` after
changing the environment.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidateSettings(BaseSettings):
    """Options that apply to every per-key validation.

    Attributes:
        allow_extra: Accept parameters that have no rule in the spec.
        no_validation: Skip per-key checks entirely. Defaults are still
            filled in and dependency predicates still run.
        called: Caller name used in error messages when none is given.
    """

    model_config = SettingsConfigDict(frozen=True, env_prefix="PARAMDEPS_")

    allow_extra: bool = False
    no_validation: bool = False
    called: str = "N/A"


@lru_cache(maxsize=1)
def get_settings() -> ValidateSettings:
    """Return the process-wide settings, read once from the environment."""
    return ValidateSettings()
