"""Process-wide settings for the arithmetic engine.

Settings are read from the environment on first use and can be replaced at
runtime with :func:`configure`::

    UNKNOWN_ORDER_BACKEND=gmp
    UNKNOWN_ORDER_PRIMALITY_ROUNDS=64
    UNKNOWN_ORDER_SIEVE_LIMIT=2000
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from unknown_order.errors import ConfigError

__all__ = ["Settings", "get_settings", "configure", "reset"]

ENV_BACKEND = "UNKNOWN_ORDER_BACKEND"
ENV_ROUNDS = "UNKNOWN_ORDER_PRIMALITY_ROUNDS"
ENV_SIEVE = "UNKNOWN_ORDER_SIEVE_LIMIT"

# 40 independent Miller-Rabin witnesses bound the false-positive rate by 4^-40.
DEFAULT_ROUNDS = 40
DEFAULT_SIEVE_LIMIT = 1000


def _parse_positive(value: str, *, field: str, minimum: int) -> int:
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ConfigError(f"Invalid integer for {field}: {value!r}") from exc
    if parsed < minimum:
        raise ConfigError(f"{field} must be at least {minimum}, got {parsed}")
    return parsed


@dataclass(frozen=True)
class Settings:
    backend: str = "python"
    primality_rounds: int = DEFAULT_ROUNDS
    sieve_limit: int = DEFAULT_SIEVE_LIMIT

    def __post_init__(self) -> None:
        if not isinstance(self.backend, str) or not self.backend.strip():
            raise ConfigError("backend must be a non-empty string")
        for field in ("primality_rounds", "sieve_limit"):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{field} must be an integer, got {value!r}")
        if self.primality_rounds < 1:
            raise ConfigError("primality_rounds must be at least 1")
        if self.sieve_limit < 3:
            raise ConfigError("sieve_limit must be at least 3")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``UNKNOWN_ORDER_*`` environment variables."""

        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get(ENV_BACKEND):
            kwargs["backend"] = env[ENV_BACKEND].strip().lower()
        if env.get(ENV_ROUNDS):
            kwargs["primality_rounds"] = _parse_positive(env[ENV_ROUNDS], field=ENV_ROUNDS, minimum=1)
        if env.get(ENV_SIEVE):
            kwargs["sieve_limit"] = _parse_positive(env[ENV_SIEVE], field=ENV_SIEVE, minimum=3)
        return cls(**kwargs)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def configure(**overrides) -> Settings:
    """Replace selected settings and return the new active settings."""

    global _settings
    try:
        _settings = replace(get_settings(), **overrides)
    except TypeError as exc:
        raise ConfigError(str(exc)) from exc
    return _settings


def reset() -> None:
    """Drop runtime overrides; the environment is re-read on next use."""

    global _settings
    _settings = None
