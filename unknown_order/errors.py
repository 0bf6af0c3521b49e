"""Exception types raised by the arithmetic engine."""

from __future__ import annotations

__all__ = [
    "UnknownOrderError",
    "ZeroModulusError",
    "NotInvertibleError",
    "DecodeError",
    "BackendUnavailableError",
    "ConfigError",
]


class UnknownOrderError(Exception):
    """Base class for every error raised by :mod:`unknown_order`."""


class ZeroModulusError(UnknownOrderError, ZeroDivisionError):
    """Raised when an operation has no defined result for a zero modulus.

    This is a programming error: callers are expected to validate moduli
    before exponentiating or dividing.
    """


class NotInvertibleError(UnknownOrderError, ValueError):
    """Raised when a negative exponent needs an inverse that does not exist."""


class DecodeError(UnknownOrderError, ValueError):
    """Raised when wire bytes or a multibase string cannot be decoded."""


class BackendUnavailableError(UnknownOrderError, RuntimeError):
    """Raised when a big-integer kernel is unknown or not installed."""


class ConfigError(UnknownOrderError, ValueError):
    """Raised for invalid configuration values."""
