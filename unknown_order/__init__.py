"""Arbitrary-precision integers for groups of unknown order.

Quick start::

    from unknown_order import BigNumber

    n = BigNumber.prime(1024) * BigNumber.prime(1024)
    x = BigNumber.random(n)
    assert x.modpow(-1, n) == x.invert(n)
"""

from __future__ import annotations

from unknown_order.backends import Backend, available_backends, get_backend, register_backend
from unknown_order.bignumber import BigNumber
from unknown_order.config import Settings, configure, get_settings
from unknown_order.errors import (
    BackendUnavailableError,
    ConfigError,
    DecodeError,
    NotInvertibleError,
    UnknownOrderError,
    ZeroModulusError,
)
from unknown_order.modular import GcdResult

__version__ = "0.1.0"

__all__ = [
    "BigNumber",
    "GcdResult",
    "Backend",
    "available_backends",
    "get_backend",
    "register_backend",
    "Settings",
    "configure",
    "get_settings",
    "UnknownOrderError",
    "ZeroModulusError",
    "NotInvertibleError",
    "DecodeError",
    "BackendUnavailableError",
    "ConfigError",
]
