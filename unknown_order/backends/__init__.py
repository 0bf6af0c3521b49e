"""Registry of big-integer kernels.

The engine talks to kernels only through :class:`Backend`.  Kernels are
registered by name with a zero-argument factory; the factory runs (and any
third-party import happens) the first time the kernel is requested.
"""

from __future__ import annotations

import importlib
import logging
import threading
from typing import Callable, Dict, List, Optional

from unknown_order.backends.base import Backend, Magnitude
from unknown_order.backends.python_int import PythonIntBackend
from unknown_order.config import get_settings
from unknown_order.errors import BackendUnavailableError

__all__ = [
    "Backend",
    "Magnitude",
    "PythonIntBackend",
    "register_backend",
    "available_backends",
    "installed_backends",
    "get_backend",
]

logger = logging.getLogger(__name__)

_EXTRAS_HINT = {"gmp": "pip install unknown-order[gmp]"}


def _load_gmp() -> Backend:
    module = importlib.import_module("unknown_order.backends.gmp")
    return module.GmpBackend()


_factories: Dict[str, Callable[[], Backend]] = {
    "python": PythonIntBackend,
    "gmp": _load_gmp,
}
_instances: Dict[str, Backend] = {}
_lock = threading.Lock()


def register_backend(name: str, factory: Callable[[], Backend]) -> None:
    """Register (or replace) a kernel factory under ``name``."""

    key = name.strip().lower()
    with _lock:
        _factories[key] = factory
        _instances.pop(key, None)


def available_backends() -> List[str]:
    """Names of every registered kernel, installed or not."""

    return sorted(_factories)


def installed_backends() -> List[str]:
    """Names of the registered kernels whose libraries can be loaded."""

    names = []
    for name in available_backends():
        try:
            get_backend(name)
        except BackendUnavailableError:
            continue
        names.append(name)
    return names


def get_backend(name: Optional[str] = None) -> Backend:
    """Return the cached kernel instance for ``name`` (default from settings)."""

    key = (name or get_settings().backend).strip().lower()
    backend = _instances.get(key)
    if backend is not None:
        return backend

    with _lock:
        backend = _instances.get(key)
        if backend is not None:
            return backend
        factory = _factories.get(key)
        if factory is None:
            raise BackendUnavailableError(
                f"Unknown backend {key!r}; choose one of {', '.join(sorted(_factories))}"
            )
        try:
            backend = factory()
        except ImportError as exc:
            hint = _EXTRAS_HINT.get(key)
            message = f"Backend {key!r} is not installed"
            if hint:
                message += f" (hint: {hint})"
            raise BackendUnavailableError(message) from exc
        _instances[key] = backend
        logger.debug("Loaded %s backend", key)
        return backend
