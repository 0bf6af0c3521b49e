"""Uniform sampling below a bound from a cryptographically secure source.

Candidates are drawn with exactly the bound's bit length and rejected when
they are not below the bound, so there is no modulo bias.  The default
source is pycryptodome's ``get_random_bytes`` (the OS CSPRNG), which is safe
to call from several threads at once.
"""

from __future__ import annotations

import threading
from typing import Callable, Optional, Union

from Crypto.Random import get_random_bytes

from unknown_order.backends import Backend
from unknown_order.bignumber import BigNumber, IntoBigNumber

__all__ = [
    "EntropySource",
    "system_entropy",
    "as_entropy_source",
    "random_below",
    "random_bits",
    "from_rng",
]


class EntropySource:
    """Callable returning ``n`` random bytes.

    Sources that are not thread-safe on their own are serialised through a
    lock; ``thread_safe=True`` skips it.
    """

    def __init__(self, read: Callable[[int], bytes], *, thread_safe: bool = False):
        self._read = read
        self._lock = None if thread_safe else threading.Lock()

    def __call__(self, n: int) -> bytes:
        if n < 0:
            raise ValueError("Cannot draw a negative number of bytes")
        if self._lock is None:
            data = self._read(n)
        else:
            with self._lock:
                data = self._read(n)
        data = bytes(data)
        if len(data) != n:
            raise RuntimeError(f"Entropy source returned {len(data)} bytes, expected {n}")
        return data


_SYSTEM = EntropySource(get_random_bytes, thread_safe=True)


def system_entropy() -> EntropySource:
    return _SYSTEM


def as_entropy_source(rng) -> EntropySource:
    """Adapt an ``EntropySource``, a ``read(n)`` callable or an object with ``randbytes``."""

    if rng is None:
        return _SYSTEM
    if isinstance(rng, EntropySource):
        return rng
    randbytes = getattr(rng, "randbytes", None)
    if callable(randbytes):
        return EntropySource(randbytes)
    if callable(rng):
        return EntropySource(rng)
    raise TypeError(f"Cannot use {type(rng).__name__} as an entropy source")


def random_below(
    bound: IntoBigNumber,
    entropy: Optional[Union[EntropySource, Callable[[int], bytes]]] = None,
    backend: Optional[Union[Backend, str]] = None,
) -> BigNumber:
    """Return a uniform value in ``[0, bound)`` for a positive ``bound``."""

    if not isinstance(bound, BigNumber):
        bound = BigNumber(bound, backend=backend)
    elif backend is not None:
        bound = BigNumber(bound, backend=backend)
    if bound.is_negative() or bound.is_zero():
        raise ValueError("bound must be positive")

    source = as_entropy_source(entropy)
    bits = bound.bit_length()
    nbytes = (bits + 7) // 8
    mask = 0xFF >> (nbytes * 8 - bits)
    while True:
        raw = bytearray(source(nbytes))
        raw[0] &= mask
        candidate = BigNumber.from_slice(raw, backend=bound.backend)
        if candidate < bound:
            return candidate


def random_bits(
    bits: int,
    entropy: Optional[Union[EntropySource, Callable[[int], bytes]]] = None,
    backend: Optional[Union[Backend, str]] = None,
) -> BigNumber:
    """Return a uniform value in ``[0, 2**bits)``."""

    if bits < 0:
        raise ValueError("bits must be non-negative")
    if bits == 0:
        return BigNumber.zero(backend)
    source = as_entropy_source(entropy)
    nbytes = (bits + 7) // 8
    raw = bytearray(source(nbytes))
    raw[0] &= 0xFF >> (nbytes * 8 - bits)
    return BigNumber.from_slice(raw, backend=backend)


def from_rng(bound: IntoBigNumber, rng) -> BigNumber:
    """Sample below ``bound`` with a caller-supplied generator.

    ``random.Random`` instances are accepted for reproducible runs; they are
    not suitable for key material.
    """

    return random_below(bound, entropy=as_entropy_source(rng))
