"""Probabilistic primality testing and random (safe) prime generation."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import FrozenSet, Optional, Tuple

from unknown_order.backends import Backend
from unknown_order.bignumber import BigNumber, _resolve_backend
from unknown_order.config import get_settings
from unknown_order.modular import modpow, mod_sqr
from unknown_order.sampling import as_entropy_source, random_below

__all__ = ["small_primes", "is_prime", "prime", "safe_prime"]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def small_primes(limit: int) -> Tuple[int, ...]:
    """Primes strictly below ``limit`` (sieve of Eratosthenes)."""

    if limit < 3:
        return ()
    flags = bytearray([1]) * limit
    flags[0] = flags[1] = 0
    for p in range(2, int(limit ** 0.5) + 1):
        if flags[p]:
            flags[p * p :: p] = bytes(len(range(p * p, limit, p)))
    return tuple(i for i, flag in enumerate(flags) if flag)


@lru_cache(maxsize=8)
def _small_prime_set(limit: int) -> FrozenSet[int]:
    return frozenset(small_primes(limit))


@lru_cache(maxsize=8)
def _primorial(limit: int) -> int:
    product = 1
    for p in small_primes(limit):
        product *= p
    return product


def _sieve_limit() -> int:
    return max(get_settings().sieve_limit, 5)


def _has_small_factor(n: BigNumber, limit: int) -> bool:
    """True when ``n >= limit`` is divisible by a prime below ``limit``."""

    residue = int(n % _primorial(limit))
    return any(residue % p == 0 for p in small_primes(limit))


def _strong_probable_prime(n: BigNumber, n_minus_one: BigNumber, d: BigNumber, s: int, witness: BigNumber) -> bool:
    x = modpow(witness, d, n)
    if x.is_one() or x == n_minus_one:
        return True
    for _ in range(s - 1):
        x = mod_sqr(x, n)
        if x == n_minus_one:
            return True
    return False


def is_prime(n, rounds: Optional[int] = None, entropy=None) -> bool:
    """Return ``True`` when ``n`` is probably prime.

    Small primes are matched exactly and trial division rejects most
    composites.  Survivors face a base-2 strong test followed by ``rounds``
    Miller-Rabin rounds with random witnesses in ``[2, n-2]``; the default of
    40 rounds bounds the error by ``2**-80``.
    """

    if not isinstance(n, BigNumber):
        n = BigNumber(n)
    if n.is_negative() or n < 2:
        return False
    if rounds is None:
        rounds = get_settings().primality_rounds
    if rounds < 1:
        raise ValueError("rounds must be at least 1")

    limit = _sieve_limit()
    if n < limit:
        return int(n) in _small_prime_set(limit)
    if _has_small_factor(n, limit):
        return False

    # Write n-1 as (2**s) * d with d odd.
    n_minus_one = n - 1
    d = n_minus_one
    s = 0
    while d.is_even():
        d >>= 1
        s += 1

    if not _strong_probable_prime(n, n_minus_one, d, s, BigNumber(2, backend=n.backend)):
        return False

    source = as_entropy_source(entropy)
    span = n - 3
    for _ in range(rounds):
        witness = random_below(span, entropy=source) + 2
        if not _strong_probable_prime(n, n_minus_one, d, s, witness):
            return False
    return True


def _candidate(bits: int, source, kernel: Backend) -> BigNumber:
    """Random odd value with exactly ``bits`` bits."""

    nbytes = (bits + 7) // 8
    excess = nbytes * 8 - bits
    raw = bytearray(source(nbytes))
    raw[0] &= 0xFF >> excess
    raw[0] |= 0x80 >> excess
    raw[-1] |= 0x01
    return BigNumber.from_slice(raw, backend=kernel)


def prime(bits: int, *, backend=None, entropy=None) -> BigNumber:
    """Generate a random probable prime with exactly ``bits`` bits."""

    if bits < 2:
        raise ValueError("Prime size must be at least 2 bits")

    kernel = _resolve_backend(backend)
    source = as_entropy_source(entropy)
    limit = _sieve_limit()
    attempts = 0
    while True:
        attempts += 1
        candidate = _candidate(bits, source, kernel)
        if candidate >= limit and _has_small_factor(candidate, limit):
            continue
        if is_prime(candidate, entropy=source):
            logger.debug("Found %d-bit prime after %d candidate(s)", bits, attempts)
            return candidate


def safe_prime(bits: int, *, backend=None, entropy=None) -> BigNumber:
    """Generate ``p = 2q + 1`` with ``p`` and ``q`` prime and ``p`` of ``bits`` bits.

    Expect this to be far slower than :func:`prime`; keep ``bits`` modest for
    interactive use.
    """

    if bits < 3:
        raise ValueError("Safe prime size must be at least 3 bits")

    kernel = _resolve_backend(backend)
    source = as_entropy_source(entropy)
    limit = _sieve_limit()
    attempts = 0
    while True:
        attempts += 1
        q = _candidate(bits - 1, source, kernel)
        p = (q << 1) + 1
        if q >= limit and _has_small_factor(q, limit):
            continue
        if p >= limit and _has_small_factor(p, limit):
            continue
        if is_prime(q, entropy=source) and is_prime(p, entropy=source):
            logger.debug("Found %d-bit safe prime after %d candidate(s)", bits, attempts)
            return p
