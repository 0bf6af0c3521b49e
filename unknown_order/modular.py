"""Modular arithmetic over :class:`BigNumber`.

Every result is the canonical residue in ``[0, |n|)``.  Only the magnitude of
a modulus is used, so a negative modulus behaves exactly like its positive
counterpart.  Reducing modulo 0 or 1 yields zero, while :func:`modpow` treats
a zero modulus as a programming error and raises :class:`ZeroModulusError`.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

from unknown_order.bignumber import BigNumber, IntoBigNumber
from unknown_order.errors import NotInvertibleError, ZeroModulusError

__all__ = [
    "GcdResult",
    "reduce",
    "div_rem_euclid",
    "modpow",
    "extended_gcd",
    "invert",
    "gcd",
    "lcm",
    "mod_add",
    "mod_sub",
    "mod_mul",
    "mod_neg",
    "mod_sqr",
]


class GcdResult(NamedTuple):
    """``gcd == a*x + b*y`` with ``gcd >= 0``."""

    gcd: BigNumber
    x: BigNumber
    y: BigNumber


def _as_number(value: IntoBigNumber, like: Optional[BigNumber] = None) -> BigNumber:
    if like is not None:
        coerced = like._coerce(value)
        if coerced is NotImplemented:
            raise TypeError(f"Expected BigNumber or int, not {type(value).__name__}")
        return coerced
    if isinstance(value, BigNumber):
        return value
    if isinstance(value, int):
        return BigNumber(value)
    raise TypeError(f"Expected BigNumber or int, not {type(value).__name__}")


def reduce(value: IntoBigNumber, modulus: IntoBigNumber) -> BigNumber:
    """Canonical residue of ``value`` modulo ``|modulus|`` (zero when ``|modulus| <= 1``)."""

    value = _as_number(value)
    return value._reduce(_as_number(modulus, value))


def div_rem_euclid(value: IntoBigNumber, divisor: IntoBigNumber) -> Tuple[BigNumber, BigNumber]:
    """Euclidean division: ``value == q*divisor + r`` with ``0 <= r < |divisor|``."""

    value = _as_number(value)
    return value._divmod_euclid(_as_number(divisor, value))


def extended_gcd(a: IntoBigNumber, b: IntoBigNumber) -> GcdResult:
    """Iterative extended Euclid over the magnitudes of ``a`` and ``b``.

    The Bézout coefficients are sign-corrected so that ``a*x + b*y == gcd``
    holds for the signed inputs.
    """

    a = _as_number(a)
    b = _as_number(b, a)

    old_r, r = abs(a), abs(b)
    old_s, s = BigNumber.one(a.backend), BigNumber.zero(a.backend)
    old_t, t = BigNumber.zero(a.backend), BigNumber.one(a.backend)

    while not r.is_zero():
        q, rem = old_r._divmod_euclid(r)
        old_r, r = r, rem
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t

    if a.is_negative():
        old_s = -old_s
    if b.is_negative():
        old_t = -old_t
    return GcdResult(old_r, old_s, old_t)


def gcd(a: IntoBigNumber, b: IntoBigNumber) -> BigNumber:
    return extended_gcd(a, b).gcd


def lcm(a: IntoBigNumber, b: IntoBigNumber) -> BigNumber:
    a = _as_number(a)
    b = _as_number(b, a)
    if a.is_zero() or b.is_zero():
        return BigNumber.zero(a.backend)
    return abs(a * b) // gcd(a, b)


def invert(value: IntoBigNumber, modulus: IntoBigNumber) -> Optional[BigNumber]:
    """Canonical inverse of ``value`` modulo ``|modulus|``, or ``None`` if none exists."""

    value = _as_number(value)
    modulus = abs(_as_number(modulus, value))
    if modulus.is_zero():
        return None
    if modulus.is_one():
        return BigNumber.zero(value.backend)
    result = extended_gcd(value._reduce(modulus), modulus)
    if not result.gcd.is_one():
        return None
    return result.x._reduce(modulus)


def modpow(base: IntoBigNumber, exponent: IntoBigNumber, modulus: IntoBigNumber) -> BigNumber:
    """``base ** exponent mod |modulus|`` for any signed exponent.

    A negative exponent first inverts ``base`` and raises
    :class:`NotInvertibleError` when that is impossible.  A zero modulus
    raises :class:`ZeroModulusError`.
    """

    base = _as_number(base)
    exponent = _as_number(exponent, base)
    modulus = abs(_as_number(modulus, base))

    if modulus.is_zero():
        raise ZeroModulusError("modpow with a zero modulus is undefined")
    if modulus.is_one():
        return BigNumber.zero(base.backend)

    if exponent.is_negative():
        inverse = invert(base, modulus)
        if inverse is None:
            raise NotInvertibleError(f"{base} is not invertible modulo {modulus}")
        base = inverse
        exponent = -exponent

    kernel = base.backend
    reduced = base._reduce(modulus)
    return BigNumber._from_parts(kernel, False, kernel.powmod(reduced._mag, exponent._mag, modulus._mag))


def mod_add(a: IntoBigNumber, b: IntoBigNumber, modulus: IntoBigNumber) -> BigNumber:
    a = _as_number(a)
    return (a + _as_number(b, a))._reduce(_as_number(modulus, a))


def mod_sub(a: IntoBigNumber, b: IntoBigNumber, modulus: IntoBigNumber) -> BigNumber:
    a = _as_number(a)
    return (a - _as_number(b, a))._reduce(_as_number(modulus, a))


def mod_mul(a: IntoBigNumber, b: IntoBigNumber, modulus: IntoBigNumber) -> BigNumber:
    a = _as_number(a)
    modulus = _as_number(modulus, a)
    return (a._reduce(modulus) * _as_number(b, a)._reduce(modulus))._reduce(modulus)


def mod_neg(a: IntoBigNumber, modulus: IntoBigNumber) -> BigNumber:
    a = _as_number(a)
    return (-a)._reduce(_as_number(modulus, a))


def mod_sqr(a: IntoBigNumber, modulus: IntoBigNumber) -> BigNumber:
    return mod_mul(a, a, modulus)
