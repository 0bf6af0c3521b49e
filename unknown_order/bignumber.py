"""Signed arbitrary-precision integer on top of a pluggable kernel.

:class:`BigNumber` stores a sign flag and a non-negative magnitude owned by a
:class:`~unknown_order.backends.Backend`.  Values are immutable; every
operation returns a new value.  Zero is always stored as non-negative.

Reduction follows one rule everywhere: ``a % n`` is the canonical residue in
``[0, |n|)``, so the sign of the modulus never matters and ``|n| <= 1``
reduces everything to zero.
"""

from __future__ import annotations

import operator
from functools import total_ordering
from typing import Optional, Tuple, Union

from unknown_order.backends import Backend, get_backend
from unknown_order.errors import ZeroModulusError

__all__ = ["BigNumber", "IntoBigNumber"]

IntoBigNumber = Union["BigNumber", int]
BackendLike = Union[Backend, str, None]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def _resolve_backend(backend: BackendLike) -> Backend:
    if backend is None or isinstance(backend, str):
        return get_backend(backend)
    if isinstance(backend, Backend):
        return backend
    raise TypeError(f"backend must be a Backend or a backend name, not {type(backend).__name__}")


def _parse_text(kernel: Backend, text: str, radix: Optional[int]) -> Tuple[bool, object]:
    """Parse an optionally signed literal; ``radix=None`` honours 0x/0o/0b prefixes."""

    body = text.strip()
    negative = False
    if body.startswith(("+", "-")):
        negative = body[0] == "-"
        body = body[1:]
    if radix is None:
        radix = 10
        prefix = body[:2].lower()
        if prefix in ("0x", "0o", "0b"):
            radix = {"0x": 16, "0o": 8, "0b": 2}[prefix]
            body = body[2:]
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")
    # ASCII digits of the radix only, identical on every kernel
    allowed = _DIGITS[:radix]
    if not body or any(char not in allowed for char in body.lower()):
        raise ValueError(f"Invalid integer literal: {text!r}")
    try:
        mag = kernel.parse(body, radix)
    except ValueError as exc:
        raise ValueError(f"Invalid integer literal: {text!r}") from exc
    return negative, mag


def _restore(negative: bool, magnitude: bytes, backend_name: str) -> "BigNumber":
    kernel = get_backend(backend_name)
    return BigNumber._from_parts(kernel, negative, kernel.from_bytes(magnitude))


@total_ordering
class BigNumber:
    """Immutable signed big integer.

    ``BigNumber()`` is zero.  Accepts ``int``, decimal (or ``0x``/``0o``/``0b``
    prefixed) strings, bytes-like magnitudes and other ``BigNumber`` values.
    """

    __slots__ = ("_backend", "_negative", "_mag")

    def __init__(self, value: Union[IntoBigNumber, str, bytes, bytearray, memoryview] = 0, *, backend: BackendLike = None):
        if isinstance(value, BigNumber):
            kernel = value._backend if backend is None else _resolve_backend(backend)
            if kernel is value._backend:
                mag = kernel.copy(value._mag)
            else:
                mag = kernel.from_bytes(value._backend.to_bytes(value._mag))
            negative = value._negative
        else:
            kernel = _resolve_backend(backend)
            if isinstance(value, int):
                negative = value < 0
                mag = kernel.from_int(-value if negative else value)
            elif isinstance(value, str):
                negative, mag = _parse_text(kernel, value, None)
            elif isinstance(value, (bytes, bytearray, memoryview)):
                negative = False
                mag = kernel.from_bytes(bytes(value))
            else:
                raise TypeError(f"Cannot build a BigNumber from {type(value).__name__}")
        self._init(kernel, negative, mag)

    def _init(self, kernel: Backend, negative: bool, mag) -> None:
        object.__setattr__(self, "_backend", kernel)
        object.__setattr__(self, "_negative", bool(negative) and not kernel.is_zero(mag))
        object.__setattr__(self, "_mag", mag)

    def __setattr__(self, name, value):
        raise AttributeError("BigNumber values are immutable")

    def __delattr__(self, name):
        raise AttributeError("BigNumber values are immutable")

    @classmethod
    def _from_parts(cls, kernel: Backend, negative: bool, mag) -> "BigNumber":
        obj = object.__new__(cls)
        obj._init(kernel, negative, mag)
        return obj

    def _make(self, negative: bool, mag) -> "BigNumber":
        return BigNumber._from_parts(self._backend, negative, mag)

    def _coerce(self, other):
        if isinstance(other, BigNumber):
            if other._backend is self._backend:
                return other
            return BigNumber(other, backend=self._backend)
        if isinstance(other, int):
            return BigNumber(other, backend=self._backend)
        return NotImplemented

    # -------- construction --------

    @classmethod
    def zero(cls, backend: BackendLike = None) -> "BigNumber":
        kernel = _resolve_backend(backend)
        return cls._from_parts(kernel, False, kernel.from_int(0))

    @classmethod
    def one(cls, backend: BackendLike = None) -> "BigNumber":
        kernel = _resolve_backend(backend)
        return cls._from_parts(kernel, False, kernel.from_int(1))

    @classmethod
    def from_str(cls, text: str, radix: int = 10, *, backend: BackendLike = None) -> "BigNumber":
        """Parse ``text`` (optionally signed) in the given radix."""

        kernel = _resolve_backend(backend)
        negative, mag = _parse_text(kernel, text, radix)
        return cls._from_parts(kernel, negative, mag)

    @classmethod
    def from_slice(cls, data: Union[bytes, bytearray, memoryview], *, backend: BackendLike = None) -> "BigNumber":
        """Read an unsigned big-endian magnitude; the inverse of :meth:`to_bytes`."""

        kernel = _resolve_backend(backend)
        return cls._from_parts(kernel, False, kernel.from_bytes(bytes(data)))

    @classmethod
    def from_digest(cls, digest, *, backend: BackendLike = None) -> "BigNumber":
        from unknown_order import encoding

        return encoding.from_digest(digest, backend=backend)

    @classmethod
    def from_multibase(cls, text: str, *, backend: BackendLike = None) -> "BigNumber":
        from unknown_order import encoding

        return encoding.from_multibase(text, backend=backend)

    @classmethod
    def from_hex(cls, text: str, *, backend: BackendLike = None) -> "BigNumber":
        from unknown_order import encoding

        return encoding.from_hex(text, backend=backend)

    @classmethod
    def decode(cls, data: Union[bytes, bytearray, memoryview], *, backend: BackendLike = None) -> "BigNumber":
        """Decode the length-prefixed wire form.  The sign is not recovered."""

        from unknown_order import encoding

        return encoding.decode(data, backend=backend)

    @classmethod
    def random(cls, bound: IntoBigNumber, entropy=None) -> "BigNumber":
        """Uniform sample from ``[0, bound)`` using the system CSPRNG."""

        from unknown_order import sampling

        return sampling.random_below(bound, entropy=entropy)

    @classmethod
    def from_rng(cls, bound: IntoBigNumber, rng) -> "BigNumber":
        from unknown_order import sampling

        return sampling.from_rng(bound, rng)

    @classmethod
    def prime(cls, bits: int, *, backend: BackendLike = None, entropy=None) -> "BigNumber":
        from unknown_order import primes

        return primes.prime(bits, backend=backend, entropy=entropy)

    @classmethod
    def safe_prime(cls, bits: int, *, backend: BackendLike = None, entropy=None) -> "BigNumber":
        from unknown_order import primes

        return primes.safe_prime(bits, backend=backend, entropy=entropy)

    # -------- queries --------

    @property
    def backend(self) -> Backend:
        return self._backend

    def is_zero(self) -> bool:
        return self._backend.is_zero(self._mag)

    def is_one(self) -> bool:
        return not self._negative and self._backend.cmp(self._mag, self._backend.from_int(1)) == 0

    def is_negative(self) -> bool:
        return self._negative

    def is_odd(self) -> bool:
        return self._backend.is_odd(self._mag)

    def is_even(self) -> bool:
        return not self._backend.is_odd(self._mag)

    def bit_length(self) -> int:
        """Bit length of the magnitude."""

        return self._backend.bit_length(self._mag)

    def sign(self) -> int:
        if self._negative:
            return -1
        return 0 if self.is_zero() else 1

    def clone(self) -> "BigNumber":
        return self._make(self._negative, self._backend.copy(self._mag))

    __copy__ = clone

    def __deepcopy__(self, memo) -> "BigNumber":
        return self.clone()

    def __reduce__(self):
        return _restore, (self._negative, self._backend.to_bytes(self._mag), self._backend.name)

    # -------- sign --------

    def __neg__(self) -> "BigNumber":
        return self._make(not self._negative, self._mag)

    def __pos__(self) -> "BigNumber":
        return self

    def __abs__(self) -> "BigNumber":
        return self._make(False, self._mag) if self._negative else self

    # -------- arithmetic --------

    def _add(self, other: "BigNumber", negate_other: bool = False) -> "BigNumber":
        kernel = self._backend
        other_negative = other._negative != negate_other
        if self._negative == other_negative:
            return self._make(self._negative, kernel.add(self._mag, other._mag))
        if kernel.cmp(self._mag, other._mag) >= 0:
            return self._make(self._negative, kernel.sub(self._mag, other._mag))
        return self._make(other_negative, kernel.sub(other._mag, self._mag))

    def __add__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other._add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._add(other, negate_other=True)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other._add(self, negate_other=True)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._make(self._negative != other._negative, self._backend.mul(self._mag, other._mag))

    __rmul__ = __mul__

    def _reduce(self, modulus: "BigNumber") -> "BigNumber":
        kernel = self._backend
        if kernel.bit_length(modulus._mag) <= 1:
            # modulo 0 or 1 everything collapses to zero
            return self._make(False, kernel.from_int(0))
        _, rem = kernel.divmod(self._mag, modulus._mag)
        if self._negative and not kernel.is_zero(rem):
            rem = kernel.sub(modulus._mag, rem)
        return self._make(False, rem)

    def _divmod_euclid(self, divisor: "BigNumber") -> Tuple["BigNumber", "BigNumber"]:
        kernel = self._backend
        if kernel.is_zero(divisor._mag):
            raise ZeroModulusError("integer division by zero")
        quot, rem = kernel.divmod(self._mag, divisor._mag)
        if self._negative and not kernel.is_zero(rem):
            quot = kernel.add(quot, kernel.from_int(1))
            rem = kernel.sub(divisor._mag, rem)
        return self._make(self._negative != divisor._negative, quot), self._make(False, rem)

    def __mod__(self, modulus):
        modulus = self._coerce(modulus)
        if modulus is NotImplemented:
            return modulus
        return self._reduce(modulus)

    def __rmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other._reduce(self)

    def __floordiv__(self, divisor):
        divisor = self._coerce(divisor)
        if divisor is NotImplemented:
            return divisor
        return self._divmod_euclid(divisor)[0]

    def __rfloordiv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other._divmod_euclid(self)[0]

    def __divmod__(self, divisor):
        divisor = self._coerce(divisor)
        if divisor is NotImplemented:
            return divisor
        return self._divmod_euclid(divisor)

    def __rdivmod__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return other._divmod_euclid(self)

    def __lshift__(self, bits):
        bits = operator.index(bits)
        if bits < 0:
            raise ValueError("negative shift count")
        return self._make(self._negative, self._backend.shl(self._mag, bits))

    def __rshift__(self, bits):
        # truncates the magnitude; a negative value shifted to zero becomes +0
        bits = operator.index(bits)
        if bits < 0:
            raise ValueError("negative shift count")
        return self._make(self._negative, self._backend.shr(self._mag, bits))

    def __pow__(self, exponent, modulus=None):
        if modulus is not None:
            return self.modpow(exponent, modulus)
        exponent = operator.index(exponent)
        if exponent < 0:
            raise ValueError("negative exponent requires a modulus")
        kernel = self._backend
        result = kernel.from_int(1)
        base = self._mag
        remaining = exponent
        while remaining:
            if remaining & 1:
                result = kernel.mul(result, base)
            remaining >>= 1
            if remaining:
                base = kernel.mul(base, base)
        return self._make(self._negative and bool(exponent & 1), result)

    def __rpow__(self, base):
        base = self._coerce(base)
        if base is NotImplemented:
            return base
        return base ** self

    # -------- modular arithmetic --------

    def modpow(self, exponent: IntoBigNumber, modulus: IntoBigNumber) -> "BigNumber":
        from unknown_order import modular

        return modular.modpow(self, exponent, modulus)

    def invert(self, modulus: IntoBigNumber) -> Optional["BigNumber"]:
        from unknown_order import modular

        return modular.invert(self, modulus)

    def extended_gcd(self, other: IntoBigNumber):
        from unknown_order import modular

        return modular.extended_gcd(self, other)

    def gcd(self, other: IntoBigNumber) -> "BigNumber":
        from unknown_order import modular

        return modular.gcd(self, other)

    def lcm(self, other: IntoBigNumber) -> "BigNumber":
        from unknown_order import modular

        return modular.lcm(self, other)

    def mod_add(self, other: IntoBigNumber, modulus: IntoBigNumber) -> "BigNumber":
        from unknown_order import modular

        return modular.mod_add(self, other, modulus)

    def mod_sub(self, other: IntoBigNumber, modulus: IntoBigNumber) -> "BigNumber":
        from unknown_order import modular

        return modular.mod_sub(self, other, modulus)

    def mod_mul(self, other: IntoBigNumber, modulus: IntoBigNumber) -> "BigNumber":
        from unknown_order import modular

        return modular.mod_mul(self, other, modulus)

    def mod_neg(self, modulus: IntoBigNumber) -> "BigNumber":
        from unknown_order import modular

        return modular.mod_neg(self, modulus)

    def mod_sqr(self, modulus: IntoBigNumber) -> "BigNumber":
        from unknown_order import modular

        return modular.mod_sqr(self, modulus)

    def is_prime(self, rounds: Optional[int] = None) -> bool:
        from unknown_order import primes

        return primes.is_prime(self, rounds=rounds)

    # -------- encoding --------

    def to_bytes(self) -> bytes:
        """Minimal big-endian magnitude; zero is a single zero byte."""

        return self._backend.to_bytes(self._mag) or b"\x00"

    __bytes__ = to_bytes

    def encode(self) -> bytes:
        from unknown_order import encoding

        return encoding.encode(self)

    def to_multibase(self, encoding: str = "base10") -> str:
        from unknown_order import encoding as _encoding

        return _encoding.to_multibase(self, encoding)

    def to_hex(self) -> str:
        return self.to_bytes().hex()

    def to_str_radix(self, radix: int = 10) -> str:
        if not 2 <= radix <= 36:
            raise ValueError(f"radix must be between 2 and 36, got {radix}")
        digits = self._backend.format(self._mag, radix)
        return "-" + digits if self._negative else digits

    # -------- comparison & conversion --------

    def _compare(self, other: "BigNumber") -> int:
        if self._negative != other._negative:
            return -1 if self._negative else 1
        order = self._backend.cmp(self._mag, other._mag)
        return -order if self._negative else order

    def __eq__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._compare(other) == 0

    def __lt__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return other
        return self._compare(other) < 0

    def __hash__(self) -> int:
        return hash(int(self))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        value = self._backend.to_int(self._mag)
        return -value if self._negative else value

    __index__ = __int__

    def __str__(self) -> str:
        return self.to_str_radix(10)

    def __repr__(self) -> str:
        return f"BigNumber({self})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        return format(int(self), spec)
