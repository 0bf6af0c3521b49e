"""Kernel backed by GMP through ``gmpy2``.

Install with ``pip install unknown-order[gmp]``.
"""

from __future__ import annotations

from typing import Tuple

import gmpy2
from gmpy2 import mpz

from unknown_order.backends.base import Backend

__all__ = ["GmpBackend"]


class GmpBackend(Backend):
    name = "gmp"

    def from_int(self, value: int):
        if value < 0:
            raise ValueError("Magnitudes are non-negative")
        return mpz(value)

    def to_int(self, mag) -> int:
        return int(mag)

    def from_bytes(self, data: bytes):
        return mpz(int.from_bytes(data, "big", signed=False))

    def to_bytes(self, mag) -> bytes:
        return int(mag).to_bytes((mag.bit_length() + 7) // 8, "big")

    def parse(self, text: str, radix: int):
        value = mpz(text, radix)
        if value < 0:
            raise ValueError("Magnitudes are non-negative")
        return value

    def format(self, mag, radix: int) -> str:
        return mag.digits(radix).lower()

    def add(self, a, b):
        return a + b

    def sub(self, a, b):
        return a - b if a >= b else b - a

    def mul(self, a, b):
        return a * b

    def divmod(self, a, b) -> Tuple[object, object]:
        return gmpy2.f_divmod(a, b)

    def shl(self, a, bits: int):
        return a << bits

    def shr(self, a, bits: int):
        return a >> bits

    def cmp(self, a, b) -> int:
        return gmpy2.cmp(a, b)

    def is_zero(self, a) -> bool:
        return a == 0

    def copy(self, a):
        return mpz(a)

    def bit_length(self, a) -> int:
        return a.bit_length()

    def is_odd(self, a) -> bool:
        return gmpy2.is_odd(a)

    def powmod(self, base, exponent, modulus):
        return gmpy2.powmod(base, exponent, modulus)
