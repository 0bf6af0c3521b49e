"""Kernel backed by CPython's built-in ``int``."""

from __future__ import annotations

from typing import Tuple

from unknown_order.backends.base import Backend

__all__ = ["PythonIntBackend"]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class PythonIntBackend(Backend):
    name = "python"

    def from_int(self, value: int) -> int:
        if value < 0:
            raise ValueError("Magnitudes are non-negative")
        return int(value)

    def to_int(self, mag: int) -> int:
        return mag

    def from_bytes(self, data: bytes) -> int:
        return int.from_bytes(data, "big", signed=False)

    def to_bytes(self, mag: int) -> bytes:
        return mag.to_bytes((mag.bit_length() + 7) // 8, "big")

    def parse(self, text: str, radix: int) -> int:
        value = int(text, radix)
        if value < 0:
            raise ValueError("Magnitudes are non-negative")
        return value

    def format(self, mag: int, radix: int) -> str:
        if radix == 10:
            return str(mag)
        if radix == 16:
            return format(mag, "x")
        if radix == 8:
            return format(mag, "o")
        if radix == 2:
            return format(mag, "b")
        if mag == 0:
            return "0"
        digits = []
        while mag:
            mag, rem = divmod(mag, radix)
            digits.append(_DIGITS[rem])
        return "".join(reversed(digits))

    def add(self, a: int, b: int) -> int:
        return a + b

    def sub(self, a: int, b: int) -> int:
        return a - b if a >= b else b - a

    def mul(self, a: int, b: int) -> int:
        return a * b

    def divmod(self, a: int, b: int) -> Tuple[int, int]:
        return divmod(a, b)

    def shl(self, a: int, bits: int) -> int:
        return a << bits

    def shr(self, a: int, bits: int) -> int:
        return a >> bits

    def cmp(self, a: int, b: int) -> int:
        return (a > b) - (a < b)

    def is_zero(self, a: int) -> bool:
        return a == 0

    def copy(self, a: int) -> int:
        # ints are immutable; a fresh object is still produced for large values
        return int.from_bytes(self.to_bytes(a), "big")

    def bit_length(self, a: int) -> int:
        return a.bit_length()

    def is_odd(self, a: int) -> bool:
        return bool(a & 1)

    def powmod(self, base: int, exponent: int, modulus: int) -> int:
        return pow(base, exponent, modulus)
