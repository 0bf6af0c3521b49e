"""Kernel contract for unsigned arbitrary-precision magnitudes.

A backend only ever sees non-negative magnitudes; sign handling lives in
:class:`unknown_order.bignumber.BigNumber`.  Magnitude objects are opaque to
the rest of the engine and must be treated as immutable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Tuple

__all__ = ["Backend", "Magnitude"]

Magnitude = Any


class Backend(ABC):
    """Narrow interface every big-integer kernel implements."""

    name: str = "abstract"

    # -------- conversions --------

    @abstractmethod
    def from_int(self, value: int) -> Magnitude:
        """Import a non-negative Python integer."""

    @abstractmethod
    def to_int(self, mag: Magnitude) -> int:
        """Export a magnitude as a Python integer."""

    @abstractmethod
    def from_bytes(self, data: bytes) -> Magnitude:
        """Import an unsigned big-endian byte string (empty means zero)."""

    @abstractmethod
    def to_bytes(self, mag: Magnitude) -> bytes:
        """Export as minimal big-endian bytes; zero exports as ``b""``."""

    @abstractmethod
    def parse(self, text: str, radix: int) -> Magnitude:
        """Parse unsigned digits in ``radix`` (2..36)."""

    @abstractmethod
    def format(self, mag: Magnitude, radix: int) -> str:
        """Render as lowercase digits in ``radix`` (2..36)."""

    # -------- arithmetic --------

    @abstractmethod
    def add(self, a: Magnitude, b: Magnitude) -> Magnitude:
        ...

    @abstractmethod
    def sub(self, a: Magnitude, b: Magnitude) -> Magnitude:
        """Absolute difference ``|a - b|``."""

    @abstractmethod
    def mul(self, a: Magnitude, b: Magnitude) -> Magnitude:
        ...

    @abstractmethod
    def divmod(self, a: Magnitude, b: Magnitude) -> Tuple[Magnitude, Magnitude]:
        """Quotient and remainder for ``b != 0``."""

    @abstractmethod
    def shl(self, a: Magnitude, bits: int) -> Magnitude:
        ...

    @abstractmethod
    def shr(self, a: Magnitude, bits: int) -> Magnitude:
        ...

    @abstractmethod
    def cmp(self, a: Magnitude, b: Magnitude) -> int:
        """Return -1, 0 or 1."""

    @abstractmethod
    def is_zero(self, a: Magnitude) -> bool:
        ...

    @abstractmethod
    def copy(self, a: Magnitude) -> Magnitude:
        """Return a magnitude that shares no storage with ``a``."""

    # -------- derived operations (kernels may override natively) --------

    def bit_length(self, a: Magnitude) -> int:
        raw = self.to_bytes(a)
        if not raw:
            return 0
        return (len(raw) - 1) * 8 + raw[0].bit_length()

    def is_odd(self, a: Magnitude) -> bool:
        raw = self.to_bytes(a)
        return bool(raw) and bool(raw[-1] & 1)

    def powmod(self, base: Magnitude, exponent: Magnitude, modulus: Magnitude) -> Magnitude:
        """Left-to-right square-and-multiply; ``modulus`` must exceed one.

        The result is always reduced below ``modulus``.
        """

        base = self.divmod(base, modulus)[1]
        result = self.divmod(self.from_int(1), modulus)[1]
        for byte in self.to_bytes(exponent):
            for shift in range(7, -1, -1):
                result = self.divmod(self.mul(result, result), modulus)[1]
                if (byte >> shift) & 1:
                    result = self.divmod(self.mul(result, base), modulus)[1]
        return result

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
