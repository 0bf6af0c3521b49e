"""Byte encodings of :class:`BigNumber` magnitudes.

Wire format::

    +----------------------------+-------------------------------+
    | length: u64, little-endian | magnitude: `length` bytes, BE |
    +----------------------------+-------------------------------+

The sign is NOT encoded.  Decoding the wire form of a negative value yields
its absolute value; callers that round-trip signed values must carry the
sign separately.
"""

from __future__ import annotations

import base64
import binascii
import struct
from typing import Tuple, Union

from unknown_order.bignumber import BigNumber
from unknown_order.errors import DecodeError

__all__ = [
    "LENGTH_PREFIX",
    "to_bytes",
    "from_slice",
    "encode",
    "decode",
    "read_wire",
    "from_digest",
    "to_hex",
    "from_hex",
    "MULTIBASE_PREFIXES",
    "to_multibase",
    "from_multibase",
]

LENGTH_PREFIX = struct.Struct("<Q")

BytesLike = Union[bytes, bytearray, memoryview]

_BASE10 = "0123456789"
_BASE58_BTC = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

MULTIBASE_PREFIXES = {
    "base10": "9",
    "base16": "f",
    "base16upper": "F",
    "base32": "b",
    "base32upper": "B",
    "base58btc": "z",
    "base64": "m",
    "base64pad": "M",
    "base64url": "u",
    "base64urlpad": "U",
}
_PREFIX_TO_NAME = {prefix: name for name, prefix in MULTIBASE_PREFIXES.items()}


def to_bytes(value: BigNumber) -> bytes:
    return value.to_bytes()


def from_slice(data: BytesLike, *, backend=None) -> BigNumber:
    return BigNumber.from_slice(data, backend=backend)


# -------- wire form --------

def encode(value: BigNumber) -> bytes:
    """Length-prefixed magnitude bytes."""

    magnitude = value.to_bytes()
    return LENGTH_PREFIX.pack(len(magnitude)) + magnitude


def read_wire(data: BytesLike, offset: int = 0, *, backend=None) -> Tuple[BigNumber, int]:
    """Decode one value starting at ``offset``; return it and the next offset."""

    view = memoryview(data)
    if offset < 0 or len(view) - offset < LENGTH_PREFIX.size:
        raise DecodeError("Truncated length prefix")
    (length,) = LENGTH_PREFIX.unpack_from(view, offset)
    start = offset + LENGTH_PREFIX.size
    end = start + length
    if end > len(view):
        raise DecodeError(f"Length prefix announces {length} bytes, only {len(view) - start} available")
    return BigNumber.from_slice(view[start:end], backend=backend), end


def decode(data: BytesLike, *, backend=None) -> BigNumber:
    """Decode exactly one wire-encoded value; trailing bytes are an error."""

    value, end = read_wire(data, backend=backend)
    if end != len(data):
        raise DecodeError(f"{len(data) - end} trailing byte(s) after encoded value")
    return value


# -------- digests & hex --------

def from_digest(digest, *, backend=None) -> BigNumber:
    """Interpret a hash output as an unsigned big-endian magnitude.

    Accepts a hash object exposing ``digest()`` (``hashlib`` or
    ``Crypto.Hash``) or the raw digest bytes.
    """

    finalize = getattr(digest, "digest", None)
    if callable(finalize):
        raw = finalize()
    elif isinstance(digest, (bytes, bytearray, memoryview)):
        raw = bytes(digest)
    else:
        raise TypeError(f"Expected a hash object or bytes, not {type(digest).__name__}")
    return BigNumber.from_slice(raw, backend=backend)


def to_hex(value: BigNumber) -> str:
    return value.to_hex()


def from_hex(text: str, *, backend=None) -> BigNumber:
    body = text.strip()
    if body[:2].lower() == "0x":
        body = body[2:]
    if not body:
        raise DecodeError(f"Empty hex string: {text!r}")
    if len(body) % 2:
        body = "0" + body
    try:
        raw = bytes.fromhex(body)
    except ValueError as exc:
        raise DecodeError(f"Invalid hex string: {text!r}") from exc
    return BigNumber.from_slice(raw, backend=backend)


# -------- multibase --------

def _encode_radix(data: bytes, alphabet: str) -> str:
    zeros = len(data) - len(data.lstrip(b"\x00"))
    value = int.from_bytes(data, "big")
    radix = len(alphabet)
    digits = []
    while value:
        value, rem = divmod(value, radix)
        digits.append(alphabet[rem])
    return alphabet[0] * zeros + "".join(reversed(digits))


def _decode_radix(text: str, alphabet: str) -> bytes:
    zeros = len(text) - len(text.lstrip(alphabet[0]))
    body = text[zeros:]
    if alphabet == _BASE10:
        if body and not (body.isascii() and body.isdigit()):
            raise DecodeError("Invalid base10 digit")
        value = int(body) if body else 0
    else:
        radix = len(alphabet)
        value = 0
        for char in body:
            index = alphabet.find(char)
            if index < 0:
                raise DecodeError(f"Invalid character {char!r} for this base")
            value = value * radix + index
    return b"\x00" * zeros + value.to_bytes((value.bit_length() + 7) // 8, "big")


def _pad(text: str, block: int) -> str:
    return text + "=" * (-len(text) % block)


def _encode_payload(data: bytes, name: str) -> str:
    if name == "base10":
        return _encode_radix(data, _BASE10)
    if name == "base58btc":
        return _encode_radix(data, _BASE58_BTC)
    if name in ("base16", "base16upper"):
        text = data.hex()
        return text.upper() if name == "base16upper" else text
    if name in ("base32", "base32upper"):
        text = base64.b32encode(data).decode("ascii").rstrip("=")
        return text if name == "base32upper" else text.lower()
    if name in ("base64", "base64pad"):
        text = base64.b64encode(data).decode("ascii")
        return text if name == "base64pad" else text.rstrip("=")
    text = base64.urlsafe_b64encode(data).decode("ascii")
    return text if name == "base64urlpad" else text.rstrip("=")


def _decode_payload(payload: str, name: str) -> bytes:
    if name == "base10":
        return _decode_radix(payload, _BASE10)
    if name == "base58btc":
        return _decode_radix(payload, _BASE58_BTC)
    try:
        if name in ("base16", "base16upper"):
            return bytes.fromhex(payload)
        if name in ("base32", "base32upper"):
            return base64.b32decode(_pad(payload.upper(), 8))
        if name in ("base64", "base64pad"):
            return base64.b64decode(_pad(payload, 4), validate=True)
        return base64.b64decode(_pad(payload, 4), altchars=b"-_", validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Invalid {name} payload") from exc


def to_multibase(value: BigNumber, encoding: str = "base10") -> str:
    """Multibase string of the magnitude bytes, e.g. ``"9" + decimal digits``."""

    prefix = MULTIBASE_PREFIXES.get(encoding)
    if prefix is None:
        raise ValueError(f"Unsupported multibase encoding {encoding!r}")
    return prefix + _encode_payload(value.to_bytes(), encoding)


def from_multibase(text: str, *, backend=None) -> BigNumber:
    """Decode a multibase string into a non-negative value.

    An empty payload is rejected, except for the bare base10 literal ``"9"``
    which reads as zero.
    """

    if not text:
        raise DecodeError("Empty multibase string")
    name = _PREFIX_TO_NAME.get(text[0])
    if name is None:
        raise DecodeError(f"Unsupported multibase prefix {text[0]!r}")
    payload = text[1:]
    if not payload and name != "base10":
        raise DecodeError(f"Empty {name} payload")
    return BigNumber.from_slice(_decode_payload(payload, name), backend=backend)
