"""Zero-compressed variable-length integers (Hadoop VInt/VLong layout).

Values in ``[-112, 127]`` take a single byte holding the value. Anything
else starts with a marker byte: ``-113..-120`` for non-negative values with
1..8 magnitude bytes following, ``-121..-128`` for negative values whose
one's complement follows. Magnitude bytes are big-endian.

The marker alone determines the encoded size, so a reader can skip a VLQ
without decoding it (see ``decode_vint_size``).
"""

from __future__ import annotations

from typing import BinaryIO

from mr_keys.core.errors import EncodingError
from mr_keys.core.hashing import INT32_MAX, INT32_MIN
from mr_keys.wire.stream import read_exact, write_exact

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

SINGLE_BYTE_MIN = -112
SINGLE_BYTE_MAX = 127
MAX_VINT_SIZE = 9


def _signed_byte(value: int) -> int:
    return value - 256 if value > 127 else value


def decode_vint_size(first_byte: int) -> int:
    """Total encoded size implied by the first byte (signed or unsigned form)."""
    b = _signed_byte(first_byte & 0xFF)
    if b >= SINGLE_BYTE_MIN:
        return 1
    if b < -120:
        return -119 - b
    return -111 - b


def is_negative_vint(first_byte: int) -> bool:
    b = _signed_byte(first_byte & 0xFF)
    return b < -120 or (SINGLE_BYTE_MIN <= b < 0)


def vint_size(value: int) -> int:
    if SINGLE_BYTE_MIN <= value <= SINGLE_BYTE_MAX:
        return 1
    if value < 0:
        value = ~value
    return (value.bit_length() + 7) // 8 + 1


def encode_vlong(value: int) -> bytes:
    if value < INT64_MIN or value > INT64_MAX:
        raise EncodingError(f"value out of int64 range: {value}")
    if SINGLE_BYTE_MIN <= value <= SINGLE_BYTE_MAX:
        return bytes((value & 0xFF,))
    marker = -112
    if value < 0:
        value = ~value
        marker = -120
    length = (value.bit_length() + 7) // 8
    marker -= length
    return bytes((marker & 0xFF,)) + value.to_bytes(length, "big")


def decode_vlong(buffer: bytes, offset: int = 0) -> tuple[int, int]:
    """Decode the VLQ at ``offset``; returns ``(value, size)``."""
    if offset < 0 or offset >= len(buffer):
        raise EncodingError("vlq offset outside buffer")
    first = buffer[offset]
    size = decode_vint_size(first)
    if size == 1:
        return _signed_byte(first), 1
    end = offset + size
    if end > len(buffer):
        raise EncodingError(
            f"truncated vlq: need {size} bytes, have {len(buffer) - offset}"
        )
    value = int.from_bytes(buffer[offset + 1 : end], "big")
    if is_negative_vint(first):
        value = ~value
    return value, size


def write_vlong(f: BinaryIO, value: int) -> None:
    write_exact(f, encode_vlong(value), "vlq")


def read_vlong(f: BinaryIO) -> int:
    first = read_exact(f, 1, "vlq marker")
    size = decode_vint_size(first[0])
    if size == 1:
        return _signed_byte(first[0])
    rest = read_exact(f, size - 1, "vlq body")
    value, _ = decode_vlong(first + rest)
    return value


def write_vint(f: BinaryIO, value: int) -> None:
    if value < INT32_MIN or value > INT32_MAX:
        raise EncodingError(f"value out of int32 range: {value}")
    write_vlong(f, value)


def read_vint(f: BinaryIO) -> int:
    value = read_vlong(f)
    if value < INT32_MIN or value > INT32_MAX:
        raise EncodingError(f"vlq value too long to fit in int32: {value}")
    return value
