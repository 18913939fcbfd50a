"""Float/string pair wire layout.

::

    byte 0-3   : left, IEEE-754 single precision, big-endian
    byte 4..   : VLQ length N of right's UTF-8 bytes
    byte 4+k.. : N bytes of right, UTF-8
"""

from __future__ import annotations

import struct
from typing import BinaryIO

from mr_keys.core.errors import EncodingError
from mr_keys.core.floats import FLOAT32_FMT, FLOAT32_SIZE
from mr_keys.wire.stream import read_exact, write_exact
from mr_keys.wire.text import pack_string
from mr_keys.wire.vint import decode_vint_size, decode_vlong

LEFT_OFFSET = 0
TEXT_PREFIX_OFFSET = LEFT_OFFSET + FLOAT32_SIZE
MIN_ENCODED_SIZE = TEXT_PREFIX_OFFSET + 1


def pack_float(value: float) -> bytes:
    try:
        return struct.pack(FLOAT32_FMT, value)
    except OverflowError as exc:
        raise EncodingError(f"float out of float32 range: {value}") from exc


def read_float(buffer: bytes, offset: int) -> float:
    return struct.unpack_from(FLOAT32_FMT, buffer, offset)[0]


def write_float(f: BinaryIO, value: float) -> None:
    write_exact(f, pack_float(value), "float")


def read_float_from(f: BinaryIO) -> float:
    return struct.unpack(FLOAT32_FMT, read_exact(f, FLOAT32_SIZE, "float"))[0]


def pack_pair(left: float, right: str) -> bytes:
    return pack_float(left) + pack_string(right)


def text_prefix_size(buffer: bytes, offset: int) -> int:
    """Bytes taken by the VLQ length prefix of the encoding at ``offset``."""
    return decode_vint_size(buffer[offset + TEXT_PREFIX_OFFSET])


def encoded_length_at(buffer: bytes, offset: int) -> int:
    """Total length of the pair encoding starting at ``offset``."""
    if offset + MIN_ENCODED_SIZE > len(buffer):
        raise EncodingError("truncated pair encoding")
    length, size = decode_vlong(buffer, offset + TEXT_PREFIX_OFFSET)
    if length < 0:
        raise EncodingError(f"negative text length: {length}")
    return TEXT_PREFIX_OFFSET + size + length
