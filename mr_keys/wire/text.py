"""Length-prefixed UTF-8 text."""

from __future__ import annotations

from typing import BinaryIO

from mr_keys.core.errors import EncodingError
from mr_keys.wire.stream import read_exact, write_exact
from mr_keys.wire.vint import encode_vlong, read_vint


def encode_text(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError(f"text is not encodable as utf-8: {exc.reason}") from exc


def decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError(f"invalid utf-8 payload: {exc.reason}") from exc


def pack_string(text: str) -> bytes:
    payload = encode_text(text)
    return encode_vlong(len(payload)) + payload


def write_string(f: BinaryIO, text: str) -> int:
    """Write ``text`` with its VLQ byte length; returns bytes written."""
    data = pack_string(text)
    write_exact(f, data, "text")
    return len(data)


def read_string(f: BinaryIO) -> str:
    length = read_vint(f)
    if length < 0:
        raise EncodingError(f"negative text length: {length}")
    return decode_text(read_exact(f, length, "text payload"))
