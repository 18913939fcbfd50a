"""Byte-level building blocks: streams, VLQ, text and the pair layout."""

from __future__ import annotations

from mr_keys.wire.format import (
    MIN_ENCODED_SIZE,
    TEXT_PREFIX_OFFSET,
    encoded_length_at,
    pack_float,
    pack_pair,
    read_float,
    read_float_from,
    text_prefix_size,
    write_float,
)
from mr_keys.wire.stream import read_exact, write_exact
from mr_keys.wire.text import (
    decode_text,
    encode_text,
    pack_string,
    read_string,
    write_string,
)
from mr_keys.wire.vint import (
    INT64_MAX,
    INT64_MIN,
    MAX_VINT_SIZE,
    decode_vint_size,
    decode_vlong,
    encode_vlong,
    is_negative_vint,
    read_vint,
    read_vlong,
    vint_size,
    write_vint,
    write_vlong,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "MAX_VINT_SIZE",
    "MIN_ENCODED_SIZE",
    "TEXT_PREFIX_OFFSET",
    "decode_text",
    "decode_vint_size",
    "decode_vlong",
    "encode_text",
    "encode_vlong",
    "encoded_length_at",
    "is_negative_vint",
    "pack_float",
    "pack_pair",
    "pack_string",
    "read_exact",
    "read_float",
    "read_float_from",
    "read_string",
    "read_vint",
    "read_vlong",
    "text_prefix_size",
    "vint_size",
    "write_exact",
    "write_float",
    "write_string",
    "write_vint",
    "write_vlong",
]
