"""Exact-size reads and writes over binary file-like objects."""

from __future__ import annotations

import logging
from typing import BinaryIO

from mr_keys.core.errors import StreamError

logger = logging.getLogger(__name__)


def read_exact(f: BinaryIO, size: int, what: str = "data") -> bytes:
    if size < 0:
        raise StreamError(f"negative read size for {what}: {size}")
    try:
        data = f.read(size)
    except OSError as exc:
        logger.debug("read of %d bytes for %s failed: %s", size, what, exc)
        raise StreamError(f"failed to read {what}: {exc}") from exc
    if data is None:
        raise StreamError(f"no data available for {what}")
    if len(data) != size:
        raise StreamError(
            f"truncated {what}: expected {size} bytes, got {len(data)}"
        )
    return bytes(data)


def write_exact(f: BinaryIO, data: bytes, what: str = "data") -> None:
    try:
        written = f.write(data)
    except OSError as exc:
        logger.debug("write of %d bytes for %s failed: %s", len(data), what, exc)
        raise StreamError(f"failed to write {what}: {exc}") from exc
    if written is not None and written != len(data):
        raise StreamError(
            f"short write for {what}: expected {len(data)} bytes, wrote {written}"
        )
