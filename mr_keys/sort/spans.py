"""Encoded key spans inside a shared buffer."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator

from mr_keys.core.errors import EncodingError
from mr_keys.keys.comparator import RawComparableKey
from mr_keys.keys.pair import FloatStringPair

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class KeySpan:
    buffer: bytes
    offset: int
    length: int

    def to_bytes(self) -> bytes:
        return bytes(self.buffer[self.offset : self.offset + self.length])


def iter_key_spans(
    buffer: bytes,
    key_type: type[RawComparableKey] = FloatStringPair,
) -> Iterator[KeySpan]:
    """Split back-to-back key encodings into spans, in buffer order."""
    offset = 0
    total = len(buffer)
    count = 0
    while offset < total:
        length = key_type.encoded_length_at(buffer, offset)
        if offset + length > total:
            raise EncodingError(
                f"truncated key at offset {offset}: need {length} bytes, "
                f"have {total - offset}"
            )
        yield KeySpan(buffer, offset, length)
        offset += length
        count += 1
    logger.debug("split %d key spans from %d bytes", count, total)
