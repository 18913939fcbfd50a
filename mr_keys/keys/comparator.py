"""Logical and raw-byte comparators for float/string pairs."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from mr_keys.core.config import RangeCheck, range_check_from_env
from mr_keys.core.errors import EncodingError, PreconditionError
from mr_keys.wire.format import (
    MIN_ENCODED_SIZE,
    TEXT_PREFIX_OFFSET,
    encoded_length_at,
    read_float,
    text_prefix_size,
)

if TYPE_CHECKING:
    from mr_keys.keys.pair import FloatStringPair

logger = logging.getLogger(__name__)


class RawComparator(Protocol):
    def compare(
        self,
        b1: bytes,
        s1: int,
        l1: int,
        b2: bytes,
        s2: int,
        l2: int,
    ) -> int:
        """Three-way compare two encoded ranges."""


class RawComparableKey(Protocol):
    @classmethod
    def raw_comparator(cls) -> RawComparator:
        """Comparator over this key type's encodings."""

    @staticmethod
    def encoded_length_at(buffer: bytes, offset: int) -> int:
        """Length of the encoding starting at ``offset``."""


def compare_pairs(a: FloatStringPair, b: FloatStringPair) -> int:
    """
    Order by left, then by right.

    Float equality is exact and NaN is not special-cased: when either left
    is NaN the result is 1, matching the raw comparator.
    """
    a_left = a.left
    b_left = b.left
    if a_left == b_left:
        a_right = a.right
        b_right = b.right
        if a_right == b_right:
            return 0
        return -1 if a_right < b_right else 1
    return -1 if a_left < b_left else 1


def compare_bytes(
    b1: bytes,
    s1: int,
    l1: int,
    b2: bytes,
    s2: int,
    l2: int,
) -> int:
    """Unsigned lexicographic order; a strict prefix sorts first."""
    left = b1[s1 : s1 + l1]
    right = b2[s2 : s2 + l2]
    if left == right:
        return 0
    return -1 if left < right else 1


def _verify_range(buffer: bytes, offset: int, length: int, name: str) -> None:
    if offset < 0 or length < MIN_ENCODED_SIZE or offset + length > len(buffer):
        raise PreconditionError(
            f"{name} range [{offset}, {offset + length}) is not a pair encoding"
        )
    try:
        expected = encoded_length_at(buffer, offset)
    except EncodingError as exc:
        raise PreconditionError(f"{name} range has a malformed prefix: {exc}") from exc
    if expected != length:
        raise PreconditionError(
            f"{name} range length {length} does not match encoded length {expected}"
        )


class FloatStringPairComparator:
    """
    Compares two pair encodings without decoding the text.

    Both ranges must be complete encodings. With ``RangeCheck.TRUST`` a
    malformed range gives an unspecified result; ``RangeCheck.VERIFY``
    checks each range first and raises ``PreconditionError``.
    """

    __slots__ = ("check",)

    def __init__(self, check: RangeCheck | None = None) -> None:
        self.check = range_check_from_env() if check is None else RangeCheck(check)

    def __repr__(self) -> str:
        return f"FloatStringPairComparator(check={self.check.value!r})"

    def compare(
        self,
        b1: bytes,
        s1: int,
        l1: int,
        b2: bytes,
        s2: int,
        l2: int,
    ) -> int:
        if self.check == RangeCheck.VERIFY:
            try:
                _verify_range(b1, s1, l1, "first")
                _verify_range(b2, s2, l2, "second")
            except PreconditionError as exc:
                logger.debug("raw compare rejected input: %s", exc)
                raise

        this_left = read_float(b1, s1)
        that_left = read_float(b2, s2)
        if this_left == that_left:
            n1 = TEXT_PREFIX_OFFSET + text_prefix_size(b1, s1)
            n2 = TEXT_PREFIX_OFFSET + text_prefix_size(b2, s2)
            return compare_bytes(b1, s1 + n1, l1 - n1, b2, s2 + n2, l2 - n2)
        return -1 if this_left < that_left else 1

    def compare_encoded(self, a: bytes, b: bytes) -> int:
        return self.compare(a, 0, len(a), b, 0, len(b))

    def __call__(self, a: bytes, b: bytes) -> int:
        return self.compare_encoded(a, b)


def compare_encoded(a: bytes, b: bytes, check: RangeCheck | None = None) -> int:
    return FloatStringPairComparator(check).compare_encoded(a, b)
