"""Float/string pair usable as a sort key."""

from __future__ import annotations

import io
from typing import Any, BinaryIO

from mr_keys.core.errors import EncodingError, PreconditionError
from mr_keys.core.floats import format_float32, to_float32
from mr_keys.core.hashing import hash_pair_i32
from mr_keys.keys.comparator import FloatStringPairComparator, compare_pairs
from mr_keys.wire import format as wire_format
from mr_keys.wire.stream import write_exact
from mr_keys.wire.text import read_string

_MISSING: Any = object()


def _coerce(left: float, right: str) -> tuple[float, str]:
    if not isinstance(right, str):
        raise TypeError(f"right must be str, not {type(right).__name__}")
    return to_float32(left), right


class FloatStringPair:
    """
    Pair of a float32 (left) and a string (right).

    The natural order is by left, then by right. ``FloatStringPair()`` is
    unset: reading its fields, encoding it or ordering it raises
    ``PreconditionError`` until ``set`` or ``read_fields`` populates it.
    Instances are not synchronized; a pair shared across threads must not
    be mutated while others read it.
    """

    __slots__ = ("_left", "_right", "_is_set")

    def __init__(self, left: float = _MISSING, right: str = _MISSING) -> None:
        self._left = 0.0
        self._right = ""
        self._is_set = False
        if left is _MISSING and right is _MISSING:
            return
        if left is _MISSING or right is _MISSING:
            raise TypeError("FloatStringPair takes both left and right or neither")
        self.set(left, right)

    def _require_set(self) -> None:
        if not self._is_set:
            raise PreconditionError("pair is unset")

    @property
    def is_set(self) -> bool:
        return self._is_set

    @property
    def left(self) -> float:
        self._require_set()
        return self._left

    @property
    def right(self) -> str:
        self._require_set()
        return self._right

    @property
    def key(self) -> float:
        return self.left

    @property
    def value(self) -> str:
        return self.right

    def get_left(self) -> float:
        return self.left

    def get_right(self) -> str:
        return self.right

    def set(self, left: float, right: str) -> "FloatStringPair":
        """Replace both elements; on a bad argument neither changes."""
        left, right = _coerce(left, right)
        self._left, self._right, self._is_set = left, right, True
        return self

    def replace(
        self, *, left: float = _MISSING, right: str = _MISSING
    ) -> "FloatStringPair":
        return FloatStringPair(
            self.left if left is _MISSING else left,
            self.right if right is _MISSING else right,
        )

    def copy(self) -> "FloatStringPair":
        out = FloatStringPair()
        out._left, out._right, out._is_set = self._left, self._right, self._is_set
        return out

    def __copy__(self) -> "FloatStringPair":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> "FloatStringPair":
        return self.copy()

    # serialization

    def write(self, f: BinaryIO) -> int:
        """Serialize to ``f``; returns bytes written."""
        data = self.to_bytes()
        write_exact(f, data, "pair")
        return len(data)

    def read_fields(self, f: BinaryIO) -> "FloatStringPair":
        """Deserialize from ``f`` into this pair; unchanged on failure."""
        left = wire_format.read_float_from(f)
        right = read_string(f)
        self._left, self._right, self._is_set = left, right, True
        return self

    @classmethod
    def read(cls, f: BinaryIO) -> "FloatStringPair":
        return cls().read_fields(f)

    def to_bytes(self) -> bytes:
        self._require_set()
        return wire_format.pack_pair(self._left, self._right)

    @classmethod
    def from_bytes(cls, data: bytes) -> "FloatStringPair":
        buf = io.BytesIO(data)
        pair = cls.read(buf)
        if buf.tell() != len(data):
            raise EncodingError(
                f"trailing bytes after pair encoding: {len(data) - buf.tell()}"
            )
        return pair

    def encoded_size(self) -> int:
        return len(self.to_bytes())

    @classmethod
    def raw_comparator(cls) -> FloatStringPairComparator:
        return FloatStringPairComparator()

    @staticmethod
    def encoded_length_at(buffer: bytes, offset: int) -> int:
        return wire_format.encoded_length_at(buffer, offset)

    # ordering and identity

    def compare_to(self, other: "FloatStringPair") -> int:
        return compare_pairs(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FloatStringPair):
            return NotImplemented
        return self._right == other._right and self._left == other._left

    def __lt__(self, other: "FloatStringPair") -> bool:
        if not isinstance(other, FloatStringPair):
            return NotImplemented
        return compare_pairs(self, other) < 0

    def __le__(self, other: "FloatStringPair") -> bool:
        if not isinstance(other, FloatStringPair):
            return NotImplemented
        return compare_pairs(self, other) <= 0

    def __gt__(self, other: "FloatStringPair") -> bool:
        if not isinstance(other, FloatStringPair):
            return NotImplemented
        return compare_pairs(self, other) > 0

    def __ge__(self, other: "FloatStringPair") -> bool:
        if not isinstance(other, FloatStringPair):
            return NotImplemented
        return compare_pairs(self, other) >= 0

    def stable_hash(self) -> int:
        return hash_pair_i32(self._left, self._right)

    def __hash__(self) -> int:
        return self.stable_hash()

    def __str__(self) -> str:
        return f"({format_float32(self._left)}, {self._right})"

    def __repr__(self) -> str:
        if not self._is_set:
            return "FloatStringPair()"
        return f"FloatStringPair(left={format_float32(self._left)}, right={self._right!r})"
