"""IEEE-754 single precision helpers."""

from __future__ import annotations

import math
import struct

FLOAT32_FMT = ">f"
FLOAT32_SIZE = struct.calcsize(FLOAT32_FMT)

# float32 carries at most 9 significant decimal digits
_MAX_DIGITS = 9


def to_float32(value: float) -> float:
    value = float(value)
    try:
        return struct.unpack(FLOAT32_FMT, struct.pack(FLOAT32_FMT, value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def format_float32(value: float) -> str:
    """Shortest decimal text that reads back to the same float32."""
    if not math.isfinite(value):
        return repr(value)
    for digits in range(1, _MAX_DIGITS + 1):
        text = f"{value:.{digits}g}"
        if to_float32(float(text)) == value:
            return repr(float(text))
    return repr(value)
