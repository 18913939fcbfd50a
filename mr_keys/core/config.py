"""Runtime configuration primitives."""

from __future__ import annotations

from enum import Enum
import os

from mr_keys.core.errors import PreconditionError

RANGE_CHECK_ENV = "MR_KEYS_RANGE_CHECK"


class RangeCheck(str, Enum):
    TRUST = "trust"
    VERIFY = "verify"


def range_check_from_env(default: RangeCheck = RangeCheck.TRUST) -> RangeCheck:
    raw = os.getenv(RANGE_CHECK_ENV)
    if raw is None or raw.strip() == "":
        return default
    try:
        return RangeCheck(raw.strip().lower())
    except ValueError as exc:
        raise PreconditionError(
            f"invalid {RANGE_CHECK_ENV}: {raw!r}"
        ) from exc
