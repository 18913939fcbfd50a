"""Exception hierarchy for sort-key encoding and comparison."""


class SortKeyError(Exception):
    """Base error for sort-key failures."""


class StreamError(SortKeyError):
    """Underlying stream could not supply or accept the required bytes."""


class EncodingError(SortKeyError):
    """Malformed VLQ, length or UTF-8 payload."""


class PreconditionError(SortKeyError):
    """Caller broke a documented precondition."""
