"""Error codes and exceptions raised by the hash map and its command line."""

from __future__ import annotations

from enum import IntEnum


class SmashMapErrorCode(IntEnum):
    """Reasons a hash map operation or consistency check can fail."""

    SUCCESS = 0
    STANDARD_ERRNO = 1
    FIST_KEYS = 2
    MAP_IS_NULL = 3
    MAP_IS_INVALID = 4
    BUCKETS_IS_NULL = 5
    BUCKETS_IS_INVALID = 6
    BUCKETS_SIZE_IS_ZERO = 7
    FIST_VALS = 8
    FIST_ELEM_SIZE_NEQ = 10
    NFOUND_ELEM = 11
    HASH_FUNC_IS_NULL = 12
    HASH_FUNC_IS_INVALID = 13
    FOUND_DUPLICATE = 14
    UNKNOWN = 32


_UNKNOWN_NAME = "UNKNOWN_SMASH_MAP_ERROR"


def strerror(code: int) -> str:
    """Return the symbolic name of an error code, or a fallback for unknown codes."""
    try:
        member = SmashMapErrorCode(code)
    except ValueError:
        return _UNKNOWN_NAME
    return f"SMASH_MAP_ERROR_{member.name}"


class SmashMapError(Exception):
    """Raised when a hash map operation fails; carries the error code."""

    def __init__(self, code: int, message: str | None = None) -> None:
        self.code = code
        self.message = message
        text = strerror(code)
        if message:
            text = f"{text}: {message}"
        super().__init__(text)


class FlagsError(Exception):
    """Raised when command-line options cannot be processed."""