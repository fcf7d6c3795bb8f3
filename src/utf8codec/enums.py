"""Enumerations for utf8codec type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion and IntEnum
where the value doubles as a C-style comparison result.

Python 3.13+.
"""

from enum import IntEnum, StrEnum


class ErrorPolicy(StrEnum):
    """How a byte walk reacts to malformed input.

    StrEnum provides automatic string conversion: str(ErrorPolicy.STRICT) == "strict"
    """

    STRICT = "strict"
    """Raise Utf8DecodeError at the first malformed sequence."""

    PERMISSIVE = "permissive"
    """Copy unrecognised bytes through as one-byte sequences."""


class Ordering(IntEnum):
    """Result of comparing two encoded strings by code point.

    Members compare like the integers -1, 0 and 1, so
    ``compare(a, b) < 0`` reads the same as with a C strcmp.
    """

    LESS = -1
    EQUAL = 0
    GREATER = 1


__all__ = [
    "ErrorPolicy",
    "Ordering",
]
