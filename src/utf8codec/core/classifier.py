"""Byte and code point classification for UTF-8.

This module provides the single source of truth for UTF-8 byte grammar,
shared by the validator (strict), the escape decoder (permissive) and the
code-point indexer (boundary detection).

UTF-8 Byte Grammar:
    0xxxxxxx                             1 byte,  U+0000..U+007F
    110xxxxx 10xxxxxx                    2 bytes, U+0080..U+07FF
    1110xxxx 10xxxxxx 10xxxxxx           3 bytes, U+0800..U+FFFF
    11110xxx 10xxxxxx 10xxxxxx 10xxxxxx  4 bytes, U+10000..U+10FFFF

Thread Safety:
    All functions in this module are pure functions with no shared state.
    Safe for concurrent use across multiple threads.

Python 3.13+.
"""

from __future__ import annotations

from utf8codec.constants import (
    CONTINUATION_MASK,
    CONTINUATION_PAYLOAD_MASK,
    CONTINUATION_TAG,
    LEAD_PATTERNS,
    MAX_CODE_POINT,
    MAX_ONE_BYTE,
    MAX_THREE_BYTE,
    MAX_TWO_BYTE,
    SURROGATE_END,
    SURROGATE_START,
)

__all__ = [
    "continuation_payload",
    "is_continuation",
    "is_lead",
    "is_overlong",
    "is_surrogate",
    "is_valid_code_point",
    "is_valid_lead_byte",
    "lead_payload",
    "minimal_length",
    "sequence_length",
]


def is_continuation(byte: int) -> bool:
    """Check if byte is a continuation byte (10xxxxxx).

    Example:
        >>> is_continuation(0x80)
        True
        >>> is_continuation(0x41)
        False
    """
    return (byte & CONTINUATION_MASK) == CONTINUATION_TAG


def is_lead(byte: int) -> bool:
    """Check if byte starts a sequence, i.e. is not a continuation byte.

    Note:
        0xF8-0xFF count as lead bytes here even though sequence_length()
        rejects them. Boundary detection only needs the 10xxxxxx test.
    """
    return (byte & CONTINUATION_MASK) != CONTINUATION_TAG


def sequence_length(lead_byte: int) -> int | None:
    """Determine sequence length from its lead byte.

    Args:
        lead_byte: First byte of a sequence

    Returns:
        1, 2, 3 or 4; None if the byte matches no lead pattern
        (continuation bytes and 0xF8-0xFF)

    Example:
        >>> sequence_length(0x41)
        1
        >>> sequence_length(0xE4)
        3
        >>> sequence_length(0xFF) is None
        True
    """
    for length, mask, tag, _ in LEAD_PATTERNS:
        if (lead_byte & mask) == tag:
            return length
    return None


def is_valid_lead_byte(byte: int, num_bytes: int) -> bool:
    """Check if byte is the lead of a multi-byte sequence of exactly num_bytes.

    Only multi-byte widths (2, 3, 4) are accepted; any other width is False.
    """
    if num_bytes < 2:
        return False
    return sequence_length(byte) == num_bytes


def lead_payload(lead_byte: int, length: int) -> int:
    """Extract the payload bits carried by a lead byte of the given length."""
    return lead_byte & LEAD_PATTERNS[length - 1][3]


def continuation_payload(byte: int) -> int:
    """Extract the six payload bits of a continuation byte."""
    return byte & CONTINUATION_PAYLOAD_MASK


def is_surrogate(code_point: int) -> bool:
    """Check if code point lies in the UTF-16 surrogate block U+D800..U+DFFF."""
    return SURROGATE_START <= code_point <= SURROGATE_END


def minimal_length(code_point: int) -> int:
    """Number of bytes in the shortest UTF-8 encoding of code_point.

    Values above U+FFFF always report 4, including values beyond
    U+10FFFF that a 4-byte sequence can still carry arithmetically.
    """
    if code_point <= MAX_ONE_BYTE:
        return 1
    if code_point <= MAX_TWO_BYTE:
        return 2
    if code_point <= MAX_THREE_BYTE:
        return 3
    return 4


def is_overlong(lead_byte: int, code_point: int, declared_length: int) -> bool:  # noqa: ARG001
    """Check if a sequence uses more bytes than its code point requires.

    Args:
        lead_byte: Lead byte of the sequence (kept for call-site symmetry
            with the validator; the verdict depends on the value only)
        code_point: Reconstructed value
        declared_length: Length announced by the lead byte

    Example:
        >>> is_overlong(0xC1, 0x41, 2)  # 'A' in two bytes
        True
        >>> is_overlong(0xC3, 0xE9, 2)  # 'é'
        False
    """
    return minimal_length(code_point) < declared_length


def is_valid_code_point(code_point: int) -> bool:
    """Check if value is a Unicode scalar value.

    Example:
        >>> is_valid_code_point(0x41)
        True
        >>> is_valid_code_point(0xD800)
        False
        >>> is_valid_code_point(0x110000)
        False
    """
    return 0 <= code_point <= MAX_CODE_POINT and not is_surrogate(code_point)
