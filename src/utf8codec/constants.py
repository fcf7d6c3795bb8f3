"""Shared constants for utf8codec.

This module provides centralized bit masks, length bands and format
constants used across the core, codec and text packages. Placing them
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Byte patterns: Masks and tags identifying lead/continuation bytes
- Code point limits: Unicode range and UTF-16 surrogate block
- Length bands: Largest code point expressible in N bytes
- Escape format: The \\uXXXX interchange notation

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Byte patterns
    "CONTINUATION_MASK",
    "CONTINUATION_TAG",
    "CONTINUATION_PAYLOAD_MASK",
    "CONTINUATION_PAYLOAD_BITS",
    "LEAD_PATTERNS",
    # Code point limits
    "MAX_CODE_POINT",
    "SURROGATE_START",
    "SURROGATE_END",
    # Length bands
    "MAX_ONE_BYTE",
    "MAX_TWO_BYTE",
    "MAX_THREE_BYTE",
    "MAX_FOUR_BYTE",
    # Escape format
    "ESCAPE_MARKER",
    "ESCAPE_HEX_WIDTH",
    "HEX_DIGITS",
    # Whitespace
    "ASCII_WHITESPACE",
]

# ============================================================================
# BYTE PATTERNS
# ============================================================================

# Continuation bytes have the form 10xxxxxx.
CONTINUATION_MASK: int = 0b1100_0000
CONTINUATION_TAG: int = 0b1000_0000
CONTINUATION_PAYLOAD_MASK: int = 0b0011_1111
CONTINUATION_PAYLOAD_BITS: int = 6

# Lead byte patterns as (length, mask, tag, payload_mask).
# A byte is a lead of `length` bytes when (byte & mask) == tag.
# Ordered by length so the first match wins.
LEAD_PATTERNS: tuple[tuple[int, int, int, int], ...] = (
    (1, 0b1000_0000, 0b0000_0000, 0b0111_1111),
    (2, 0b1110_0000, 0b1100_0000, 0b0001_1111),
    (3, 0b1111_0000, 0b1110_0000, 0b0000_1111),
    (4, 0b1111_1000, 0b1111_0000, 0b0000_0111),
)

# ============================================================================
# CODE POINT LIMITS
# ============================================================================

# Maximum valid Unicode code point per Unicode Standard.
MAX_CODE_POINT: int = 0x10FFFF

# UTF-16 surrogate block. Invalid standalone in UTF-8.
SURROGATE_START: int = 0xD800
SURROGATE_END: int = 0xDFFF

# ============================================================================
# LENGTH BANDS
# ============================================================================

# Largest value whose minimal UTF-8 encoding takes N bytes.
MAX_ONE_BYTE: int = 0x7F
MAX_TWO_BYTE: int = 0x7FF
MAX_THREE_BYTE: int = 0xFFFF
# 21 payload bits: arithmetic ceiling of a 4-byte sequence (not a valid limit).
MAX_FOUR_BYTE: int = 0x1FFFFF

# ============================================================================
# ESCAPE FORMAT
# ============================================================================

# \uXXXX: fixed four hex digits, so only the Basic Multilingual Plane
# (U+0000 to U+FFFF) can be written. Supplementary planes do not round-trip.
ESCAPE_MARKER: str = "\\u"
ESCAPE_HEX_WIDTH: int = 4

HEX_DIGITS: str = "0123456789abcdefABCDEF"

# ============================================================================
# WHITESPACE
# ============================================================================

# Run separators for longest_run(): space, tab, LF, CR.
ASCII_WHITESPACE: frozenset[int] = frozenset(b" \t\n\r")
