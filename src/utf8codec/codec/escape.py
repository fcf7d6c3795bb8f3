"""Escape-form text to UTF-8 bytes.

Escape-form text mixes literal characters with \\uXXXX tokens, each
naming one code point by four hex digits. The reader is loose:

    - Hex digits are read up to the first non-hex character, so "\\u41x"
      yields U+0041 followed by a literal "x".
    - A marker with no hex digit after it ("\\uZ") is copied through as
      literal text.
    - There is no escape for the backslash itself.

The four-digit width limits the notation to U+0000..U+FFFF. Supplementary
plane characters are not expressible as escapes (no surrogate pairs).

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from utf8codec.constants import (
    CONTINUATION_PAYLOAD_BITS,
    CONTINUATION_PAYLOAD_MASK,
    CONTINUATION_TAG,
    ESCAPE_HEX_WIDTH,
    ESCAPE_MARKER,
    HEX_DIGITS,
    LEAD_PATTERNS,
    MAX_FOUR_BYTE,
)
from utf8codec.core.classifier import minimal_length
from utf8codec.diagnostics import ErrorTemplate

__all__ = ["encode_code_point", "encode_from_escape"]

logger = logging.getLogger(__name__)


def encode_code_point(code_point: int) -> bytes:
    """Encode one value as a UTF-8 sequence using the standard length bands.

    The encoding is purely arithmetic: surrogates and values up to
    0x1FFFFF are written without complaint. Use is_valid_code_point()
    when only Unicode scalar values are acceptable.

    Args:
        code_point: Value in 0..0x1FFFFF

    Returns:
        1 to 4 bytes

    Raises:
        ValueError: If the value is negative or needs more than 4 bytes

    Example:
        >>> encode_code_point(0x41)
        b'A'
        >>> encode_code_point(0xE9)
        b'\\xc3\\xa9'
        >>> encode_code_point(0x20AC)
        b'\\xe2\\x82\\xac'
    """
    if code_point < 0 or code_point > MAX_FOUR_BYTE:
        diagnostic = ErrorTemplate.code_point_out_of_range(code_point)
        raise ValueError(diagnostic.message)

    length = minimal_length(code_point)
    if length == 1:
        return bytes((code_point,))

    out = bytearray(length)
    # Fill continuation bytes from the end, 6 payload bits each.
    for i in range(length - 1, 0, -1):
        out[i] = CONTINUATION_TAG | (code_point & CONTINUATION_PAYLOAD_MASK)
        code_point >>= CONTINUATION_PAYLOAD_BITS
    out[0] = LEAD_PATTERNS[length - 1][2] | code_point
    return bytes(out)


def _count_hex_digits(token: str) -> int:
    """Count leading hex digits of token, at most ESCAPE_HEX_WIDTH."""
    count = 0
    for ch in token[:ESCAPE_HEX_WIDTH]:
        if ch not in HEX_DIGITS:
            break
        count += 1
    return count


def _encode_literal_text(chunk: str) -> bytes:
    # surrogatepass keeps lone surrogates arithmetic, like encode_code_point()
    return chunk.encode("utf-8", "surrogatepass")


def _encode_literal_bytes(chunk: str) -> bytes:
    # Inverse of the latin-1 view taken in encode_from_escape()
    return chunk.encode("latin-1")


def encode_from_escape(text: str | bytes) -> bytes:
    """Convert escape-form text into UTF-8 bytes.

    Args:
        text: Escape-form text. For str input every literal character is
            emitted as its UTF-8 encoding; for bytes-like input every literal
            byte is copied through verbatim.

    Returns:
        Encoded bytes. Malformed escapes never raise (see module notes).

    Raises:
        TypeError: If text is neither str nor bytes-like

    Example:
        >>> encode_from_escape("H\\\\u00E9llo")
        b'H\\xc3\\xa9llo'
        >>> encode_from_escape(b"\\\\u0041\\\\u0042\\\\u0043")
        b'ABC'
    """
    literal: Callable[[str], bytes]
    if isinstance(text, str):
        source = text
        literal = _encode_literal_text
    elif isinstance(text, (bytes, bytearray, memoryview)):
        # latin-1 maps each byte to one character, so scanning stays byte-exact.
        source = bytes(text).decode("latin-1")
        literal = _encode_literal_bytes
    else:
        diagnostic = ErrorTemplate.unsupported_input_type(
            type(text).__name__, "str or bytes-like escape text"
        )
        raise TypeError(diagnostic.message)

    out = bytearray()
    pos = 0
    while True:
        hit = source.find(ESCAPE_MARKER, pos)
        if hit < 0:
            out += literal(source[pos:])
            break
        out += literal(source[pos:hit])

        digits_start = hit + len(ESCAPE_MARKER)
        token = source[digits_start : digits_start + ESCAPE_HEX_WIDTH]
        count = _count_hex_digits(token)

        if count == 0:
            logger.debug("Escape marker at %d has no hex digits; copied as text", hit)
            out += literal(source[hit:digits_start])
            pos = digits_start
            continue
        if count < ESCAPE_HEX_WIDTH:
            logger.debug("Short escape at %d: %d hex digit(s)", hit, count)

        out += encode_code_point(int(token[:count], 16))
        pos = digits_start + count

    return bytes(out)
