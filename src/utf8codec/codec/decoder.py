"""UTF-8 sequence decoding.

Every byte walk in utf8codec (validation, escape rendering, indexing,
comparison) goes through decode_sequence(). The strict/permissive
difference between call sites is the ErrorPolicy argument, not a
separate copy of the bit arithmetic.

Policies:
    STRICT: The first malformed sequence raises Utf8DecodeError with one
        of the five encoding DiagnosticCodes and its byte position.
    PERMISSIVE: A byte that does not start a complete, well-formed
        multi-byte shape (bad lead, truncated tail, non-continuation
        trailing byte) is returned as a one-byte fallback step carrying
        the raw byte value. A recognised lead followed by a byte that is
        not 10xxxxxx is therefore not decoded at all: b"\\xc3A" walks as
        0xC3 then "A", where a decoder that masks trailing bytes without
        checking them would give U+00C1. Overlong and out-of-range
        values decode as-is.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from utf8codec.constants import CONTINUATION_PAYLOAD_BITS, ESCAPE_HEX_WIDTH, ESCAPE_MARKER
from utf8codec.core.classifier import (
    continuation_payload,
    is_continuation,
    is_overlong,
    is_valid_code_point,
    lead_payload,
    minimal_length,
    sequence_length,
)
from utf8codec.core.cursor import ByteCursor, DecodedSequence, ensure_bytes
from utf8codec.diagnostics import Diagnostic, ErrorTemplate, Utf8DecodeError
from utf8codec.enums import ErrorPolicy

__all__ = ["decode_sequence", "decode_to_escape", "iter_sequences"]

logger = logging.getLogger(__name__)


def _reject(
    diagnostic: Diagnostic, cursor: ByteCursor, policy: ErrorPolicy
) -> DecodedSequence:
    """Raise under STRICT, otherwise pass the lead byte through unchanged."""
    if policy is ErrorPolicy.STRICT:
        raise Utf8DecodeError(diagnostic)
    return DecodedSequence(cursor.current, cursor.pos, 1, fallback=True)


def decode_sequence(
    data: bytes, pos: int = 0, policy: ErrorPolicy = ErrorPolicy.STRICT
) -> DecodedSequence:
    """Decode the UTF-8 sequence starting at byte offset pos.

    Checks run in this order, so the reported kind is the first that applies:
        1. Continuation byte in lead position -> UNEXPECTED_CONTINUATION_BYTE
        2. No 1/2/3/4-byte lead pattern -> INVALID_LEAD_BYTE
        3. Trailing byte missing or not 10xxxxxx -> INVALID_CONTINUATION_BYTE
        4. Value fits in fewer bytes -> OVERLONG_ENCODING
        5. Surrogate or beyond U+10FFFF -> INVALID_CODE_POINT

    Args:
        data: Encoded buffer
        pos: Byte offset of the lead byte
        policy: STRICT raises on malformed input; PERMISSIVE falls back

    Returns:
        DecodedSequence for the step

    Raises:
        Utf8DecodeError: Malformed sequence under ErrorPolicy.STRICT
        EOFError: If pos is at or past the end of data

    Example:
        >>> decode_sequence("é!".encode(), 0)
        DecodedSequence(code_point=233, start=0, length=2, fallback=False)
        >>> decode_sequence(b"\\xc3!", 0, ErrorPolicy.PERMISSIVE)
        DecodedSequence(code_point=195, start=0, length=1, fallback=True)
    """
    cursor = ByteCursor(ensure_bytes(data), pos)
    lead = cursor.current

    length = sequence_length(lead)
    if length is None:
        if is_continuation(lead):
            diagnostic = ErrorTemplate.unexpected_continuation_byte(lead, pos)
        else:
            diagnostic = ErrorTemplate.invalid_lead_byte(lead, pos)
        return _reject(diagnostic, cursor, policy)

    if length == 1:
        return DecodedSequence(lead, pos, 1)

    # Most significant chunk first: lead payload, then 6 bits per trailing byte.
    code_point = lead_payload(lead, length)
    for offset in range(1, length):
        byte = cursor.peek(offset)
        if byte is None or not is_continuation(byte):
            diagnostic = ErrorTemplate.invalid_continuation_byte(byte, pos + offset, pos)
            return _reject(diagnostic, cursor, policy)
        code_point = (code_point << CONTINUATION_PAYLOAD_BITS) | continuation_payload(byte)

    if policy is ErrorPolicy.STRICT:
        if is_overlong(lead, code_point, length):
            raise Utf8DecodeError(
                ErrorTemplate.overlong_encoding(
                    code_point, cursor.slice_ahead(length), pos, minimal_length(code_point)
                )
            )
        if not is_valid_code_point(code_point):
            raise Utf8DecodeError(
                ErrorTemplate.invalid_code_point(code_point, cursor.slice_ahead(length), pos)
            )

    return DecodedSequence(code_point, pos, length)


def iter_sequences(
    data: bytes, policy: ErrorPolicy = ErrorPolicy.STRICT
) -> Iterator[DecodedSequence]:
    """Lazily walk a buffer one decoded sequence at a time.

    The generator is finite and restartable (call again for a fresh walk).
    Under STRICT it raises Utf8DecodeError when it reaches the first
    malformed sequence; steps before it are still yielded.

    Args:
        data: Encoded buffer (bytes-like)
        policy: Error policy forwarded to decode_sequence()

    Yields:
        DecodedSequence for each step, in order, covering every byte once

    Example:
        >>> [s.code_point for s in iter_sequences("aé".encode())]
        [97, 233]
    """
    data = ensure_bytes(data)
    pos = 0
    end = len(data)
    while pos < end:
        step = decode_sequence(data, pos, policy)
        yield step
        pos = step.end


def decode_to_escape(data: bytes) -> str:
    """Render an encoded buffer as escape-form text.

    ASCII bytes are copied through as characters. Every multi-byte sequence
    becomes a \\uXXXX token with uppercase hex digits. Bytes that do not
    start a complete multi-byte shape are copied through as the character
    with the same ordinal (U+0080..U+00FF), never rejected. Call validate()
    first when the input must be well-formed.

    Only the offending lead byte is copied through. The byte after it is
    rendered on its own, so b"\\xc3A" gives "\\xc3A" rather than "\\u00C1":
    a non-continuation trailing byte is never folded into the lead's value
    and never swallowed with it.

    Note:
        The token has a fixed width of four hex digits. Code points above
        U+FFFF are written with five or six digits and cannot be read back
        by encode_from_escape().

    Args:
        data: Encoded buffer (bytes-like)

    Returns:
        Escape-form text

    Example:
        >>> decode_to_escape("Héllo".encode())
        'H\\\\u00E9llo'
    """
    parts: list[str] = []
    for step in iter_sequences(data, ErrorPolicy.PERMISSIVE):
        if step.length == 1:
            if step.fallback:
                logger.debug(
                    "Copying unrecognised byte 0x%02X at byte %d through", step.code_point, step.start
                )
            parts.append(chr(step.code_point))
        else:
            parts.append(f"{ESCAPE_MARKER}{step.code_point:0{ESCAPE_HEX_WIDTH}X}")
    return "".join(parts)
