"""Strict UTF-8 conformance checking.

validate() is a validity oracle, not a repair pass: a single linear scan
that stops at the first malformed sequence and reports its kind and byte
position. It shares decode_sequence() with every other walk, under
ErrorPolicy.STRICT.

Thread Safety:
    Pure functions over immutable input. Safe for concurrent use.

Python 3.13+.
"""

from __future__ import annotations

import logging

from utf8codec.codec.decoder import iter_sequences
from utf8codec.core.cursor import ensure_bytes
from utf8codec.diagnostics import Utf8DecodeError, ValidationResult
from utf8codec.enums import ErrorPolicy

__all__ = ["is_valid_utf8", "validate"]

logger = logging.getLogger(__name__)


def validate(data: bytes) -> ValidationResult:
    """Check a buffer for UTF-8 conformance.

    Args:
        data: Encoded buffer (bytes-like)

    Returns:
        ValidationResult.valid() for a well-formed buffer (including the
        empty buffer); otherwise a result whose error names the first
        offending byte's kind and position

    Raises:
        TypeError: If data is not bytes-like

    Example:
        >>> validate(b"A").is_valid
        True
        >>> result = validate(b"\\xed\\xa0\\x80")
        >>> result.code.name, result.position
        ('INVALID_CODE_POINT', 0)
    """
    data = ensure_bytes(data)
    try:
        for _ in iter_sequences(data, ErrorPolicy.STRICT):
            pass
    except Utf8DecodeError as e:
        # Strict decode errors always carry a span-bearing diagnostic.
        assert e.diagnostic is not None
        logger.debug(
            "Rejected %d-byte buffer: %s at byte %s",
            len(data),
            e.diagnostic.code.name,
            e.diagnostic.position,
        )
        return ValidationResult.invalid(e.diagnostic)
    return ValidationResult.valid()


def is_valid_utf8(data: bytes) -> bool:
    """Boolean shortcut for validate(data).is_valid."""
    return validate(data).is_valid
