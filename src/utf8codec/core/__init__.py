"""Core utilities shared across codec and text layers.

This package provides the byte classifier and the immutable cursor that
both the codec layer (decode, validate, escape) and the text layer
(indexing, comparison) depend on:

    core <- codec <- text

Exports:
    ByteCursor: Immutable position tracker over an encoded buffer
    DecodedSequence: One decoded (code point, start, length) step
    ensure_bytes: Normalise bytes-like arguments

Python 3.13+.
"""

from .classifier import (
    continuation_payload,
    is_continuation,
    is_lead,
    is_overlong,
    is_surrogate,
    is_valid_code_point,
    is_valid_lead_byte,
    lead_payload,
    minimal_length,
    sequence_length,
)
from .cursor import ByteCursor, DecodedSequence, ensure_bytes

__all__ = [
    "ByteCursor",
    "DecodedSequence",
    "continuation_payload",
    "ensure_bytes",
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
