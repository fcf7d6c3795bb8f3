"""Codec layer: UTF-8 bytes to and from escape-form text, and validation.

Exports:
    decode_sequence: Decode one sequence under an ErrorPolicy
    iter_sequences: Lazy walk over a whole buffer
    decode_to_escape: Bytes -> \\uXXXX escape-form text (permissive)
    encode_from_escape: Escape-form text -> bytes (permissive)
    encode_code_point: One value -> 1-4 UTF-8 bytes
    validate / is_valid_utf8: Strict conformance checks

Python 3.13+.
"""

from .decoder import decode_sequence, decode_to_escape, iter_sequences
from .escape import encode_code_point, encode_from_escape
from .validator import is_valid_utf8, validate

__all__ = [
    "decode_sequence",
    "decode_to_escape",
    "encode_code_point",
    "encode_from_escape",
    "is_valid_utf8",
    "iter_sequences",
    "validate",
]
