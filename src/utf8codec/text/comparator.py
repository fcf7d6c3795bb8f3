"""Lexicographic comparison of UTF-8 buffers by code point.

compare() decodes both sides in lockstep and orders them by numeric code
point value. It never falls back to byte comparison, even though for
valid UTF-8 the two orders coincide.

Python 3.13+.
"""

from __future__ import annotations

from utf8codec.codec.decoder import decode_sequence
from utf8codec.core.cursor import ensure_bytes
from utf8codec.enums import ErrorPolicy, Ordering

__all__ = ["compare"]


def compare(a: bytes, b: bytes) -> Ordering:
    """Compare two encoded strings by their decoded code points.

    The first differing pair of code points decides. When one side runs
    out first, the side with bytes remaining is GREATER. Only the steps
    actually taken are decoded: compare(b"A", b"A\\xff") is LESS without
    looking at the trailing byte.

    Args:
        a: Left encoded buffer
        b: Right encoded buffer

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER

    Raises:
        Utf8DecodeError: If a decode step on either side is malformed
        TypeError: If either argument is not bytes-like

    Example:
        >>> compare(b"Hi", b"Hello")
        <Ordering.GREATER: 1>
        >>> compare("你好".encode(), "こんにちは".encode())
        <Ordering.GREATER: 1>
        >>> compare(b"", b"Hello") < 0
        True
    """
    a = ensure_bytes(a)
    b = ensure_bytes(b)
    pos_a = pos_b = 0

    while pos_a < len(a) and pos_b < len(b):
        left = decode_sequence(a, pos_a, ErrorPolicy.STRICT)
        right = decode_sequence(b, pos_b, ErrorPolicy.STRICT)
        if left.code_point != right.code_point:
            return Ordering.LESS if left.code_point < right.code_point else Ordering.GREATER
        pos_a, pos_b = left.end, right.end

    if pos_a < len(a):
        return Ordering.GREATER
    if pos_b < len(b):
        return Ordering.LESS
    return Ordering.EQUAL
