"""Immutable byte cursor infrastructure for UTF-8 walks.

Implements the immutable cursor pattern over an encoded buffer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Positions are byte offsets into a bytes object, never pointers
    - EOF is a state (is_eof), not a sentinel byte
    - Walks build a NEW cursor per sequence start; fields never change
    - Reads never go past len(source)
"""

from dataclasses import dataclass

from utf8codec.diagnostics import ErrorTemplate

__all__ = ["ByteCursor", "DecodedSequence", "ensure_bytes"]


def ensure_bytes(data: object) -> bytes:
    """Normalise a bytes-like argument to an immutable bytes object.

    Args:
        data: bytes, bytearray or memoryview

    Returns:
        The same content as bytes (no copy for bytes input)

    Raises:
        TypeError: If data is not bytes-like (str included)

    Example:
        >>> ensure_bytes(bytearray(b"hi"))
        b'hi'
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    diagnostic = ErrorTemplate.unsupported_input_type(
        type(data).__name__, "bytes, bytearray or memoryview"
    )
    raise TypeError(diagnostic.message)


@dataclass(frozen=True, slots=True)
class ByteCursor:
    """Immutable position tracker over an encoded buffer.

    Example:
        >>> cursor = ByteCursor(b"hi", 0)
        >>> cursor.current
        104
        >>> cursor.peek(1)
        105
        >>> ByteCursor(b"hi", 2).is_eof
        True
    """

    source: bytes
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if position >= source length."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> int:
        """Get the byte at the current position.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected end of input at byte {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> int | None:
        """Byte at position + offset without advancing, or None beyond EOF."""
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def slice_ahead(self, n: int) -> bytes:
        """Get up to n bytes starting at the current position."""
        return self.source[self.pos : self.pos + n]


@dataclass(frozen=True, slots=True)
class DecodedSequence:
    """One step of a UTF-8 walk: a code point and the bytes it came from.

    Attributes:
        code_point: Decoded value. For a fallback step this is the raw
            byte value, copied through unchanged.
        start: Byte offset of the lead byte
        length: Number of bytes consumed (1-4)
        fallback: True if the bytes were not a recognised sequence and
            were passed through under ErrorPolicy.PERMISSIVE

    Example:
        >>> seq = DecodedSequence(0xE9, 3, 2)
        >>> seq.end
        5
    """

    code_point: int
    start: int
    length: int
    fallback: bool = False

    @property
    def end(self) -> int:
        """Byte offset just past the sequence."""
        return self.start + self.length
