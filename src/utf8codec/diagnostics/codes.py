"""Diagnostic codes and data structures.

Defines error codes, byte spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "ByteSpan",
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Encoding errors (malformed UTF-8 byte sequences)
        2000-2999: Input errors (wrong argument types or values)
    """

    # Encoding errors (1000-1999)
    INVALID_LEAD_BYTE = 1001
    INVALID_CONTINUATION_BYTE = 1002
    OVERLONG_ENCODING = 1003
    INVALID_CODE_POINT = 1004
    UNEXPECTED_CONTINUATION_BYTE = 1005

    # Input errors (2000-2999)
    UNSUPPORTED_INPUT_TYPE = 2001
    CODE_POINT_OUT_OF_RANGE = 2002


@dataclass(frozen=True, slots=True)
class ByteSpan:
    """Byte range inside an encoded buffer.

    Note:
        Offsets count bytes, not code points. Use
        utf8codec.length_in_codepoints(data[:start]) to convert.

    Attributes:
        start: Starting byte offset (0-indexed)
        end: Ending byte offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate ByteSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"ByteSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"ByteSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Offending bytes (None for non-encoding errors)
        hint: Suggestion for fixing the error
        found: Hex rendering of the offending byte(s), e.g. "0xC0 0xAF"
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: ByteSpan | None = None
    hint: str | None = None
    found: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def position(self) -> int | None:
        """Byte offset of the first offending byte, if known."""
        return self.span.start if self.span is not None else None

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[OVERLONG_ENCODING]: Overlong 2-byte encoding of U+0041 at byte 0
              --> bytes 0..2
              = found: 0xC1 0x81
              = help: Encode U+0041 in 1 byte

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
