"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from utf8codec.constants import MAX_CODE_POINT

from .codes import ByteSpan, Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate", "format_bytes"]


def format_bytes(raw: bytes) -> str:
    """Render bytes as space-separated uppercase hex, e.g. "0xC0 0xAF"."""
    return " ".join(f"0x{b:02X}" for b in raw)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistently formatted, and documents
    every failure mode of the codec in one place.
    """

    @staticmethod
    def invalid_lead_byte(byte: int, position: int) -> Diagnostic:
        """Byte matches none of the 1/2/3/4-byte lead patterns.

        Args:
            byte: The offending byte value (0xF8-0xFF)
            position: Byte offset of the offending byte

        Returns:
            Diagnostic for INVALID_LEAD_BYTE
        """
        msg = f"Invalid lead byte 0x{byte:02X} at byte {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_LEAD_BYTE,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="Lead bytes must match 0xxxxxxx, 110xxxxx, 1110xxxx or 11110xxx",
            found=format_bytes(bytes((byte,))),
        )

    @staticmethod
    def invalid_continuation_byte(
        byte: int | None, position: int, lead_position: int
    ) -> Diagnostic:
        """Expected trailing byte is missing or not of the form 10xxxxxx.

        Args:
            byte: The offending byte, or None if the buffer ended early
            position: Byte offset where the continuation byte was expected
            lead_position: Byte offset of the sequence's lead byte

        Returns:
            Diagnostic for INVALID_CONTINUATION_BYTE
        """
        if byte is None:
            msg = (
                f"Truncated sequence starting at byte {lead_position}: "
                f"expected continuation byte at byte {position}, found end of input"
            )
            return Diagnostic(
                code=DiagnosticCode.INVALID_CONTINUATION_BYTE,
                message=msg,
                span=ByteSpan(position, position),
                hint="The input ends in the middle of a multi-byte sequence",
            )
        msg = (
            f"Invalid continuation byte 0x{byte:02X} at byte {position} "
            f"(sequence starts at byte {lead_position})"
        )
        return Diagnostic(
            code=DiagnosticCode.INVALID_CONTINUATION_BYTE,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="Continuation bytes must match 10xxxxxx",
            found=format_bytes(bytes((byte,))),
        )

    @staticmethod
    def overlong_encoding(
        code_point: int, raw: bytes, position: int, minimal_length: int
    ) -> Diagnostic:
        """Sequence uses more bytes than its code point requires.

        Args:
            code_point: The reconstructed value
            raw: The complete offending sequence
            position: Byte offset of the lead byte
            minimal_length: Bytes needed by the shortest encoding

        Returns:
            Diagnostic for OVERLONG_ENCODING
        """
        msg = f"Overlong {len(raw)}-byte encoding of U+{code_point:04X} at byte {position}"
        return Diagnostic(
            code=DiagnosticCode.OVERLONG_ENCODING,
            message=msg,
            span=ByteSpan(position, position + len(raw)),
            hint=f"Encode U+{code_point:04X} in {minimal_length} byte(s)",
            found=format_bytes(raw),
        )

    @staticmethod
    def invalid_code_point(code_point: int, raw: bytes, position: int) -> Diagnostic:
        """Reconstructed value is a surrogate or beyond U+10FFFF.

        Args:
            code_point: The reconstructed value
            raw: The complete offending sequence
            position: Byte offset of the lead byte

        Returns:
            Diagnostic for INVALID_CODE_POINT
        """
        if code_point > MAX_CODE_POINT:
            msg = f"Code point 0x{code_point:X} beyond U+10FFFF at byte {position}"
            hint = "Unicode ends at U+10FFFF"
        else:
            msg = f"Surrogate code point U+{code_point:04X} at byte {position}"
            hint = "Surrogates are reserved for UTF-16 and invalid in UTF-8"
        return Diagnostic(
            code=DiagnosticCode.INVALID_CODE_POINT,
            message=msg,
            span=ByteSpan(position, position + len(raw)),
            hint=hint,
            found=format_bytes(raw),
        )

    @staticmethod
    def unexpected_continuation_byte(byte: int, position: int) -> Diagnostic:
        """Continuation byte found where a lead byte was expected.

        Args:
            byte: The offending byte value (0x80-0xBF)
            position: Byte offset of the offending byte

        Returns:
            Diagnostic for UNEXPECTED_CONTINUATION_BYTE
        """
        msg = f"Unexpected continuation byte 0x{byte:02X} at byte {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CONTINUATION_BYTE,
            message=msg,
            span=ByteSpan(position, position + 1),
            hint="A sequence cannot start with a byte of the form 10xxxxxx",
            found=format_bytes(bytes((byte,))),
        )

    @staticmethod
    def unsupported_input_type(type_name: str, expected: str) -> Diagnostic:
        """Argument is not of a supported type.

        Args:
            type_name: Name of the received type
            expected: Description of the accepted types

        Returns:
            Diagnostic for UNSUPPORTED_INPUT_TYPE
        """
        msg = f"Expected {expected}, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_INPUT_TYPE,
            message=msg,
        )

    @staticmethod
    def code_point_out_of_range(code_point: int) -> Diagnostic:
        """Value cannot be expressed in a 1-4 byte sequence.

        Args:
            code_point: The rejected value

        Returns:
            Diagnostic for CODE_POINT_OUT_OF_RANGE
        """
        msg = f"Value {code_point} cannot be encoded in at most 4 UTF-8 bytes"
        return Diagnostic(
            code=DiagnosticCode.CODE_POINT_OUT_OF_RANGE,
            message=msg,
            hint="Encodable values are 0 to 0x1FFFFF",
        )
