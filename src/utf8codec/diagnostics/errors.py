"""utf8codec exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class Utf8Error(Exception):
    """Base exception for all utf8codec errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize Utf8Error.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, if the error carries a diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None

    @property
    def position(self) -> int | None:
        """Byte offset of the first offending byte, if known."""
        return self.diagnostic.position if self.diagnostic is not None else None


class Utf8DecodeError(Utf8Error):
    """Malformed UTF-8 met by a strict decode step.

    Raised by compare() and by decode_sequence() under ErrorPolicy.STRICT.
    The permissive operations (decode_to_escape, encode_from_escape) never
    raise it.
    """


class Utf8ValidationError(Utf8DecodeError):
    """Validation failure converted to an exception.

    Raised by ValidationResult.raise_for_error(). validate() itself
    returns its outcome and never raises for malformed data.
    """
