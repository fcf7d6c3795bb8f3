"""Validation result for UTF-8 conformance checks.

validate() is all-or-nothing: a buffer is either valid or rejected at its
first offending sequence. The result carries that single issue.

Python 3.13+.
"""

from dataclasses import dataclass

from .codes import Diagnostic, DiagnosticCode
from .errors import Utf8ValidationError

__all__ = [
    "ValidationIssue",
    "ValidationResult",
]


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """First offending sequence found by validate().

    Attributes:
        code: Error kind (one of the five encoding DiagnosticCodes)
        position: Byte offset of the first offending byte
        diagnostic: Full diagnostic with message and hint
    """

    code: DiagnosticCode
    position: int
    diagnostic: Diagnostic

    @staticmethod
    def from_diagnostic(diagnostic: Diagnostic) -> "ValidationIssue":
        """Build an issue from a diagnostic that carries a byte span.

        Raises:
            ValueError: If the diagnostic has no span
        """
        if diagnostic.span is None:
            msg = f"Diagnostic {diagnostic.code.name} has no byte span"
            raise ValueError(msg)
        return ValidationIssue(
            code=diagnostic.code,
            position=diagnostic.span.start,
            diagnostic=diagnostic,
        )

    def format(self) -> str:
        """Format issue as a single human-readable line."""
        return f"[{self.code.name}] at byte {self.position}: {self.diagnostic.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Immutable outcome of validate().

    Attributes:
        error: First issue found, or None when the buffer is valid UTF-8

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> bool(result)
        True

        >>> result = validate(b"\\xc1\\x81")
        >>> result.is_valid
        False
        >>> result.error.code
        <DiagnosticCode.OVERLONG_ENCODING: 1003>
        >>> result.error.position
        0
    """

    error: ValidationIssue | None = None

    @property
    def is_valid(self) -> bool:
        """True if no issue was found."""
        return self.error is None

    @property
    def code(self) -> DiagnosticCode | None:
        """Error kind of the first issue, or None when valid."""
        return self.error.code if self.error is not None else None

    @property
    def position(self) -> int | None:
        """Byte offset of the first issue, or None when valid."""
        return self.error.position if self.error is not None else None

    def __bool__(self) -> bool:
        return self.is_valid

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a result for a fully valid buffer."""
        return ValidationResult(error=None)

    @staticmethod
    def invalid(diagnostic: Diagnostic) -> "ValidationResult":
        """Create a result rejecting the buffer with the given diagnostic."""
        return ValidationResult(error=ValidationIssue.from_diagnostic(diagnostic))

    def raise_for_error(self) -> None:
        """Raise Utf8ValidationError if the buffer was rejected.

        Raises:
            Utf8ValidationError: Carrying the issue's diagnostic
        """
        if self.error is not None:
            raise Utf8ValidationError(self.error.diagnostic)

    def format(self) -> str:
        """Format validation result as human-readable string."""
        if self.error is None:
            return "Validation passed: valid UTF-8"
        return f"Validation failed: {self.error.format()}"
