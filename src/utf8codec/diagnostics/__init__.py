"""Diagnostic system for utf8codec errors.

Provides structured error diagnostics with codes, byte spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import ByteSpan, Diagnostic, DiagnosticCode
from .errors import Utf8DecodeError, Utf8Error, Utf8ValidationError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationIssue, ValidationResult

__all__ = [
    "ByteSpan",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "Utf8DecodeError",
    "Utf8Error",
    "Utf8ValidationError",
    "ValidationIssue",
    "ValidationResult",
]
