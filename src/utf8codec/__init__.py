"""utf8codec - UTF-8 codec with code-point indexing and strict validation.

Converts between raw UTF-8 bytes and \\uXXXX escape-form text, measures
and indexes text by code point rather than by byte, and validates
arbitrary byte sequences with fine-grained error classification.

Public API:
    encode_from_escape - Escape-form text to UTF-8 bytes
    decode_to_escape - UTF-8 bytes to escape-form text
    length_in_codepoints - Number of code points in a buffer
    char_at / char_bytes_at - Locate the code point at an index
    substring - Slice by code-point offset and count
    longest_run - Longest whitespace-free run of code points
    compare - Code-point lexicographic ordering
    validate / is_valid_utf8 - Strict conformance check

Exceptions:
    Utf8Error - Base exception class
    Utf8DecodeError - Malformed input met by a strict decode step
    Utf8ValidationError - Raised by ValidationResult.raise_for_error()

Submodules:
    utf8codec.core - Byte classifier and immutable byte cursor
    utf8codec.codec - Decoding, escape conversion and validation
    utf8codec.text - Code-point indexing and comparison
    utf8codec.diagnostics - Error codes, templates and formatting
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .codec import decode_to_escape, encode_from_escape, is_valid_utf8, validate
from .diagnostics import (
    DiagnosticCode,
    Utf8DecodeError,
    Utf8Error,
    Utf8ValidationError,
    ValidationResult,
)
from .enums import ErrorPolicy, Ordering
from .text import char_at, char_bytes_at, compare, length_in_codepoints, longest_run, substring

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("utf8codec")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DiagnosticCode",
    "ErrorPolicy",
    "Ordering",
    "Utf8DecodeError",
    "Utf8Error",
    "Utf8ValidationError",
    "ValidationResult",
    "__version__",
    "char_at",
    "char_bytes_at",
    "compare",
    "decode_to_escape",
    "encode_from_escape",
    "is_valid_utf8",
    "length_in_codepoints",
    "longest_run",
    "substring",
    "validate",
]
