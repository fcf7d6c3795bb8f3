"""Hypothesis strategies for utf8codec property-based testing.

Strategies are organized by domain:

- utf8: Well-formed and malformed encoded buffers, code points and
  escape-form text

Usage:
    from tests.strategies import bmp_text, malformed_buffers
    from tests.strategies.utf8 import scalar_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - malformed_buffers, code_points_by_width, escape_text
"""

from .utf8 import (
    arbitrary_buffers,
    bmp_text,
    code_points_by_width,
    escape_text,
    malformed_buffers,
    scalar_values,
    unicode_text,
)

__all__ = [
    "arbitrary_buffers",
    "bmp_text",
    "code_points_by_width",
    "escape_text",
    "malformed_buffers",
    "scalar_values",
    "unicode_text",
]
