"""Text layer: code-point indexing and comparison over UTF-8 buffers.

Python 3.13+.
"""

from .comparator import compare
from .indexer import char_at, char_bytes_at, length_in_codepoints, longest_run, substring

__all__ = [
    "char_at",
    "char_bytes_at",
    "compare",
    "length_in_codepoints",
    "longest_run",
    "substring",
]
