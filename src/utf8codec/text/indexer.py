"""Code-point indexing over UTF-8 buffers.

All offsets and counts in this module are code points, not bytes.
Out-of-range requests are answered with None or b"", never an exception,
and no function reads past len(data).

Two boundary rules are used:
    - length_in_codepoints() and char_at() count lead bytes (any byte that
      is not 10xxxxxx), so stray continuation bytes attach to the code
      point before them.
    - substring(), char_bytes_at() and longest_run() step by sequence
      width from the permissive walk, so an unrecognised byte is one step.
For valid UTF-8 both rules agree.

Thread Safety:
    Pure functions over immutable input. Safe for concurrent use.

Python 3.13+.
"""

from __future__ import annotations

from itertools import islice

from utf8codec.codec.decoder import iter_sequences
from utf8codec.constants import ASCII_WHITESPACE
from utf8codec.core.classifier import is_lead, sequence_length
from utf8codec.core.cursor import ensure_bytes
from utf8codec.enums import ErrorPolicy

__all__ = [
    "char_at",
    "char_bytes_at",
    "length_in_codepoints",
    "longest_run",
    "substring",
]


def length_in_codepoints(data: bytes) -> int:
    """Count code points by counting lead bytes.

    Example:
        >>> length_in_codepoints(b"Hello")
        5
        >>> length_in_codepoints("Hello 你好".encode())
        8
        >>> length_in_codepoints(b"")
        0
    """
    return sum(1 for byte in ensure_bytes(data) if is_lead(byte))


def char_at(data: bytes, index: int) -> int | None:
    """Find the byte offset of the code point at a code-point index.

    Args:
        data: Encoded buffer
        index: Code-point index (0-based)

    Returns:
        Byte offset of the index-th lead byte, or None if index is
        negative or at/after the end of the buffer

    Example:
        >>> char_at(b"Hello", 2)
        2
        >>> char_at("你好".encode(), 1)
        3
        >>> char_at(b"Hello", -1) is None
        True
        >>> char_at(b"Hello", 10) is None
        True
    """
    if index < 0:
        return None
    remaining = index
    for pos, byte in enumerate(ensure_bytes(data)):
        if is_lead(byte):
            if remaining == 0:
                return pos
            remaining -= 1
    return None


def char_bytes_at(data: bytes, index: int) -> bytes | None:
    """Return the encoded bytes of the code point at a code-point index.

    The slice starts at char_at(data, index) and spans sequence_length()
    of its lead byte (one byte for an unrecognised lead), clamped to the
    end of the buffer.

    Example:
        >>> char_bytes_at("aé".encode(), 1)
        b'\\xc3\\xa9'
    """
    data = ensure_bytes(data)
    pos = char_at(data, index)
    if pos is None:
        return None
    width = sequence_length(data[pos]) or 1
    return data[pos : min(pos + width, len(data))]


def substring(data: bytes, start: int, length: int) -> bytes:
    """Extract length code points starting at code point start.

    Args:
        data: Encoded buffer
        start: First code point to copy. Negative yields b"". Past the end
            yields b"" (clamped, no error).
        length: Maximum number of code points to copy. Fewer are copied if
            the buffer ends first; zero or negative yields b"".

    Returns:
        Whole encoded sequences only, as a new bytes object

    Example:
        >>> substring(b"Hello World", 6, 5)
        b'World'
        >>> substring(b"Hello", 2, 10)
        b'llo'
        >>> substring("你好 World".encode(), 0, 4).decode()
        '你好 W'
    """
    if start < 0 or length <= 0:
        return b""
    data = ensure_bytes(data)
    steps = list(islice(iter_sequences(data, ErrorPolicy.PERMISSIVE), start, start + length))
    if not steps:
        return b""
    return data[steps[0].start : steps[-1].end]


def longest_run(data: bytes) -> bytes:
    """Find the longest run of code points not broken by ASCII whitespace.

    Space, tab, LF and CR separate runs. Length is measured in code points;
    among runs of equal length the first one wins.

    Args:
        data: Encoded buffer

    Returns:
        Bytes of the longest run, or b"" if the buffer holds no
        non-whitespace code point

    Example:
        >>> longest_run(b"Hello   World!")
        b'World!'
        >>> longest_run("ab 你好吗".encode()).decode()
        '你好吗'
        >>> longest_run(b" \\t\\n")
        b''
    """
    data = ensure_bytes(data)
    best_start = best_end = best_count = 0
    run_start = run_count = 0

    for step in iter_sequences(data, ErrorPolicy.PERMISSIVE):
        if step.length == 1 and step.code_point in ASCII_WHITESPACE:
            run_count = 0
            continue
        if run_count == 0:
            run_start = step.start
        run_count += 1
        if run_count > best_count:
            best_start, best_end, best_count = run_start, step.end, run_count

    return data[best_start:best_end]
