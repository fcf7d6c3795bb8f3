"""Performance benchmarks for validation, escape conversion and indexing.

Every operation is a single linear scan; these benchmarks catch
regressions that would make one quadratic.

Python 3.13+.
"""

from __future__ import annotations

from utf8codec import (
    compare,
    decode_to_escape,
    encode_from_escape,
    length_in_codepoints,
    longest_run,
    substring,
    validate,
)


class TestCodecBenchmarks:
    """Benchmark the codec layer."""

    def test_validate_mixed(self, benchmark, mixed_text: bytes) -> None:
        """Benchmark strict validation of mixed-width text."""
        result = benchmark(validate, mixed_text)

        assert result.is_valid

    def test_validate_ascii(self, benchmark) -> None:
        """Benchmark strict validation of pure ASCII."""
        data = b"The quick brown fox jumps over the lazy dog. " * 400

        result = benchmark(validate, data)

        assert result.is_valid

    def test_decode_to_escape(self, benchmark, mixed_text: bytes) -> None:
        """Benchmark rendering bytes as escape-form text."""
        result = benchmark(decode_to_escape, mixed_text)

        assert result.startswith("Hello, World! Gr\\u00FC")

    def test_encode_from_escape(self, benchmark) -> None:
        """Benchmark reading escape-form text back to bytes."""
        text = "caf\\u00E9 \\u4F60\\u597D " * 1000

        result = benchmark(encode_from_escape, text)

        assert result.startswith("café 你好".encode())


class TestTextBenchmarks:
    """Benchmark the text layer."""

    def test_length_in_codepoints(self, benchmark, mixed_text: bytes) -> None:
        """Benchmark counting code points."""
        result = benchmark(length_in_codepoints, mixed_text)

        assert result == len(mixed_text.decode("utf-8"))

    def test_substring_tail(self, benchmark, mixed_text: bytes) -> None:
        """Benchmark slicing near the end of the buffer."""
        count = len(mixed_text.decode("utf-8"))

        result = benchmark(substring, mixed_text, count - 10, 10)

        assert result == mixed_text.decode("utf-8")[-10:].encode("utf-8")

    def test_longest_run(self, benchmark, mixed_text: bytes) -> None:
        """Benchmark finding the longest whitespace-free run."""
        result = benchmark(longest_run, mixed_text)

        assert result == b"Hello,"

    def test_compare_equal(self, benchmark, mixed_text: bytes) -> None:
        """Benchmark comparing two equal buffers (full walk on both sides)."""
        other = bytes(mixed_text)

        result = benchmark(compare, mixed_text, other)

        assert result == 0
