"""Exhaustive sweeps cross-checked against the standard codec.

Run via: pytest -m fuzz
"""

from __future__ import annotations

from itertools import product

import pytest
from hypothesis import event, given, settings
from hypothesis import strategies as st

from tests.strategies import arbitrary_buffers
from utf8codec.codec.decoder import decode_to_escape, iter_sequences
from utf8codec.codec.escape import encode_code_point, encode_from_escape
from utf8codec.codec.validator import validate
from utf8codec.enums import ErrorPolicy
from utf8codec.text.indexer import length_in_codepoints

pytestmark = pytest.mark.fuzz


def _standard_accepts(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


@pytest.mark.fuzz
class TestEveryCodePoint:
    """Sweep U+0000..U+10FFFF."""

    def test_encode_and_validate_every_scalar_value(self) -> None:
        """Every scalar value encodes like the standard codec and validates."""
        for cp in range(0x110000):
            encoded = encode_code_point(cp)
            if 0xD800 <= cp <= 0xDFFF:
                assert not validate(encoded).is_valid, hex(cp)
                continue
            assert encoded == chr(cp).encode("utf-8"), hex(cp)
            assert validate(encoded).is_valid, hex(cp)

    def test_escape_round_trip_whole_bmp(self) -> None:
        """Every BMP scalar value survives decode_to_escape/encode_from_escape."""
        for cp in range(0x10000):
            if 0xD800 <= cp <= 0xDFFF or cp == ord("\\"):
                continue
            data = chr(cp).encode("utf-8")
            assert encode_from_escape(decode_to_escape(data)) == data, hex(cp)


@pytest.mark.fuzz
class TestEveryShortBuffer:
    """Sweep all one- and two-byte buffers."""

    def test_validate_agrees_with_standard_codec(self) -> None:
        """validate() accepts exactly the buffers the standard codec accepts."""
        for length in (1, 2):
            for raw in product(range(256), repeat=length):
                data = bytes(raw)
                assert validate(data).is_valid is _standard_accepts(data), data


@pytest.mark.fuzz
class TestArbitraryBuffers:
    """Intensive property tests over arbitrary bytes."""

    @given(arbitrary_buffers(max_size=256))
    @settings(max_examples=5000)
    def test_validate_agrees_with_standard_codec(self, data: bytes) -> None:
        """Oracle check on long buffers."""
        valid = _standard_accepts(data)
        event(f"fuzz_valid={valid}")
        assert validate(data).is_valid is valid

    @given(arbitrary_buffers(max_size=256))
    @settings(max_examples=2000)
    def test_permissive_operations_never_raise(self, data: bytes) -> None:
        """Escape rendering and permissive walks accept any input."""
        decode_to_escape(data)
        steps = list(iter_sequences(data, ErrorPolicy.PERMISSIVE))
        assert sum(s.length for s in steps) == len(data)

    @given(st.text(max_size=200))
    @settings(max_examples=2000)
    def test_length_matches_for_valid_text(self, text: str) -> None:
        """Code-point count of valid text equals its str length."""
        assert length_in_codepoints(text.encode("utf-8")) == len(text)
