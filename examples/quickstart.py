"""Quickstart example for utf8codec.

This example demonstrates escape conversion, validation, code-point
indexing and comparison on UTF-8 byte buffers.

Note: decode_to_escape() and encode_from_escape() never reject input.
In production, call validate() first whenever the bytes must be
well-formed UTF-8.
"""

from utf8codec import (
    DiagnosticCode,
    char_at,
    compare,
    decode_to_escape,
    encode_from_escape,
    length_in_codepoints,
    longest_run,
    substring,
    validate,
)
from utf8codec.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Escape-form text to bytes and back
print("=" * 50)
print("Example 1: Escape Conversion")
print("=" * 50)

data = encode_from_escape("Gr\\u00FC\\u00DFe \\u4F60\\u597D")
print(data)
# Output: b'Gr\xc3\xbc\xc3\x9fe \xe4\xbd\xa0\xe5\xa5\xbd'

print(decode_to_escape(data))
# Output: Gr\u00FC\u00DFe \u4F60\u597D

# Example 2: Code-point indexing
print("\n" + "=" * 50)
print("Example 2: Code-Point Indexing")
print("=" * 50)

print(length_in_codepoints(data), "code points in", len(data), "bytes")
# Output: 8 code points in 14 bytes

print(char_at(data, 6))
# Output: 8 (byte offset of the 7th code point)

print(substring(data, 6, 2).decode("utf-8"))
# Output: 你好

print(longest_run(data).decode("utf-8"))
# Output: Grüße

# Example 3: Validation
print("\n" + "=" * 50)
print("Example 3: Validation")
print("=" * 50)

for sample in (b"A", b"\xc1\x81", b"\xe4A", b"\xed\xa0\x80", b"\x80"):
    result = validate(sample)
    print(f"{sample!r:<18} {result.format()}")

result = validate(b"ok\xc0\xaf")
assert result.code is DiagnosticCode.OVERLONG_ENCODING
print()
print(DiagnosticFormatter().format_validation_result(result))
# Output:
# Validation failed
# error[OVERLONG_ENCODING]: Overlong 2-byte encoding of U+002F at byte 2
#   --> bytes 2..4
#   = found: 0xC0 0xAF
#   = help: Encode U+002F in 1 byte(s)

print(DiagnosticFormatter(output_format=OutputFormat.JSON).format_validation_result(result))

# Example 4: Comparison by code point
print("\n" + "=" * 50)
print("Example 4: Comparison")
print("=" * 50)

words = ["Zebra", "apple", "Äpfel", "你好", "こんにちは"]
for left, right in zip(words, words[1:], strict=False):
    order = compare(left.encode("utf-8"), right.encode("utf-8"))
    print(f"compare({left!r}, {right!r}) = {order.name}")
# Output:
# compare('Zebra', 'apple') = LESS
# compare('apple', 'Äpfel') = LESS
# compare('Äpfel', '你好') = LESS
# compare('你好', 'こんにちは') = GREATER
