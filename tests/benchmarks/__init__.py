"""Performance benchmarks for utf8codec.

Benchmarks use pytest-benchmark to measure and track performance of the
linear scans: validation, escape conversion, indexing and comparison.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
