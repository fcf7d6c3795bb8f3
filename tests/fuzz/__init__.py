"""Exhaustive and intensive tests for utf8codec.

This package contains:
- test_exhaustive: Sweeps over every code point and every short byte
  sequence, cross-checked against the standard codec

Python 3.13+.
"""
