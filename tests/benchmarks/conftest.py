"""pytest-benchmark configuration for utf8codec benchmarks.

Configures benchmark defaults and shared input buffers.

Python 3.13+.
"""

from __future__ import annotations

import pytest


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add utf8codec metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "utf8codec"
    output_json["python_version"] = "3.13+"


@pytest.fixture(scope="session")
def benchmark_config():
    """Configure pytest-benchmark parameters."""
    return {
        "min_rounds": 5,  # Minimum rounds for stable results
        "min_time": 0.000005,  # 5 us minimum time per round
        "max_time": 1.0,  # 1 second maximum time
        "warmup": True,  # Warmup before timing
    }


@pytest.fixture(scope="session")
def mixed_text() -> bytes:
    """About 16 KiB of mixed-width UTF-8."""
    return ("Hello, World! Grüße 你好世界 😀 " * 400).encode("utf-8")
