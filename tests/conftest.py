"""Pytest configuration for the utf8codec test suite.

Hypothesis profiles (max_examples per property):
- dev: 500. Local runs; malformed-buffer properties need the volume to
  reach every planted error kind at several offsets.
- ci: 50, derandomized, with reproduction blobs printed on failure.
- verbose: 100, with per-example output for debugging a strategy.

Selection: HYPOTHESIS_PROFILE names a profile explicitly; otherwise CI=true
selects "ci"; otherwise "dev".

    HYPOTHESIS_PROFILE=verbose pytest tests/test_codec_validator.py

Exhaustive sweeps:
tests/fuzz walks all 1,112,064 scalar values, every buffer of up to two
bytes, and long arbitrary-buffer properties. Those tests carry
@pytest.mark.fuzz and are skipped unless the marker expression names them:

    pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_PHASES, **_options)  # type: ignore[arg-type]


def _detect_profile() -> str:
    """Pick the Hypothesis profile for this run.

    An unknown HYPOTHESIS_PROFILE value is ignored rather than failing
    collection.
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE", "")
    if explicit in _PROFILES:
        return explicit
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# EXHAUSTIVE SWEEPS
# =============================================================================

_FUZZ_SKIP_REASON = "Exhaustive code-point/buffer sweep - run with: pytest -m fuzz"


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker."""
    config.addinivalue_line(
        "markers",
        "fuzz: full code-point and short-buffer sweeps (skipped unless -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip sweep tests when the -m expression does not mention fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_sweep = pytest.mark.skip(reason=_FUZZ_SKIP_REASON)
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip_sweep)
