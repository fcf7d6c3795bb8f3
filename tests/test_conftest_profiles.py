"""Tests for the suite's Hypothesis profile selection and fuzz marker."""

from __future__ import annotations

import pytest
from hypothesis import settings

from tests.conftest import _detect_profile


class TestProfileSelection:
    """Test _detect_profile() environment handling."""

    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("HYPOTHESIS_PROFILE", raising=False)
        monkeypatch.delenv("CI", raising=False)

    def test_default_is_dev(self) -> None:
        """No environment hints select the local profile."""
        assert _detect_profile() == "dev"

    def test_ci_flag(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """CI=true selects the fast derandomized profile."""
        monkeypatch.setenv("CI", "true")
        assert _detect_profile() == "ci"

    def test_explicit_profile_wins_over_ci(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """HYPOTHESIS_PROFILE overrides CI detection."""
        monkeypatch.setenv("CI", "true")
        monkeypatch.setenv("HYPOTHESIS_PROFILE", "verbose")
        assert _detect_profile() == "verbose"

    def test_unknown_profile_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """A misspelt profile name falls back instead of failing collection."""
        monkeypatch.setenv("HYPOTHESIS_PROFILE", "nightly")
        assert _detect_profile() == "dev"

    @pytest.mark.parametrize(("name", "examples"), [("dev", 500), ("ci", 50), ("verbose", 100)])
    def test_registered_profiles(self, name: str, examples: int) -> None:
        """Each profile is registered with its example budget."""
        assert settings.get_profile(name).max_examples == examples

    def test_ci_profile_is_reproducible(self) -> None:
        """The ci profile derandomizes and prints reproduction blobs."""
        ci = settings.get_profile("ci")
        assert ci.derandomize
        assert ci.print_blob


class TestFuzzMarker:
    """Test the fuzz marker registration."""

    def test_marker_registered(self, pytestconfig: pytest.Config) -> None:
        """The marker is declared, so --strict-markers accepts it."""
        markers = pytestconfig.getini("markers")
        assert any(line.startswith("fuzz:") for line in markers)
