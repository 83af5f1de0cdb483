"""Pytest configuration and shared fixtures."""

import pytest

from buildcli.cli import CLI


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove environment variables that change output defaults."""
    for name in ("NO_COLOR", "TERM", "GITHUB_ACTIONS", "FORCE_COLOR"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli() -> CLI:
    """Return a CLI with plain output and no build engine."""
    return CLI(no_color=True)
