"""Shared pytest fixtures and test helpers for envperm tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from envperm.config.settings import EnvPermSettings
from envperm.services.telemetry import _active, _enabled
from envperm.services.variables import VariableService


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Point HOME at a temp dir and hide any real envperm config.

    Every test gets this so nothing ever writes to the real profile.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for key in list(os.environ):
        if key.startswith("ENVPERM_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by the CLI."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("envperm")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    _enabled.set(False)
    _active.set(None)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def home(tmp_path: Path) -> Path:
    """The temp home directory (also exported as $HOME)."""
    return tmp_path / "home"


@pytest.fixture
def settings(home: Path) -> EnvPermSettings:
    return EnvPermSettings.load(home=home)


@pytest.fixture
def service(settings: EnvPermSettings) -> VariableService:
    """VariableService with an empty environment for check_or_set."""
    return VariableService(settings, environ={})


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def export_lines(path: Path) -> list[str]:
    """Return the ``export`` lines of a profile, in order."""
    return [line for line in path.read_text(encoding="utf-8").splitlines() if line]
