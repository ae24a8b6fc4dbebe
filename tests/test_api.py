"""Tests for the module-level envperm API."""

from __future__ import annotations

from pathlib import Path

import pytest

import envperm
from envperm.config.settings import EnvPermSettings
from tests.conftest import export_lines


def test_exports() -> None:
    assert set(envperm.__all__) >= {"set", "check_or_set", "append", "append_to_end"}


def test_readme_example(home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DUMMY", raising=False)
    assert envperm.check_or_set("DUMMY", 1).ok
    assert envperm.append("PATH", "$HOME/some/cool/bin").ok
    assert envperm.append_to_end("PATH", "$HOME/some/cooler/bin").ok
    assert envperm.set("DUMMY", '"/something"').ok
    assert export_lines(home / ".bash_profile") == [
        "export DUMMY=1",
        'export PATH="$HOME/some/cool/bin:$PATH"',
        'export PATH="$PATH:$HOME/some/cooler/bin"',
        'export DUMMY="/something"',
    ]


def test_check_or_set_respects_environment(home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DUMMY", "x")
    result = envperm.check_or_set("DUMMY", 1)
    assert result.ok
    assert result.data["already_set"] is True
    assert not (home / ".bash_profile").exists()


def test_explicit_settings(tmp_path: Path) -> None:
    other = tmp_path / "other"
    other.mkdir()
    result = envperm.set("DUMMY", 1, settings=EnvPermSettings.load(home=other))
    assert result.data["path"] == str(other / ".bash_profile")


def test_errors_are_results_not_exceptions(tmp_path: Path) -> None:
    result = envperm.append("PATH", "/x", settings=EnvPermSettings.load(home=tmp_path / "nope"))
    assert result.ok is False
    assert result.error is not None
    assert result.error.code == "PROFILE_UNAVAILABLE"


def test_find_profile(home: Path) -> None:
    (home / ".profile").write_text("")
    assert envperm.find_profile().data["path"] == str(home / ".profile")


def test_blank_home_override_writes_to_home(
    home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv("ENVPERM_HOME", "")
    result = envperm.set("DUMMY", 1)
    assert result.ok
    assert result.data["path"] == str(home / ".bash_profile")
    assert not (cwd / ".bash_profile").exists()


def test_invalid_toml_is_a_result(
    home: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    bad = tmp_path / "bad.toml"
    bad.write_text("[profile\n")
    monkeypatch.setenv("ENVPERM_CONFIG", str(bad))
    result = envperm.set("DUMMY", 1)
    assert result.ok is False
    assert result.op == "set"
    assert result.error is not None
    assert result.error.code == "INVALID_CONFIG"
    assert "Invalid TOML" in result.error.message
    assert list(home.iterdir()) == []


def test_invalid_setting_is_a_result(home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVPERM_PROFILE__CANDIDATES", "[]")
    result = envperm.append_to_end("PATH", "/x")
    assert result.ok is False
    assert result.op == "append_to_end"
    assert result.error is not None
    assert result.error.code == "INVALID_CONFIG"
    assert any("at least one file" in msg for msg in result.error.detail["errors"])
    assert list(home.iterdir()) == []


def test_find_profile_invalid_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVPERM_PROFILE__CANDIDATES", "[]")
    result = envperm.find_profile()
    assert result.op == "profile"
    assert result.error is not None
    assert result.error.code == "INVALID_CONFIG"
