"""Tests for config file discovery."""

from pathlib import Path

import pytest

from envperm.config.discovery import CONFIG_FILENAME, default_config_path, find_config


class TestDefaultConfigPath:
    def test_uses_xdg_config_home(self, tmp_path: Path) -> None:
        assert default_config_path() == tmp_path / "xdg" / "envperm" / CONFIG_FILENAME

    def test_falls_back_to_dot_config(
        self, home: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME")
        assert default_config_path() == home / ".config" / "envperm" / CONFIG_FILENAME

    def test_none_without_home(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("XDG_CONFIG_HOME")
        monkeypatch.delenv("HOME")
        assert default_config_path() is None


class TestFindConfig:
    def test_returns_none_when_not_found(self) -> None:
        assert find_config() is None

    def test_finds_default_location(self, tmp_path: Path) -> None:
        path = tmp_path / "xdg" / "envperm" / CONFIG_FILENAME
        path.parent.mkdir(parents=True)
        path.write_text("")
        assert find_config() == path

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("")
        monkeypatch.setenv("ENVPERM_CONFIG", str(custom))
        assert find_config() == custom

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        default = tmp_path / "xdg" / "envperm" / CONFIG_FILENAME
        default.parent.mkdir(parents=True)
        default.write_text("")
        monkeypatch.setenv("ENVPERM_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config() is None
