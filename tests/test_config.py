"""Tests for mcal.config."""

import stat
from pathlib import Path

import pytest

from mcal.config import (
    create_default_config,
    get_config_path,
    get_range_defaults,
    load_config,
    save_config,
)


class TestConfigPath:
    """Tests for get_config_path."""

    def test_uses_xdg_config_home(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """Should place the config under XDG_CONFIG_HOME when set."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert get_config_path() == tmp_path / "mcal" / "config.toml"

    def test_falls_back_to_dot_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should fall back to ~/.config."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

        assert get_config_path() == Path.home() / ".config" / "mcal" / "config.toml"


class TestLoadAndSave:
    """Tests for load_config, save_config and create_default_config."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        """Should return an empty config when the file doesn't exist."""
        assert load_config(tmp_path / "missing.toml") == {}

    def test_default_config(self, tmp_path: Path) -> None:
        """Should write zero range counts."""
        config_path = tmp_path / "mcal" / "config.toml"
        create_default_config(config_path)

        assert load_config(config_path) == {"months_before": 0, "months_after": 0}

    def test_secure_permissions(self, tmp_path: Path) -> None:
        """Should restrict the file to its owner."""
        config_path = tmp_path / "config.toml"
        save_config({"months_after": 2}, config_path)

        assert stat.S_IMODE(config_path.stat().st_mode) == 0o600

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Should raise on malformed TOML."""
        import tomllib

        config_path = tmp_path / "config.toml"
        config_path.write_text("months_after = = 1\n")

        with pytest.raises(tomllib.TOMLDecodeError):
            load_config(config_path)


class TestRangeDefaults:
    """Tests for get_range_defaults."""

    def test_empty_config(self) -> None:
        """Should default both counts to zero."""
        assert get_range_defaults({}) == (0, 0)

    def test_values(self) -> None:
        """Should read both counts."""
        assert get_range_defaults({"months_before": 2, "months_after": 1}) == (2, 1)

    @pytest.mark.parametrize("value", [-1, "3", 1.5, True])
    def test_rejects_bad_values(self, value: object) -> None:
        """Should reject anything but a non-negative integer."""
        with pytest.raises(ValueError):
            get_range_defaults({"months_after": value})
