"""Configuration file management for mcal."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

RANGE_KEYS = ("months_before", "months_after")


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "mcal" / "config.toml"


def default_config() -> dict[str, Any]:
    return {key: 0 for key in RANGE_KEYS}


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary, empty if the file doesn't exist.

    Raises:
        tomllib.TOMLDecodeError: If the file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        return {}

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_range_defaults(config: dict[str, Any]) -> tuple[int, int]:
    """Read the default months-before/months-after counts.

    Args:
        config: Configuration dictionary.

    Returns:
        Tuple of (months_before, months_after), 0 where unset.

    Raises:
        ValueError: If a value is not a non-negative integer.
    """
    values = []
    for key in RANGE_KEYS:
        value = config.get(key, 0)
        # bool is an int subclass; `months_after = true` is still a mistake
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
        values.append(value)

    months_before, months_after = values
    return months_before, months_after
