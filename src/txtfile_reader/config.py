"""Configuration loading utilities for the text file reader."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parent / "configs" / "default.yaml"


class ConfigError(Exception):
    """Raised when configuration loading fails."""


def load_default_config() -> Dict[str, Any]:
    """Load the default job configuration.

    Returns
    -------
    Dict[str, Any]
        Parsed configuration dictionary.

    Raises
    ------
    ConfigError
        If the default configuration file is missing or cannot be parsed.
    """

    if not DEFAULT_CONFIG_PATH.exists():
        raise ConfigError(f"Default config not found at {DEFAULT_CONFIG_PATH}")
    return load_custom_config(DEFAULT_CONFIG_PATH)


def load_config(config_path: Path | None = None) -> Dict[str, Any]:
    """Load configuration from a provided path merged over the defaults.

    Parameters
    ----------
    config_path : Path | None
        Optional path to a configuration file overriding the default.

    Returns
    -------
    Dict[str, Any]
        Parsed configuration dictionary.
    """

    path = config_path or DEFAULT_CONFIG_PATH
    if path != DEFAULT_CONFIG_PATH and not path.exists():
        raise ConfigError(f"Config path does not exist: {path}")

    base = load_default_config()
    if path == DEFAULT_CONFIG_PATH:
        return base

    override = load_custom_config(path)
    return {**base, **override}


def load_custom_config(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from ``path``; an empty file yields ``{}``."""

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping, got {type(data).__name__}: {path}")
    return data
