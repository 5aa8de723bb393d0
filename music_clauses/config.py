"""Configuration management for music-clauses."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from music_clauses.exceptions import (
    ConfigParseError,
    ConfigValidationError,
)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".config" / "music-clauses" / "config.toml"


@dataclass
class Config:
    """Application configuration.

    Attributes:
        database: Path to the SQLite track library used by ``search``.
        colored_output: Whether to use colored terminal output.
        whole_items: Match search terms against whole multi-value items
            instead of arbitrary substrings.
        config_path: Path where config was loaded from (None if defaults).
    """

    database: Path | None = None
    colored_output: bool = True
    whole_items: bool = True
    config_path: Path | None = None

    def validate(self) -> list[str]:
        """Validate configuration values.

        Returns:
            List of warning messages for non-fatal issues.
        """
        warnings: list[str] = []

        if self.database is not None:
            self.database = self.database.expanduser().resolve()
            # Might be created later
            if not self.database.exists():
                warnings.append(f"Track database not found: {self.database}")

        return warnings


def load_config(config_path: Path | None = None) -> tuple[Config, list[str]]:
    """Load configuration from file or use defaults.

    Args:
        config_path: Explicit config file path. If None, uses default location.

    Returns:
        Tuple of (Config object, list of warning messages).

    Raises:
        ConfigParseError: If config file exists but has invalid syntax.
        ConfigValidationError: If config values are invalid.
    """
    warnings: list[str] = []

    if config_path is None:
        config_path = get_default_config_path()

    config_path = config_path.expanduser().resolve()

    if not config_path.exists():
        config = Config()
        warnings.append(
            f"No config file found at {config_path}. Using defaults. "
            f"Create config with: music-clauses init-config"
        )
        config_warnings = config.validate()
        return config, warnings + config_warnings

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(config_path, str(e)) from e

    config = _parse_config_dict(data, config_path)
    config_warnings = config.validate()

    return config, warnings + config_warnings


def _require_bool(section: dict[str, Any], section_name: str, key: str) -> bool | None:
    if key not in section:
        return None
    value = section[key]
    if not isinstance(value, bool):
        raise ConfigValidationError(f"{section_name}.{key}", value, "must be a boolean")
    return value


def _parse_config_dict(data: dict[str, Any], config_path: Path) -> Config:
    """Parse configuration dictionary into Config object."""
    config = Config(config_path=config_path)

    # Parse [paths] section
    paths = data.get("paths", {})
    if "database" in paths:
        value = paths["database"]
        if not isinstance(value, str):
            raise ConfigValidationError("paths.database", value, "must be a string path")
        config.database = Path(value)

    # Parse [display] section
    display = data.get("display", {})
    colored_output = _require_bool(display, "display", "colored_output")
    if colored_output is not None:
        config.colored_output = colored_output

    # Parse [search] section
    search = data.get("search", {})
    whole_items = _require_bool(search, "search", "whole_items")
    if whole_items is not None:
        config.whole_items = whole_items

    return config


def save_config(config: Config, config_path: Path | None = None) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save.
        config_path: Path to save to. If None, uses config.config_path or default.
    """
    if config_path is None:
        config_path = config.config_path or get_default_config_path()

    config_path = config_path.expanduser().resolve()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "display": {
            "colored_output": config.colored_output,
        },
        "search": {
            "whole_items": config.whole_items,
        },
    }

    if config.database is not None:
        data["paths"] = {"database": str(config.database)}

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
