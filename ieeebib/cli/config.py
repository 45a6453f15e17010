"""Configuration management for the CLI."""

import logging
import os
from pathlib import Path
from typing import Any

import msgspec
import yaml

from ieeebib.core.models import FormatterConfig

logger = logging.getLogger(__name__)


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "ieeebib" / "config.yaml")

        # Project config
        paths.append(Path(".ieeebib.yaml"))
        paths.append(Path("ieeebib.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge multiple configuration dictionaries."""
        result = {}
        for config in configs:
            result = _deep_merge(result, config)
        return result

    @staticmethod
    def to_formatter_config(data: dict[str, Any]) -> FormatterConfig:
        """Convert raw configuration data, ignoring unknown keys."""
        try:
            return msgspec.convert(data, FormatterConfig)
        except msgspec.ValidationError as e:
            raise ValueError(f"Invalid configuration: {e}")


def get_config_paths() -> list[Path]:
    """Get configuration paths in precedence order."""
    return Config.get_config_paths()


def load_config(
    path: Path | None = None, overrides: dict[str, Any] | None = None
) -> FormatterConfig:
    """Load configuration from files, environment and explicit overrides.

    Precedence, lowest first: default file locations, ``IEEEBIB_LANG``,
    the file given as ``path``, then ``overrides``.

    Raises:
        ValueError: If the explicit file is unreadable or a value has the
            wrong type.
    """
    config: dict[str, Any] = {}

    # Load from all config paths (last one wins for conflicting keys)
    for default_path in get_config_paths():
        if default_path.exists():
            try:
                file_config = Config.from_file(default_path)
            except ValueError as e:
                logger.warning("Ignoring config file %s: %s", default_path, e)
                continue
            config = Config.merge_configs(config, file_config)

    # Override with environment variables
    env_overrides = {}
    if lang := os.environ.get("IEEEBIB_LANG"):
        env_overrides["lang"] = lang
    config = Config.merge_configs(config, env_overrides)

    if path:
        config = Config.merge_configs(config, Config.from_file(path))

    if overrides:
        config = Config.merge_configs(
            config, {k: v for k, v in overrides.items() if v is not None}
        )

    return Config.to_formatter_config(config)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
