"""Configuration loading and parsing for filterbar.

This module provides the ConfigLoader class for reading TOML configuration files
and the Config dataclass for storing configuration values. Besides logging and
plugin settings, a config file can declare filter definitions directly:

    [[filters]]
    id = "status"
    name = "Status code"
    grammar = [
        { kind = "literal", text = "status" },
        { kind = "options", options = ["=", "!="] },
        { kind = "digits", digits = 3 },
    ]
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import tomli
from pydantic import ValidationError

from filterbar.models.filter_def import FilterDefinition

CONFIG_FILENAME = "filterbar.toml"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class ConfigError(Exception):
    """Exception raised for configuration parsing errors.

    Attributes:
        message: Error description
        line: Line number where error occurred (if available)
        path: Path to the config file (if available)
    """

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        path: Optional[Path] = None
    ):
        self.line = line
        self.path = path

        parts = []
        if path:
            parts.append(f"Error in {path}")
        if line is not None:
            parts.append(f"at line {line}")
        if parts:
            full_message = f"{' '.join(parts)}: {message}"
        else:
            full_message = message

        super().__init__(full_message)


@dataclass
class LoggingConfig:
    """Logging configuration settings."""

    enabled: bool = False
    level: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict) -> "LoggingConfig":
        """Create LoggingConfig from a dictionary."""
        level = str(data.get("level", "INFO")).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(
                f"Unknown log level '{level}'. Valid levels: {', '.join(LOG_LEVELS)}"
            )
        return cls(
            enabled=data.get("enabled", False),
            level=level,
        )


@dataclass
class PluginsConfig:
    """Plugin configuration settings."""

    disabled: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "PluginsConfig":
        """Create PluginsConfig from a dictionary."""
        return cls(
            disabled=list(data.get("disabled", []))
        )


@dataclass
class Config:
    """Complete filterbar configuration.

    Attributes:
        logging: Logging settings
        plugins: Plugin selection settings
        filters: Filter definitions declared in the config, in file order
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    plugins: PluginsConfig = field(default_factory=PluginsConfig)
    filters: list[FilterDefinition] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        """Create Config from a dictionary.

        Args:
            data: Dictionary parsed from TOML file

        Returns:
            Config instance with values from dictionary

        Raises:
            ConfigError: If a section holds invalid values
        """
        return cls(
            logging=LoggingConfig.from_dict(data.get("logging", {})),
            plugins=PluginsConfig.from_dict(data.get("plugins", {})),
            filters=_filters_from_list(data.get("filters", [])),
        )


def _filters_from_list(entries: list) -> list[FilterDefinition]:
    """Validate ``[[filters]]`` tables into FilterDefinition objects."""
    filters: list[FilterDefinition] = []
    for position, entry in enumerate(entries, start=1):
        try:
            definition = FilterDefinition.model_validate({"source": "config", **entry})
        except (ValidationError, TypeError) as e:
            raise ConfigError(f"Invalid filter #{position}: {e}") from e
        filters.append(definition)
    return filters


class ConfigLoader:
    """Loader for filterbar TOML configuration files.

    Example usage:
        loader = ConfigLoader()
        config = loader.load(Path("filterbar.toml"))

        # Or load defaults when no file exists
        config = loader.load(None)
    """

    def load(self, path: Optional[Path]) -> Config:
        """Load configuration from a TOML file.

        Args:
            path: Path to the TOML configuration file, or None to use defaults

        Returns:
            Config instance with values from file or defaults

        Raises:
            ConfigError: If the file exists but contains invalid TOML or values
            FileNotFoundError: If the path is specified but file doesn't exist
        """
        if path is None:
            return Config()

        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = self._read(path)
        try:
            return Config.from_dict(data)
        except ConfigError as e:
            raise ConfigError(str(e), path=path) from e

    def _read(self, path: Path) -> dict:
        try:
            return tomli.loads(path.read_text(encoding="utf-8"))
        except tomli.TOMLDecodeError as e:
            line = self._extract_line_number(str(e))
            raise ConfigError(str(e), line=line, path=path) from e

    def _extract_line_number(self, error_message: str) -> Optional[int]:
        """Extract line number from tomli error message.

        Args:
            error_message: The error message from tomli

        Returns:
            Line number if found, None otherwise
        """
        match = re.search(r"(?:at )?line (\d+)", error_message, re.IGNORECASE)
        if match:
            return int(match.group(1))
        return None

    def discover_configs(self, start_path: Optional[Path] = None) -> list[Path]:
        """Discover configuration files in order of precedence.

        Precedence order (lowest to highest):
        1. User config: ~/.config/filterbar/config.toml
        2. Local (start_path): <start_path>/filterbar.toml

        Args:
            start_path: Directory for the local config search. If None,
                uses current working directory.

        Returns:
            List of existing config file paths in precedence order (lowest first).
        """
        if start_path is None:
            start_path = Path.cwd()
        else:
            start_path = Path(start_path).resolve()

        configs: list[Path] = []

        user_config = Path(os.path.expanduser("~")) / ".config" / "filterbar" / "config.toml"
        if user_config.exists():
            configs.append(user_config)

        local_config = start_path / CONFIG_FILENAME
        if local_config.exists():
            if local_config.resolve() not in [c.resolve() for c in configs]:
                configs.append(local_config)

        return configs

    def load_merged(self, start_path: Optional[Path] = None) -> Config:
        """Load and merge configuration from all discovered config files.

        Later (higher precedence) files override values from earlier files.
        Tables merge recursively; lists, including ``[[filters]]``, are
        replaced entirely.

        Args:
            start_path: Starting directory for config discovery. If None,
                uses current working directory.

        Returns:
            Config instance with merged values from all sources.

        Raises:
            ConfigError: If any config file contains invalid TOML or values.
        """
        merged_data: dict = {}
        config_paths = self.discover_configs(start_path)

        for config_path in config_paths:
            merged_data = self._deep_merge(merged_data, self._read(config_path))

        try:
            return Config.from_dict(merged_data)
        except ConfigError as e:
            path = config_paths[-1] if len(config_paths) == 1 else None
            raise ConfigError(str(e), path=path) from e

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge two dictionaries.

        Values from override take precedence over base. Nested dictionaries
        are merged recursively. Lists and other values are replaced entirely.
        """
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
