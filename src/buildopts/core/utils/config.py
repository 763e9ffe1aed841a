"""Runtime configuration for buildopts."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from typing import Any

from buildopts.core.exceptions import ConversionError
from buildopts.core.options.converters import BOOLEAN
from buildopts.core.utils.logger import is_valid_level

ENV_PREFIX = "BUILDOPTS_"

_TRUE_WORDS = ("1", "true", "yes", "on")


def _coerce_setting(section_name: str, key: str, current: Any, value: Any) -> Any:
    """Coerce a file value to the type of the setting it replaces."""
    if isinstance(current, bool):
        try:
            return BOOLEAN.convert(value)
        except ConversionError as e:
            raise ValueError(f"{section_name}.{key}: {e.message}") from e
    if section_name == "logging" and key == "level" and not is_valid_level(value):
        raise ValueError(f"logging.level: unknown log level '{value}'")
    return value


@dataclass
class LoggingConfig:
    """Configuration for the buildopts logger."""

    level: str = "INFO"
    file: str | None = None


@dataclass
class RegistryConfig:
    """Configuration for registry construction."""

    # Log a warning when a later group declares a name an earlier group owns
    warn_on_shadowed_options: bool = True


@dataclass
class BuildOptsConfig:
    """
    Main configuration class for buildopts.

    Configuration loading order (highest to lowest priority):
    1. Environment variables (``BUILDOPTS_`` prefix)
    2. Configuration file (if provided)
    3. Default values
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)

    @classmethod
    def load(cls, config_file: str | None = None) -> "BuildOptsConfig":
        config = cls()
        if config_file:
            config._load_from_file(config_file)
        config._load_from_env()
        return config

    def _load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a JSON file shaped like ``to_dict()``.

        Raises:
            ValueError: If the file cannot be read or parsed
        """
        if not os.path.exists(config_file):
            return
        try:
            with open(config_file) as f:
                config_data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Could not load config file {config_file}: {e}") from e
        if not isinstance(config_data, dict):
            raise ValueError(f"Config file {config_file} must contain a JSON object")

        for section_name in ("logging", "registry"):
            section = getattr(self, section_name)
            section_data = config_data.get(section_name, {})
            if not isinstance(section_data, dict):
                raise ValueError(
                    f"Section '{section_name}' in {config_file} must be a JSON object"
                )
            for key, value in section_data.items():
                if hasattr(section, key):
                    current = getattr(section, key)
                    setattr(section, key, _coerce_setting(section_name, key, current, value))

    def _load_from_env(self) -> None:
        """
        Load configuration from environment variables.

        Supported environment variables:
        - BUILDOPTS_LOG_LEVEL: Logging level
        - BUILDOPTS_LOG_FILE: Log file path
        - BUILDOPTS_WARN_ON_SHADOWED_OPTIONS: 1/true/yes/on or 0/false/no/off
        """
        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            self.logging.level = log_level

        log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        if log_file:
            self.logging.file = log_file

        shadow_env = os.getenv(f"{ENV_PREFIX}WARN_ON_SHADOWED_OPTIONS")
        if shadow_env is not None:
            self.registry.warn_on_shadowed_options = (
                shadow_env.strip().lower() in _TRUE_WORDS
            )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# Global configuration instance
_config: BuildOptsConfig | None = None


def get_config() -> BuildOptsConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = BuildOptsConfig.load()
    return _config


def set_config(config: BuildOptsConfig | None) -> None:
    """Set the global configuration instance; ``None`` reloads on next access."""
    global _config
    _config = config


def load_config(config_file: str) -> BuildOptsConfig:
    """Load configuration from file and set as global config."""
    config = BuildOptsConfig.load(config_file)
    set_config(config)
    return config
