"""
Taerae Configuration

Settings for the platform version plugin, optionally loaded from YAML.

Example file::

    channel_name: taerae_flutter
    platform_label: macOS
    log_level: INFO
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from taerae.errors import ConfigError


DEFAULT_CHANNEL_NAME = "taerae_flutter"

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ChannelConfig:
    """
    Configuration for the platform version plugin.

    Attributes:
        channel_name: Channel the handler is registered on
        platform_label: Replaces the detected platform label when set
        log_level: Level for the CLI log sink (None = derive from -v)
    """

    channel_name: str = DEFAULT_CHANNEL_NAME
    platform_label: Optional[str] = None
    log_level: Optional[str] = None

    def __post_init__(self) -> None:
        # loguru level names are upper case
        if isinstance(self.log_level, str):
            self.log_level = self.log_level.upper()

    def validate(self) -> Optional[str]:
        """
        Validate field values.

        Returns:
            Error message if validation fails, None otherwise
        """
        if not isinstance(self.channel_name, str) or not self.channel_name:
            return "channel_name must be a non-empty string"
        if self.platform_label is not None and not isinstance(self.platform_label, str):
            return "platform_label must be a string"
        if self.log_level is not None and self.log_level not in LOG_LEVELS:
            return f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}"
        return None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], file_path: Optional[str] = None) -> "ChannelConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(key) for key in set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}", file_path)

        config = cls(**data)
        error = config.validate()
        if error:
            raise ConfigError(error, file_path)
        return config


def load_config(path: Union[str, Path]) -> ChannelConfig:
    """
    Load configuration from a YAML file.

    An empty file yields the defaults.

    Raises:
        ConfigError: If the file is missing, not valid YAML, or has bad values
    """
    config_path = Path(path)
    if not config_path.exists():
        raise ConfigError("Config file not found", str(config_path))

    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML syntax error: {e}", str(config_path))

    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping", str(config_path))

    return ChannelConfig.from_dict(data, str(config_path))


# Default configuration
_config = ChannelConfig()


def get_config() -> ChannelConfig:
    """Get the current configuration."""
    return _config


def set_config(config: ChannelConfig) -> None:
    """Set the current configuration."""
    global _config
    _config = config


def configure(**kwargs) -> None:
    """
    Update individual settings of the current configuration.

    Unknown keys are ignored. The current configuration is kept when the
    updated one does not validate.

    Raises:
        ConfigError: If an updated value is invalid
    """
    global _config
    known = {f.name for f in fields(ChannelConfig)}
    updated = replace(_config, **{key: value for key, value in kwargs.items() if key in known})
    error = updated.validate()
    if error:
        raise ConfigError(error)
    _config = updated
