"""Configuration loading and management."""
from typing import Optional

import yaml

from ..core.errors import ConfigError
from .config import Config
from .display_config import DisplayConfig


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: Optional[str] = None) -> Config:
        """Load configuration from a YAML file, or defaults when no path is given."""
        if config_path is None:
            return Config()

        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        # Empty file means defaults
        if config_data is None:
            return Config()
        if not isinstance(config_data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")

        try:
            display_data = config_data.pop('display', None) or {}
            if not isinstance(display_data, dict):
                raise TypeError(f"display must be a mapping, got {display_data!r}")
            display = DisplayConfig(**display_data)
            return Config(display=display, **config_data)
        except TypeError as e:
            raise ConfigError(f"Invalid config in {config_path}: {e}") from e

    @staticmethod
    def apply_overrides(config: Config, args) -> Config:
        """Apply command-line overrides on top of loaded configuration."""
        if getattr(args, 'no_color', False):
            config.display.show_colors = False
        if getattr(args, 'height', None) is not None and args.height > 0:
            config.display.graph_height = args.height
        if getattr(args, 'no_pseudo', False):
            config.include_pseudo = False
        if getattr(args, 'log_level', None):
            config.log_level = args.log_level
        if getattr(args, 'interval', None) is not None and args.interval > 0:
            config.poll_interval = args.interval
        return config
