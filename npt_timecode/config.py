"""
Configuration handling for the npt-timecode command line tool
"""
import copy
import logging
import os
from typing import Dict, Any, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)


class Config:
    """Application configuration: defaults, then YAML file, then CLI args"""

    DEFAULT_CONFIG = {
        'format': 'hh:mm:ss',
        'log_level': 'WARNING',
        'formats': {
            'default': 'hh:mm:ss',
            'short': 'mm:ss',
            'seconds': 'S',
        },
    }

    # Keys merged recursively instead of replaced
    NESTED_KEYS = ('formats',)

    DEFAULT_FILENAMES = ('npt.yml', 'npt.yaml')

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize the configuration

        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    @classmethod
    def find_default_file(cls, directory: Optional[str] = None) -> Optional[str]:
        """
        Look for ``npt.yml`` or ``npt.yaml`` in ``directory`` (cwd by default)

        Returns:
            The first existing path, or None
        """
        directory = directory or os.getcwd()
        for name in cls.DEFAULT_FILENAMES:
            candidate = os.path.join(directory, name)
            if os.path.exists(candidate):
                return candidate
        return None

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a YAML file

        Args:
            config_file: Path to the configuration file

        Raises:
            ConfigError: if the file cannot be read or parsed
        """
        logger.debug("Loading configuration from %s", config_file)
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error("Failed to load configuration %s: %s", config_file, e)
            raise ConfigError(f"Error loading configuration file: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {config_file}")

        for key, value in file_config.items():
            if key in self.NESTED_KEYS and isinstance(value, dict):
                if not isinstance(self.config.get(key), dict):
                    self.config[key] = {}
                self._deep_merge(self.config[key], value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Recursively merge nested dictionaries

        Args:
            base: Dictionary to update in place
            update: Dictionary with the updates
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Update the configuration with CLI arguments.
        CLI arguments take precedence over the configuration file; None
        values are ignored.

        Args:
            args: Dictionary of CLI arguments
        """
        for key, value in args.items():
            if value is None:
                continue
            if key in self.NESTED_KEYS and isinstance(value, dict):
                if not isinstance(self.config.get(key), dict):
                    self.config[key] = {}
                self._deep_merge(self.config[key], {
                    k: v for k, v in value.items() if v is not None
                })
            else:
                self.config[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value

        Args:
            key: Configuration key
            default: Value returned when the key does not exist

        Returns:
            The configuration value
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """
        Get the whole configuration

        Returns:
            Dictionary with the full configuration
        """
        return self.config.copy()

    def resolve_format(self, fmt: Optional[str] = None) -> str:
        """
        Resolve a format preset name to its format string

        Args:
            fmt: Preset name or literal format; the configured 'format' when omitted

        Returns:
            The preset's format, or ``fmt`` itself when it names no preset
        """
        fmt = fmt or self.get('format')
        presets = self.get('formats')
        if isinstance(presets, dict) and isinstance(presets.get(fmt), str):
            return presets[fmt]
        return fmt
