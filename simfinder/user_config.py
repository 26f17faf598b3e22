"""
User configuration management for Similar Image Finder.

Supports configuration from multiple sources (in order of priority):
1. Command-line arguments (highest priority)
2. Environment variables
3. User config file (~/.simfinder/config.json)
4. Default values from config.py (lowest priority)

Example config.json:
{
    "threshold": 5,
    "workers": 8,
    "queue_size": 64
}
"""

import json
import os
from pathlib import Path
from typing import Any, Optional
import logging

from .config import DEFAULT_QUEUE_SIZE, DEFAULT_THRESHOLD, DEFAULT_WORKERS

logger = logging.getLogger(__name__)


class UserConfig:
    """
    Manages user configuration from file and environment variables.

    The config file is read lazily and cached until reload().
    """

    _instance: Optional['UserConfig'] = None
    _config_data: Optional[dict] = None

    def __new__(cls):
        """Singleton pattern to ensure one config instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def config_dir(self) -> Path:
        """Get the configuration directory path."""
        env_dir = os.getenv('SIMFINDER_CONFIG_DIR')
        if env_dir:
            return Path(env_dir)
        return Path.home() / '.simfinder'

    @property
    def config_file_path(self) -> Path:
        """Get the configuration file path."""
        return self.config_dir / 'config.json'

    def _load_config_file(self) -> dict:
        """Load configuration from JSON file."""
        if not self.config_file_path.exists():
            return {}

        try:
            with open(self.config_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
                logger.debug(f"Loaded configuration from {self.config_file_path}")
                return data if isinstance(data, dict) else {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load config file {self.config_file_path}: {e}")
            return {}

    def _get_config_data(self) -> dict:
        """Get cached config data (lazy loading)."""
        if self._config_data is None:
            self._config_data = self._load_config_file()
        return self._config_data

    def reload(self):
        """Reload configuration from file."""
        self._config_data = None

    def get(self, key: str, default: Any = None, env_var: Optional[str] = None) -> Any:
        """
        Get a configuration value with priority:
        1. Environment variable (if env_var specified)
        2. Config file
        3. Default value
        """
        if env_var:
            env_value = os.getenv(env_var)
            if env_value is not None:
                try:
                    return json.loads(env_value)
                except (json.JSONDecodeError, TypeError):
                    return env_value

        config_data = self._get_config_data()
        if key in config_data:
            return config_data[key]

        return default

    def get_int(self, key: str, default: int, env_var: Optional[str] = None,
                minimum: Optional[int] = None) -> int:
        """
        Like get(), falling back to default if the value is not an integer
        or is below minimum.
        """
        value = self.get(key, default=default, env_var=env_var)
        if isinstance(value, bool):
            return default
        try:
            number = int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring invalid value for {key}: {value!r}")
            return default
        if minimum is not None and number < minimum:
            logger.warning(f"Ignoring {key}={number}: must be >= {minimum}")
            return default
        return number

    @property
    def threshold(self) -> int:
        """Perceptual hash distance threshold (0-64)."""
        return self.get_int('threshold', DEFAULT_THRESHOLD, env_var='SIMFINDER_THRESHOLD', minimum=0)

    @property
    def workers(self) -> int:
        """Number of fingerprint worker threads."""
        return self.get_int('workers', DEFAULT_WORKERS, env_var='SIMFINDER_WORKERS', minimum=1)

    @property
    def queue_size(self) -> int:
        """Capacity of the discoverer -> worker channel."""
        return self.get_int('queue_size', DEFAULT_QUEUE_SIZE, env_var='SIMFINDER_QUEUE_SIZE', minimum=1)


# Global instance
_user_config = UserConfig()


def get_user_config() -> UserConfig:
    """Get the global UserConfig instance."""
    return _user_config
