"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from file_manager.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.username: str = self._get_env("FM_USERNAME", "User")
        self.home_directory: str = self._get_directory(
            "FM_HOME_DIR", os.path.expanduser("~")
        )
        self.chunk_size: int = self._get_positive_int("FM_CHUNK_SIZE", 64 * 1024)
        self.wait_for_streams: bool = self._get_bool("FM_WAIT_FOR_STREAMS", True)
        self.max_workers: int = self._get_positive_int("FM_MAX_WORKERS", 4)
        self.compression_level: int = self._get_int("FM_COMPRESSION_LEVEL", 9)
        if not 0 <= self.compression_level <= 9:
            raise ConfigurationError(
                f"FM_COMPRESSION_LEVEL must be between 0 and 9, got {self.compression_level}"
            )
        self.log_level: str = self._get_env("FM_LOG_LEVEL", "WARNING").upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if malformed."""
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be an integer, got {raw!r}")

    def _get_positive_int(self, key: str, default: int) -> int:
        value = self._get_int(key, default)
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive, got {value}")
        return value

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable ("1"/"0", "true"/"false", ...)."""
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        value = raw.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ConfigurationError(f"Environment variable {key} must be a boolean, got {raw!r}")

    def _get_directory(self, key: str, default: str) -> str:
        """Get a directory path from the environment; it must exist."""
        path = os.path.abspath(os.path.expanduser(self._get_env(key, default)))
        if not os.path.isdir(path):
            raise ConfigurationError(f"{key} does not point to a directory: {path}")
        return path


# Global settings instance
settings = Settings()
