# Path: resource_lister/core/config_loader.py
"""
Resource Lister Configuration Loader

Centralized configuration management for the Resource Lister module.
Loads and validates environment variables with type safety and defaults.

Architecture:
- Singleton pattern for global configuration
- Type-safe access with validation
- Defaults match the launcher layout (CDN mirror 1, default channel)
- Optional .env at the project root
"""

import os
from typing import Any, Optional
from pathlib import Path
from dotenv import load_dotenv

from resource_lister.constants import (
    ENV_INDIRECTION_URL,
    ENV_USE_BUILTIN_SERVERS,
    ENV_RELEASE_CHANNEL,
    ENV_CDN_INDEX,
    ENV_REQUEST_TIMEOUT,
    ENV_CONNECT_TIMEOUT,
    ENV_USER_AGENT,
    ENV_INCLUDE_ALL_FILES,
    ENV_BIGPAKS_ONLY,
    ENV_BIGPAKS_MIN_SIZE,
    ENV_INCLUDE_EXTENSIONS,
    ENV_MIN_FILE_SIZE,
    ENV_CHECKSUM_MODE,
    ENV_OUTPUT_DIR,
    ENV_NAME_PREFIX,
    ENV_INTERACTIVE,
    ENV_LOG_LEVEL,
    ENV_LOG_CONSOLE,
    ENV_LOG_DIR,
    DEFAULT_INDIRECTION_URL,
    CHANNEL_DEFAULT,
    DEFAULT_CDN_INDEX,
    DEFAULT_TIMEOUT,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_INCLUDE_ALL_FILES,
    DEFAULT_BIGPAKS_ONLY,
    DEFAULT_BIGPAKS_MIN_SIZE,
    DEFAULT_INCLUDE_EXTENSIONS,
    DEFAULT_MIN_FILE_SIZE,
    DEFAULT_CHECKSUM_MODE,
    CHECKSUM_MODES,
    DEFAULT_NAME_PREFIX,
    DEFAULT_USER_AGENT,
)


class ConfigLoader:
    """
    Singleton configuration loader.

    Loads configuration from environment variables with validation,
    type conversion, and sensible defaults.

    Example:
        config = ConfigLoader()
        channel = config.get('release_channel')
        cdn_index = config.get('cdn_index')
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern.
        """
        if ConfigLoader._initialized:
            return

        # config_loader.py is at: <root>/resource_lister/core/config_loader.py
        # .env is at: <root>/.env
        current_file = Path(__file__).resolve()
        project_root = current_file.parent.parent.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next instance re-reads the environment."""
        cls._instance = None
        cls._initialized = False

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load and validate all configuration from environment.

        Returns:
            Dictionary of validated configuration values

        Raises:
            ValueError: If configuration is invalid
        """
        config = {
            # ================================================================
            # MANIFEST SOURCES
            # ================================================================
            'indirection_url': self._get_env(ENV_INDIRECTION_URL, DEFAULT_INDIRECTION_URL),
            'use_builtin_servers': self._get_bool(ENV_USE_BUILTIN_SERVERS, False),
            'release_channel': self._get_env(ENV_RELEASE_CHANNEL, CHANNEL_DEFAULT),
            'cdn_index': self._get_int(ENV_CDN_INDEX, DEFAULT_CDN_INDEX),

            # ================================================================
            # NETWORK CONFIGURATION
            # ================================================================
            'request_timeout': self._get_int(ENV_REQUEST_TIMEOUT, DEFAULT_TIMEOUT),
            'connect_timeout': self._get_int(ENV_CONNECT_TIMEOUT, DEFAULT_CONNECT_TIMEOUT),
            'user_agent': self._get_env(ENV_USER_AGENT, DEFAULT_USER_AGENT),

            # ================================================================
            # INCLUSION POLICY
            # ================================================================
            'include_all_files': self._get_bool(ENV_INCLUDE_ALL_FILES, DEFAULT_INCLUDE_ALL_FILES),
            'big_paks_only': self._get_bool(ENV_BIGPAKS_ONLY, DEFAULT_BIGPAKS_ONLY),
            'big_paks_min_size': self._get_int(ENV_BIGPAKS_MIN_SIZE, DEFAULT_BIGPAKS_MIN_SIZE),
            'include_extensions': self._get_list(ENV_INCLUDE_EXTENSIONS, DEFAULT_INCLUDE_EXTENSIONS),
            'min_file_size': self._get_int(ENV_MIN_FILE_SIZE, DEFAULT_MIN_FILE_SIZE),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'checksum_mode': self._get_choice(ENV_CHECKSUM_MODE, DEFAULT_CHECKSUM_MODE, CHECKSUM_MODES),
            'output_dir': self._get_path(ENV_OUTPUT_DIR) or Path.cwd(),
            'name_prefix': self._get_env(ENV_NAME_PREFIX, DEFAULT_NAME_PREFIX),

            # ================================================================
            # CLI CONFIGURATION
            # ================================================================
            'interactive': self._get_bool(ENV_INTERACTIVE, False),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_level': self._get_env(ENV_LOG_LEVEL, 'INFO'),
            'log_console': self._get_bool(ENV_LOG_CONSOLE, True),
            'log_dir': self._get_path(ENV_LOG_DIR),
        }

        return config

    def _get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """
        Get string environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            Environment variable value or default
        """
        value = os.getenv(key)

        if value is None:
            return default

        return value.strip()

    def _get_bool(self, key: str, default: bool) -> bool:
        """
        Get boolean environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            Boolean value
        """
        value = os.getenv(key)
        if value is None:
            return default

        return value.strip().lower() in ('true', '1', 'yes', 'on')

    def _get_int(self, key: str, default: int) -> int:
        """
        Get integer environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found or invalid

        Returns:
            Integer value
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value.strip())
        except ValueError:
            return default

    def _get_list(self, key: str, default: list) -> list[str]:
        """
        Get comma-separated list environment variable.

        Entries are stripped and lowercased; empty entries are dropped.

        Args:
            key: Environment variable name
            default: Default list if not found

        Returns:
            List of strings
        """
        value = os.getenv(key)
        if value is None:
            return list(default)

        return [item.strip().lower() for item in value.split(',') if item.strip()]

    def _get_choice(self, key: str, default: str, choices: set) -> str:
        """
        Get environment variable restricted to a set of values.

        Raises:
            ValueError: If the value is not one of the allowed choices
        """
        value = self._get_env(key, default).lower()
        if value not in choices:
            raise ValueError(
                f"Invalid value for {key}: {value!r} (expected one of {sorted(choices)})"
            )
        return value

    def _get_path(self, key: str) -> Optional[Path]:
        """
        Get path environment variable.

        Args:
            key: Environment variable name

        Returns:
            Path object or None when unset or blank
        """
        value = os.getenv(key)

        if value is None or not value.strip():
            return None

        return Path(value.strip())

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Default value if not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Override a configuration value for the current process."""
        self._config[key] = value

    def __getitem__(self, key: str) -> Any:
        """Dictionary-style access to configuration."""
        return self._config[key]


__all__ = ['ConfigLoader']
