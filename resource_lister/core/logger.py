# Path: resource_lister/core/logger.py
"""
Resource Lister Logger

Centralized logging configuration for the resource lister module.

Architecture:
- Component-based logging (core, engine, cli)
- Console output plus optional activity/error log files
- Configurable log levels
- IPO (Input-Process-Output) structured logging
"""

import logging
from typing import Optional

from resource_lister.core.config_loader import ConfigLoader
from resource_lister.constants import (
    LOG_FORMAT,
    LOG_DATE_FORMAT,
    LOG_ACTIVITY_FILENAME,
    LOG_ERRORS_FILENAME,
    LOGGER_ROOT,
    LOGGER_CORE,
    LOGGER_ENGINE,
    LOGGER_CLI,
)


class ListerLogger:
    """
    Centralized logger for resource lister module.

    Provides component-specific loggers with unified configuration.

    Example:
        logger = get_logger(__name__, 'engine')
        logger.info("[INPUT] Fetching manifest")
        logger.info("[PROCESS] Filtering 31204 resources")
        logger.info("[OUTPUT] Wrote 3 files")
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize lister logger.

        Args:
            config: Optional ConfigLoader instance
        """
        self._config = config
        self._configured = False

    @property
    def config(self) -> ConfigLoader:
        """Configuration is resolved lazily so importing never reads the environment."""
        if self._config is None:
            self._config = ConfigLoader()
        return self._config

    def configure(self) -> None:
        """Configure logging system for resource lister module."""
        if self._configured:
            return

        log_dir = self.config.get('log_dir')
        log_level = self.config.get('log_level', 'INFO')
        console_output = self.config.get('log_console', True)
        level = getattr(logging, log_level.upper(), logging.INFO)
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        logger = logging.getLogger(LOGGER_ROOT)
        logger.setLevel(level)

        # Clear any existing handlers
        logger.handlers.clear()

        if log_dir:
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_dir / LOG_ACTIVITY_FILENAME)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

            # Error-only log file
            error_handler = logging.FileHandler(log_dir / LOG_ERRORS_FILENAME)
            error_handler.setLevel(logging.ERROR)
            error_handler.setFormatter(formatter)
            logger.addHandler(error_handler)

        if console_output:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

        self._configured = True

    def get_logger(self, name: str, component: str = 'core') -> logging.Logger:
        """
        Get logger for specific component.

        Handlers are attached on the first call to configure(), not here,
        so module-level loggers can be created at import time.

        Args:
            name: Module name (typically __name__)
            component: Component type ('core', 'engine', 'cli')

        Returns:
            Logger instance
        """
        if component == 'core':
            logger_name = f"{LOGGER_CORE}.{name}"
        elif component == 'engine':
            logger_name = f"{LOGGER_ENGINE}.{name}"
        elif component == 'cli':
            logger_name = f"{LOGGER_CLI}.{name}"
        else:
            logger_name = f"{LOGGER_ROOT}.{name}"

        return logging.getLogger(logger_name)


# Global logger instance
_lister_logger = ListerLogger()


def get_logger(name: str, component: str = 'core') -> logging.Logger:
    """
    Get logger for resource lister component.

    Args:
        name: Module name (typically __name__)
        component: Component type ('core', 'engine', 'cli')

    Returns:
        Logger instance

    Example:
        from resource_lister.core.logger import get_logger

        logger = get_logger(__name__, 'engine')
        logger.info("[INPUT] Resolving manifest for live/os")
    """
    return _lister_logger.get_logger(name, component)


def configure_logging(config: Optional[ConfigLoader] = None) -> None:
    """
    Configure resource lister logging system.

    Call this once from the entry point.

    Args:
        config: Optional ConfigLoader instance
    """
    global _lister_logger

    if config:
        _lister_logger = ListerLogger(config)

    _lister_logger.configure()


__all__ = ['get_logger', 'configure_logging', 'ListerLogger']
