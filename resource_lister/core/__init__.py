# Path: resource_lister/core/__init__.py
"""
Resource Lister Core Module

Core utilities for the resource lister: configuration and logging.
"""

from .config_loader import ConfigLoader
from .logger import get_logger, configure_logging

__all__ = [
    'ConfigLoader',
    'get_logger',
    'configure_logging',
]
