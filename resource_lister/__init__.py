# Path: resource_lister/__init__.py
"""
Resource Lister Module

Resolves a game's CDN manifest and writes URL, checksum and detail
lists for its resource index.
"""

from .engine.coordinator import ListingCoordinator
from .cli.listing_cli import ListingCLI, main

__version__ = '1.0.0'

__all__ = ['ListingCoordinator', 'ListingCLI', 'main']
