# Path: resource_lister/cli/__init__.py
"""
Resource Lister CLI Module

Command-line interface for version selection and listing.
"""

from resource_lister.cli.listing_cli import ListingCLI, main

__all__ = ['ListingCLI', 'main']
