# Path: resource_lister/list_resources.py
"""
Resource Lister - Main Entry Point

Resolves the game manifest, fetches the resource index and writes
URL, checksum and detail lists for the files that pass the
configured inclusion policy.

Architecture:
- Version discovery across configured servers
- Interactive or automatic version selection
- Listing coordinator handles workflow
- Files written to LISTER_OUTPUT_DIR (current directory by default)

Usage:
    python -m resource_lister.list_resources
    resource-lister
"""

import asyncio
import sys

from resource_lister.core.logger import configure_logging
from resource_lister.cli.listing_cli import main


def run() -> None:
    """
    Console entry point.

    Exits with status 0 on success, 1 on failure.
    """
    try:
        configure_logging()
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\n\nListing cancelled by user.")
        sys.exit(0)
    except Exception as e:
        print(f"\nFatal error: {e}")
        sys.exit(1)


if __name__ == '__main__':
    run()
