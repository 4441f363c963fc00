# Path: resource_lister/cli/listing_cli.py
"""
Listing CLI Interface

Command-line interface for resolving a game version and writing its
resource lists.

Architecture:
- Discover versions for every configured server
- Display table with availability
- Interactive selection by number, or first available when
  interactive mode is off
- Trigger ListingCoordinator
- IPO logging throughout

Usage:
    python -m resource_lister.list_resources
"""

import asyncio
from typing import Optional

from resource_lister.core.logger import get_logger
from resource_lister.core.config_loader import ConfigLoader
from resource_lister.engine.coordinator import ListingCoordinator
from resource_lister.engine.manifest_resolver import select_version
from resource_lister.engine.errors import ListerError
from resource_lister.engine.result import ListingResult, VersionInfo
from resource_lister.constants import BYTES_PER_GIB, LOG_INPUT, LOG_OUTPUT

logger = get_logger(__name__, 'cli')

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ListingCLI:
    """
    CLI for listing game resources.

    Workflow:
    1. Query every server option for its current version
    2. Display list to user (label, version, availability)
    3. User selects a version by number (or first available is used)
    4. Execute listing via coordinator
    5. Display results

    Example:
        cli = ListingCLI()
        exit_code = await cli.run()
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        coordinator: Optional[ListingCoordinator] = None
    ):
        """Initialize listing CLI."""
        self.config = config if config else ConfigLoader()
        self.coordinator = coordinator if coordinator else ListingCoordinator(self.config)
        self.interactive = self.config.get('interactive', False)

    async def run(self) -> int:
        """
        Run CLI session.

        Returns:
            Process exit status
        """
        logger.info(f"{LOG_INPUT} Starting Listing CLI")

        try:
            print("Selecting version...")
            versions = await self.coordinator.list_versions()
            self._display_versions(versions)

            selected = self._choose_version(versions)
            if selected is None:
                print("\nListing cancelled.")
                return EXIT_SUCCESS

            print(f"\nSelected: {selected.label} ({selected.version})")
            result = await self.coordinator.run(selected.index_url)
            self._display_result(result)

            return EXIT_SUCCESS if result.success else EXIT_FAILURE

        except KeyboardInterrupt:
            print("\n\nListing interrupted by user.")
            logger.info(f"{LOG_OUTPUT} User interrupted listing")
            return EXIT_SUCCESS

        except ListerError as e:
            print(f"\nError: {e}")
            logger.error(f"CLI error: {e}")
            return EXIT_FAILURE

        finally:
            await self.coordinator.close()

    def _display_versions(self, versions: list[VersionInfo]):
        """Display discovered versions."""
        print("\n" + "=" * 60)
        print("AVAILABLE VERSIONS")
        print("=" * 60)
        print(f"\n{'#':<5} {'Server':<20} {'Version':<15} {'Status':<12}")
        print("-" * 60)

        for i, version in enumerate(versions, 1):
            status = 'OK' if version.available else 'UNAVAILABLE'
            print(f"{i:<5} {version.label:<20} {version.version:<15} {status:<12}")

        print("=" * 60)

    def _choose_version(self, versions: list[VersionInfo]) -> Optional[VersionInfo]:
        """
        Pick the version to list.

        Returns:
            Selected VersionInfo or None if the user quit

        Raises:
            ManifestLookupError: If no version is available
        """
        if not self.interactive:
            return select_version(versions)

        # Fail early instead of prompting for a list with nothing usable
        select_version(versions)

        print(f"\nEnter selection (1-{len(versions)}), blank for first available, 'q' to quit")

        while True:
            try:
                choice = input("\nSelection: ").strip().lower()
            except (KeyboardInterrupt, EOFError):
                return None

            if choice in ('q', 'quit', 'exit'):
                return None

            if not choice:
                return select_version(versions)

            try:
                return select_version(versions, int(choice))
            except ValueError:
                print("Invalid input. Please enter a number or 'q' to quit.")
            except ListerError as e:
                print(f"Invalid selection: {e}")

    def _display_result(self, result: ListingResult):
        """Display run summary."""
        print("\n" + "=" * 60)
        print("LISTING SUMMARY")
        print("=" * 60)

        if result.success:
            files = result.output_files
            print(f"Version:   {result.context.version}")
            print(f"Resources: {result.included_count}/{result.total_resources}")
            print(f"Size:      {result.total_size / BYTES_PER_GIB:.2f} GB")
            print(f"URLs:      {files.urls_file}")
            if files.checksum_file:
                print(f"Hashes:    {files.checksum_file}")
            print(f"Details:   {files.details_file}")
        else:
            print(f"Failed at {result.error_stage}: {result.error_message}")

        print(f"Duration:  {result.duration:.1f}s")
        print("=" * 60)

        logger.info(f"{LOG_OUTPUT} Listing finished: {result.to_dict()}")


async def main() -> int:
    """Main CLI entry point."""
    cli = ListingCLI()
    return await cli.run()


if __name__ == '__main__':
    raise SystemExit(asyncio.run(main()))


__all__ = ['ListingCLI', 'main']
