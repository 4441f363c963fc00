# Path: resource_lister/engine/coordinator.py
"""
Listing Coordinator

Main workflow orchestrator for resource listing.
Coordinates: version discovery -> manifest -> CDN -> index -> filter -> emit.

Architecture:
- Strictly sequential, one awaited fetch at a time
- Per-run RunContext carries the resolved version to emission
- Any failure before emission aborts with no output written
- IPO logging throughout
"""

import time
from typing import Optional

from resource_lister.core.logger import get_logger
from resource_lister.core.config_loader import ConfigLoader
from resource_lister.engine.protocol_handlers import HTTPHandler
from resource_lister.engine.manifest_resolver import ManifestResolver, select_version
from resource_lister.engine.resource_index import fetch_resource_index
from resource_lister.engine.emitter import aggregate, emit
from resource_lister.engine.errors import ListerError, SchemaError
from resource_lister.engine.result import (
    InclusionPolicy,
    ListingResult,
    ManifestChannel,
    RunContext,
    ServerOption,
    VersionInfo,
)
from resource_lister.constants import (
    SERVER_OPTIONS,
    CHANNEL_DEFAULT,
    DEFAULT_CDN_INDEX,
    DEFAULT_CHECKSUM_MODE,
    DEFAULT_NAME_PREFIX,
    BYTES_PER_GIB,
    STAGE_VERSIONS,
    STAGE_MANIFEST,
    STAGE_CDN,
    STAGE_INDEX,
    STAGE_EMIT,
    LOG_INPUT,
    LOG_PROCESS,
    LOG_OUTPUT,
)

logger = get_logger(__name__, 'engine')


def build_run_context(manifest_url: str, channel: ManifestChannel, cdn_index: int) -> RunContext:
    """
    Select the configured CDN mirror and derive absolute URLs.

    Paths are joined by plain concatenation, matching the URLs the
    official launcher builds.

    Raises:
        SchemaError: If cdn_index is outside the manifest's CDN list
    """
    if not 0 <= cdn_index < len(channel.cdn_list):
        raise SchemaError(
            f"CDN index {cdn_index} not available "
            f"(channel '{channel.name}' lists {len(channel.cdn_list)} mirrors)"
        )

    cdn_url = channel.cdn_list[cdn_index].url

    return RunContext(
        manifest_url=manifest_url,
        channel=channel,
        cdn_url=cdn_url,
        resource_index_url=cdn_url + channel.resources_path,
        resource_base_url=cdn_url + channel.resources_base_path,
    )


class ListingCoordinator:
    """
    Coordinates a complete listing run.

    Workflow:
    1. Discover versions and select a manifest (unless one is given)
    2. Resolve the configured release channel
    3. Select the configured CDN mirror
    4. Fetch the resource index
    5. Filter and aggregate, then write the three artifacts

    Example:
        coordinator = ListingCoordinator()
        result = await coordinator.run()
        await coordinator.close()
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        http_handler: Optional[HTTPHandler] = None
    ):
        """
        Initialize listing coordinator.

        Args:
            config: Optional ConfigLoader instance
            http_handler: Optional transport (any object with fetch_json)
        """
        self.config = config if config else ConfigLoader()

        self.http_handler = http_handler if http_handler else HTTPHandler(self.config)
        self.resolver = ManifestResolver(self.http_handler, self.config)
        self.policy = InclusionPolicy.from_config(self.config)

        self.release_channel = self.config.get('release_channel', CHANNEL_DEFAULT)
        self.cdn_index = self.config.get('cdn_index', DEFAULT_CDN_INDEX)
        self.checksum_mode = self.config.get('checksum_mode', DEFAULT_CHECKSUM_MODE)
        self.name_prefix = self.config.get('name_prefix', DEFAULT_NAME_PREFIX)
        self.output_dir = self.config.get('output_dir')

    async def list_versions(self) -> list[VersionInfo]:
        """List versions for the configured server options."""
        options = [ServerOption(*option) for option in SERVER_OPTIONS]
        return await self.resolver.list_versions(options)

    async def run(self, manifest_url: Optional[str] = None) -> ListingResult:
        """
        Run the full listing pipeline.

        Args:
            manifest_url: Manifest to list; discovered when omitted

        Returns:
            ListingResult
        """
        result = ListingResult(success=False)
        start_time = time.time()
        stage = STAGE_VERSIONS

        try:
            if manifest_url is None:
                logger.info(f"{LOG_INPUT} Selecting version...")
                selected = select_version(await self.list_versions())
                logger.info(f"{LOG_PROCESS} Selected: {selected.label} ({selected.version})")
                manifest_url = selected.index_url

            stage = STAGE_MANIFEST
            channel = await self.resolver.resolve_channel(manifest_url, self.release_channel)

            stage = STAGE_CDN
            context = build_run_context(manifest_url, channel, self.cdn_index)
            result.context = context
            logger.info(f"{LOG_PROCESS} Version: {context.version}")
            logger.info(f"{LOG_PROCESS} CDN: {context.cdn_url}")

            stage = STAGE_INDEX
            entries = await fetch_resource_index(self.http_handler, context.resource_index_url)
            result.total_resources = len(entries)
            logger.info(f"{LOG_PROCESS} Processing {len(entries)} total resources...")

            accumulator = aggregate(
                entries,
                self.policy,
                context.resource_base_url,
                self.checksum_mode,
            )
            result.included_count = accumulator.included_count
            result.total_size = accumulator.total_size
            self._log_declared_size(channel, entries)

            stage = STAGE_EMIT
            result.output_files = await emit(
                accumulator,
                f"{self.name_prefix}_{context.version}",
                self.policy,
                self.output_dir,
                self.checksum_mode,
            )
            result.success = True
            logger.info(f"{LOG_OUTPUT} Download preparation completed successfully")

        except (ListerError, OSError) as e:
            result.error_stage = stage
            result.error_message = str(e)
            logger.error(f"{LOG_OUTPUT} Listing failed at {stage}: {e}")

        finally:
            result.duration = time.time() - start_time

        return result

    def _log_declared_size(self, channel: ManifestChannel, entries: list) -> None:
        """Compare the manifest's declared size with the index total."""
        if channel.declared_size is None:
            return

        index_total = sum(entry.size for entry in entries)
        logger.info(
            f"{LOG_PROCESS} Declared size {channel.declared_size / BYTES_PER_GIB:.2f} GB, "
            f"index total {index_total / BYTES_PER_GIB:.2f} GB"
        )

    async def close(self):
        """Close coordinator and cleanup resources."""
        logger.info("Closing listing coordinator")
        await self.http_handler.close()


__all__ = ['ListingCoordinator', 'build_run_context']
