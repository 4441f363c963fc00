# Path: resource_lister/engine/manifest_resolver.py
"""
Manifest Resolver

Finds the per-build manifest for a category/region through the
indirection document and extracts one release channel from it.

Architecture:
- Indirection document: category -> region -> manifest URL
- Exact key lookup, no fuzzy matching
- Two manifest schemas: version under config.version or at top level
- Batch version listing tolerates per-region failures
"""

from typing import Any, Iterable, Optional
from urllib.parse import urlparse

from resource_lister.core.logger import get_logger
from resource_lister.core.config_loader import ConfigLoader
from resource_lister.engine.protocol_handlers import HTTPHandler
from resource_lister.engine.errors import (
    ListerError,
    ManifestLookupError,
    CategoryNotFoundError,
    RegionNotFoundError,
    SchemaError,
)
from resource_lister.engine.result import (
    CdnEntry,
    ManifestChannel,
    ServerOption,
    VersionInfo,
)
from resource_lister.constants import (
    BUILTIN_REGION_SERVERS,
    CHANNEL_DEFAULT,
    DEFAULT_INDIRECTION_URL,
    VERSION_UNKNOWN,
    VERSION_UNAVAILABLE,
    LOG_INPUT,
    LOG_PROCESS,
    LOG_OUTPUT,
)
from resource_lister.engine.constants import (
    MANIFEST_KEY_CONFIG,
    MANIFEST_KEY_VERSION,
    MANIFEST_KEY_SIZE,
    MANIFEST_KEY_CDN_LIST,
    MANIFEST_KEY_CDN_URL,
    MANIFEST_KEY_RESOURCES,
    MANIFEST_KEY_RESOURCES_BASE,
    VALID_URL_SCHEMES,
)

logger = get_logger(__name__, 'engine')


def lookup_manifest_url(document: dict, category: str, region: str) -> str:
    """
    Look up document[category][region].

    Raises:
        CategoryNotFoundError: If category key is absent
        RegionNotFoundError: If region key is absent under the category
        SchemaError: If the entry is not an http(s) URL
    """
    category_data = document.get(category) if isinstance(document, dict) else None
    if not isinstance(category_data, dict):
        raise CategoryNotFoundError(category)

    url = category_data.get(region)
    if url is None or url == '':
        raise RegionNotFoundError(category, region)

    if not isinstance(url, str) or urlparse(url).scheme not in VALID_URL_SCHEMES:
        raise SchemaError(f"Invalid manifest URL for {category}/{region}: {url!r}")

    return url


def extract_version(channel_data: Any) -> str:
    """
    Read a channel's version.

    Newer manifests keep it under config.version, older ones at the
    channel's top level. Neither present gives 'unknown'.
    """
    if not isinstance(channel_data, dict):
        return VERSION_UNKNOWN

    config_block = channel_data.get(MANIFEST_KEY_CONFIG)
    if isinstance(config_block, dict) and config_block.get(MANIFEST_KEY_VERSION):
        return str(config_block[MANIFEST_KEY_VERSION])

    if channel_data.get(MANIFEST_KEY_VERSION):
        return str(channel_data[MANIFEST_KEY_VERSION])

    return VERSION_UNKNOWN


def parse_channel(manifest: Any, channel_name: str) -> ManifestChannel:
    """
    Extract one release channel from a parsed manifest.

    Raises:
        SchemaError: If the channel key is absent, or a CDN entry or
            resource path has the wrong type
    """
    if not isinstance(manifest, dict) or not isinstance(manifest.get(channel_name), dict):
        raise SchemaError(f"Channel '{channel_name}' not found in manifest")

    channel_data = manifest[channel_name]

    cdn_items = channel_data.get(MANIFEST_KEY_CDN_LIST) or []
    if not isinstance(cdn_items, list):
        raise SchemaError(f"Channel '{channel_name}' has invalid '{MANIFEST_KEY_CDN_LIST}'")

    cdn_list = tuple(_parse_cdn_entry(item, channel_name) for item in cdn_items)

    declared_size = None
    config_block = channel_data.get(MANIFEST_KEY_CONFIG)
    if isinstance(config_block, dict):
        size = config_block.get(MANIFEST_KEY_SIZE)
        if isinstance(size, int) and not isinstance(size, bool):
            declared_size = size

    return ManifestChannel(
        name=channel_name,
        version=extract_version(channel_data),
        cdn_list=cdn_list,
        resources_path=_get_path_field(channel_data, MANIFEST_KEY_RESOURCES, channel_name),
        resources_base_path=_get_path_field(channel_data, MANIFEST_KEY_RESOURCES_BASE, channel_name),
        declared_size=declared_size,
    )


def _parse_cdn_entry(item: Any, channel_name: str) -> CdnEntry:
    url = item.get(MANIFEST_KEY_CDN_URL) if isinstance(item, dict) else None
    if not isinstance(url, str) or not url:
        raise SchemaError(f"Channel '{channel_name}' has a CDN entry without a URL: {item!r}")
    return CdnEntry(url=url)


def _get_path_field(channel_data: dict, key: str, channel_name: str) -> str:
    """Relative path field; absent or null gives ''."""
    value = channel_data.get(key)
    if value is None:
        return ''
    if not isinstance(value, str):
        raise SchemaError(f"Channel '{channel_name}' has invalid '{key}': {value!r}")
    return value


class ManifestResolver:
    """
    Resolves manifests through the indirection document.

    Example:
        async with HTTPHandler() as http:
            resolver = ManifestResolver(http)
            url = await resolver.resolve_manifest_url('live', 'os')
            channel = await resolver.resolve_channel(url, 'default')
    """

    def __init__(self, http_handler: HTTPHandler, config: Optional[ConfigLoader] = None):
        """
        Initialize manifest resolver.

        Args:
            http_handler: Transport used for every fetch
            config: Optional ConfigLoader instance
        """
        self.config = config if config else ConfigLoader()
        self.http_handler = http_handler

        self.indirection_url = self.config.get('indirection_url', DEFAULT_INDIRECTION_URL)
        self.use_builtin_servers = self.config.get('use_builtin_servers', False)

    async def fetch_indirection_document(self) -> dict:
        """
        Fetch the category/region -> manifest URL document.

        Returns the built-in region table instead when configured.

        Raises:
            TransportError: If the document cannot be fetched
            SchemaError: If the document is not a JSON object
        """
        if self.use_builtin_servers:
            logger.info(f"{LOG_PROCESS} Using built-in region servers")
            return BUILTIN_REGION_SERVERS

        logger.info(f"{LOG_INPUT} Fetching indirection document")
        document = await self.http_handler.fetch_json(self.indirection_url)

        if not isinstance(document, dict):
            raise SchemaError(f"Indirection document at {self.indirection_url} is not an object")

        return document

    async def resolve_manifest_url(self, category: str, region: str) -> str:
        """
        Resolve the manifest URL for a category/region.

        Raises:
            ManifestLookupError: If the category or region is absent
        """
        document = await self.fetch_indirection_document()
        url = lookup_manifest_url(document, category, region)
        logger.info(f"{LOG_OUTPUT} Manifest for {category}/{region}: {url}")
        return url

    async def resolve_channel(self, manifest_url: str, channel_name: str) -> ManifestChannel:
        """
        Fetch a manifest and extract one release channel.

        Raises:
            TransportError: If the manifest cannot be fetched
            SchemaError: If the channel is absent
        """
        logger.info(f"{LOG_INPUT} Resolving channel '{channel_name}' from {manifest_url}")

        manifest = await self.http_handler.fetch_json(manifest_url)
        channel = parse_channel(manifest, channel_name)

        logger.info(
            f"{LOG_OUTPUT} Channel '{channel_name}' version {channel.version}, "
            f"{len(channel.cdn_list)} CDN mirrors"
        )
        return channel

    async def list_versions(
        self,
        server_options: Iterable[ServerOption],
        channel_name: str = CHANNEL_DEFAULT
    ) -> list[VersionInfo]:
        """
        Discover the current version behind each server option.

        Options are resolved one at a time. A failing option is recorded
        as 'unavailable' with an empty index URL and the batch continues,
        so the result always has one entry per option.

        Raises:
            TransportError: If the indirection document itself cannot be fetched
        """
        options = list(server_options)
        logger.info(f"{LOG_INPUT} Listing versions for {len(options)} servers")

        document = await self.fetch_indirection_document()
        versions: list[VersionInfo] = []

        for option in options:
            try:
                index_url = lookup_manifest_url(document, option.category, option.region)
                manifest = await self.http_handler.fetch_json(index_url)
                channel_data = manifest.get(channel_name) if isinstance(manifest, dict) else None

                versions.append(VersionInfo(
                    label=option.label,
                    version=extract_version(channel_data),
                    index_url=index_url,
                ))

            except ListerError as e:
                logger.warning(f"{LOG_PROCESS} Failed to fetch version for {option.label}: {e}")
                versions.append(VersionInfo(
                    label=option.label,
                    version=VERSION_UNAVAILABLE,
                    index_url='',
                ))

        available = sum(1 for v in versions if v.available)
        logger.info(f"{LOG_OUTPUT} {available}/{len(versions)} servers available")
        return versions


def select_version(versions: list[VersionInfo], choice: Optional[int] = None) -> VersionInfo:
    """
    Pick a version to list.

    Args:
        versions: Result of list_versions()
        choice: 1-based position; None picks the first available entry

    Raises:
        ManifestLookupError: If nothing suitable is available
    """
    if choice is None:
        for version in versions:
            if version.available:
                return version
        raise ManifestLookupError("No available versions found")

    if not 1 <= choice <= len(versions):
        raise ManifestLookupError(f"Selection {choice} out of range (1-{len(versions)})")

    selected = versions[choice - 1]
    if not selected.available:
        raise ManifestLookupError(f"{selected.label} is unavailable")

    return selected


__all__ = [
    'ManifestResolver',
    'lookup_manifest_url',
    'extract_version',
    'parse_channel',
    'select_version',
]
