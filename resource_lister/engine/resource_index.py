# Path: resource_lister/engine/resource_index.py
"""
Resource Index Fetcher

Fetches the per-build resource index and turns it into ResourceEntry
values. The index is always a single payload with one array field.
"""

from typing import Any

from resource_lister.core.logger import get_logger
from resource_lister.engine.protocol_handlers import HTTPHandler
from resource_lister.engine.errors import SchemaError
from resource_lister.engine.result import ResourceEntry
from resource_lister.constants import LOG_INPUT, LOG_OUTPUT
from resource_lister.engine.constants import (
    INDEX_KEY_RESOURCE,
    INDEX_KEY_DEST,
    INDEX_KEY_SIZE,
    INDEX_KEY_MD5,
)

logger = get_logger(__name__, 'engine')


def parse_resource_entry(item: Any, position: int) -> ResourceEntry:
    """
    Validate one index record.

    Raises:
        SchemaError: If dest is empty or size is not a non-negative integer
    """
    if not isinstance(item, dict):
        raise SchemaError(f"Resource #{position} is not an object")

    destination = item.get(INDEX_KEY_DEST)
    if not isinstance(destination, str) or not destination:
        raise SchemaError(f"Resource #{position} has no '{INDEX_KEY_DEST}'")

    size = item.get(INDEX_KEY_SIZE)
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise SchemaError(f"Resource {destination} has invalid '{INDEX_KEY_SIZE}': {size!r}")

    checksum = item.get(INDEX_KEY_MD5) or ''

    return ResourceEntry(destination=destination, size=size, checksum=str(checksum))


def parse_resource_index(payload: Any) -> list[ResourceEntry]:
    """
    Parse a resource index document, preserving entry order.

    Raises:
        SchemaError: If the entry array is missing or malformed
    """
    if not isinstance(payload, dict) or not isinstance(payload.get(INDEX_KEY_RESOURCE), list):
        raise SchemaError(f"No '{INDEX_KEY_RESOURCE}' array found in resource index")

    return [
        parse_resource_entry(item, position)
        for position, item in enumerate(payload[INDEX_KEY_RESOURCE])
    ]


async def fetch_resource_index(http_handler: HTTPHandler, index_url: str) -> list[ResourceEntry]:
    """
    Fetch and parse the resource index at an absolute URL.

    Raises:
        TransportError: If the index cannot be fetched
        SchemaError: If the index is malformed
    """
    logger.info(f"{LOG_INPUT} Fetching resource index: {index_url}")

    payload = await http_handler.fetch_json(index_url)
    entries = parse_resource_index(payload)

    logger.info(f"{LOG_OUTPUT} Resource index contains {len(entries)} entries")
    return entries


__all__ = ['fetch_resource_index', 'parse_resource_index', 'parse_resource_entry']
