# Path: resource_lister/engine/__init__.py
"""
Resource Lister Engine Module

Manifest resolution, index fetching, filtering and emission.
Exports public APIs for listing workflow execution.

Architecture:
- ListingCoordinator: Main orchestrator
- HTTPHandler: Transport with gzip-sniffing decoder
- ManifestResolver: Indirection document and channel resolution
- Inclusion policy and emitter: Pure filtering and artifact writing
"""

from resource_lister.engine.coordinator import ListingCoordinator, build_run_context
from resource_lister.engine.protocol_handlers import HTTPHandler, decode_payload
from resource_lister.engine.manifest_resolver import (
    ManifestResolver,
    lookup_manifest_url,
    parse_channel,
    select_version,
)
from resource_lister.engine.resource_index import fetch_resource_index, parse_resource_index
from resource_lister.engine.inclusion_policy import should_include, filter_entries, get_extension
from resource_lister.engine.emitter import aggregate, emit, build_output_name
from resource_lister.engine.errors import (
    ListerError,
    TransportError,
    DecodeError,
    ManifestLookupError,
    CategoryNotFoundError,
    RegionNotFoundError,
    SchemaError,
)
from resource_lister.engine.result import (
    ServerOption,
    VersionInfo,
    CdnEntry,
    ManifestChannel,
    ResourceEntry,
    InclusionPolicy,
    RunContext,
    EmissionAccumulator,
    OutputFiles,
    ListingResult,
)

__all__ = [
    # Main coordinator
    'ListingCoordinator',
    'build_run_context',

    # Transport
    'HTTPHandler',
    'decode_payload',

    # Resolution
    'ManifestResolver',
    'lookup_manifest_url',
    'parse_channel',
    'select_version',
    'fetch_resource_index',
    'parse_resource_index',

    # Filtering and emission
    'should_include',
    'filter_entries',
    'get_extension',
    'aggregate',
    'emit',
    'build_output_name',

    # Errors
    'ListerError',
    'TransportError',
    'DecodeError',
    'ManifestLookupError',
    'CategoryNotFoundError',
    'RegionNotFoundError',
    'SchemaError',

    # Value objects
    'ServerOption',
    'VersionInfo',
    'CdnEntry',
    'ManifestChannel',
    'ResourceEntry',
    'InclusionPolicy',
    'RunContext',
    'EmissionAccumulator',
    'OutputFiles',
    'ListingResult',
]
