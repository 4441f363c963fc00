# Path: resource_lister/engine/result.py
"""
Listing Value Objects

Type-safe, structured values for the listing pipeline.
Replaces raw manifest dictionaries with proper data classes.

Architecture:
- ServerOption / VersionInfo: Version discovery
- CdnEntry / ManifestChannel: Parsed manifest channel
- ResourceEntry: One file from the resource index
- InclusionPolicy: Filter configuration
- RunContext: Values resolved once per run and threaded to emission
- EmissionAccumulator / OutputFiles: Aggregated output
- ListingResult: Complete resolve+fetch+filter+emit workflow
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from resource_lister.core.config_loader import ConfigLoader


@dataclass(frozen=True)
class ServerOption:
    """One (category, region) pair probed during version listing."""
    category: str
    region: str
    label: str


@dataclass(frozen=True)
class VersionInfo:
    """
    Version discovered for one server option.

    Attributes:
        label: Human readable server label
        version: Version string, 'unknown' or 'unavailable'
        index_url: Manifest URL, empty when the option could not be resolved
    """
    label: str
    version: str
    index_url: str

    @property
    def available(self) -> bool:
        return self.index_url != ''


@dataclass(frozen=True)
class CdnEntry:
    url: str


@dataclass(frozen=True)
class ManifestChannel:
    """
    One release channel inside a manifest.

    Attributes:
        name: Channel key (e.g. 'default', 'predownload')
        version: Channel version or 'unknown'
        cdn_list: CDN mirrors in manifest order
        resources_path: Resource index path relative to a CDN
        resources_base_path: Base path resource destinations are joined to
        declared_size: Total size declared by the manifest, if any
    """
    name: str
    version: str
    cdn_list: tuple[CdnEntry, ...] = ()
    resources_path: str = ''
    resources_base_path: str = ''
    declared_size: Optional[int] = None


@dataclass(frozen=True)
class ResourceEntry:
    """A single downloadable file from the resource index."""
    destination: str
    size: int
    checksum: str = ''


@dataclass(frozen=True)
class InclusionPolicy:
    """
    Rules deciding which resource entries are emitted.

    Tiers are evaluated in priority order:
    include_all_files > big_paks_only > include_extensions.
    """
    include_all_files: bool = True
    big_paks_only: bool = False
    big_paks_min_size: int = 100_000_000
    include_extensions: frozenset = frozenset()
    min_file_size: int = 1024

    def __post_init__(self):
        # Normalize so membership checks are case-insensitive
        object.__setattr__(
            self,
            'include_extensions',
            frozenset(ext.lower() for ext in self.include_extensions),
        )

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> 'InclusionPolicy':
        """Build policy from configuration."""
        config = config if config else ConfigLoader()
        return cls(
            include_all_files=config.get('include_all_files'),
            big_paks_only=config.get('big_paks_only'),
            big_paks_min_size=config.get('big_paks_min_size'),
            include_extensions=frozenset(config.get('include_extensions', [])),
            min_file_size=config.get('min_file_size'),
        )


@dataclass(frozen=True)
class RunContext:
    """
    Values resolved once per run and threaded through to emission.

    Attributes:
        manifest_url: Manifest the run was resolved from
        channel: Parsed release channel
        cdn_url: Selected CDN mirror base URL
        resource_index_url: Absolute URL of the resource index
        resource_base_url: Prefix for every emitted download URL
    """
    manifest_url: str
    channel: ManifestChannel
    cdn_url: str
    resource_index_url: str
    resource_base_url: str

    @property
    def version(self) -> str:
        return self.channel.version


@dataclass
class EmissionAccumulator:
    """Ordered outputs and running totals built while aggregating."""
    urls: list[str] = field(default_factory=list)
    checksum_lines: list[str] = field(default_factory=list)
    detail_lines: list[str] = field(default_factory=list)
    included_count: int = 0
    total_size: int = 0


@dataclass(frozen=True)
class OutputFiles:
    """Paths of the written artifacts. checksum_file is None when disabled."""
    urls_file: Path
    details_file: Path
    checksum_file: Optional[Path] = None


@dataclass
class ListingResult:
    """
    Result of a complete listing run.

    Attributes:
        success: Whether all stages succeeded
        error_stage: Stage where run failed (versions/manifest/cdn/index/emit)
        error_message: Error message if failed
        context: Resolved run context
        output_files: Written artifacts
        total_resources: Entries in the resource index
        included_count: Entries passing the inclusion policy
        total_size: Bytes of included entries
        duration: Total run duration in seconds
    """
    success: bool
    error_stage: Optional[str] = None
    error_message: Optional[str] = None
    context: Optional[RunContext] = None
    output_files: Optional[OutputFiles] = None
    total_resources: int = 0
    included_count: int = 0
    total_size: int = 0
    duration: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        files = self.output_files
        return {
            'success': self.success,
            'error_stage': self.error_stage,
            'error_message': self.error_message,
            'version': self.context.version if self.context else None,
            'manifest_url': self.context.manifest_url if self.context else None,
            'urls_file': str(files.urls_file) if files else None,
            'checksum_file': str(files.checksum_file) if files and files.checksum_file else None,
            'details_file': str(files.details_file) if files else None,
            'total_resources': self.total_resources,
            'included_count': self.included_count,
            'total_size': self.total_size,
            'duration': self.duration,
            'timestamp': self.timestamp.isoformat(),
        }


__all__ = [
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
