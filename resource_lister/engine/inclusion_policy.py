# Path: resource_lister/engine/inclusion_policy.py
"""
Inclusion Policy Engine

Pure predicates deciding which resource entries are emitted.

The three modes are priority tiers, not composable flags:
1. include_all_files: size floor only
2. big_paks_only: '.pak' extension and big-file size floor
3. otherwise: extension allow-list and size floor
"""

from typing import Iterable, Iterator

from resource_lister.engine.result import InclusionPolicy, ResourceEntry
from resource_lister.constants import BIGPAK_EXTENSION


def get_extension(destination: str) -> str:
    """
    Lowercase extension of a destination, dot included.

    Text after the final '.'; a destination with no '.' yields the
    whole lowercased path, which matches no real extension.

    Example:
        get_extension('/Client/Paks/a.PAK')  # '.pak'
        get_extension('LICENSE')             # '.license'
    """
    return '.' + destination.rsplit('.', 1)[-1].lower()


def should_include(entry: ResourceEntry, policy: InclusionPolicy) -> bool:
    """Decide whether an entry is emitted. Never mutates its inputs."""
    if policy.include_all_files:
        return entry.size >= policy.min_file_size

    extension = get_extension(entry.destination)

    if policy.big_paks_only:
        return extension == BIGPAK_EXTENSION and entry.size >= policy.big_paks_min_size

    return extension in policy.include_extensions and entry.size >= policy.min_file_size


def filter_entries(entries: Iterable[ResourceEntry], policy: InclusionPolicy) -> Iterator[ResourceEntry]:
    """Yield included entries in input order."""
    for entry in entries:
        if should_include(entry, policy):
            yield entry


__all__ = ['get_extension', 'should_include', 'filter_entries']
