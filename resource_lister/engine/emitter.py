# Path: resource_lister/engine/emitter.py
"""
Aggregator / Emitter

Accumulates included resource entries into three parallel outputs and
writes them as flat text artifacts.

Architecture:
- aggregate(): single ordered pass, one accumulator per run
- emit(): writes urls / checksums / details files
- File names carry policy infixes so runs with different policies
  can share an output directory

Output files:
    <prefix>_[bigpaks_][filtered_]urls.txt     one absolute URL per line
    <prefix>_[bigpaks_][filtered_]hashes.md5   "<md5> *<name>" per line
    <prefix>_[bigpaks_][filtered_]details.txt  summary + " | " rows
"""

from pathlib import Path
from typing import Iterable

import aiofiles

from resource_lister.core.logger import get_logger
from resource_lister.engine.inclusion_policy import should_include
from resource_lister.engine.result import (
    EmissionAccumulator,
    InclusionPolicy,
    OutputFiles,
    ResourceEntry,
)
from resource_lister.constants import (
    CHECKSUM_DISABLED,
    CHECKSUM_FULL_PATH,
    CHECKSUM_FILENAME,
    CHECKSUM_MODES,
    SUFFIX_URLS,
    SUFFIX_CHECKSUMS,
    SUFFIX_DETAILS,
    INFIX_BIGPAKS,
    INFIX_FILTERED,
    UNKNOWN_EXTENSION,
    OUTPUT_ENCODING,
    BYTES_PER_MIB,
    BYTES_PER_GIB,
    LOG_PROCESS,
    LOG_OUTPUT,
)

logger = get_logger(__name__, 'engine')


def checksum_name(destination: str, checksum_mode: str) -> str:
    """
    Path written next to the checksum.

    full_path: destination without its leading '/', for a checksum file
    placed at the game root. filename: last path segment only, for a
    checksum file placed beside the downloaded files.
    """
    if checksum_mode == CHECKSUM_FULL_PATH:
        return destination[1:] if destination.startswith('/') else destination
    return destination.rsplit('/', 1)[-1] or destination


def detail_extension(destination: str) -> str:
    """Uppercase extension of the file name, 'UNKNOWN' if there is none."""
    filename = destination.rsplit('/', 1)[-1]
    if '.' not in filename:
        return UNKNOWN_EXTENSION
    return filename.rsplit('.', 1)[-1].upper() or UNKNOWN_EXTENSION


def format_detail_line(entry: ResourceEntry) -> str:
    size_mb = entry.size / BYTES_PER_MIB
    size_gb = entry.size / BYTES_PER_GIB
    return (
        f"{entry.destination} | {size_mb:.1f}MB ({size_gb:.3f}GB) | "
        f"{detail_extension(entry.destination)} | {entry.checksum}"
    )


def aggregate(
    entries: Iterable[ResourceEntry],
    policy: InclusionPolicy,
    resource_base_url: str,
    checksum_mode: str = CHECKSUM_FILENAME
) -> EmissionAccumulator:
    """
    Build the three outputs from the entries that pass the policy.

    Args:
        entries: Resource index entries, in index order
        policy: Inclusion policy
        resource_base_url: Prefix joined to every destination (plain concatenation)
        checksum_mode: 'disabled', 'full_path' or 'filename'

    Returns:
        Filled EmissionAccumulator
    """
    if checksum_mode not in CHECKSUM_MODES:
        raise ValueError(f"Unknown checksum mode: {checksum_mode!r}")

    accumulator = EmissionAccumulator()

    for entry in entries:
        if not should_include(entry, policy):
            continue

        accumulator.included_count += 1
        accumulator.total_size += entry.size

        accumulator.urls.append(resource_base_url + entry.destination)

        if checksum_mode != CHECKSUM_DISABLED:
            name = checksum_name(entry.destination, checksum_mode)
            accumulator.checksum_lines.append(f"{entry.checksum} *{name}")

        accumulator.detail_lines.append(format_detail_line(entry))

    logger.info(
        f"{LOG_PROCESS} Found {accumulator.included_count} resources to download "
        f"({accumulator.total_size / BYTES_PER_GIB:.2f} GB)"
    )
    return accumulator


def build_output_name(name_prefix: str, suffix: str, policy: InclusionPolicy) -> str:
    """
    Derive an artifact file name.

    Example:
        build_output_name('wuwa_2.4.0', 'urls.txt', policy)
        # 'wuwa_2.4.0_bigpaks_filtered_urls.txt' with big_paks_only and
        # include_all_files off
    """
    infix = ''
    if policy.big_paks_only:
        infix += INFIX_BIGPAKS
    if not policy.include_all_files:
        infix += INFIX_FILTERED
    return f"{name_prefix}_{infix}{suffix}"


def render_details(accumulator: EmissionAccumulator) -> str:
    total_gb = accumulator.total_size / BYTES_PER_GIB
    details = '\n'.join(accumulator.detail_lines)
    return (
        f"Total files: {accumulator.included_count}\n"
        f"Total size: {total_gb:.2f} GB\n"
        f"\n"
        f"File Details:\n"
        f"{details}"
    )


async def _write_text(path: Path, content: str) -> None:
    async with aiofiles.open(path, 'w', encoding=OUTPUT_ENCODING, newline='\n') as f:
        await f.write(content)


async def emit(
    accumulator: EmissionAccumulator,
    name_prefix: str,
    policy: InclusionPolicy,
    output_dir: Path,
    checksum_mode: str = CHECKSUM_FILENAME
) -> OutputFiles:
    """
    Write the URL, checksum and details artifacts.

    The checksum file is skipped when checksum_mode is 'disabled'.

    Args:
        accumulator: Result of aggregate()
        name_prefix: '<game>_<version>' prefix for all three files
        policy: Policy the accumulator was built with (selects infixes)
        output_dir: Directory receiving the files
        checksum_mode: Mode the accumulator was built with

    Returns:
        OutputFiles with the written paths
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    urls_file = output_dir / build_output_name(name_prefix, SUFFIX_URLS, policy)
    await _write_text(urls_file, '\n'.join(accumulator.urls))
    logger.info(f"{LOG_OUTPUT} URLs written to: {urls_file}")

    checksum_file = None
    if checksum_mode != CHECKSUM_DISABLED:
        checksum_file = output_dir / build_output_name(name_prefix, SUFFIX_CHECKSUMS, policy)
        await _write_text(checksum_file, '\n'.join(accumulator.checksum_lines))
        logger.info(f"{LOG_OUTPUT} MD5 hashes written to: {checksum_file}")

    details_file = output_dir / build_output_name(name_prefix, SUFFIX_DETAILS, policy)
    await _write_text(details_file, render_details(accumulator))
    logger.info(f"{LOG_OUTPUT} File details written to: {details_file}")

    return OutputFiles(
        urls_file=urls_file,
        details_file=details_file,
        checksum_file=checksum_file,
    )


__all__ = [
    'aggregate',
    'emit',
    'build_output_name',
    'render_details',
    'format_detail_line',
    'checksum_name',
    'detail_extension',
]
