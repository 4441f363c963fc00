# Path: resource_lister/engine/errors.py
"""
Resource Lister Errors

Exception taxonomy for the listing pipeline.

- TransportError: non-success HTTP status or connection failure. Fatal.
- DecodeError: gzip payload could not be decompressed. Recovered inside
  the transport by falling back to the raw bytes; never reaches callers.
- ManifestLookupError: category/region missing from the indirection
  document. Fatal for single resolution, recorded during version listing.
- SchemaError: expected field missing from a parsed document. Fatal.
"""

from typing import Optional


class ListerError(Exception):
    """Base class for all resource lister errors."""
    pass


class TransportError(ListerError):
    """HTTP request failed or returned a non-success status."""

    def __init__(self, url: str, status_code: Optional[int] = None, message: Optional[str] = None):
        self.url = url
        self.status_code = status_code
        if message is None:
            message = f"HTTP error! status: {status_code}" if status_code is not None else "request failed"
        super().__init__(f"{message} ({url})")


class DecodeError(ListerError):
    """Compressed payload could not be decompressed."""
    pass


class ManifestLookupError(ListerError, LookupError):
    """Key missing from the indirection document."""
    pass


class CategoryNotFoundError(ManifestLookupError):
    """Category key absent from the indirection document."""

    def __init__(self, category: str):
        self.category = category
        super().__init__(f"category not found: '{category}'")


class RegionNotFoundError(ManifestLookupError):
    """Region key absent under an existing category."""

    def __init__(self, category: str, region: str):
        self.category = category
        self.region = region
        super().__init__(f"region not found: '{region}' in category '{category}'")


class SchemaError(ListerError):
    """Parsed document lacks an expected field."""
    pass


__all__ = [
    'ListerError',
    'TransportError',
    'DecodeError',
    'ManifestLookupError',
    'CategoryNotFoundError',
    'RegionNotFoundError',
    'SchemaError',
]
