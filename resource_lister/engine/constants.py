# Path: resource_lister/engine/constants.py
"""
Resource Lister Engine Constants

Centralized constants for transport, manifest schemas and index parsing.
NO HARDCODED VALUES in engine modules - all schema keys here.
"""

# ============================================================================
# PAYLOAD DECODING
# ============================================================================

# First two bytes of every gzip stream
GZIP_MAGIC = b'\x1f\x8b'

# Text encoding for decoded payloads (invalid sequences replaced)
PAYLOAD_ENCODING = 'utf-8'
PAYLOAD_DECODE_ERRORS = 'replace'

# ============================================================================
# HTTP/PROTOCOL HANDLER CONSTANTS
# ============================================================================

# HTTP Connection pooling
MAX_CONCURRENT_CONNECTIONS = 4
FORCE_CLOSE_CONNECTIONS = True

# HTTP Headers - Default values
DEFAULT_ACCEPT_HEADER = 'application/json, */*'
DEFAULT_ACCEPT_ENCODING = 'gzip'  # Only gzip is recognized by the payload decoder

# HTTP Header keys
HEADER_USER_AGENT = 'User-Agent'
HEADER_ACCEPT = 'Accept'
HEADER_ACCEPT_ENCODING = 'Accept-Encoding'

# Valid URL schemes for manifest sources
VALID_URL_SCHEMES = ('http', 'https')

# ============================================================================
# MANIFEST SCHEMA KEYS
# ============================================================================

MANIFEST_KEY_CONFIG = 'config'
MANIFEST_KEY_VERSION = 'version'
MANIFEST_KEY_SIZE = 'size'
MANIFEST_KEY_CDN_LIST = 'cdnList'
MANIFEST_KEY_CDN_URL = 'url'
MANIFEST_KEY_RESOURCES = 'resources'
MANIFEST_KEY_RESOURCES_BASE = 'resourcesBasePath'

# ============================================================================
# RESOURCE INDEX SCHEMA KEYS
# ============================================================================

INDEX_KEY_RESOURCE = 'resource'
INDEX_KEY_DEST = 'dest'
INDEX_KEY_SIZE = 'size'
INDEX_KEY_MD5 = 'md5'

# ============================================================================
# EXPORTS
# ============================================================================

__all__ = [
    # Payload decoding
    'GZIP_MAGIC',
    'PAYLOAD_ENCODING',
    'PAYLOAD_DECODE_ERRORS',

    # HTTP/Protocol handler
    'MAX_CONCURRENT_CONNECTIONS',
    'FORCE_CLOSE_CONNECTIONS',
    'DEFAULT_ACCEPT_HEADER',
    'DEFAULT_ACCEPT_ENCODING',
    'HEADER_USER_AGENT',
    'HEADER_ACCEPT',
    'HEADER_ACCEPT_ENCODING',
    'VALID_URL_SCHEMES',

    # Manifest schema
    'MANIFEST_KEY_CONFIG',
    'MANIFEST_KEY_VERSION',
    'MANIFEST_KEY_SIZE',
    'MANIFEST_KEY_CDN_LIST',
    'MANIFEST_KEY_CDN_URL',
    'MANIFEST_KEY_RESOURCES',
    'MANIFEST_KEY_RESOURCES_BASE',

    # Resource index schema
    'INDEX_KEY_RESOURCE',
    'INDEX_KEY_DEST',
    'INDEX_KEY_SIZE',
    'INDEX_KEY_MD5',
]
