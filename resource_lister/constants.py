# Path: resource_lister/constants.py
"""
Resource Lister Module Constants

Module-wide constants for manifest resolution and file list emission.
Engine-specific constants (headers, magic numbers, schema keys) go in
engine/constants.py.

Defaults only - runtime values come from .env via config_loader.
"""

# ============================================================================
# NETWORK CONFIGURATION DEFAULTS
# ============================================================================
DEFAULT_TIMEOUT: int = 60  # Manifests and indexes are single payloads
DEFAULT_CONNECT_TIMEOUT: int = 30
DEFAULT_USER_AGENT: str = 'ResourceLister/1.0'

# ============================================================================
# MANIFEST SOURCES
# ============================================================================
DEFAULT_INDIRECTION_URL: str = (
    'https://gist.githubusercontent.com/yuhkix/b8796681ac2cd3bab11b7e8cdc022254'
    '/raw/4435fd290c07f7f766a6d2ab09ed3096d83b02e3/wuwa.json'
)

# Static copy of the region table, used when the indirection
# document cannot or should not be fetched
BUILTIN_REGION_SERVERS: dict = {
    'live': {
        'cn': 'https://prod-cn-alicdn-gamestarter.kurogame.com/launcher/game/G152/10003_Y8xXrXk65DqFHEDgApn3cpK5lfczpFx5/index.json',
        'os': 'https://prod-alicdn-gamestarter.kurogame.com/launcher/game/G153/50004_obOHXFrFanqsaIEOmuKroCcbZkQRBC7c/index.json',
    },
    'beta': {
        'cn': 'https://prod-cn-alicdn-gamestarter.kurogame.com/launcher/game/G152/10003_Y8xXrXk65DqFHEDgApn3cpK5lfczpFx5/index.json',
        'os': 'https://prod-alicdn-gamestarter.kurogame.com/launcher/game/G153/50004_obOHXFrFanqsaIEOmuKroCcbZkQRBC7c/index.json',
    },
}

# (category, region, label) triples probed during version listing
SERVER_OPTIONS: list = [
    ('live', 'os', 'Live - OS'),
    ('live', 'cn', 'Live - CN'),
    ('beta', 'os', 'Beta - OS'),
    ('beta', 'cn', 'Beta - CN'),
]

# ============================================================================
# RELEASE CHANNELS & CDN MIRRORS
# ============================================================================
CHANNEL_DEFAULT: str = 'default'

# Mirror order in cdnList: 0 QCloud, 1 AWS, 2 Akamai, 3 CloudFlare, 4 Huoshan
DEFAULT_CDN_INDEX: int = 1

# ============================================================================
# VERSION SENTINELS
# ============================================================================
VERSION_UNKNOWN: str = 'unknown'
VERSION_UNAVAILABLE: str = 'unavailable'

# ============================================================================
# CHECKSUM FILE MODES
# ============================================================================
CHECKSUM_DISABLED: str = 'disabled'
CHECKSUM_FULL_PATH: str = 'full_path'  # Checksum file sits at the game root
CHECKSUM_FILENAME: str = 'filename'  # Files sit beside the checksum file
CHECKSUM_MODES: set = {CHECKSUM_DISABLED, CHECKSUM_FULL_PATH, CHECKSUM_FILENAME}
DEFAULT_CHECKSUM_MODE: str = CHECKSUM_FILENAME

# ============================================================================
# INCLUSION POLICY DEFAULTS
# ============================================================================
DEFAULT_INCLUDE_ALL_FILES: bool = True
DEFAULT_BIGPAKS_ONLY: bool = False
DEFAULT_BIGPAKS_MIN_SIZE: int = 100_000_000
DEFAULT_MIN_FILE_SIZE: int = 1024  # 1KB minimum
DEFAULT_INCLUDE_EXTENSIONS: list = [
    '.pak', '.pck', '.exe', '.dll', '.json', '.png',
    '.sig', '.txt', '.ttf', '.otf', '.wav',
]
BIGPAK_EXTENSION: str = '.pak'

# ============================================================================
# OUTPUT ARTIFACTS
# ============================================================================
DEFAULT_NAME_PREFIX: str = 'wuwa'
SUFFIX_URLS: str = 'urls.txt'
SUFFIX_CHECKSUMS: str = 'hashes.md5'
SUFFIX_DETAILS: str = 'details.txt'
INFIX_BIGPAKS: str = 'bigpaks_'
INFIX_FILTERED: str = 'filtered_'
UNKNOWN_EXTENSION: str = 'UNKNOWN'
OUTPUT_ENCODING: str = 'utf-8'

BYTES_PER_MIB: int = 1024 * 1024
BYTES_PER_GIB: int = 1024 * 1024 * 1024

# ============================================================================
# PIPELINE STAGES (reported on failure)
# ============================================================================
STAGE_VERSIONS: str = 'versions'
STAGE_MANIFEST: str = 'manifest'
STAGE_CDN: str = 'cdn'
STAGE_INDEX: str = 'index'
STAGE_EMIT: str = 'emit'

# ============================================================================
# IPO LOGGING PREFIXES
# ============================================================================
LOG_INPUT: str = '[INPUT]'
LOG_PROCESS: str = '[PROCESS]'
LOG_OUTPUT: str = '[OUTPUT]'

# ============================================================================
# LOGGING COMPONENTS
# ============================================================================
LOGGER_ROOT: str = 'resource_lister'
LOGGER_CORE: str = 'resource_lister.core'
LOGGER_ENGINE: str = 'resource_lister.engine'
LOGGER_CLI: str = 'resource_lister.cli'

# ============================================================================
# LOG FORMAT
# ============================================================================
LOG_FORMAT: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
LOG_ACTIVITY_FILENAME: str = 'lister_activity.log'
LOG_ERRORS_FILENAME: str = 'errors.log'

# ============================================================================
# ENVIRONMENT VARIABLE KEYS (for reference in config_loader.py)
# ============================================================================

# Manifest Sources
ENV_INDIRECTION_URL: str = 'LISTER_INDIRECTION_URL'
ENV_USE_BUILTIN_SERVERS: str = 'LISTER_USE_BUILTIN_SERVERS'
ENV_RELEASE_CHANNEL: str = 'LISTER_RELEASE_CHANNEL'
ENV_CDN_INDEX: str = 'LISTER_CDN_INDEX'

# Network
ENV_REQUEST_TIMEOUT: str = 'LISTER_REQUEST_TIMEOUT'
ENV_CONNECT_TIMEOUT: str = 'LISTER_CONNECT_TIMEOUT'
ENV_USER_AGENT: str = 'LISTER_USER_AGENT'

# Inclusion Policy
ENV_INCLUDE_ALL_FILES: str = 'LISTER_INCLUDE_ALL_FILES'
ENV_BIGPAKS_ONLY: str = 'LISTER_BIGPAKS_ONLY'
ENV_BIGPAKS_MIN_SIZE: str = 'LISTER_BIGPAKS_MIN_SIZE'
ENV_INCLUDE_EXTENSIONS: str = 'LISTER_INCLUDE_EXTENSIONS'
ENV_MIN_FILE_SIZE: str = 'LISTER_MIN_FILE_SIZE'

# Output
ENV_CHECKSUM_MODE: str = 'LISTER_CHECKSUM_MODE'
ENV_OUTPUT_DIR: str = 'LISTER_OUTPUT_DIR'
ENV_NAME_PREFIX: str = 'LISTER_NAME_PREFIX'

# CLI
ENV_INTERACTIVE: str = 'LISTER_INTERACTIVE'

# Logging
ENV_LOG_LEVEL: str = 'LISTER_LOG_LEVEL'
ENV_LOG_CONSOLE: str = 'LISTER_LOG_CONSOLE'
ENV_LOG_DIR: str = 'LISTER_LOG_DIR'
