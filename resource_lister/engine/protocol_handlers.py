# Path: resource_lister/engine/protocol_handlers.py
"""
Protocol Handlers

HTTP/HTTPS fetch handler for manifests and resource indexes.
Handles headers, timeouts, status checks and payload decoding.

Architecture:
- Async HTTP client (one session per handler)
- Full-body reads, no streaming (documents are single payloads)
- Gzip detected by magic number, not by Content-Encoding
- Raw-bytes fallback when decompression fails
- No retries: non-success status surfaces immediately
"""

import asyncio
import gzip
import json
import zlib
from typing import Any, Optional

import aiohttp

from resource_lister.core.logger import get_logger
from resource_lister.core.config_loader import ConfigLoader
from resource_lister.engine.errors import TransportError, DecodeError, SchemaError
from resource_lister.constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_USER_AGENT,
    LOG_INPUT,
    LOG_PROCESS,
    LOG_OUTPUT,
)
from resource_lister.engine.constants import (
    GZIP_MAGIC,
    PAYLOAD_ENCODING,
    PAYLOAD_DECODE_ERRORS,
    MAX_CONCURRENT_CONNECTIONS,
    FORCE_CLOSE_CONNECTIONS,
    DEFAULT_ACCEPT_HEADER,
    DEFAULT_ACCEPT_ENCODING,
    HEADER_USER_AGENT,
    HEADER_ACCEPT,
    HEADER_ACCEPT_ENCODING,
)

logger = get_logger(__name__, 'engine')


def is_gzipped(body: bytes) -> bool:
    """Check the first two bytes against the gzip magic number."""
    return body[:2] == GZIP_MAGIC


def decompress_gzip(body: bytes) -> bytes:
    """
    Decompress a gzip payload.

    Raises:
        DecodeError: If the payload is not a valid gzip stream
    """
    try:
        return gzip.decompress(body)
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError(f"Failed to decompress gzipped content: {e}") from e


def decode_payload(body: bytes) -> str:
    """
    Turn a response body into text.

    Gzip payloads are decompressed first. A payload that looks gzipped
    but fails to decompress is decoded as-is instead of failing.

    Args:
        body: Raw response bytes

    Returns:
        Decoded text
    """
    if is_gzipped(body):
        try:
            body = decompress_gzip(body)
        except DecodeError as e:
            logger.warning(f"{LOG_PROCESS} {e}, trying as plain text")

    return body.decode(PAYLOAD_ENCODING, errors=PAYLOAD_DECODE_ERRORS)


class HTTPHandler:
    """
    HTTP/HTTPS fetch handler.

    Features:
    - Async HTTP with aiohttp
    - Automatic decompression disabled, see decode_payload()
    - Configurable timeouts and User-Agent

    Example:
        async with HTTPHandler() as handler:
            text = await handler.fetch_text('https://example.com/index.json')
            data = await handler.fetch_json('https://example.com/index.json')
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize HTTP handler.

        Args:
            config: Optional ConfigLoader instance
        """
        self.config = config if config else ConfigLoader()

        self.timeout = self.config.get('request_timeout', DEFAULT_TIMEOUT)
        self.connect_timeout = self.config.get('connect_timeout', DEFAULT_CONNECT_TIMEOUT)
        self.user_agent = self.config.get('user_agent', DEFAULT_USER_AGENT)

        self._session: Optional[aiohttp.ClientSession] = None

    async def fetch_bytes(self, url: str) -> bytes:
        """
        GET a URL and return the undecoded body.

        Args:
            url: Source URL

        Returns:
            Response body bytes

        Raises:
            TransportError: On non-success status or connection failure
        """
        logger.info(f"{LOG_INPUT} Fetching: {url}")

        session = await self._get_session()

        try:
            async with session.get(url, headers=self._build_headers()) as response:
                if response.status < 200 or response.status >= 300:
                    logger.error(f"{LOG_OUTPUT} HTTP error {response.status}: {url}")
                    raise TransportError(url, response.status)

                body = await response.read()

        except aiohttp.ClientError as e:
            logger.error(f"{LOG_OUTPUT} Request failed: {url} ({e})")
            raise TransportError(url, message=f"request failed: {e}") from e
        except asyncio.TimeoutError as e:
            logger.error(f"{LOG_OUTPUT} Request timed out: {url}")
            raise TransportError(url, message="request timed out") from e

        logger.debug(f"{LOG_OUTPUT} Received {len(body)} bytes from {url}")
        return body

    async def fetch_text(self, url: str) -> str:
        """
        GET a URL and return its body as text, decompressing gzip payloads.

        Raises:
            TransportError: On non-success status or connection failure
        """
        body = await self.fetch_bytes(url)
        return decode_payload(body)

    async def fetch_json(self, url: str) -> Any:
        """
        GET a URL and parse its body as JSON.

        Raises:
            TransportError: On non-success status or connection failure
            SchemaError: If the body is not valid JSON
        """
        text = await self.fetch_text(url)
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"{LOG_OUTPUT} Invalid JSON from {url}: {e}")
            raise SchemaError(f"Invalid JSON document at {url}: {e}") from e

    def _build_headers(self) -> dict[str, str]:
        """
        Build HTTP headers for request.

        Returns:
            Dictionary of headers
        """
        return {
            HEADER_USER_AGENT: self.user_agent,
            HEADER_ACCEPT: DEFAULT_ACCEPT_HEADER,
            HEADER_ACCEPT_ENCODING: DEFAULT_ACCEPT_ENCODING,
        }

    async def _get_session(self) -> aiohttp.ClientSession:
        """
        Get or create aiohttp session.

        Returns:
            ClientSession instance
        """
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=MAX_CONCURRENT_CONNECTIONS,
                force_close=FORCE_CLOSE_CONNECTIONS
            )

            self._session = aiohttp.ClientSession(
                connector=connector,
                auto_decompress=False,
                timeout=aiohttp.ClientTimeout(
                    total=self.timeout,
                    connect=self.connect_timeout
                )
            )

        return self._session

    async def close(self):
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()


__all__ = ['HTTPHandler', 'decode_payload', 'decompress_gzip', 'is_gzipped']
