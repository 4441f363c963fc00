# Path: tests/conftest.py
"""Shared fixtures for resource lister tests."""

import copy
import os

import pytest

from resource_lister.core.config_loader import ConfigLoader
from resource_lister.engine.errors import TransportError

INDIRECTION_URL = 'https://gist.example/wuwa.json'


class FakeTransport:
    """
    In-memory stand-in for HTTPHandler.

    Maps URL -> parsed document. Unknown URLs answer 404; exception
    values are raised as-is.
    """

    def __init__(self, documents: dict):
        self.documents = documents
        self.requested: list[str] = []
        self.closed = False

    async def fetch_json(self, url: str):
        self.requested.append(url)
        if url not in self.documents:
            raise TransportError(url, 404)
        document = self.documents[url]
        if isinstance(document, Exception):
            raise document
        return copy.deepcopy(document)

    async def close(self):
        self.closed = True


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / 'out'


@pytest.fixture
def config(monkeypatch, output_dir):
    """Fresh ConfigLoader with defaults, writing into a temp directory."""
    for key in list(os.environ):
        if key.startswith('LISTER_'):
            monkeypatch.delenv(key)
    monkeypatch.setenv('LISTER_OUTPUT_DIR', str(output_dir))
    monkeypatch.setenv('LISTER_INDIRECTION_URL', INDIRECTION_URL)
    monkeypatch.setenv('LISTER_LOG_CONSOLE', 'false')

    ConfigLoader.reset()
    yield ConfigLoader()
    ConfigLoader.reset()
