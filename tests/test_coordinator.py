# Path: tests/test_coordinator.py
"""End-to-end tests for the listing coordinator with an in-memory transport."""

import pytest

from resource_lister.engine.coordinator import ListingCoordinator, build_run_context
from resource_lister.engine.errors import SchemaError
from resource_lister.engine.result import CdnEntry, ManifestChannel

from tests.conftest import INDIRECTION_URL, FakeTransport

MANIFEST_URL = 'https://x/a.json'


def _documents():
    return {
        INDIRECTION_URL: {'live': {'os': MANIFEST_URL}},
        MANIFEST_URL: {
            'default': {
                'config': {'version': '1.2.3', 'size': 2000},
                'cdnList': [{'url': 'https://cdn/'}],
                'resources': 'r.json',
                'resourcesBasePath': '/base/',
            }
        },
        'https://cdn/r.json': {
            'resource': [
                {'dest': '/f.pak', 'size': 2000, 'md5': 'abc'},
                {'dest': '/tiny.txt', 'size': 10, 'md5': 'def'},
            ]
        },
    }


@pytest.fixture
def listing_config(config):
    config.set('cdn_index', 0)
    config.set('min_file_size', 1000)
    return config


def test_build_run_context_concatenates_paths():
    channel = ManifestChannel(
        name='default',
        version='1.2.3',
        cdn_list=(CdnEntry('https://a/'), CdnEntry('https://b/')),
        resources_path='r.json',
        resources_base_path='base/',
    )

    context = build_run_context(MANIFEST_URL, channel, 1)

    assert context.cdn_url == 'https://b/'
    assert context.resource_index_url == 'https://b/r.json'
    assert context.resource_base_url == 'https://b/base/'
    assert context.version == '1.2.3'


def test_build_run_context_rejects_missing_mirror():
    channel = ManifestChannel(name='default', version='1', cdn_list=(CdnEntry('https://a/'),))

    with pytest.raises(SchemaError):
        build_run_context(MANIFEST_URL, channel, 1)


class TestRun:

    @pytest.mark.asyncio
    async def test_end_to_end(self, listing_config, output_dir):
        coordinator = ListingCoordinator(listing_config, FakeTransport(_documents()))

        result = await coordinator.run(MANIFEST_URL)

        assert result.success, result.error_message
        assert result.total_resources == 2
        assert result.included_count == 1
        assert result.total_size == 2000

        files = result.output_files
        assert files.urls_file == output_dir / 'wuwa_1.2.3_urls.txt'
        assert files.checksum_file == output_dir / 'wuwa_1.2.3_hashes.md5'
        assert files.details_file == output_dir / 'wuwa_1.2.3_details.txt'

        assert files.urls_file.read_text(encoding='utf-8') == 'https://cdn//base//f.pak'
        assert files.checksum_file.read_text(encoding='utf-8') == 'abc *f.pak'
        details = files.details_file.read_text(encoding='utf-8')
        assert 'Total files: 1' in details
        assert '/f.pak | 0.0MB (0.000GB) | PAK | abc' in details

    @pytest.mark.asyncio
    async def test_discovers_version_when_no_url_given(self, listing_config, output_dir):
        transport = FakeTransport(_documents())
        coordinator = ListingCoordinator(listing_config, transport)

        result = await coordinator.run()

        assert result.success, result.error_message
        assert result.context.manifest_url == MANIFEST_URL
        assert transport.requested[0] == INDIRECTION_URL

    @pytest.mark.asyncio
    async def test_filtered_names(self, listing_config, output_dir):
        listing_config.set('include_all_files', False)
        listing_config.set('include_extensions', ['.pak'])
        coordinator = ListingCoordinator(listing_config, FakeTransport(_documents()))

        result = await coordinator.run(MANIFEST_URL)

        assert result.success
        assert result.output_files.urls_file.name == 'wuwa_1.2.3_filtered_urls.txt'

    @pytest.mark.asyncio
    async def test_missing_channel_writes_nothing(self, listing_config, output_dir):
        listing_config.set('release_channel', 'predownload')
        coordinator = ListingCoordinator(listing_config, FakeTransport(_documents()))

        result = await coordinator.run(MANIFEST_URL)

        assert not result.success
        assert result.error_stage == 'manifest'
        assert not output_dir.exists() or not any(output_dir.iterdir())

    @pytest.mark.asyncio
    async def test_cdn_index_out_of_range(self, config, output_dir):
        config.set('cdn_index', 3)
        coordinator = ListingCoordinator(config, FakeTransport(_documents()))

        result = await coordinator.run(MANIFEST_URL)

        assert not result.success
        assert result.error_stage == 'cdn'
        assert not output_dir.exists()

    @pytest.mark.asyncio
    async def test_index_fetch_failure(self, listing_config, output_dir):
        documents = _documents()
        del documents['https://cdn/r.json']
        coordinator = ListingCoordinator(listing_config, FakeTransport(documents))

        result = await coordinator.run(MANIFEST_URL)

        assert not result.success
        assert result.error_stage == 'index'
        assert 'HTTP error! status: 404' in result.error_message
        assert not output_dir.exists()

    @pytest.mark.asyncio
    async def test_no_versions_available(self, listing_config, output_dir):
        documents = {INDIRECTION_URL: {'live': {}}}
        coordinator = ListingCoordinator(listing_config, FakeTransport(documents))

        result = await coordinator.run()

        assert not result.success
        assert result.error_stage == 'versions'

    @pytest.mark.asyncio
    async def test_close_closes_transport(self, listing_config):
        transport = FakeTransport({})
        coordinator = ListingCoordinator(listing_config, transport)

        await coordinator.close()

        assert transport.closed

    @pytest.mark.asyncio
    async def test_malformed_resource_path_fails_at_manifest(self, listing_config, output_dir):
        documents = _documents()
        documents[MANIFEST_URL]['default']['resources'] = 5
        coordinator = ListingCoordinator(listing_config, FakeTransport(documents))

        result = await coordinator.run(MANIFEST_URL)

        assert not result.success
        assert result.error_stage == 'manifest'
        assert "'resources'" in result.error_message
        assert not output_dir.exists()
