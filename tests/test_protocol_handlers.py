# Path: tests/test_protocol_handlers.py
"""Tests for payload decoding and the aiohttp transport."""

import gzip
import json

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from resource_lister.engine.errors import DecodeError, SchemaError, TransportError
from resource_lister.engine.protocol_handlers import (
    HTTPHandler,
    decode_payload,
    decompress_gzip,
    is_gzipped,
)

DOCUMENT = {'default': {'config': {'version': '2.4.0'}}}


class TestDecodePayload:

    def test_plain_text(self):
        assert decode_payload(b'{"a": 1}') == '{"a": 1}'

    def test_gzip_payload(self):
        body = gzip.compress('{"name": "Wuthering"}'.encode('utf-8'))

        assert is_gzipped(body)
        assert decode_payload(body) == '{"name": "Wuthering"}'

    def test_corrupt_gzip_falls_back_to_raw_bytes(self):
        body = b'\x1f\x8bnot really gzip'

        text = decode_payload(body)

        assert isinstance(text, str)
        assert text.endswith('not really gzip')

    def test_invalid_utf8_is_replaced(self):
        assert decode_payload(b'ok\xff') == 'ok\ufffd'

    def test_decompress_gzip_raises_decode_error(self):
        with pytest.raises(DecodeError):
            decompress_gzip(b'\x1f\x8b\x08garbage')


def _make_app():
    async def plain(request):
        return web.json_response(DOCUMENT)

    async def gzipped(request):
        body = gzip.compress(json.dumps(DOCUMENT).encode('utf-8'))
        return web.Response(body=body, content_type='application/octet-stream')

    async def gzipped_with_header(request):
        body = gzip.compress(json.dumps(DOCUMENT).encode('utf-8'))
        return web.Response(
            body=body,
            content_type='application/json',
            headers={'Content-Encoding': 'gzip'},
        )

    async def missing(request):
        return web.Response(status=404, text='not found')

    async def broken(request):
        return web.Response(text='{"unterminated": ', content_type='application/json')

    async def echo_headers(request):
        return web.json_response({'user_agent': request.headers.get('User-Agent')})

    app = web.Application()
    app.router.add_get('/plain.json', plain)
    app.router.add_get('/gzip.json', gzipped)
    app.router.add_get('/gzip-header.json', gzipped_with_header)
    app.router.add_get('/missing.json', missing)
    app.router.add_get('/broken.json', broken)
    app.router.add_get('/headers.json', echo_headers)
    return app


class TestHTTPHandler:

    @pytest.mark.asyncio
    async def test_fetch_plain_json(self, config):
        async with TestServer(_make_app()) as server:
            async with HTTPHandler(config) as handler:
                data = await handler.fetch_json(str(server.make_url('/plain.json')))

        assert data == DOCUMENT

    @pytest.mark.asyncio
    async def test_gzip_detected_by_magic_number(self, config):
        async with TestServer(_make_app()) as server:
            async with HTTPHandler(config) as handler:
                data = await handler.fetch_json(str(server.make_url('/gzip.json')))

        assert data == DOCUMENT

    @pytest.mark.asyncio
    async def test_gzip_with_content_encoding_header(self, config):
        async with TestServer(_make_app()) as server:
            async with HTTPHandler(config) as handler:
                data = await handler.fetch_json(str(server.make_url('/gzip-header.json')))

        assert data == DOCUMENT

    @pytest.mark.asyncio
    async def test_non_success_status_raises(self, config):
        async with TestServer(_make_app()) as server:
            url = str(server.make_url('/missing.json'))
            async with HTTPHandler(config) as handler:
                with pytest.raises(TransportError) as exc_info:
                    await handler.fetch_json(url)

        assert exc_info.value.status_code == 404
        assert exc_info.value.url == url
        assert 'HTTP error! status: 404' in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_invalid_json_raises_schema_error(self, config):
        async with TestServer(_make_app()) as server:
            async with HTTPHandler(config) as handler:
                with pytest.raises(SchemaError):
                    await handler.fetch_json(str(server.make_url('/broken.json')))

    @pytest.mark.asyncio
    async def test_sends_configured_user_agent(self, config):
        config.set('user_agent', 'ListerTest/0.1')

        async with TestServer(_make_app()) as server:
            async with HTTPHandler(config) as handler:
                data = await handler.fetch_json(str(server.make_url('/headers.json')))

        assert data == {'user_agent': 'ListerTest/0.1'}

    @pytest.mark.asyncio
    async def test_connection_failure_raises_transport_error(self, config):
        server = TestServer(_make_app())
        await server.start_server()
        url = str(server.make_url('/plain.json'))
        await server.close()

        async with HTTPHandler(config) as handler:
            with pytest.raises(TransportError) as exc_info:
                await handler.fetch_json(url)

        assert exc_info.value.status_code is None
