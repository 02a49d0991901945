from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from handlers.async_comm import AsyncCommError, AsyncCommInvalidContentTypeError, AsyncCommTimeoutError, AsyncHttp
from utils.logger_utils import LOGGER_NAMESPACE

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


async def _json(request: web.Request) -> web.Response:
    return web.json_response({"q": request.query.get("q"), "accept": request.headers.get("Accept")})


async def _echo(request: web.Request) -> web.Response:
    body = await request.json()
    return web.json_response({"body": body, "auth": request.headers.get("Authorization")})


async def _text(_request: web.Request) -> web.Response:
    return web.Response(text="안녕하세요", content_type="text/plain", charset="utf-8")


async def _empty(_request: web.Request) -> web.Response:
    return web.Response(body=b"", content_type="application/json")


async def _binary(_request: web.Request) -> web.Response:
    return web.Response(body=b"\x00\x01", content_type="application/octet-stream")


async def _broken_json(_request: web.Request) -> web.Response:
    return web.Response(text="{broken", content_type="application/json")


async def _unavailable(_request: web.Request) -> web.Response:
    return web.Response(status=503, text="busy")


async def _slow(_request: web.Request) -> web.Response:
    await asyncio.sleep(1)
    return web.json_response({})


@pytest.fixture
async def server() -> AsyncIterator[TestServer]:
    app = web.Application()
    app.router.add_get("/json", _json)
    app.router.add_post("/echo", _echo)
    app.router.add_get("/text", _text)
    app.router.add_get("/empty", _empty)
    app.router.add_get("/binary", _binary)
    app.router.add_get("/broken", _broken_json)
    app.router.add_get("/unavailable", _unavailable)
    app.router.add_get("/slow", _slow)
    test_server = TestServer(app)
    await test_server.start_server()
    yield test_server
    await test_server.close()


@pytest.mark.asyncio
async def test_session_is_created_lazily(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger=LOGGER_NAMESPACE)

    http = AsyncHttp()

    assert http.is_open is False
    assert "HTTP session opened" not in caplog.text

    session = http.session

    assert http.is_open is True
    assert http.session is session
    assert caplog.text.count("HTTP session opened") == 1
    await http.close()
    assert http.is_open is False


@pytest.mark.asyncio
async def test_reopens_after_close() -> None:
    http = AsyncHttp()

    async with http:
        first = http.session

    async with http:
        assert http.is_open is True
        assert http.session is not first

    assert first.closed
    assert http.is_open is False


@pytest.mark.asyncio
async def test_get_decodes_json_and_sends_params(server: TestServer) -> None:
    async with AsyncHttp() as http:
        payload = await http.get(url=str(server.make_url("/json")), params={"q": "Hello"})

    assert payload == {"q": "Hello", "accept": "application/json"}


@pytest.mark.asyncio
async def test_post_sends_json_body(server: TestServer) -> None:
    async with AsyncHttp() as http:
        payload = await http.post(
            url=str(server.make_url("/echo")),
            data={"q": "Hello", "source": "en", "target": "ko"},
            headers={"Authorization": "Bearer key"},
        )

    assert payload == {"body": {"q": "Hello", "source": "en", "target": "ko"}, "auth": "Bearer key"}


@pytest.mark.asyncio
async def test_text_and_empty_bodies(server: TestServer) -> None:
    async with AsyncHttp() as http:
        assert await http.get(url=str(server.make_url("/text"))) == "안녕하세요"
        assert await http.get(url=str(server.make_url("/empty"))) is None


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/binary", "/broken"])
async def test_undecodable_bodies_raise(server: TestServer, path: str) -> None:
    async with AsyncHttp() as http:
        with pytest.raises(AsyncCommInvalidContentTypeError):
            await http.get(url=str(server.make_url(path)))


@pytest.mark.asyncio
async def test_error_status_raises_with_status(server: TestServer) -> None:
    async with AsyncHttp() as http:
        with pytest.raises(AsyncCommError) as exc_info:
            await http.get(url=str(server.make_url("/unavailable")))

    assert exc_info.value.status == 503
    assert "503" in str(exc_info.value)


@pytest.mark.asyncio
async def test_timeout_raises_timeout_error(server: TestServer) -> None:
    async with AsyncHttp() as http:
        with pytest.raises(AsyncCommTimeoutError):
            await http.get(url=str(server.make_url("/slow")), total_timeout=0.2)


@pytest.mark.asyncio
async def test_unreachable_server_raises(unused_tcp_port: int) -> None:
    async with AsyncHttp() as http:
        with pytest.raises(AsyncCommError):
            await http.get(url=f"http://127.0.0.1:{unused_tcp_port}/", total_timeout=2.0)


def test_register_decoder_replaces_existing(caplog: pytest.LogCaptureFixture) -> None:
    http = AsyncHttp()

    with caplog.at_level(logging.WARNING, logger=LOGGER_NAMESPACE):
        http.register_decoder("text/plain", lambda raw: raw.decode("ascii").upper())

    assert http.decoders["text/plain"](b"ok") == "OK"
    assert "Replacing decoder" in caplog.text


def test_timeout_budget() -> None:
    assert AsyncHttp._build_timeout(0).total is None
    assert AsyncHttp._build_timeout(2.0).connect is None
    assert AsyncHttp._build_timeout(10.0).connect == pytest.approx(3.0)
