# File: tests/conftest.py
import asyncio
from pathlib import Path
from typing import AsyncIterator, Awaitable, Callable

import pytest
import pytest_asyncio
from aiohttp import ClientSession, web

from adstxt_crawler.config import CrawlerConfig
from adstxt_crawler.crawler.fetcher import new_session


@pytest.fixture()
def out_dir(tmp_path) -> Path:
    """
    Empty output directory for crawled files.
    """
    path = tmp_path / "out"
    path.mkdir()
    return path


@pytest.fixture()
def crawler_config(out_dir) -> CrawlerConfig:
    """
    Return a basic valid CrawlerConfig for crawler tests.
    """
    return CrawlerConfig(out_dir=out_dir, chunk_size=3, timeout_ms=2000)


@pytest_asyncio.fixture
async def session(crawler_config) -> AsyncIterator[ClientSession]:
    s = new_session(crawler_config)
    try:
        yield s
    finally:
        await s.close()


@pytest_asyncio.fixture
async def serve() -> AsyncIterator[Callable[[web.Application, int], Awaitable[str]]]:
    """
    Start an aiohttp *app* on 127.0.0.1:*port* and return the "domain" for it
    (``127.0.0.1:<port>``). Every started app is cleaned up after the test.
    """
    runners: list[web.AppRunner] = []

    async def _start(app: web.Application, port: int) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"127.0.0.1:{port}"

    yield _start
    for runner in runners:
        await runner.cleanup()


@pytest_asyncio.fixture
async def raw_serve() -> AsyncIterator[Callable[[bytes, int], Awaitable[str]]]:
    """
    Serve a fixed raw HTTP *payload* for every connection; used for responses
    aiohttp.web would not produce (no Content-Type, non-ASCII headers).
    """
    servers: list[asyncio.base_events.Server] = []

    async def _start(payload: bytes, port: int) -> str:
        async def handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            try:
                await reader.readuntil(b"\r\n\r\n")
                writer.write(payload)
                await writer.drain()
            finally:
                writer.close()
                await writer.wait_closed()

        server = await asyncio.start_server(handle, "127.0.0.1", port)
        servers.append(server)
        return f"127.0.0.1:{port}"

    yield _start
    for server in servers:
        server.close()
        await server.wait_closed()
