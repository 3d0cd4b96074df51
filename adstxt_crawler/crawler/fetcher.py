# adstxt_crawler/crawler/fetcher.py
"""
Fetcher module: one GET per call, classified into NotFound / Redirect / Success,
plus the timeout guard that races a fetch against a deadline.
"""
from __future__ import annotations

import asyncio
from typing import Final

from aiohttp import (
    ClientConnectorError,
    ClientError,
    ClientResponse,
    ClientResponseError,
    ClientSession,
    ClientTimeout,
    InvalidURL,
    TCPConnector,
    hdrs,
)

from adstxt_crawler import __version__
from adstxt_crawler.config import CrawlerConfig
from adstxt_crawler.crawler.errors import (
    BodyEncodingError,
    HeaderEncodingError,
    RequestBuildError,
    TransportError,
)
from adstxt_crawler.crawler.models import NOT_FOUND, FetchOutcome, Redirect, Success
from adstxt_crawler.logger import logger

USER_AGENT: Final[str] = f"ads.txt crawler/1.0.2; adstxt-crawler v{__version__}"

REDIRECT_STATUS: Final[frozenset[int]] = frozenset({301, 302, 307, 308})


def new_session(config: CrawlerConfig) -> ClientSession:
    """
    Build the shared session for a batch.

    No keep-alive and no idle pooling: a batch touches a huge set of distinct
    hosts once each. ``limit`` caps open sockets at the chunk width.
    """
    connector = TCPConnector(
        limit=config.chunk_size,
        limit_per_host=0,
        force_close=True,
    )
    return ClientSession(
        connector=connector,
        timeout=ClientTimeout(total=None),
        headers={hdrs.USER_AGENT: USER_AGENT, hdrs.ACCEPT: "text/plain"},
        raise_for_status=False,
    )


def _visible_ascii(value: str) -> bool:
    return all(ch == "\t" or 32 <= ord(ch) < 127 for ch in value)


class Fetcher:
    """Issues a single GET for a URL and classifies the response."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> FetchOutcome:
        """
        Fetch *url* once; no redirects are followed and nothing is retried.

        Connection failures are NotFound. Decoding problems and other transport
        failures are raised as CrawlError subclasses.
        """
        try:
            async with self.session.get(url, allow_redirects=False) as resp:
                return await self._classify(resp)
        except ClientConnectorError as exc:
            logger.debug("%s: connect failed: %s", url, exc)
            return NOT_FOUND
        except asyncio.TimeoutError:
            return NOT_FOUND
        except (InvalidURL, ValueError) as exc:
            raise RequestBuildError(f"build request error: {url}: {exc}") from exc
        except ClientResponseError as exc:
            raise HeaderEncodingError(f"header encoding error: {url}: {exc.message}") from exc
        except ClientError as exc:
            raise TransportError(f"ads.txt crawl error: {url}: {exc!r}") from exc

    @staticmethod
    async def _classify(resp: ClientResponse) -> FetchOutcome:
        if resp.status in REDIRECT_STATUS:
            location = resp.headers.get(hdrs.LOCATION)
            if location is None:
                return NOT_FOUND
            if not _visible_ascii(location):
                raise HeaderEncodingError(f"header encoding error: Location {location!r}")
            return Redirect(location)

        if not 200 <= resp.status < 300:
            return NOT_FOUND

        ctype = resp.headers.get(hdrs.CONTENT_TYPE)
        if ctype is not None and not ctype.lower().startswith("text/plain"):
            return NOT_FOUND

        data = await resp.read()
        try:
            return Success(data.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise BodyEncodingError(f"body encoding error: {exc}") from exc


async def fetch_with_timeout(fetcher: Fetcher, url: str, timeout: float) -> FetchOutcome:
    """
    Race ``fetcher.fetch(url)`` against *timeout* seconds.

    A timed-out fetch is cancelled and reported as NotFound; otherwise the
    outcome or error of the fetch passes through unchanged.
    """
    try:
        return await asyncio.wait_for(fetcher.fetch(url), timeout)
    except asyncio.TimeoutError:
        logger.debug("%s: timed out after %.3f s", url, timeout)
        return NOT_FOUND


__all__ = ["USER_AGENT", "Fetcher", "fetch_with_timeout", "new_session"]
