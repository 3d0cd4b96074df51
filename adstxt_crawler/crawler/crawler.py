# === FILE: adstxt_crawler/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Iterator, Optional, Sequence

from aiohttp import ClientSession

from adstxt_crawler.config import CrawlerConfig
from adstxt_crawler.crawler.errors import CrawlError, CrawlTaskError, is_decoding_error
from adstxt_crawler.crawler.fetcher import Fetcher, new_session
from adstxt_crawler.crawler.models import BatchProgress, CrawlResult, CrawlSummary
from adstxt_crawler.crawler.resolver import DomainResolver
from adstxt_crawler.sink import store

__all__ = ("BatchCrawler", "chunked")


def chunked(items: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    """Consecutive slices of *size* items; the last one may be shorter."""
    if size < 1:
        raise ValueError("chunk size must be >= 1")
    for start in range(0, len(items), size):
        yield items[start:start + size]


class BatchCrawler:
    """
    Chunked ads.txt crawler.

    Every domain of a chunk runs as its own task; the next chunk starts only
    after the whole current chunk has finished. Progress counters are touched
    only between chunks.
    """

    def __init__(self, config: CrawlerConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._own_session = session is None
        self.logger = logging.getLogger("adstxt_crawler")
        self.progress: Optional[BatchProgress] = None

    async def __aenter__(self) -> BatchCrawler:
        if self.session is None:
            self.session = new_session(self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._own_session and self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, domains: Sequence[str]) -> CrawlSummary:
        if not self.session:
            raise RuntimeError("Session not initialized")
        out_dir = Path(self.config.out_dir)
        if not out_dir.is_dir():
            raise NotADirectoryError(f"output directory does not exist: {out_dir}")

        self.logger.info("start crawl ...")
        resolver = DomainResolver(Fetcher(self.session), self.config.timeout)
        progress = self.progress = BatchProgress(total=len(domains))
        summary = CrawlSummary(total=len(domains))

        for chunk in chunked(domains, self.config.chunk_size):
            tasks = [asyncio.create_task(self._crawl_one(resolver, d)) for d in chunk]
            results = await asyncio.gather(*tasks, return_exceptions=True)
            for domain, result in zip(chunk, results):
                if isinstance(result, BaseException):
                    raise CrawlTaskError(f"task execution error: {domain}: {result!r}") from result
                summary.add(result)

            before = progress.processed
            progress.advance(len(chunk))
            if progress.processed // self.config.progress_every > before // self.config.progress_every:
                self._log_progress(progress)

        self._log_progress(progress)
        self.logger.info("done!")
        summary.processed = progress.processed
        summary.elapsed = progress.elapsed
        return summary

    async def _crawl_one(self, resolver: DomainResolver, domain: str) -> CrawlResult:
        try:
            content = await resolver.resolve(domain)
            if content is None:
                return CrawlResult.not_found(domain)
            store(self.config.out_dir, domain, content)
            return CrawlResult.found(domain, content)
        except CrawlError as exc:
            if is_decoding_error(exc):
                self.logger.debug("%s: %s", domain, exc)
            else:
                self.logger.error("%s: %s", domain, exc)
            return CrawlResult.failed(domain, exc)

    def _log_progress(self, progress: BatchProgress) -> None:
        self.logger.info(
            "current: %7d / %d, elapsed: %.3fs",
            progress.processed,
            progress.total,
            progress.elapsed,
        )

