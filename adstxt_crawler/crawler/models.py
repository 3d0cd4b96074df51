# adstxt_crawler/crawler/models.py
"""
Data models for the ads.txt crawler.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Optional, Union


# --------------------------------------------------------------------------- #
# Single fetch outcome                                                         #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class NotFound:
    """No usable ads.txt at the fetched URL."""


@dataclass(frozen=True, slots=True)
class Redirect:
    """3xx response carrying a ``Location`` header."""

    location: str


@dataclass(frozen=True, slots=True)
class Success:
    """2xx text/plain (or untyped) response decoded as UTF-8."""

    body: str


FetchOutcome = Union[NotFound, Redirect, Success]

NOT_FOUND = NotFound()


# --------------------------------------------------------------------------- #
# Per-domain result                                                            #
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class CrawlResult:
    """Result of resolving one domain: found content, not found, or failed."""

    domain: str
    content: Optional[str] = None
    error: Optional[BaseException] = None

    @classmethod
    def found(cls, domain: str, content: str) -> CrawlResult:
        return cls(domain, content=content)

    @classmethod
    def not_found(cls, domain: str) -> CrawlResult:
        return cls(domain)

    @classmethod
    def failed(cls, domain: str, error: BaseException) -> CrawlResult:
        return cls(domain, error=error)

    @property
    def is_found(self) -> bool:
        return self.content is not None

    @property
    def is_failed(self) -> bool:
        return self.error is not None


# --------------------------------------------------------------------------- #
# Batch accounting                                                             #
# --------------------------------------------------------------------------- #


@dataclass(slots=True)
class BatchProgress:
    """Running counters owned by the batch scheduler."""

    total: int
    processed: int = 0
    started: float = field(default_factory=time.monotonic)

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started

    def advance(self, count: int) -> None:
        self.processed += count


@dataclass(slots=True)
class CrawlSummary:
    """Totals of a finished batch."""

    total: int = 0
    processed: int = 0
    found: int = 0
    not_found: int = 0
    failed: int = 0
    elapsed: float = 0.0

    def add(self, result: CrawlResult) -> None:
        if result.is_failed:
            self.failed += 1
        elif result.is_found:
            self.found += 1
        else:
            self.not_found += 1
