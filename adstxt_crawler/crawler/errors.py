# adstxt_crawler/crawler/errors.py
"""
Errors raised while crawling ads.txt files.

Everything below :class:`CrawlError` except :class:`CrawlTaskError` is a
per-domain error: it is logged with the domain name and never stops a batch.
"""
from __future__ import annotations


class CrawlError(Exception):
    """Base class for crawler errors."""


class RequestBuildError(CrawlError):
    """The URL could not be turned into a request."""


class HeaderEncodingError(CrawlError):
    """Response headers are malformed or not visible ASCII."""


class BodyEncodingError(CrawlError):
    """Response body is not valid UTF-8."""


class TransportError(CrawlError):
    """Connection reset, server disconnect, incomplete payload and friends."""


class StoreError(CrawlError):
    """A discovered file could not be written to the output directory."""


class CrawlTaskError(CrawlError):
    """A per-domain task could not be run or joined; aborts the batch."""


def is_decoding_error(exc: BaseException) -> bool:
    return isinstance(exc, (HeaderEncodingError, BodyEncodingError))


__all__ = [
    "CrawlError",
    "RequestBuildError",
    "HeaderEncodingError",
    "BodyEncodingError",
    "TransportError",
    "StoreError",
    "CrawlTaskError",
    "is_decoding_error",
]
