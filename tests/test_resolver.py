# File: tests/test_resolver.py
"""Протокол обнаружения ads.txt для одного домена: http, затем redirect или https."""
from __future__ import annotations

import asyncio
from typing import Dict, List, Union

import pytest

from adstxt_crawler.crawler.errors import BodyEncodingError
from adstxt_crawler.crawler.models import FetchOutcome, NotFound, Redirect, Success
from adstxt_crawler.crawler.resolver import DomainResolver, is_trusted_redirect

DOMAIN = "example.com"
HTTP = "http://example.com/ads.txt"
HTTPS = "https://example.com/ads.txt"


class ScriptedFetcher:
    """Returns scripted outcomes per URL and records every call."""

    def __init__(self, script: Dict[str, Union[FetchOutcome, Exception, float]]) -> None:
        self.script = script
        self.calls: List[str] = []

    async def fetch(self, url: str) -> FetchOutcome:
        self.calls.append(url)
        step = self.script.get(url, NotFound())
        if isinstance(step, float):
            # simulates a server that answers too late
            await asyncio.sleep(step)
            return Success("late")
        if isinstance(step, Exception):
            raise step
        return step


async def resolve(script, timeout: float = 1.0):
    fetcher = ScriptedFetcher(script)
    content = await DomainResolver(fetcher, timeout).resolve(DOMAIN)
    return content, fetcher.calls


@pytest.mark.asyncio()
async def test_http_success_makes_single_request():
    content, calls = await resolve({HTTP: Success("a=1")})
    assert content == "a=1"
    assert calls == [HTTP]


@pytest.mark.asyncio()
@pytest.mark.parametrize(
    "location",
    [
        "http://unrelated.net/landing",
        "https://example.com/index.html",
        "https://other.net/ads.txt",
    ],
)
async def test_untrusted_redirect_stops_without_https(location):
    content, calls = await resolve({HTTP: Redirect(location)})
    assert content is None
    assert calls == [HTTP]


@pytest.mark.asyncio()
async def test_trusted_redirect_replaces_https_fallback():
    location = "https://www.example.com/ads.txt"
    content, calls = await resolve({HTTP: Redirect(location), location: Success("b=2")})
    assert content == "b=2"
    assert calls == [HTTP, location]


@pytest.mark.asyncio()
async def test_second_redirect_is_not_followed():
    location = "https://www.example.com/ads.txt"
    script = {
        HTTP: Redirect(location),
        location: Redirect("https://cdn.example.com/ads.txt"),
    }
    content, calls = await resolve(script)
    assert content is None
    assert calls == [HTTP, location]


@pytest.mark.asyncio()
async def test_not_found_falls_back_to_https_once():
    content, calls = await resolve({HTTP: NotFound(), HTTPS: Success("c=3")})
    assert content == "c=3"
    assert calls == [HTTP, HTTPS]


@pytest.mark.asyncio()
@pytest.mark.parametrize("second", [NotFound(), Redirect("https://example.com/x/ads.txt")])
async def test_gives_up_after_two_attempts(second):
    content, calls = await resolve({HTTP: NotFound(), HTTPS: second})
    assert content is None
    assert calls == [HTTP, HTTPS]


@pytest.mark.asyncio()
async def test_http_timeout_tries_https_exactly_once():
    content, calls = await resolve({HTTP: 0.05, HTTPS: Success("d=4")}, timeout=0.01)
    assert content == "d=4"
    assert calls == [HTTP, HTTPS]


@pytest.mark.asyncio()
async def test_both_attempts_time_out():
    content, calls = await resolve({HTTP: 0.05, HTTPS: 0.05}, timeout=0.01)
    assert content is None
    assert calls == [HTTP, HTTPS]


@pytest.mark.asyncio()
async def test_fetch_error_is_propagated():
    with pytest.raises(BodyEncodingError):
        await resolve({HTTP: BodyEncodingError("body encoding error")})


@pytest.mark.parametrize(
    "location,trusted",
    [
        ("https://example.com/ads.txt", True),
        ("http://www.example.com/path/ads.txt", True),
        ("https://example.com/", False),
        ("https://elsewhere.org/ads.txt", False),
        ("/ads.txt", False),
    ],
)
def test_is_trusted_redirect(location, trusted):
    assert is_trusted_redirect(DOMAIN, location) is trusted
