# adstxt_crawler/crawler/resolver.py
"""
Domain resolver: decides whether a domain serves an ads.txt file.

At most two guarded fetches per domain::

    http://<domain>/ads.txt
        Success      -> found
        Redirect     -> validated location, else not found
        NotFound     -> https://<domain>/ads.txt
    <next url>
        Success      -> found
        otherwise    -> not found
"""
from __future__ import annotations

from typing import Optional

from adstxt_crawler.crawler.fetcher import Fetcher, fetch_with_timeout
from adstxt_crawler.crawler.models import Redirect, Success
from adstxt_crawler.logger import logger

ADS_TXT = "ads.txt"


def is_trusted_redirect(domain: str, location: str) -> bool:
    """A redirect target must mention both the domain and the ads.txt filename."""
    return domain in location and ADS_TXT in location


class DomainResolver:
    """Runs the http -> (redirect | https) discovery protocol for one domain."""

    def __init__(self, fetcher: Fetcher, timeout: float) -> None:
        self.fetcher = fetcher
        self.timeout = timeout

    async def resolve(self, domain: str) -> Optional[str]:
        """Return the ads.txt body for *domain*, or None when it has none."""
        outcome = await fetch_with_timeout(self.fetcher, f"http://{domain}/{ADS_TXT}", self.timeout)

        if isinstance(outcome, Success):
            return outcome.body
        if isinstance(outcome, Redirect):
            if not is_trusted_redirect(domain, outcome.location):
                logger.debug("%s: untrusted redirect to %s", domain, outcome.location)
                return None
            next_url = outcome.location
        else:
            next_url = f"https://{domain}/{ADS_TXT}"

        outcome = await fetch_with_timeout(self.fetcher, next_url, self.timeout)
        # a second redirect is not chased
        return outcome.body if isinstance(outcome, Success) else None


__all__ = ["DomainResolver", "is_trusted_redirect"]
