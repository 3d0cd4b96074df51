"""adstxt_crawler.crawler: Fetcher, domain resolver and chunked batch crawler."""

from .crawler import BatchCrawler
from .models import CrawlResult, CrawlSummary

__all__ = ["BatchCrawler", "CrawlResult", "CrawlSummary"]
