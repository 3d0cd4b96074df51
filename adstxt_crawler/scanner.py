# === FILE: adstxt_crawler/scanner.py ===
"""
Модуль-обёртка для функции запуска обхода.
"""
from typing import Sequence

from adstxt_crawler.config import CrawlerConfig
from adstxt_crawler.crawler.crawler import BatchCrawler
from adstxt_crawler.crawler.models import CrawlSummary


async def start_crawl(cfg: CrawlerConfig, domains: Sequence[str]) -> CrawlSummary:
    """
    Запускает пакетный краулер в контексте и возвращает сводку обхода.

    Parameters
    ----------
    cfg : CrawlerConfig
        Параметры пакета.
    domains : Sequence[str]
        Домены в порядке обработки.

    Returns
    -------
    CrawlSummary
        Счётчики найденных, ненайденных и сбойных доменов.
    """
    async with BatchCrawler(cfg) as crawler:
        summary = await crawler.crawl(domains)
    return summary

__all__ = ["start_crawl"]
