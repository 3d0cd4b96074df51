"""
adstxt_crawler package initializer.
Defines package version; the CLI lives in :mod:`adstxt_crawler.cli`.
"""
__version__ = "1.0.2"
