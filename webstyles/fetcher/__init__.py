"""Document fetchers.

A fetcher turns a URL into a queryable PageElement. Two implementations are
provided: PlaywrightFetcher renders the page in a browser, HttpFetcher makes
a plain HTTP request. create_fetcher() picks between them based on what is
installed.
"""

from webstyles.fetcher.base import DocumentFetcher
from webstyles.fetcher.fallback import (
    FallbackFetcher,
    create_fetcher,
    playwright_available,
)
from webstyles.fetcher.http_fetcher import HttpFetcher

__all__ = [
    "DocumentFetcher",
    "FallbackFetcher",
    "HttpFetcher",
    "create_fetcher",
    "playwright_available",
]
