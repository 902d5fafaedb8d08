"""Fetcher selection and fallback.

The browser-rendering path is preferred because it sees the page the way a
reader does. Where Playwright is not installed, or the browser cannot be
started, the plain HTTP path is used instead.
"""

from __future__ import annotations

import importlib.util
import logging

from webstyles.common.exceptions import FetchError
from webstyles.common.lxml_page_element import LxmlPageElement
from webstyles.fetcher.base import DocumentFetcher
from webstyles.fetcher.http_fetcher import HttpFetcher

logger = logging.getLogger(__name__)

RENDERERS = ("auto", "playwright", "http")


class FallbackFetcher(DocumentFetcher):
    """Tries a primary fetcher, then a fallback if the primary fails.

    Args:
        primary: Fetcher tried first.
        fallback: Fetcher tried when the primary raises FetchError.
    """

    def __init__(
        self, primary: DocumentFetcher, fallback: DocumentFetcher
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"

    async def fetch(self, url: str) -> LxmlPageElement:
        try:
            return await self.primary.fetch(url)
        except FetchError as primary_error:
            logger.warning(
                f"{self.primary.name} fetcher failed for {url} "
                f"({primary_error.reason}), falling back to "
                f"{self.fallback.name}",
                extra={"request_url": url},
            )
            try:
                return await self.fallback.fetch(url)
            except FetchError as fallback_error:
                raise FetchError(
                    url,
                    "every fetcher failed",
                    {
                        self.primary.name: str(primary_error),
                        self.fallback.name: str(fallback_error),
                    },
                ) from fallback_error


def playwright_available() -> bool:
    """Whether the playwright package can be imported."""
    return importlib.util.find_spec("playwright") is not None


def create_fetcher(
    renderer: str = "auto",
    timeout: float | None = None,
    browser_type: str = "chromium",
    headless: bool = True,
) -> DocumentFetcher:
    """Choose a fetcher for the current environment.

    Args:
        renderer: ``"auto"`` renders with Playwright when it is installed and
            falls back to plain HTTP; ``"playwright"`` and ``"http"`` force
            one path.
        timeout: Timeout in seconds for each fetch. None means no timeout.
        browser_type: Browser used by the Playwright path.
        headless: Run the browser headless.

    Returns:
        The selected DocumentFetcher.

    Raises:
        ValueError: If renderer is not one of RENDERERS.
        FetchError: If ``"playwright"`` is forced but not installed.
    """
    if renderer not in RENDERERS:
        raise ValueError(
            f"renderer must be one of {', '.join(RENDERERS)}, got {renderer!r}"
        )

    http = HttpFetcher(timeout=timeout)
    if renderer == "http":
        return http

    if not playwright_available():
        if renderer == "playwright":
            raise FetchError(
                "",
                "playwright is not installed. Install the 'playwright' "
                "extra: pip install webstyles[playwright]",
            )
        logger.debug("playwright is not installed, using plain HTTP")
        return http

    from webstyles.fetcher.playwright_fetcher import PlaywrightFetcher

    browser = PlaywrightFetcher(
        browser_type=browser_type, headless=headless, timeout=timeout
    )
    if renderer == "playwright":
        return browser
    return FallbackFetcher(browser, http)
