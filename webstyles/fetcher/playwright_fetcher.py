"""Browser-rendering document fetcher.

Renders the page in a real browser so that client-side rendering has run,
serializes the rendered DOM to HTML, and parses that with LXML. Extractors
never receive live browser references.
"""

from __future__ import annotations

import logging
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from webstyles.common.exceptions import FetchError
from webstyles.common.lxml_page_element import (
    LxmlPageElement,
    parse_document,
)
from webstyles.fetcher.base import DocumentFetcher

logger = logging.getLogger(__name__)

BROWSER_TYPES = ("chromium", "firefox", "webkit")


class PlaywrightFetcher(DocumentFetcher):
    """Fetches documents by rendering them with Playwright.

    A browser is launched for each fetch and closed afterwards.

    Example::

        fetcher = PlaywrightFetcher(browser_type="firefox")
        document = await fetcher.fetch(COLOR_PAGE_URL)
    """

    name = "playwright"

    def __init__(
        self,
        browser_type: str = "chromium",
        headless: bool = True,
        timeout: float | None = None,
        user_agent: str | None = None,
        locale: str = "en-US",
    ) -> None:
        """Initialize the fetcher.

        Args:
            browser_type: "chromium", "firefox", or "webkit" (default: "chromium").
            headless: Run browser in headless mode (default: True).
            timeout: Navigation timeout in seconds. None means no timeout.
            user_agent: Custom user agent string (default: browser default).
            locale: Browser locale (default: "en-US").
        """
        if browser_type not in BROWSER_TYPES:
            raise ValueError(
                f"browser_type must be one of {', '.join(BROWSER_TYPES)}"
            )
        self.browser_type = browser_type
        self.headless = headless
        self.timeout = timeout
        self.user_agent = user_agent
        self.locale = locale

    async def fetch(self, url: str) -> LxmlPageElement:
        """Render the page at ``url`` and parse the resulting DOM.

        Raises:
            FetchError: If the browser cannot be launched, navigation fails
                or returns a non-2xx status, or the DOM cannot be parsed.
        """
        logger.info(f"Rendering {url} with {self.browser_type}")
        # Playwright takes milliseconds; 0 disables the timeout
        timeout_ms = self.timeout * 1000 if self.timeout else 0

        try:
            async with async_playwright() as playwright:
                browser_launcher = getattr(playwright, self.browser_type)
                browser = await browser_launcher.launch(headless=self.headless)
                try:
                    context_kwargs: dict[str, Any] = {"locale": self.locale}
                    if self.user_agent:
                        context_kwargs["user_agent"] = self.user_agent
                    context = await browser.new_context(**context_kwargs)
                    page = await context.new_page()

                    response = await page.goto(
                        url, wait_until="domcontentloaded", timeout=timeout_ms
                    )
                    if response is not None and not response.ok:
                        raise FetchError(
                            url,
                            f"HTTP {response.status}",
                            {"status_code": response.status},
                        )

                    html_content = await page.content()
                    final_url = page.url
                finally:
                    await browser.close()
        except PlaywrightError as e:
            raise FetchError(
                url,
                "browser could not load page",
                {"error": f"{type(e).__name__}: {e.message}"},
            ) from e

        return parse_document(html_content, final_url)
