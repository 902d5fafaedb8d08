"""Plain HTTP document fetcher.

Fetches the raw markup with httpx and parses it with lxml. No scripts are
executed, so content rendered client-side is not visible to this fetcher.
"""

from __future__ import annotations

import logging
import ssl

import httpx

from webstyles.common.exceptions import FetchError
from webstyles.common.lxml_page_element import (
    LxmlPageElement,
    parse_document,
)
from webstyles.fetcher.base import DocumentFetcher

logger = logging.getLogger(__name__)


class HttpFetcher(DocumentFetcher):
    """Fetches documents with an httpx.AsyncClient.

    Example::

        fetcher = HttpFetcher(timeout=30.0)
        document = await fetcher.fetch(COLOR_PAGE_URL)
    """

    name = "http"

    def __init__(
        self,
        timeout: float | None = None,
        ssl_context: ssl.SSLContext | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            timeout: Request timeout in seconds. None means no timeout (default).
            ssl_context: Optional SSL context for HTTPS connections.
            headers: Extra request headers.
        """
        self.timeout = timeout
        self.ssl_context = ssl_context
        self.headers = headers or {}

    def _client(self) -> httpx.AsyncClient:
        if self.ssl_context:
            return httpx.AsyncClient(
                verify=self.ssl_context,
                timeout=self.timeout,
                headers=self.headers,
                follow_redirects=True,
            )
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            follow_redirects=True,
        )

    async def fetch(self, url: str) -> LxmlPageElement:
        """Fetch the raw markup at ``url`` and parse it.

        Raises:
            FetchError: On transport errors, timeouts, non-2xx responses, or
                markup lxml cannot parse.
        """
        logger.info(f"Fetching {url}")
        try:
            async with self._client() as client:
                response = await client.get(url)
        except httpx.TimeoutException as e:
            raise FetchError(
                url, f"request timed out after {self.timeout}s"
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(
                url, "request failed", {"error": f"{type(e).__name__}: {e}"}
            ) from e

        if not response.is_success:
            raise FetchError(
                url,
                f"HTTP {response.status_code}",
                {"status_code": response.status_code},
            )

        logger.debug(
            f"Received {len(response.content)} bytes from {response.url}",
            extra={"status_code": response.status_code},
        )
        return parse_document(response.content, str(response.url))
