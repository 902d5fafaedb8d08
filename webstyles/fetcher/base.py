"""Base class for document fetchers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from webstyles.common.lxml_page_element import LxmlPageElement


class DocumentFetcher(ABC):
    """Retrieves a page and returns it as a parsed document.

    Every implementation returns an LxmlPageElement, so extractors get the
    same query capability whichever way the markup was obtained.
    """

    #: Short name used in log messages and error context.
    name: str = "fetcher"

    @abstractmethod
    async def fetch(self, url: str) -> LxmlPageElement:
        """Fetch and parse the document at ``url``.

        Args:
            url: Absolute URL of an HTML page.

        Returns:
            The parsed document.

        Raises:
            FetchError: If the page cannot be retrieved or parsed.
        """
