"""LxmlPageElement implementation wrapping CheckedHtmlElement.

This module provides the implementation of the PageElement protocol used by
every fetcher, and parse_document(), the pure HTML-to-DOM step they share.
"""

from __future__ import annotations

from lxml import etree, html

from webstyles.common.checked_html import CheckedHtmlElement
from webstyles.common.exceptions import FetchError


class LxmlPageElement:
    """Implementation of PageElement protocol wrapping CheckedHtmlElement.

    Attributes:
        _element: The underlying CheckedHtmlElement.
        _url: URL of the document, used for error context.
    """

    def __init__(self, element: CheckedHtmlElement, url: str = ""):
        """Initialize LxmlPageElement.

        Args:
            element: The CheckedHtmlElement to wrap.
            url: URL of the document the element belongs to.
        """
        self._element = element
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def query_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[LxmlPageElement]:
        """Query elements by CSS selector.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching LxmlPageElement instances.

        Raises:
            HTMLStructureError: If count doesn't match expectations.
        """
        checked_elements = self._element.checked_css(
            selector, description, min_count, max_count
        )
        return [LxmlPageElement(elem, self._url) for elem in checked_elements]

    def text_content(self) -> str:
        """Extract the text content.

        Returns:
            Text content of the element and its descendants.
        """
        return self._element.text_content()

    def tag_name(self) -> str:
        """Get the element's tag name.

        Returns:
            Tag name as a lowercase string (e.g., "table", "td").
        """
        return self._element.tag.lower()


def parse_document(markup: str | bytes, url: str = "") -> LxmlPageElement:
    """Parse HTML markup into a queryable document.

    No scripts are executed; what is in the markup is what gets queried.

    Args:
        markup: The HTML source.
        url: URL the markup was retrieved from, for error context.

    Returns:
        LxmlPageElement wrapping the document's root element.

    Raises:
        FetchError: If lxml rejects the markup (e.g. an empty document).
    """
    try:
        root = html.document_fromstring(markup)
    except (etree.ParserError, ValueError) as e:
        raise FetchError(
            url, "document could not be parsed", {"error": str(e)}
        ) from e
    return LxmlPageElement(CheckedHtmlElement(root, url), url)
