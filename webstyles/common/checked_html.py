"""Count-checked CSS queries over lxml trees.

The extractors assume the style guide keeps a particular shape: a page of
tables, rows of cells, columns addressable by position. CheckedHtmlElement
turns each of those assumptions into an explicit expected count, so a page
whose markup has drifted fails with the selector and the counts in hand
rather than yielding a short stylesheet.
"""

from __future__ import annotations

from cssselect import SelectorError
from lxml.html import HtmlElement

from webstyles.common.exceptions import HTMLStructureError


class CheckedHtmlElement:
    """An lxml element whose CSS queries state how many matches they expect.

    Attributes other than checked_css() and request_url are looked up on the
    wrapped element, so ``tag`` and ``text_content()`` work unchanged.
    """

    def __init__(self, element: HtmlElement, request_url: str = "") -> None:
        """Wrap ``element``.

        Args:
            element: Parsed lxml element, usually a document root or a table.
            request_url: Page the element came from, reported in errors.
        """
        self._element = element
        self._request_url = request_url

    @property
    def request_url(self) -> str:
        return self._request_url

    def checked_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[CheckedHtmlElement]:
        """Select descendants and check how many were found.

        Args:
            selector: CSS selector, e.g. ``"td:nth-child(2)"``.
            description: What the selector finds, e.g. ``"color tables"``.
                Used in the error message.
            min_count: Fewest matches accepted. Pass 0 for optional parts
                such as a column the table may not have.
            max_count: Most matches accepted, or None for no limit.

        Returns:
            The matches in document order, each wrapped so it can be queried
            in turn.

        Raises:
            HTMLStructureError: If the match count is outside
                ``[min_count, max_count]`` or the selector does not parse.

        Example::

            page = CheckedHtmlElement(document_root, url)
            for table in page.checked_css("table", "color tables"):
                names = table.checked_css(
                    "td:nth-child(1)", "first color column", min_count=0
                )
        """
        try:
            matches = self._element.cssselect(selector)
        except SelectorError as e:
            raise HTMLStructureError(
                selector=selector,
                description=description,
                expected_min=min_count,
                expected_max=max_count,
                actual_count=0,
                request_url=self._request_url,
            ) from e

        found = len(matches)
        too_many = max_count is not None and found > max_count
        if found < min_count or too_many:
            raise HTMLStructureError(
                selector=selector,
                description=description,
                expected_min=min_count,
                expected_max=max_count,
                actual_count=found,
                request_url=self._request_url,
            )

        return [CheckedHtmlElement(match, self._request_url) for match in matches]

    def __getattr__(self, name: str):
        return getattr(self._element, name)
