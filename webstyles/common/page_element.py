"""PageElement protocol for querying fetched documents.

Extractors only ever see this interface. PageElement is always backed by
static parsed HTML (LXML); each fetcher is responsible for obtaining the
HTML, whether by a plain HTTP request or by serializing a rendered
Playwright DOM.
"""

from __future__ import annotations

from typing import Protocol


class PageElement(Protocol):
    """Driver-agnostic interface for a document or an element within it."""

    @property
    def url(self) -> str:
        """URL of the document this element belongs to."""
        ...

    def query_css(
        self,
        selector: str,
        description: str,
        min_count: int = 1,
        max_count: int | None = None,
    ) -> list[PageElement]:
        """Query elements by CSS selector.

        Args:
            selector: CSS selector expression.
            description: Human-readable description of what's being selected.
            min_count: Minimum number of elements expected (default: 1).
            max_count: Maximum number of elements expected (None = unlimited).

        Returns:
            List of matching elements in document order.

        Raises:
            HTMLStructureError: If count doesn't match expectations.
        """
        ...

    def text_content(self) -> str:
        """Text content of the element and its descendants."""
        ...

    def tag_name(self) -> str:
        """Tag name as a lowercase string (e.g., "table", "td")."""
        ...
