"""Scrapes style definitions from the WSDOT web style guide.

scrape_colors() and scrape_scales() tie a fetcher to the extractors for the
two pages of the style guide that hold tables of definitions.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from urllib.parse import urljoin

from webstyles.colors import ColorRecord
from webstyles.common.data_models import ScaleIncrement
from webstyles.common.exceptions import MissingTableError
from webstyles.common.page_element import PageElement
from webstyles.extract.colors import (
    InvalidColorCallback,
    extract_all_colors,
    log_invalid_color,
)
from webstyles.extract.scales import (
    MalformedRowCallback,
    extract_scales,
    log_malformed_row,
)
from webstyles.fetcher import DocumentFetcher, create_fetcher

logger = logging.getLogger(__name__)

URL_ROOT = "https://wsdotwebhelp.gitbook.io"

COLOR_PAGE_URL = urljoin(URL_ROOT, "web-style-guide/design-foundations/color")

SCALE_INCREMENTS_URL = urljoin(
    URL_ROOT,
    "web-style-guide/design-foundations/typography/typographic-scale/"
    "scale-increments",
)


def find_tables(document: PageElement, description: str) -> list[PageElement]:
    """Find every table in the document.

    Raises:
        MissingTableError: If the document has no tables.
    """
    tables = document.query_css("table", description, min_count=0)
    if not tables:
        raise MissingTableError("table", description, document.url)
    logger.debug(f"Found {len(tables)} {description} on {document.url}")
    return tables


async def scrape_colors(
    url: str = COLOR_PAGE_URL,
    fetcher: DocumentFetcher | None = None,
    on_invalid_color: InvalidColorCallback = log_invalid_color,
) -> list[ColorRecord]:
    """Scrape the color definitions from the color page.

    Args:
        url: The color page URL. Defaults to COLOR_PAGE_URL.
        fetcher: Fetcher to use. Defaults to create_fetcher().
        on_invalid_color: Called for each unclassifiable color column.

    Returns:
        Every color on the page, in document order.

    Raises:
        FetchError: If the page cannot be fetched.
        MissingTableError: If the page has no tables.
    """
    fetcher = fetcher or create_fetcher()
    document = await fetcher.fetch(url)
    tables = find_tables(document, "color tables")
    return extract_all_colors(tables, on_invalid_color)


async def scrape_scales(
    url: str = SCALE_INCREMENTS_URL,
    fetcher: DocumentFetcher | None = None,
    on_malformed_row: MalformedRowCallback = log_malformed_row,
) -> AsyncIterator[ScaleIncrement]:
    """Scrape the typographic scale increments.

    Only the first table on the page is read.

    Args:
        url: The scale increments page URL. Defaults to SCALE_INCREMENTS_URL.
        fetcher: Fetcher to use. Defaults to create_fetcher().
        on_malformed_row: Called for each row that is skipped.

    Yields:
        ScaleIncrement for each valid row in the table.

    Raises:
        FetchError: If the page cannot be fetched.
        MissingTableError: If the page has no table.
    """
    fetcher = fetcher or create_fetcher()
    document = await fetcher.fetch(url)
    table = find_tables(document, "scale increment table")[0]
    for increment in extract_scales(table, on_malformed_row):
        yield increment
