"""Test utilities for building documents and collecting callback output."""

import socket
from collections.abc import Callable
from contextlib import closing
from typing import Any

from lxml import html

from webstyles.common.checked_html import CheckedHtmlElement
from webstyles.common.lxml_page_element import LxmlPageElement


def make_page(
    markup: str, url: str = "https://example.com/page"
) -> LxmlPageElement:
    """Parse markup into an LxmlPageElement.

    Args:
        markup: HTML source.
        url: URL to attach for error context.

    Returns:
        LxmlPageElement wrapping the parsed document.
    """
    doc = html.fromstring(markup)
    return LxmlPageElement(CheckedHtmlElement(doc, url), url)


def make_table(rows: list[list[str]], cell: str = "td") -> LxmlPageElement:
    """Build a single table from a list of rows of cell texts.

    Returns:
        LxmlPageElement for the <table> element.
    """
    body = "".join(
        "<tr>" + "".join(f"<{cell}>{text}</{cell}>" for text in row) + "</tr>"
        for row in rows
    )
    page = make_page(f"<html><body><table>{body}</table></body></html>")
    return page.query_css("table", "table", min_count=1, max_count=1)[0]


def collect_errors() -> tuple[Callable[[Any], None], list[Any]]:
    """Create a callback that collects the errors it is given.

    Returns:
        A tuple of (callback_function, errors_list).

    Example:
        callback, errors = collect_errors()
        list(extract_scales(table, on_malformed_row=callback))
        assert [e.row_index for e in errors] == [3]
    """
    errors: list[Any] = []

    def callback(error: Any) -> None:
        errors.append(error)

    return callback, errors


def find_free_port() -> int:
    """Find a free port on localhost.

    Returns:
        An available port number.
    """
    with closing(socket.socket(socket.AF_INET, socket.SOCK_STREAM)) as s:
        s.bind(("", 0))
        s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        return s.getsockname()[1]
