"""Extraction of typographic scale increments from the scale table.

The scale increments page has a single table with a heading row followed by
one row per increment: base size, increment name, pixel size and rem size.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterator

from webstyles.common.data_models import ScaleIncrement
from webstyles.common.exceptions import MalformedRowError
from webstyles.common.page_element import PageElement

logger = logging.getLogger(__name__)

CELLS_PER_ROW = 4

INCREMENT_NAME_PATTERN = re.compile(r"Base-?\d+")

MalformedRowCallback = Callable[[MalformedRowError], None]


def log_malformed_row(error: MalformedRowError) -> None:
    """Default callback for malformed rows: log and move on.

    Args:
        error: The row failure.
    """
    logger.warning(
        f"{error.message}: {error.cells}",
        extra={
            "row_index": error.row_index,
            "cells": error.cells,
            "request_url": error.request_url,
        },
    )


def extract_scales(
    table: PageElement,
    on_malformed_row: MalformedRowCallback = log_malformed_row,
) -> Iterator[ScaleIncrement]:
    """Enumerate the scale increments in the scale table.

    Row 0 holds the table headings and is always skipped. Rows that do not
    hold a valid increment are handed to ``on_malformed_row`` and skipped.

    Args:
        table: The scale increments table.
        on_malformed_row: Called with a MalformedRowError for each skipped
            row.

    Yields:
        One ScaleIncrement per valid row, top to bottom.
    """
    rows = table.query_css("tr", "scale table rows", min_count=0)

    for i, row in enumerate(rows):
        if i == 0:
            continue

        cells = [
            text
            for text in (
                cell.text_content()
                for cell in row.query_css("td", "scale cells", min_count=0)
            )
            if text
        ]

        if len(cells) < CELLS_PER_ROW:
            on_malformed_row(
                MalformedRowError(
                    i,
                    cells,
                    f"should have {CELLS_PER_ROW} elements "
                    f"but only has {len(cells)}",
                    table.url,
                )
            )
            continue

        # Whitespace-only cells survive the filter above
        if not all(text.strip() for text in cells[:CELLS_PER_ROW]):
            on_malformed_row(
                MalformedRowError(
                    i, cells, "contains an empty element", table.url
                )
            )
            continue

        base, increment_name, pixel_size, rem_size = cells[:CELLS_PER_ROW]
        if not INCREMENT_NAME_PATTERN.search(increment_name):
            on_malformed_row(
                MalformedRowError(
                    i,
                    cells,
                    f"has an invalid increment name: {increment_name}. "
                    f"Expected to match {INCREMENT_NAME_PATTERN.pattern}",
                    table.url,
                )
            )
            continue

        yield ScaleIncrement(
            base=base,
            increment_name=increment_name,
            pixel_size=pixel_size,
            rem_size=rem_size,
        )
