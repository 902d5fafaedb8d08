"""Extraction of color definitions from the style guide's color tables.

The color page lays its data out in columns rather than rows. Each table
holds up to three colors side by side: the first row names them, the second
row holds a color swatch, and the remaining rows hold Pantone, RGB and hex
values in no fixed order::

    | Primary Blue | Accent Green | Accent 50%    |
    | (swatch)     | (swatch)     | (swatch)      |
    | 2945 100%    | 7481 100%    | Same as ...   |
    | 0, 75, 135   | 0, 171, 94   | 128, 213, 174 |
    | 004B87       | 00AB5E       | 80D5AE        |
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from webstyles.colors import ColorRecord
from webstyles.common.exceptions import InvalidColorError
from webstyles.common.page_element import PageElement

logger = logging.getLogger(__name__)

COLORS_PER_TABLE = 3

# Index of the swatch cell among a column's selected cells.
SWATCH_ROW = 1

InvalidColorCallback = Callable[[InvalidColorError], None]


def log_invalid_color(error: InvalidColorError) -> None:
    """Default callback for unclassifiable columns: log and move on.

    Args:
        error: The classification failure.
    """
    logger.error(
        f"Skipping color column: {error.message}",
        extra={
            "color_name": error.name,
            "values": error.values,
            "request_url": error.request_url,
        },
    )


def column_texts(table: PageElement, position: int) -> list[str] | None:
    """Collect the text of every cell in one column of a color table.

    Args:
        table: A color definition table.
        position: One-based column position.

    Returns:
        Right-trimmed cell texts with the swatch cell removed, or None if the
        table has no cells at that position.
    """
    cells = table.query_css(
        f"td:nth-child({position})",
        f"color column {position} cells",
        min_count=0,
    )
    if not cells:
        return None

    return [
        text.rstrip()
        for i, text in enumerate(cell.text_content() for cell in cells)
        if i != SWATCH_ROW and text is not None
    ]


def extract_colors(
    table: PageElement,
    on_invalid_color: InvalidColorCallback = log_invalid_color,
) -> Iterator[ColorRecord]:
    """Enumerate the color definitions in a color table.

    Columns that cannot be classified are handed to ``on_invalid_color``.
    The default callback logs the error and extraction continues with the
    next column; a callback that raises aborts the table.

    Args:
        table: A color definition table.
        on_invalid_color: Called with each InvalidColorError.

    Yields:
        One ColorRecord per populated, classifiable column, left to right.
    """
    for position in range(1, COLORS_PER_TABLE + 1):
        texts = column_texts(table, position)
        if texts is None:
            continue
        name, values = texts[0], texts[1:]
        try:
            record = ColorRecord.classify(name, values, request_url=table.url)
        except InvalidColorError as e:
            on_invalid_color(e)
            continue
        logger.debug(
            f"Classified color {record.name!r}",
            extra={"column": position, "css_name": record.css_variable_name},
        )
        yield record


def extract_all_colors(
    tables: Iterable[PageElement],
    on_invalid_color: InvalidColorCallback = log_invalid_color,
) -> list[ColorRecord]:
    """Extract the colors from every table, in document order.

    Args:
        tables: Color definition tables.
        on_invalid_color: Passed through to extract_colors().

    Returns:
        All ColorRecords, table by table and column by column.
    """
    return [
        record
        for table in tables
        for record in extract_colors(table, on_invalid_color)
    ]
