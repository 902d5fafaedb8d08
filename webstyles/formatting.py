"""Rendering of extracted records as CSS or JSON lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from webstyles.colors import COLOR_FORMATS, ColorFormat, ColorRecord
from webstyles.common.data_models import StyleRecord
from webstyles.common.exceptions import FormatError


def declaration(record: StyleRecord, color_format: ColorFormat = "hex") -> str:
    """Render one record as a CSS custom property declaration.

    Colors are rendered in ``color_format`` when the record has a value for
    it, otherwise in the first format the record does have.

    Raises:
        FormatError: If ``color_format`` is not one of COLOR_FORMATS.
    """
    if isinstance(record, ColorRecord):
        if color_format not in COLOR_FORMATS:
            raise FormatError(
                color_format, record.css_variable_name, record.available_formats
            )
        if color_format not in record.available_formats:
            color_format = record.available_formats[0]
        return record.render(color_format)
    return record.render()


def stylesheet_lines(
    records: Iterable[StyleRecord], color_format: ColorFormat = "hex"
) -> Iterator[str]:
    """Yield the lines of a ``:root`` block declaring every record.

    Example output::

        :root {
        	--primary-blue: #004b87; /* 0,75,135 */
        }
    """
    yield ":root {"
    for record in records:
        line = f"\t{declaration(record, color_format)}"
        if record.comment:
            line = f"{line} /* {record.comment} */"
        yield line
    yield "}"


def format_stylesheet(
    records: Iterable[StyleRecord], color_format: ColorFormat = "hex"
) -> str:
    return "\n".join(stylesheet_lines(records, color_format))


def json_lines(records: Iterable[StyleRecord]) -> Iterator[str]:
    """Yield one JSON object per record."""
    for record in records:
        yield record.model_dump_json()
