"""Tests for stylesheet and JSON rendering."""

import json

import pytest

from webstyles.colors import ColorRecord
from webstyles.common.data_models import ScaleIncrement, StyleRecord
from webstyles.common.exceptions import FormatError
from webstyles.formatting import (
    declaration,
    format_stylesheet,
    json_lines,
    stylesheet_lines,
)

BLUE = ColorRecord(name="Primary Blue", rgb=(0, 75, 135), hex=0x004B87)
HEX_ONLY = ColorRecord(name="Black", hex=0)
RGB_ONLY = ColorRecord(name="Gray", rgb=(83, 86, 90))
BASE_1 = ScaleIncrement(
    base="16", increment_name="Base-1", pixel_size="16px", rem_size="1rem"
)


class TestStyleRecord:
    """Tests for the StyleRecord base class."""

    def test_is_abstract(self):
        """A record type without render() shall not be instantiable."""
        with pytest.raises(TypeError):
            StyleRecord()

        class Unrendered(StyleRecord):
            name: str

        with pytest.raises(TypeError):
            Unrendered(name="x")

    def test_subclass_without_comment(self):
        class Plain(StyleRecord):
            value: str

            def render(self) -> str:
                return f"--plain: {self.value};"

        assert list(stylesheet_lines([Plain(value="1px")])) == [
            ":root {",
            "\t--plain: 1px;",
            "}",
        ]


class TestDeclaration:
    """Tests for declaration."""

    def test_requested_format(self):
        assert declaration(BLUE, "rgb") == "--primary-blue: rgb(0,75,135);"
        assert declaration(BLUE, "hex") == "--primary-blue: #004b87;"

    def test_falls_back_to_available_format(self):
        """A color missing the requested format shall use the one it has."""
        assert declaration(HEX_ONLY, "rgb") == "--black: #000000;"
        assert declaration(RGB_ONLY, "hex") == "--gray: rgb(83,86,90);"

    @pytest.mark.parametrize("record", [BLUE, HEX_ONLY, RGB_ONLY])
    def test_unknown_format(self, record):
        """An unknown format shall raise FormatError rather than fall back."""
        with pytest.raises(FormatError) as exc_info:
            declaration(record, "hsl")

        assert exc_info.value.requested_format == "hsl"
        assert exc_info.value.available_formats == record.available_formats
        assert 'format must be either "hex" or "rgb"' in str(exc_info.value)

    def test_scale_ignores_color_format(self):
        assert declaration(BASE_1, "rgb") == "--Base-1: 1rem;"


class TestStylesheetLines:
    """Tests for stylesheet_lines and format_stylesheet."""

    def test_colors(self):
        lines = list(stylesheet_lines([BLUE, HEX_ONLY]))

        assert lines == [
            ":root {",
            "\t--primary-blue: #004b87; /* 0,75,135 */",
            "\t--black: #000000;",
            "}",
        ]

    def test_scales(self):
        assert list(stylesheet_lines([BASE_1])) == [
            ":root {",
            "\t--Base-1: 1rem; /* 16px 16 */",
            "}",
        ]

    def test_unknown_format(self):
        with pytest.raises(FormatError):
            format_stylesheet([BLUE], "cmyk")

    def test_empty(self):
        """No records shall still produce an empty :root block."""
        assert format_stylesheet([]) == ":root {\n}"

    def test_format_stylesheet_joins_lines(self):
        assert format_stylesheet([RGB_ONLY], "rgb") == (
            ":root {\n\t--gray: rgb(83,86,90); /* 83,86,90 */\n}"
        )


class TestJsonLines:
    """Tests for json_lines."""

    def test_color(self):
        (line,) = json_lines([BLUE])

        assert json.loads(line) == {
            "name": "Primary Blue",
            "pantone_code": None,
            "rgb": [0, 75, 135],
            "hex": 0x004B87,
            "alias_reference": None,
        }

    def test_scale(self):
        (line,) = json_lines([BASE_1])

        assert json.loads(line) == {
            "base": "16",
            "increment_name": "Base-1",
            "pixel_size": "16px",
            "rem_size": "1rem",
        }

    def test_one_line_per_record(self):
        assert len(list(json_lines([BLUE, HEX_ONLY, RGB_ONLY]))) == 3
