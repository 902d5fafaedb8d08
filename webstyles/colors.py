"""Color definitions and classification of color table text.

The style guide's color tables hold loosely formatted text: a Pantone code
such as ``"2945 100%"``, an RGB triple such as ``"0, 75, 135"``, a hex code
such as ``"004B87"``, or a note such as ``"Same as Primary Blue"``.
classify_value() recognizes one of these per string, and
ColorRecord.classify() folds a column's worth of strings into a record.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, NamedTuple

from pydantic import Field, model_validator

from webstyles.common.data_models import StyleRecord
from webstyles.common.exceptions import FormatError, InvalidColorError

ColorFormat = str
COLOR_FORMATS: tuple[ColorFormat, ...] = ("hex", "rgb")

Rgb = tuple[int, int, int]


class ColorValueKind(str, Enum):
    """Kinds of color value text. Values are ColorRecord field names."""

    PANTONE = "pantone_code"
    RGB = "rgb"
    HEX = "hex"
    ALIAS = "alias_reference"


class ClassifiedValue(NamedTuple):
    """A color value string recognized as one kind of value."""

    kind: ColorValueKind
    value: Any


def _parse_rgb(match: re.Match[str]) -> Rgb:
    red, green, blue = (int(group) for group in match.groups())
    return red, green, blue


# Evaluated in order; the first pattern found in a value wins.
COLOR_VALUE_PATTERNS: list[
    tuple[ColorValueKind, re.Pattern[str], Callable[[re.Match[str]], Any]]
] = [
    (
        ColorValueKind.PANTONE,
        re.compile(r"(\d+)\s+(\d+)%", re.IGNORECASE),
        lambda m: m.group(0),
    ),
    (
        ColorValueKind.RGB,
        re.compile(r"(\d+),\s(\d+),\s(\d+)"),
        _parse_rgb,
    ),
    (
        ColorValueKind.HEX,
        re.compile(r"(?<![0-9a-f])[0-9a-f]{6}(?![0-9a-f])", re.IGNORECASE),
        lambda m: int(m.group(0), 16),
    ),
    (
        ColorValueKind.ALIAS,
        re.compile(r"Same as.+", re.IGNORECASE),
        lambda m: m.group(0),
    ),
]


def classify_value(text: str | None) -> ClassifiedValue | None:
    """Recognize a single color table string.

    Args:
        text: Cell text, or None for a missing cell.

    Returns:
        The kind and parsed value of the first matching pattern, or None if
        the text matches none of them.

    Examples:
        >>> classify_value("0, 75, 135")
        ClassifiedValue(kind=<ColorValueKind.RGB: 'rgb'>, value=(0, 75, 135))
        >>> classify_value("Swatch") is None
        True
    """
    if text is None:
        return None
    for kind, pattern, convert in COLOR_VALUE_PATTERNS:
        match = pattern.search(text)
        if match:
            return ClassifiedValue(kind, convert(match))
    return None


class ColorRecord(StyleRecord):
    """A named color from the style guide.

    At least one of ``rgb`` and ``hex`` is always present.
    """

    name: str = Field(..., min_length=1, description="Color name")
    pantone_code: str | None = Field(
        None, description="Pantone code text, e.g. 2945 100%"
    )
    rgb: Rgb | None = Field(None, description="Red, green, blue channels")
    hex: int | None = Field(None, description="Numeric value of the hex code")
    alias_reference: str | None = Field(
        None, description="'Same as ...' note naming another color"
    )

    @model_validator(mode="after")
    def _require_rgb_or_hex(self) -> ColorRecord:
        if not self.is_valid:
            raise ValueError("Either an RGB or HEX color value is required")
        return self

    @classmethod
    def classify(
        cls,
        name: str | None,
        values: Iterable[str | None],
        request_url: str = "",
    ) -> ColorRecord:
        """Build a record from a color's name and its raw value strings.

        Each value is classified with classify_value(); values that match
        nothing are discarded. A later value of the same kind replaces an
        earlier one.

        Args:
            name: The color's name.
            values: Raw strings from the color's table column. None entries
                are skipped.
            request_url: URL of the page the values came from, for errors.

        Returns:
            The classified ColorRecord.

        Raises:
            InvalidColorError: If name is empty, or no value held an RGB
                triple or a hex code.
        """
        values = list(values)
        if not name:
            raise InvalidColorError(name, values, request_url=request_url)

        fields: dict[str, Any] = {}
        for text in values:
            classified = classify_value(text)
            if classified is not None:
                fields[classified.kind.value] = classified.value

        if "rgb" not in fields and "hex" not in fields:
            raise InvalidColorError(
                name,
                values,
                "Either an RGB or HEX color value must be provided",
                request_url=request_url,
            )
        return cls(name=name, **fields)

    @property
    def is_valid(self) -> bool:
        return self.rgb is not None or self.hex is not None

    @property
    def css_variable_name(self) -> str:
        """CSS custom property name, e.g. ``--accent-50-percent``."""
        name = re.sub(r"\s", "-", self.name).replace("%", "-percent")
        return f"--{name}".lower()

    @property
    def available_formats(self) -> tuple[ColorFormat, ...]:
        """Formats render() accepts for this record, hex first."""
        formats = []
        if self.hex is not None:
            formats.append("hex")
        if self.rgb is not None:
            formats.append("rgb")
        return tuple(formats)

    @property
    def comment(self) -> str | None:
        if self.rgb is None:
            return None
        return ",".join(str(channel) for channel in self.rgb)

    def render(self, format: ColorFormat = "hex") -> str:
        """Render the color as a CSS custom property declaration.

        Args:
            format: ``"hex"`` or ``"rgb"``.

        Returns:
            e.g. ``--primary-blue: #004b87;`` or
            ``--primary-blue: rgb(0,75,135);``.

        Raises:
            FormatError: If the format is unknown or the record has no value
                for it.
        """
        if format == "hex" and self.hex is not None:
            return f"{self.css_variable_name}: #{self.hex:06x};"
        if format == "rgb" and self.rgb is not None:
            channels = ",".join(str(channel) for channel in self.rgb)
            return f"{self.css_variable_name}: rgb({channels});"
        raise FormatError(
            format, self.css_variable_name, self.available_formats
        )
