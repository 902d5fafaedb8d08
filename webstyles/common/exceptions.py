"""Exception types for style guide scraping errors.

Everything raised by this package derives from StyleGuideException, which
carries the URL being processed and a dict of context that is rendered into
the error message.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class StyleGuideException(Exception):
    """Base class for style guide scraping errors.

    The scraper makes assumptions about the style guide's page structure and
    the text held in its tables. When these assumptions are violated, a
    subclass of this exception is raised with enough context to find the
    offending input.
    """

    def __init__(
        self,
        message: str,
        request_url: str = "",
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the error.
            request_url: The URL of the page being processed, if known.
            context: Optional dict of additional context (values, counts, etc).
        """
        self.message = message
        self.request_url = request_url
        self.context = context or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context.

        Returns:
            Formatted error message string.
        """
        parts = [self.message]
        if self.request_url:
            parts.append(f"URL: {self.request_url}")

        if self.context:
            parts.append("Context:")
            for key, value in self.context.items():
                parts.append(f"  {key}: {value}")

        return "\n".join(parts)


class FetchError(StyleGuideException):
    """Raised when the source document cannot be retrieved or parsed.

    Fatal for the pipeline run. The underlying error is chained as
    ``__cause__`` and its description is kept in the context.
    """

    def __init__(
        self,
        url: str,
        reason: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Could not fetch document: {reason}", url, context)


class InvalidColorError(StyleGuideException):
    """Raised when a color table column cannot be classified.

    Either the column has no name, or none of its values held an RGB triple
    or a hex value.

    Attributes:
        name: The color name that was provided (may be empty or None).
        values: The full list of raw values that were scanned.
    """

    def __init__(
        self,
        name: str | None,
        values: Sequence[str | None],
        message: str | None = None,
        request_url: str = "",
    ) -> None:
        self.name = name
        self.values = list(values)
        super().__init__(
            message or "Invalid color parameters were provided",
            request_url,
            {"name": name, "values": self.values},
        )


class FormatError(StyleGuideException):
    """Raised when a record cannot be rendered in the requested format."""

    def __init__(
        self,
        requested_format: str,
        css_name: str,
        available_formats: Sequence[str] = (),
    ) -> None:
        self.requested_format = requested_format
        self.available_formats = tuple(available_formats)
        if requested_format in ("hex", "rgb"):
            message = (
                f"Color {css_name} has no {requested_format} value to render"
            )
        else:
            message = (
                f'format must be either "hex" or "rgb". '
                f"Instead got {requested_format!r}"
            )
        super().__init__(
            message,
            context={
                "css_name": css_name,
                "available_formats": ", ".join(self.available_formats)
                or "none",
            },
        )


class MalformedRowError(StyleGuideException):
    """Raised when a scale increment row does not hold a valid increment.

    Not fatal: the row extractor hands these to a callback that logs them by
    default and carries on with the next row.

    Attributes:
        row_index: Zero-based index of the row within the table.
        cells: The non-empty cell texts of the row.
        reason: Short description of what was wrong with the row.
    """

    def __init__(
        self,
        row_index: int,
        cells: Sequence[str],
        reason: str,
        request_url: str = "",
    ) -> None:
        self.row_index = row_index
        self.cells = list(cells)
        self.reason = reason
        super().__init__(
            f"Row {row_index} {reason}",
            request_url,
            {"row_index": row_index, "cells": self.cells},
        )


class HTMLStructureError(StyleGuideException):
    """Raised when HTML structure doesn't match expectations.

    Raised when a CSS selector returns a different number of elements than
    expected, which usually means the style guide's markup has changed.

    Attributes:
        selector: The CSS selector that was used.
        description: Human-readable description of what was being selected.
        expected_min: Minimum number of elements expected.
        expected_max: Maximum number of elements expected (None = unlimited).
        actual_count: Actual number of elements found.
    """

    def __init__(
        self,
        selector: str,
        description: str,
        expected_min: int,
        expected_max: int | None,
        actual_count: int,
        request_url: str = "",
    ) -> None:
        self.selector = selector
        self.description = description
        self.expected_min = expected_min
        self.expected_max = expected_max
        self.actual_count = actual_count

        if expected_max is None:
            expected_str = f"at least {expected_min}"
        elif expected_min == expected_max:
            expected_str = f"exactly {expected_min}"
        else:
            expected_str = f"between {expected_min} and {expected_max}"

        message = (
            f"HTML structure mismatch: Expected {expected_str} "
            f"elements for '{description}', but found {actual_count}"
        )

        context = {
            "selector": selector,
            "expected_min": expected_min,
            "expected_max": expected_max
            if expected_max is not None
            else "unlimited",
            "actual_count": actual_count,
        }

        super().__init__(message, request_url, context)


class MissingTableError(HTMLStructureError):
    """Raised when the page holds no table to extract from."""

    def __init__(
        self, selector: str, description: str, request_url: str = ""
    ) -> None:
        super().__init__(
            selector=selector,
            description=description,
            expected_min=1,
            expected_max=None,
            actual_count=0,
            request_url=request_url,
        )
