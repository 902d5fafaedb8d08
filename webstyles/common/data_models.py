"""Pydantic data models for extracted style definitions.

Records are immutable projections of the style guide's tables. Each one
knows how to render itself as a CSS custom property declaration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field


class StyleRecord(BaseModel, ABC):
    """Base class for records extracted from the style guide.

    Subclasses implement render() and may override comment.
    """

    model_config = ConfigDict(frozen=True)

    @property
    def comment(self) -> str | None:
        """Text to place in a CSS comment after the declaration, if any."""
        return None

    @abstractmethod
    def render(self) -> str:
        """Render the record as a CSS custom property declaration."""


class ScaleIncrement(StyleRecord):
    """One step of the typographic scale."""

    base: str = Field(..., description="Base size, e.g. 16")
    increment_name: str = Field(..., description="Step name, e.g. Base-1")
    pixel_size: str = Field(..., description="Size in pixels, e.g. 16px")
    rem_size: str = Field(..., description="Size in rem, e.g. 1rem")

    @property
    def css_variable_name(self) -> str:
        return f"--{self.increment_name}"

    @property
    def comment(self) -> str:
        return f"{self.pixel_size} {self.base}"

    def render(self) -> str:
        return f"{self.css_variable_name}: {self.rem_size};"
