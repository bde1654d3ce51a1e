"""Colours and cell styling properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

DEFAULT_LINE_THICKNESS = 0.2


@dataclass(frozen=True)
class Color:
    """An RGB colour; 0 on all channels is black, 255 is white."""

    red: int = 0
    green: int = 0
    blue: int = 0

    def __str__(self) -> str:
        return f"RGB({self.red}, {self.green}, {self.blue})"


WHITE_COLOR = Color(255, 255, 255)
BLACK_COLOR = Color(0, 0, 0)
RED_COLOR = Color(255, 0, 0)
GREEN_COLOR = Color(0, 255, 0)
BLUE_COLOR = Color(0, 0, 255)


def color_string(color: Color | None) -> str:
    """Describe a colour, or return an empty string for no colour."""
    return "" if color is None else str(color)


class LineStyle(str, Enum):
    """Style of a drawn line."""

    SOLID = "solid"
    DASHED = "dashed"


class Border(str, Enum):
    """Which sides of a cell get a border."""

    NONE = ""
    FULL = "1"
    LEFT = "L"
    TOP = "T"
    RIGHT = "R"
    BOTTOM = "B"


@dataclass
class CellStyle:
    """Styling of a grid cell, applicable to rows and columns."""

    background_color: Color | None = None
    border_color: Color | None = None
    border_type: Border = Border.NONE
    border_thickness: float = 0.0
    line_style: LineStyle | None = None

    def to_map(self) -> dict[str, Any]:
        """Return the set fields keyed by their property names."""
        m: dict[str, Any] = {}
        if self.border_type:
            m["prop_border_type"] = self.border_type
        if self.border_thickness != 0:
            m["prop_border_thickness"] = self.border_thickness
        if self.line_style:
            m["prop_border_line_style"] = self.line_style
        if self.background_color is not None:
            m["prop_background_color"] = str(self.background_color)
        if self.border_color is not None:
            m["prop_border_color"] = str(self.border_color)
        return m