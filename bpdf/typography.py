"""Fonts, text, signatures and page numbering properties."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from bpdf.color import DEFAULT_LINE_THICKNESS, RED_COLOR, Color, LineStyle
from bpdf.shapes import Line

_DEFAULT_FONT_SIZE = 8.0
_DEFAULT_SAFE_PADDING = 1.5


class FontStyle(str, Enum):
    """Style of a font, as understood by the PDF writer."""

    NORMAL = ""
    BOLD = "B"
    ITALIC = "I"
    BOLD_ITALIC = "BI"


class FontFamily(str, Enum):
    """Built-in font families."""

    ARIAL = "arial"
    HELVETICA = "helvetica"
    SYMBOL = "symbol"
    ZAP_BATS = "zapfdingbats"
    COURIER = "courier"


class Align(str, Enum):
    """Alignment of content inside a cell."""

    LEFT = "L"
    RIGHT = "R"
    CENTER = "C"
    TOP = "T"
    BOTTOM = "B"
    MIDDLE = "M"
    JUSTIFY = "J"


class BreakLineStrategy(str, Enum):
    """How long text is split into lines."""

    EMPTY_SPACE = "empty_space_strategy"
    DASH = "dash_strategy"


@dataclass
class Font:
    """Properties of a font."""

    family: str = ""
    style: FontStyle | None = None
    size: float = 0.0
    color: Color | None = None

    def append_map(self, mapping: dict[str, Any]) -> dict[str, Any]:
        """Add the set font fields to ``mapping``."""
        if self.family:
            mapping["prop_font_family"] = self.family
        if self.style is not None:
            mapping["prop_font_style"] = self.style
        if self.size != 0:
            mapping["prop_font_size"] = self.size
        if self.color is not None:
            mapping["prop_font_color"] = str(self.color)
        return mapping

    def make_valid(self, default_family: str) -> None:
        """Fill the unset fields with defaults."""
        if not self.family:
            self.family = default_family
        if self.style is None:
            self.style = FontStyle.NORMAL
        if self.size == 0.0:
            self.size = _DEFAULT_FONT_SIZE

    def to_text(self, align: Align, top: float, vertical_padding: float) -> Text:
        """Build valid text properties using this font."""
        text = Text(
            family=self.family,
            style=self.style,
            size=self.size,
            align=align,
            top=top,
            vertical_padding=vertical_padding,
            color=self.color,
        )
        text.make_valid(self)
        return text


@dataclass
class Text:
    """Properties of text inside a cell."""

    top: float = 0.0
    bottom: float = 0.0
    left: float = 0.0
    right: float = 0.0
    family: str = ""
    style: FontStyle | None = None
    size: float = 0.0
    align: Align | None = None
    break_line_strategy: BreakLineStrategy | None = None
    vertical_padding: float = 0.0
    color: Color | None = None
    hyperlink: str | None = None

    def to_map(self) -> dict[str, Any]:
        """Return the set fields keyed by their property names."""
        m: dict[str, Any] = {}
        for key, value in (
            ("prop_top", self.top),
            ("prop_bottom", self.bottom),
            ("prop_left", self.left),
            ("prop_right", self.right),
        ):
            if value != 0:
                m[key] = value
        if self.family:
            m["prop_font_family"] = self.family
        if self.style is not None:
            m["prop_font_style"] = self.style
        if self.size != 0:
            m["prop_font_size"] = self.size
        if self.align is not None:
            m["prop_align"] = self.align
        if self.break_line_strategy is not None:
            m["prop_breakline_strategy"] = self.break_line_strategy
        if self.vertical_padding != 0:
            m["prop_vertical_padding"] = self.vertical_padding
        if self.color is not None:
            m["prop_color"] = str(self.color)
        if self.hyperlink is not None:
            m["prop_hyperlink"] = self.hyperlink
        return m

    def make_valid(self, font: Font) -> None:
        """Fill unset fields from ``font`` and defaults; clamp negative spacing."""
        if not self.family:
            self.family = font.family
        if self.style is None:
            self.style = font.style
        if self.size == 0.0:
            self.size = font.size
        if self.color is None:
            self.color = font.color
        if self.align is None:
            self.align = Align.LEFT
        self.top = max(self.top, 0.0)
        self.bottom = max(self.bottom, 0.0)
        self.left = max(self.left, 0.0)
        self.right = max(self.right, 0.0)
        self.vertical_padding = max(self.vertical_padding, 0.0)
        if self.break_line_strategy is None:
            self.break_line_strategy = BreakLineStrategy.EMPTY_SPACE


@dataclass
class Signature:
    """Properties of a signature: its label font and its line."""

    font_family: str = ""
    font_style: FontStyle | None = None
    font_size: float = 0.0
    font_color: Color | None = None
    line_color: Color | None = None
    line_style: LineStyle | None = None
    line_thickness: float = 0.0
    safe_padding: float = 0.0

    def to_map(self) -> dict[str, Any]:
        """Return the set fields keyed by their property names."""
        m: dict[str, Any] = {}
        if self.font_family:
            m["prop_font_family"] = self.font_family
        if self.font_style is not None:
            m["prop_font_style"] = self.font_style
        if self.font_size != 0:
            m["prop_font_size"] = self.font_size
        if self.line_style is not None:
            m["prop_line_style"] = self.line_style
        if self.line_thickness != 0:
            m["prop_line_thickness"] = self.line_thickness
        if self.font_color is not None:
            m["prop_font_color"] = str(self.font_color)
        if self.line_color is not None:
            m["prop_line_color"] = str(self.line_color)
        return m

    def to_line(self, offset_percent: float) -> Line:
        """Build valid line properties for the signature line."""
        line = Line(
            color=self.line_color,
            style=self.line_style,
            thickness=self.line_thickness,
            offset_percent=offset_percent,
        )
        line.make_valid()
        return line

    def to_font(self) -> Font:
        """Build valid font properties for the signature label."""
        font = Font(
            family=self.font_family,
            style=self.font_style,
            size=self.font_size,
            color=self.font_color,
        )
        font.make_valid(self.font_family)
        return font

    def to_text(self, align: Align, top: float, vertical_padding: float) -> Text:
        """Build valid text properties for the signature label."""
        return self.to_font().to_text(align, top, vertical_padding)

    def make_valid(self, default_font_family: str) -> None:
        """Fill the unset fields with defaults."""
        if not self.font_family:
            self.font_family = default_font_family
        if self.font_style is None:
            self.font_style = FontStyle.BOLD
        if self.font_size == 0.0:
            self.font_size = _DEFAULT_FONT_SIZE
        if self.line_style is None:
            self.line_style = LineStyle.SOLID
        if self.line_thickness == 0:
            self.line_thickness = DEFAULT_LINE_THICKNESS
        if self.safe_padding <= 0:
            self.safe_padding = _DEFAULT_SAFE_PADDING


class Place(str, Enum):
    """Where on the page the page number goes."""

    TOP = "top"
    LEFT_TOP = "left_top"
    RIGHT_TOP = "right_top"
    BOTTOM = "bottom"
    LEFT_BOTTOM = "left_bottom"
    RIGHT_BOTTOM = "right_bottom"

    def is_valid(self) -> bool:
        return self in _VALID_PLACES


_VALID_PLACES = frozenset(Place)
_LEFT_PLACES = frozenset({Place.LEFT_TOP, Place.LEFT_BOTTOM})
_RIGHT_PLACES = frozenset({Place.RIGHT_TOP, Place.RIGHT_BOTTOM})
_BOTTOM_PLACES = frozenset({Place.BOTTOM, Place.LEFT_BOTTOM, Place.RIGHT_BOTTOM})


@dataclass
class PageNumber:
    """Page numbering: a pattern with ``{current}`` and ``{total}``, its place and font."""

    pattern: str = ""
    place: Place | None = None
    family: str = ""
    style: FontStyle | None = None
    size: float = 0.0
    color: Color | None = None

    def number_text(self, height: float) -> Text:
        """Text properties for the page number on a page of the given height."""
        align = Align.CENTER
        if self.place in _LEFT_PLACES:
            align = Align.LEFT
        elif self.place in _RIGHT_PLACES:
            align = Align.RIGHT
        return Text(
            family=self.family,
            style=self.style,
            size=self.size,
            color=self.color,
            align=align,
            top=height if self.place in _BOTTOM_PLACES else 0.0,
            break_line_strategy=BreakLineStrategy.EMPTY_SPACE,
        )

    def page_string(self, current: int, total: int) -> str:
        """Fill the pattern with the page numbers."""
        return self.pattern.replace("{current}", str(current)).replace(
            "{total}", str(total)
        )

    def with_font(self, font: Font) -> None:
        """Take from ``font`` whatever is not set yet."""
        if self.color is None:
            self.color = font.color
        if self.size == 0:
            self.size = font.size
        if self.style is None:
            self.style = font.style
        if not self.family:
            self.family = font.family

    def append_map(self, mapping: dict[str, Any]) -> dict[str, Any]:
        """Add the set fields to ``mapping``."""
        if self.pattern:
            mapping["page_number_pattern"] = self.pattern
        if self.place is not None:
            mapping["page_number_place"] = self.place
        if self.family:
            mapping["page_number_family"] = self.family
        if self.style is not None:
            mapping["page_number_style"] = self.style
        if self.size != 0:
            mapping["page_number_size"] = self.size
        if self.color is not None:
            mapping["page_number_color"] = str(self.color)
        return mapping


def default_error_text() -> Text:
    """Text properties used to report a component that could not be drawn."""
    return Text(
        family=FontFamily.ARIAL,
        style=FontStyle.BOLD,
        size=10.0,
        color=RED_COLOR,
    )