"""A chain of stylers that draws grid cells on a PDF writer.

Each link applies one style to the writer, passes the call on to the next
link and restores the default afterwards. The last link draws the cell.
"""

from __future__ import annotations

from typing import Any

from bpdf.color import (
    BLACK_COLOR,
    DEFAULT_LINE_THICKNESS,
    WHITE_COLOR,
    Border,
    CellStyle,
    LineStyle,
)

_DASHED = [1.0, 1.0]
_SOLID = [1.0, 0.0]


class CellWriter:
    """A link of the cell writing chain."""

    name = "styler"

    def __init__(self, pdf: Any) -> None:
        self.pdf = pdf
        self.next: CellWriter | None = None

    def apply(
        self, width: float, height: float, config: Any, prop: CellStyle | None
    ) -> None:
        """Apply this link's style and continue down the chain."""
        self.go_to_next(width, height, config, prop)

    def go_to_next(
        self, width: float, height: float, config: Any, prop: CellStyle | None
    ) -> None:
        """Pass the call to the next link, if there is one."""
        if self.next is not None:
            self.next.apply(width, height, config, prop)


class CellCreator(CellWriter):
    """Draws the cell itself, with its border and fill."""

    name = "cellWriter"

    def __init__(self, pdf: Any) -> None:
        super().__init__(pdf)
        self.default_color = BLACK_COLOR

    def apply(self, width, height, config, prop) -> None:
        border = Border.NONE
        fill = False
        if prop is not None:
            border = prop.border_type
            fill = prop.background_color is not None
        if config.debug:
            border = Border.FULL
        self.pdf.cell_format(
            width, height, "", Border(border).value, 0, "C", fill, 0, ""
        )


class BorderColorStyler(CellWriter):
    """Sets the border colour for the rest of the chain."""

    name = "borderColorStyler"

    def __init__(self, pdf: Any) -> None:
        super().__init__(pdf)
        self.default_color = BLACK_COLOR

    def apply(self, width, height, config, prop) -> None:
        if prop is None or prop.border_color is None:
            self.go_to_next(width, height, config, prop)
            return
        color = prop.border_color
        self.pdf.set_draw_color(color.red, color.green, color.blue)
        self.go_to_next(width, height, config, prop)
        default = self.default_color
        self.pdf.set_draw_color(default.red, default.green, default.blue)


class BorderLineStyler(CellWriter):
    """Switches to a dashed border when the style asks for one."""

    name = "borderLineStyler"

    def apply(self, width, height, config, prop) -> None:
        if prop is None or prop.line_style in (None, LineStyle.SOLID):
            self.go_to_next(width, height, config, prop)
            return
        self.pdf.set_dash_pattern(list(_DASHED), 0.0)
        self.go_to_next(width, height, config, prop)
        self.pdf.set_dash_pattern(list(_SOLID), 0.0)


class BorderThicknessStyler(CellWriter):
    """Sets the border thickness for the rest of the chain."""

    name = "borderThicknessStyler"

    def __init__(self, pdf: Any) -> None:
        super().__init__(pdf)
        self.default_line_thickness = DEFAULT_LINE_THICKNESS

    def apply(self, width, height, config, prop) -> None:
        if prop is None or prop.border_thickness == 0:
            self.go_to_next(width, height, config, prop)
            return
        self.pdf.set_line_width(prop.border_thickness)
        self.go_to_next(width, height, config, prop)
        self.pdf.set_line_width(self.default_line_thickness)


class FillColorStyler(CellWriter):
    """Sets the background colour for the rest of the chain."""

    name = "fillColorStyler"

    def __init__(self, pdf: Any) -> None:
        super().__init__(pdf)
        self.default_fill_color = WHITE_COLOR

    def apply(self, width, height, config, prop) -> None:
        if prop is None or prop.background_color is None:
            self.go_to_next(width, height, config, prop)
            return
        color = prop.background_color
        self.pdf.set_fill_color(color.red, color.green, color.blue)
        self.go_to_next(width, height, config, prop)
        default = self.default_fill_color
        self.pdf.set_fill_color(default.red, default.green, default.blue)


def build_chain(pdf: Any) -> CellWriter:
    """Build the full chain and return its first link."""
    thickness = BorderThicknessStyler(pdf)
    line = BorderLineStyler(pdf)
    color = BorderColorStyler(pdf)
    fill = FillColorStyler(pdf)
    creator = CellCreator(pdf)

    thickness.next = line
    line.next = color
    color.next = fill
    fill.next = creator
    return thickness