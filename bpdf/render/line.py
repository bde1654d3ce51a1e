"""Drawing of horizontal and vertical lines inside cells."""

from __future__ import annotations

from typing import Any

from bpdf.color import BLACK_COLOR, DEFAULT_LINE_THICKNESS, LineStyle
from bpdf.geometry import Cell
from bpdf.shapes import Line, Orientation


class LineRenderer:
    """Draws a line property inside a cell on a PDF writer."""

    def __init__(self, pdf: Any) -> None:
        self.pdf = pdf
        self.default_color = BLACK_COLOR
        self.default_thickness = DEFAULT_LINE_THICKNESS

    def add(self, cell: Cell, prop: Line) -> None:
        """Draw the line, then restore the writer's default pen."""
        left, top, _, _ = self.pdf.get_margins()
        if prop.orientation == Orientation.VERTICAL:
            size = cell.height * (prop.size_percent / 100.0)
            position = cell.width * (prop.offset_percent / 100.0)
            space = (cell.height - size) / 2.0
            x = left + cell.x + position
            start = (x, top + cell.y + space)
            end = (x, top + cell.y + cell.height - space)
        else:
            size = cell.width * (prop.size_percent / 100.0)
            position = cell.height * (prop.offset_percent / 100.0)
            space = (cell.width - size) / 2.0
            y = top + cell.y + position
            start = (left + cell.x + space, y)
            end = (left + cell.x + cell.width - space, y)

        dashed = prop.style != LineStyle.SOLID
        if prop.color is not None:
            self.pdf.set_draw_color(prop.color.red, prop.color.green, prop.color.blue)
        self.pdf.set_line_width(prop.thickness)
        if dashed:
            self.pdf.set_dash_pattern([1.0, 1.0], 0.0)

        self.pdf.line(start[0], start[1], end[0], end[1])

        if prop.color is not None:
            default = self.default_color
            self.pdf.set_draw_color(default.red, default.green, default.blue)
        self.pdf.set_line_width(self.default_thickness)
        if dashed:
            self.pdf.set_dash_pattern([1.0, 0.0], 0.0)