"""The current font of a PDF writer."""

from __future__ import annotations

from enum import Enum
from typing import Any

from bpdf.color import Color

_POINTS_PER_INCH = 72.0
_MM_PER_INCH = 25.4


def _style_value(style: Any) -> str:
    if style is None:
        return ""
    if isinstance(style, Enum):
        return str(style.value)
    return str(style)


class FontState:
    """Tracks the font set on a PDF writer and keeps the writer in step."""

    def __init__(self, pdf: Any, size: float, family: str, style: Any) -> None:
        pdf.set_font(family, _style_value(style), size)
        self.pdf = pdf
        self._size = size
        self._family = family
        self._style = style
        self.scale_factor = _POINTS_PER_INCH / _MM_PER_INCH
        self._color = Color(0, 0, 0)

    @property
    def family(self) -> str:
        return self._family

    @family.setter
    def family(self, family: str) -> None:
        self._family = family
        self.pdf.set_font(self._family, _style_value(self._style), self._size)

    @property
    def style(self) -> Any:
        return self._style

    @style.setter
    def style(self, style: Any) -> None:
        self._style = style
        self.pdf.set_font_style(_style_value(self._style))

    @property
    def size(self) -> float:
        return self._size

    @size.setter
    def size(self, size: float) -> None:
        self._size = size
        self.pdf.set_font_size(self._size)

    @property
    def color(self) -> Color:
        return self._color

    @color.setter
    def color(self, color: Color | None) -> None:
        # An unset colour leaves the current one in place.
        if color is None:
            return
        self._color = color
        self.pdf.set_text_color(color.red, color.green, color.blue)

    @property
    def font(self) -> tuple[str, Any, float]:
        """The family, style and size currently set."""
        return self._family, self._style, self._size

    def set_font(self, family: str, style: Any, size: float) -> None:
        """Set family, style and size at once."""
        self._family = family
        self._style = style
        self._size = size
        self.pdf.set_font(self._family, _style_value(self._style), self._size)

    def get_height(self, family: str, style: Any, size: float) -> float:
        """Set the font and return its height in millimetres."""
        self.set_font(family, style, size)
        return self._size / self.scale_factor