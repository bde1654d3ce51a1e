"""Properties of rectangles, barcodes and lines placed inside cells."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from bpdf.color import DEFAULT_LINE_THICKNESS, Color, LineStyle

_MIN_PERCENT = 0.0
_MAX_PERCENT = 100.0
_MIN_VALUE = 0.0
_MAX_HEIGHT_RATIO = 0.20
_MIN_HEIGHT_RATIO = 0.10


@dataclass
class Rect:
    """Placement of a rectangular component (image, QR code, barcode) in a cell.

    ``percent`` is how much of the cell the component occupies. With
    ``just_reference_width`` only the available width is used for scaling.
    ``center`` centres the component and ignores ``left`` and ``top``.
    """

    left: float = 0.0
    top: float = 0.0
    percent: float = 0.0
    just_reference_width: bool = False
    center: bool = False

    def to_map(self) -> dict[str, Any]:
        """Return the set fields keyed by their property names."""
        m: dict[str, Any] = {}
        if self.left != 0:
            m["prop_left"] = self.left
        if self.top != 0:
            m["prop_top"] = self.top
        if self.percent != 0:
            m["prop_percent"] = self.percent
        if self.center:
            m["prop_center"] = self.center
        if self.just_reference_width:
            m["prop_just_reference_Width"] = self.just_reference_width
        return m

    def make_valid(self) -> None:
        """Clamp the values so the rectangle fits in a cell."""
        if self.percent <= _MIN_PERCENT or self.percent > _MAX_PERCENT:
            self.percent = _MAX_PERCENT
        if self.center:
            self.left = 0.0
            self.top = 0.0
        self.left = max(self.left, _MIN_VALUE)
        self.top = max(self.top, _MIN_VALUE)


@dataclass
class Proportion:
    """The ratio between the sides of a rectangle, such as 16x9 or 4x3."""

    width: float = 0.0
    height: float = 0.0


class BarcodeType(str, Enum):
    """Symbology of a barcode."""

    CODE128 = "code128"
    EAN = "ean"


@dataclass
class Barcode:
    """Placement and shape of a barcode inside a cell."""

    left: float = 0.0
    top: float = 0.0
    percent: float = 0.0
    proportion: Proportion = field(default_factory=Proportion)
    center: bool = False
    type: BarcodeType | None = None

    def to_map(self) -> dict[str, Any]:
        """Return the set fields keyed by their property names."""
        m: dict[str, Any] = {}
        if self.left != 0:
            m["prop_left"] = self.left
        if self.top != 0:
            m["prop_top"] = self.top
        if self.percent != 0:
            m["prop_percent"] = self.percent
        if self.proportion.width != 0:
            m["prop_proportion_width"] = self.proportion.width
        if self.proportion.height != 0:
            m["prop_proportion_height"] = self.proportion.height
        if self.center:
            m["prop_center"] = self.center
        return m

    def to_rect(self) -> Rect:
        """Return the rectangle placement of this barcode."""
        return Rect(
            left=self.left, top=self.top, percent=self.percent, center=self.center
        )

    def make_valid(self) -> None:
        """Clamp the values so the barcode fits in a cell and fill defaults."""
        if self.percent <= _MIN_PERCENT or self.percent > _MAX_PERCENT:
            self.percent = _MAX_PERCENT
        if self.center:
            self.left = 0.0
            self.top = 0.0
        self.left = max(self.left, _MIN_VALUE)
        self.top = max(self.top, _MIN_VALUE)

        if self.proportion.width <= 0:
            self.proportion.width = 1.0
        if self.proportion.height <= 0:
            self.proportion.height = 1.0

        width = self.proportion.width
        if self.proportion.height > width * _MAX_HEIGHT_RATIO:
            self.proportion.height = width * _MAX_HEIGHT_RATIO
        elif self.proportion.height < width * _MIN_HEIGHT_RATIO:
            self.proportion.height = width * _MIN_HEIGHT_RATIO

        if self.type is None:
            self.type = BarcodeType.CODE128


class Orientation(str, Enum):
    """Direction of a line."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass
class Line:
    """A line drawn inside a cell.

    ``offset_percent`` places the line across the cell (0 start, 50 middle,
    100 end); ``size_percent`` is how much of the cell it spans.
    """

    color: Color | None = None
    style: LineStyle | None = None
    thickness: float = 0.0
    orientation: Orientation | None = None
    offset_percent: float = 0.0
    size_percent: float = 0.0

    def to_map(self) -> dict[str, Any]:
        """Return the set fields keyed by their property names."""
        m: dict[str, Any] = {}
        if self.color is not None:
            m["prop_color"] = str(self.color)
        if self.style:
            m["prop_style"] = self.style
        if self.thickness != 0:
            m["prop_thickness"] = self.thickness
        if self.orientation:
            m["prop_orientation"] = self.orientation
        if self.offset_percent != 0:
            m["prop_offset_percent"] = self.offset_percent
        if self.size_percent != 0:
            m["prop_size_percent"] = self.size_percent
        return m

    def make_valid(self) -> None:
        """Fill defaults and clamp the offset and size."""
        if self.style is None:
            self.style = LineStyle.SOLID
        if self.thickness == 0:
            self.thickness = DEFAULT_LINE_THICKNESS
        if self.orientation is None:
            self.orientation = Orientation.HORIZONTAL
        self.offset_percent = min(max(self.offset_percent, 5.0), 95.0)
        if self.size_percent <= 0:
            self.size_percent = 90.0
        if self.size_percent > 100:
            self.size_percent = 100.0