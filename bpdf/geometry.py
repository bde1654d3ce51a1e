"""Dimensions, cells, margins and the sizing arithmetic between them."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass
class Dimensions:
    """A width and a height."""

    width: float = 0.0
    height: float = 0.0

    def append_map(self, label: str, mapping: dict[str, Any]) -> dict[str, Any]:
        """Add the non-zero sides to ``mapping`` under ``label``."""
        if self.width != 0:
            mapping[f"{label}_dimension_width"] = self.width
        if self.height != 0:
            mapping[f"{label}_dimension_height"] = self.height
        return mapping


@dataclass
class Cell:
    """A positioned rectangle inside the page."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)

    def copy(self) -> Cell:
        return replace(self)


@dataclass
class Margins:
    """Page margins."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0

    def append_map(self, mapping: dict[str, Any]) -> dict[str, Any]:
        """Add the non-zero margins to ``mapping``."""
        for name, value in (
            ("left", self.left),
            ("top", self.top),
            ("right", self.right),
            ("bottom", self.bottom),
        ):
            if value != 0:
                mapping[f"config_margin_{name}"] = value
        return mapping


def new_root_cell(page_width: float, page_height: float, margins: Margins) -> Cell:
    """Create the cell covering the page area inside the margins."""
    return Cell(
        0.0,
        0.0,
        page_width - margins.left - margins.right,
        page_height - margins.top - margins.bottom,
    )


def resize(
    inner: Dimensions, outer: Dimensions, percent: float, just_reference_width: bool
) -> Dimensions:
    """Scale ``inner`` to take ``percent`` of ``outer``, keeping its proportion.

    With ``just_reference_width`` only the width is the reference, unless the
    result would exceed the outer height.
    """
    percent /= 100.0
    inner_proportion = inner.height / inner.width
    outer_proportion = outer.height / outer.width
    if inner_proportion > outer_proportion and not just_reference_width:
        width = outer.height / inner_proportion * percent
    else:
        width = outer.width * percent
    height = width * inner_proportion
    if just_reference_width and height > outer.height:
        width = outer.height / inner_proportion * 1
        height = width * inner_proportion
    return Dimensions(width, height)


def center_correction(outer_size: float, inner_size: float) -> float:
    """Offset that centres a length inside another."""
    return (outer_size - inner_size) / 2.0


def inner_center_cell(inner: Dimensions, outer: Dimensions) -> Cell:
    """Place ``inner`` centred inside ``outer``."""
    return Cell(
        center_correction(outer.width, inner.width),
        center_correction(outer.height, inner.height),
        inner.width,
        inner.height,
    )