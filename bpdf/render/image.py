"""Placing images inside cells on a PDF writer."""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any

from bpdf.entity import Extension, Image
from bpdf.geometry import Cell, Dimensions, Margins, inner_center_cell, resize
from bpdf.shapes import Rect


class ImageRegistrationError(RuntimeError):
    """Raised when the PDF writer cannot register an image."""


def _extension_value(extension: Any) -> str:
    if isinstance(extension, Enum):
        return str(extension.value)
    return str(extension)


def from_bytes(data: bytes, extension: Extension | str) -> Image:
    """Wrap image bytes, checking that the extension is supported."""
    try:
        ext = Extension(extension)
    except ValueError:
        raise ValueError("invalid image format") from None
    return Image(data=data, extension=ext)


class ImageRenderer:
    """Registers images with a PDF writer and draws them in cells."""

    def __init__(self, pdf: Any) -> None:
        self.pdf = pdf

    def _register(self, img: Image, extension: Any) -> tuple[Any, uuid.UUID]:
        image_id = uuid.uuid4()
        info = self.pdf.register_image(
            str(image_id), _extension_value(extension), img.data
        )
        return info, image_id

    def image_info(self, img: Image, extension: Extension | str) -> tuple[Any, uuid.UUID]:
        """Register the image and return its information (or None) and its id."""
        return self._register(img, extension)

    def add(
        self,
        img: Image,
        cell: Cell,
        margins: Margins,
        prop: Rect,
        extension: Extension | str,
        flow: bool,
    ) -> None:
        """Draw the image inside ``cell`` according to ``prop``."""
        info, image_id = self._register(img, extension)
        if info is None:
            raise ImageRegistrationError(
                "could not register image options, maybe path/name is wrong"
            )

        dimensions = resize(
            Dimensions(info.width, info.height),
            cell.dimensions(),
            prop.percent,
            prop.just_reference_width,
        )
        if prop.center:
            rect = inner_center_cell(dimensions, cell.dimensions())
        else:
            rect = Cell(prop.left, prop.top, dimensions.width, dimensions.height)

        self.pdf.image(
            str(image_id),
            cell.x + rect.x + margins.left,
            cell.y + rect.y + margins.top,
            rect.width,
            rect.height,
            flow,
            "",
            0,
            "",
        )