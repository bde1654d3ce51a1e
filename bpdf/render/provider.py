"""The document provider: draws components on a PDF writer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable

from bpdf.cache import ImageNotFoundError
from bpdf.entity import Config, Extension, Image, Metadata, Protection
from bpdf.geometry import Cell, Dimensions
from bpdf.render.image import ImageRegistrationError, from_bytes
from bpdf.shapes import Barcode, BarcodeType, Line, Rect
from bpdf.typography import Font, Text, default_error_text

_UNREADABLE = "could not read image options, maybe path/name is wrong"


def _enum_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _file_extension(file: str) -> str:
    suffix = Path(file).suffix
    if suffix.startswith("."):
        suffix = suffix[1:]
    return suffix.lower()


@dataclass
class Dependencies:
    """The collaborators a provider draws with."""

    pdf: Any
    font: Any
    text: Any
    code: Any
    image: Any
    line: Any
    cache: Any
    cell_writer: Any
    config: Config


class Provider:
    """Draws grid cells, text, lines, codes and images on a PDF writer.

    Components that cannot be drawn are replaced by an error message in red.
    """

    def __init__(self, deps: Dependencies) -> None:
        self.pdf = deps.pdf
        self.font = deps.font
        self.text = deps.text
        self.code = deps.code
        self.image = deps.image
        self.line = deps.line
        self.cache = deps.cache
        self.cell_writer = deps.cell_writer
        self.config = deps.config

    def get_lines_quantity(self, text: str, text_prop: Text, col_width: float) -> int:
        return self.text.lines_quantity(text, text_prop, col_width)

    def get_font_height(self, prop: Font) -> float:
        return self.font.get_height(prop.family, prop.style, prop.size)

    def add_text(self, text: str, cell: Cell, prop: Text) -> None:
        self.text.add(text, cell, prop)

    def add_line(self, cell: Cell, prop: Line) -> None:
        self.line.add(cell, prop)

    def _error(self, message: str, cell: Cell) -> None:
        self.text.add(message, cell, default_error_text())

    def _add_code(
        self,
        code: str,
        cell: Cell,
        prop: Rect,
        prefix: str,
        generate: Callable[[str], Image],
        label: str,
    ) -> None:
        try:
            img = self._load_code(code, prefix, generate)
        except Exception:
            self._error(f"could not generate {label}", cell)
            return
        try:
            self.image.add(img, cell, self.config.margins, prop, Extension.PNG, False)
        except ImageRegistrationError:
            self.pdf.clear_error()
            self._error(f"could not add {label} to document", cell)

    def add_matrix_code(self, code: str, cell: Cell, prop: Rect) -> None:
        self._add_code(
            code, cell, prop, "matrix-code-", self.code.gen_data_matrix, "matrixcode"
        )

    def add_qr_code(self, code: str, cell: Cell, prop: Rect) -> None:
        self._add_code(code, cell, prop, "qr-code-", self.code.gen_qr, "qrcode")

    def add_bar_code(self, code: str, cell: Cell, prop: Barcode) -> None:
        name = self._barcode_image_name(f"bar-code-{code}", prop)
        try:
            image = self.cache.get_image(name, Extension.PNG)
        except ImageNotFoundError:
            try:
                image = self.code.gen_bar(code, cell, prop)
            except Exception:
                self._error("could not generate barcode", cell)
                return

        self.cache.add_image(name, image)
        try:
            self.image.add(
                image, cell, self.config.margins, prop.to_rect(), Extension.PNG, False
            )
        except ImageRegistrationError:
            self.pdf.clear_error()
            self._error("could not add barcode to document", cell)

    def _add_image(
        self, data: bytes, cell: Cell, prop: Rect, extension: Any, flow: bool
    ) -> None:
        try:
            img = from_bytes(data, extension)
        except ValueError:
            self._error("could not parse image bytes", cell)
            return
        try:
            self.image.add(img, cell, self.config.margins, prop, extension, flow)
        except ImageRegistrationError:
            self.pdf.clear_error()
            self._error("could not add image to document", cell)

    def add_image_from_bytes(
        self, data: bytes, cell: Cell, prop: Rect, extension: Extension | str
    ) -> None:
        self._add_image(data, cell, prop, extension, False)

    def add_image_from_file(self, file: str, cell: Cell, prop: Rect) -> None:
        extension = _file_extension(file)
        try:
            image = self._load_image(file, extension)
        except (ImageNotFoundError, OSError):
            self._error("could not load image", cell)
            return
        self.add_image_from_bytes(image.data, cell, prop, extension)

    def add_background_image_from_bytes(
        self, data: bytes, cell: Cell, prop: Rect, extension: Extension | str
    ) -> None:
        """Draw an image that flows with the page, then return to the home position."""
        try:
            img = from_bytes(data, extension)
        except ValueError:
            self._error("could not parse image bytes", cell)
            return
        try:
            self.image.add(img, cell, self.config.margins, prop, extension, True)
        except ImageRegistrationError:
            self.pdf.clear_error()
            self._error("could not add image to document", cell)
        self.pdf.set_home_xy()

    def create_row(self, height: float) -> None:
        self.pdf.ln(height)

    def create_col(self, width: float, height: float, config: Config, prop: Any) -> None:
        self.cell_writer.apply(width, height, config, prop)

    def set_protection(self, protection: Protection | None) -> None:
        if protection is None:
            return
        self.pdf.set_protection(
            int(protection.type), protection.user_password, protection.owner_password
        )

    def set_metadata(self, metadata: Metadata | None) -> None:
        if metadata is None:
            return
        for setter, value in (
            (self.pdf.set_author, metadata.author),
            (self.pdf.set_creator, metadata.creator),
            (self.pdf.set_subject, metadata.subject),
            (self.pdf.set_title, metadata.title),
        ):
            if value is not None:
                setter(value.text, value.utf8)
        if metadata.creation_date is not None:
            self.pdf.set_creation_date(metadata.creation_date)
        if metadata.keywords is not None:
            self.pdf.set_keywords(metadata.keywords.text, metadata.keywords.utf8)

    def set_compression(self, compression: bool) -> None:
        self.pdf.set_compression(compression)

    def _dimensions_of(self, img: Image, extension: Any) -> Dimensions:
        info, _ = self.image.image_info(img, extension)
        if info is None:
            raise ImageRegistrationError(_UNREADABLE)
        return Dimensions(info.width, info.height)

    def dimensions_by_image(self, file: str) -> Dimensions:
        """Dimensions of an image file; raises if it cannot be loaded."""
        extension = _file_extension(file)
        img = self._load_image(file, extension)
        return self._dimensions_of(img, extension)

    def dimensions_by_matrix_code(self, code: str) -> Dimensions:
        img = self._load_code(code, "matrix-code-", self.code.gen_data_matrix)
        return self._dimensions_of(img, Extension.PNG)

    def dimensions_by_qr_code(self, code: str) -> Dimensions:
        img = self._load_code(code, "qr-code-", self.code.gen_qr)
        return self._dimensions_of(img, Extension.PNG)

    def dimensions_by_image_bytes(
        self, data: bytes, extension: Extension | str
    ) -> Dimensions:
        img = from_bytes(data, extension)
        return self._dimensions_of(img, extension)

    def generate_bytes(self) -> bytes:
        """Return the bytes of the written document."""
        return self.pdf.output()

    def _barcode_image_name(self, code: str, prop: Barcode | None) -> str:
        if prop is None:
            return code + BarcodeType.CODE128.value
        return code + _enum_value(prop.type)

    def _load_code(
        self, code: str, prefix: str, generate: Callable[[str], Image]
    ) -> Image:
        try:
            return self.cache.get_image(prefix + code, Extension.PNG)
        except ImageNotFoundError:
            image = generate(code)
        self.cache.add_image(prefix + code, image)
        return image

    def _load_image(self, file: str, extension: str) -> Image:
        try:
            return self.cache.get_image(file, extension)
        except ImageNotFoundError:
            self.cache.load_image(file, extension)
        return self.cache.get_image(file, extension)