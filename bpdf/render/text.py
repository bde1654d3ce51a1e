"""Writing text inside cells, with line breaking and alignment."""

from __future__ import annotations

from typing import Any

from bpdf.color import BLUE_COLOR
from bpdf.geometry import Cell
from bpdf.typography import Align, BreakLineStrategy, FontFamily, Text

_TRANSLATED_FAMILIES = frozenset(
    {
        FontFamily.ARIAL.value,
        FontFamily.HELVETICA.value,
        FontFamily.SYMBOL.value,
        FontFamily.ZAP_BATS.value,
        FontFamily.COURIER.value,
    }
)


def is_incorrect_space_width(
    text_width: float, space_width: float, default_space_width: float, text: str
) -> bool:
    """Tell whether a justified space would be unreasonably wide.

    That is the case when the space is more than ten default spaces wide and
    the text does not end in a letter or a digit.
    """
    if text_width <= 0 or space_width <= default_space_width * 10:
        return False
    if not text:
        return False
    last = text[-1]
    return not last.isalpha() and not last.isnumeric()


class TextRenderer:
    """Writes text properties inside cells on a PDF writer."""

    def __init__(self, pdf: Any, font: Any) -> None:
        self.pdf = pdf
        self.font = font

    def lines_quantity(self, text: str, prop: Text, col_width: float) -> int:
        """Number of lines the text takes in a column of the given width."""
        self.font.set_font(prop.family, prop.style, prop.size)
        translated = self._to_unicode(text, prop)
        if prop.break_line_strategy == BreakLineStrategy.DASH:
            return len(self._lines_with_dash(text, col_width))
        return len(self._lines_from_space(translated.split(" "), col_width))

    def add(self, text: str, cell: Cell, prop: Text) -> None:
        """Write ``text`` inside ``cell``; spacing in ``prop`` is clamped to the cell."""
        self.font.set_font(prop.family, prop.style, prop.size)
        font_height = self.font.get_height(prop.family, prop.style, prop.size)

        prop.top = min(prop.top, cell.height)
        prop.left = min(prop.left, cell.width)
        prop.right = min(prop.right, cell.width)

        width = max(cell.width - prop.left - prop.right, 0.0)
        x = cell.x + prop.left
        y = cell.y + prop.top

        original_color = self.font.color
        if prop.color is not None:
            self.font.color = prop.color
        if prop.hyperlink is not None:
            self.font.color = BLUE_COLOR

        y += font_height
        unicode_text = self._to_unicode(text, prop)
        string_width = self.pdf.get_string_width(unicode_text)

        if string_width < width:
            self._add_line(prop, x, width, y, string_width, unicode_text)
        else:
            if prop.break_line_strategy == BreakLineStrategy.EMPTY_SPACE:
                lines = self._lines_from_space(unicode_text.split(" "), width)
            else:
                lines = self._lines_with_dash(unicode_text, width)
            offset = 0.0
            for index, line in enumerate(lines):
                line_width = self.pdf.get_string_width(line)
                line_y = y + index * font_height + offset
                self._add_line(prop, x, width, line_y, line_width, line)
                offset += prop.vertical_padding

        if prop.color is not None:
            self.font.color = original_color

    def _to_unicode(self, text: str, prop: Text) -> str:
        family = getattr(prop.family, "value", prop.family)
        if family in _TRANSLATED_FAMILIES:
            translate = self.pdf.unicode_translator_from_descriptor("")
            return translate(text)
        return text

    def _add_line(
        self,
        prop: Text,
        x_offset: float,
        col_width: float,
        y_offset: float,
        text_width: float,
        text: str,
    ) -> None:
        left, top, _, _ = self.pdf.get_margins()
        font_height = self.font.get_height(prop.family, prop.style, prop.size)
        baseline = y_offset + top

        if prop.align == Align.LEFT:
            self.pdf.text(x_offset + left, baseline, text)
            if prop.hyperlink is not None:
                self.pdf.link_string(
                    x_offset + left,
                    baseline - font_height,
                    text_width,
                    font_height,
                    prop.hyperlink,
                )
            return

        if prop.align == Align.JUSTIFY:
            text = text.rstrip(" ")
            text_no_spaces = text.replace(" ", "")
            text_width = self.pdf.get_string_width(text_no_spaces)
            default_space_width = self.pdf.get_string_width(" ")
            words = text.split()
            spaces = max(len(words) - 1, 1)
            space_width = (col_width - text_width) / spaces
            if is_incorrect_space_width(
                text_width, space_width, default_space_width, text_no_spaces
            ):
                space_width = default_space_width

            x = x_offset + left
            start_x = x
            finish_x = 0.0
            for word in words:
                self.pdf.text(x, baseline, word)
                finish_x = x + self.pdf.get_string_width(word)
                x = finish_x + space_width

            if prop.hyperlink is not None:
                self.pdf.link_string(
                    start_x,
                    baseline - font_height,
                    finish_x - start_x,
                    font_height,
                    prop.hyperlink,
                )
            return

        modifier = 1.0 if prop.align == Align.RIGHT else 2.0
        dx = (col_width - text_width) / modifier
        if prop.hyperlink is not None:
            self.pdf.link_string(
                dx + x_offset + left,
                baseline - font_height,
                text_width,
                font_height,
                prop.hyperlink,
            )
        self.pdf.text(dx + x_offset + left, baseline, text)

    def _lines_from_space(self, words: list[str], col_width: float) -> list[str]:
        lines = [""]
        current = 0.0
        for word in words:
            piece = word + " "
            piece_width = self.pdf.get_string_width(piece)
            if piece_width + current < col_width:
                lines[-1] += piece
                current += piece_width
            else:
                lines.append(piece)
                current = piece_width
        return lines

    def _lines_with_dash(self, text: str, col_width: float) -> list[str]:
        lines: list[str] = []
        content = ""
        current = 0.0
        dash_size = self.pdf.get_string_width(" - ")
        for letter in text:
            if current + dash_size > col_width - dash_size:
                lines.append(content + "-")
                content = ""
                current = 0.0
            content += letter
            current += self.pdf.get_string_width(letter)
        if content:
            lines.append(content)
        return lines