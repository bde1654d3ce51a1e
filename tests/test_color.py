import pytest

from bpdf.color import (
    BLACK_COLOR,
    BLUE_COLOR,
    GREEN_COLOR,
    RED_COLOR,
    WHITE_COLOR,
    Border,
    CellStyle,
    Color,
    LineStyle,
    color_string,
)


@pytest.mark.parametrize(
    "color, expected",
    [
        (WHITE_COLOR, (255, 255, 255)),
        (BLACK_COLOR, (0, 0, 0)),
        (RED_COLOR, (255, 0, 0)),
        (GREEN_COLOR, (0, 255, 0)),
        (BLUE_COLOR, (0, 0, 255)),
    ],
)
def test_named_colors(color, expected):
    assert (color.red, color.green, color.blue) == expected


def test_color_string_none_is_empty():
    assert color_string(None) == ""


def test_color_string_filled():
    assert color_string(Color(100, 50, 200)) == "RGB(100, 50, 200)"


def _cell_fixture():
    return CellStyle(
        background_color=Color(255, 100, 50),
        border_color=Color(200, 80, 60),
        border_type=Border.LEFT,
        border_thickness=0.6,
        line_style=LineStyle.DASHED,
    )


def test_cell_to_map_filled():
    m = _cell_fixture().to_map()
    assert m["prop_border_type"] == Border.LEFT
    assert m["prop_border_thickness"] == 0.6
    assert m["prop_border_line_style"] == LineStyle.DASHED
    assert m["prop_background_color"] == "RGB(255, 100, 50)"
    assert m["prop_border_color"] == "RGB(200, 80, 60)"


def test_cell_to_map_empty():
    assert CellStyle().to_map() == {}