import pytest

from bpdf.geometry import (
    Cell,
    Dimensions,
    Margins,
    center_correction,
    inner_center_cell,
    new_root_cell,
    resize,
)


def test_cell_dimensions():
    d = Cell(10, 10, 100, 100).dimensions()
    assert d.width == 100.0
    assert d.height == 100.0


def test_cell_copy_same_values():
    cell = Cell(10, 10, 100, 100)
    assert cell.copy() == cell


def test_cell_copy_no_side_effects():
    cell = Cell(10, 10, 100, 100)
    copy = cell.copy()
    copy.x = 15
    copy.y = 15
    copy.width = 90
    copy.height = 90
    assert cell == Cell(10.0, 10.0, 100.0, 100.0)


def test_new_root_cell():
    cell = new_root_cell(100.0, 300.0, Margins(left=10, right=10, top=10, bottom=20))
    assert cell.x == 0.0
    assert cell.y == 0.0
    assert cell.width == 80.0
    assert cell.height == 270.0


def test_dimensions_append_map():
    m = Dimensions(100, 200).append_map("label", {})
    assert m["label_dimension_width"] == 100.0
    assert m["label_dimension_height"] == 200.0


def test_dimensions_append_map_skips_zero():
    assert Dimensions().append_map("label", {}) == {}


def test_margins_append_map():
    m = Margins(left=20, top=30, right=40, bottom=50).append_map({})
    assert m["config_margin_left"] == 20.0
    assert m["config_margin_top"] == 30.0
    assert m["config_margin_right"] == 40.0
    assert m["config_margin_bottom"] == 50.0


def test_center_correction():
    assert center_correction(100.0, 50.0) == 25.0


def test_inner_center_cell_no_side_effect():
    inner = Dimensions(100, 100)
    outer = Dimensions(100, 100)
    inner_center_cell(inner, outer)
    assert inner == Dimensions(100.0, 100.0)
    assert outer == Dimensions(100.0, 100.0)


@pytest.mark.parametrize(
    "inner, x, y",
    [
        (Dimensions(100, 100), 0.0, 0.0),
        (Dimensions(80, 80), 10.0, 10.0),
        (Dimensions(75.0, 60.0), 12.5, 20.0),
        (Dimensions(80.0, 100), 10.0, 0.0),
        (Dimensions(60.0, 75.0), 20.0, 12.5),
        (Dimensions(100, 80), 0.0, 10.0),
    ],
)
def test_inner_center_cell(inner, x, y):
    cell = inner_center_cell(inner, Dimensions(100, 100))
    assert cell.x == x
    assert cell.y == y
    assert cell.width == inner.width
    assert cell.height == inner.height


@pytest.mark.parametrize(
    "inner, percent, width, height",
    [
        (Dimensions(100, 100), 100.0, 100.0, 100.0),
        (Dimensions(100, 100), 75.0, 75.0, 75.0),
        (Dimensions(80, 80), 100.0, 100.0, 100.0),
        (Dimensions(80, 80), 75.0, 75.0, 75.0),
        (Dimensions(120, 120), 100.0, 100.0, 100.0),
        (Dimensions(120, 120), 75.0, 75.0, 75.0),
        (Dimensions(100, 80), 100.0, 100.0, 80.0),
        (Dimensions(100, 80), 75.0, 75.0, 60.0),
        (Dimensions(80, 100), 100.0, 80.0, 100.0),
        (Dimensions(80, 100), 75.0, 60.0, 75.0),
        (Dimensions(100, 125), 100.0, 80.0, 100.0),
        (Dimensions(100, 125), 75.0, 60.0, 75.0),
        (Dimensions(125, 100), 100.0, 100.0, 80.0),
        (Dimensions(125, 100), 75.0, 75.0, 60.0),
    ],
)
def test_resize(inner, percent, width, height):
    result = resize(inner, Dimensions(100, 100), percent, False)
    assert result.width == width
    assert result.height == height


def test_resize_just_width_limited_by_height():
    result = resize(Dimensions(50, 50), Dimensions(100, 50), 100.0, True)
    assert result.width == 50.0
    assert result.height == 50.0


def test_resize_just_width_clamped_to_outer_height():
    result = resize(Dimensions(100, 55), Dimensions(100, 40.99999999999999), 75.0, True)
    assert result.width == 74.54545454545453
    assert result.height == 40.99999999999999