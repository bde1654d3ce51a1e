import pytest

from bpdf.color import Color, LineStyle
from bpdf.shapes import (
    Barcode,
    BarcodeType,
    Line,
    Orientation,
    Proportion,
    Rect,
)


def rect_prop() -> Rect:
    prop = Rect(top=10, left=10, percent=98, center=False)
    prop.make_valid()
    return prop


def line_prop() -> Line:
    prop = Line(
        color=Color(100, 50, 200),
        style=LineStyle.DASHED,
        thickness=1.1,
        orientation=Orientation.VERTICAL,
        offset_percent=50,
        size_percent=20,
    )
    prop.make_valid()
    return prop


@pytest.mark.parametrize("percent", [-2, 102, 0])
def test_rect_invalid_percent_becomes_100(percent):
    prop = Rect(percent=percent)
    prop.make_valid()
    assert prop.percent == 100.0


def test_rect_center_resets_top_and_left():
    prop = Rect(center=True, top=5, left=5)
    prop.make_valid()
    assert prop.top == 0.0
    assert prop.left == 0.0


def test_rect_negative_left_becomes_zero():
    prop = Rect(left=-5)
    prop.make_valid()
    assert prop.left == 0.0


def test_rect_negative_top_becomes_zero():
    prop = Rect(top=-5)
    prop.make_valid()
    assert prop.top == 0.0


def test_rect_to_map():
    sut = rect_prop()
    sut.center = True
    m = sut.to_map()
    assert m["prop_left"] == 10.0
    assert m["prop_top"] == 10.0
    assert m["prop_percent"] == 98.0
    assert m["prop_center"] is True
    assert "prop_just_reference_Width" not in m


def test_rect_to_map_empty_when_unset():
    assert Rect().to_map() == {}


def test_line_empty_style_becomes_solid():
    prop = Line()
    prop.make_valid()
    assert prop.style == LineStyle.SOLID


def test_line_zero_thickness_becomes_default():
    prop = Line(thickness=0.0)
    prop.make_valid()
    assert prop.thickness == 0.2


def test_line_empty_orientation_becomes_horizontal():
    prop = Line()
    prop.make_valid()
    assert prop.orientation == Orientation.HORIZONTAL


def test_line_offset_below_5_becomes_5():
    prop = Line(offset_percent=4)
    prop.make_valid()
    assert prop.offset_percent == 5.0


def test_line_offset_above_95_becomes_95():
    prop = Line(offset_percent=96)
    prop.make_valid()
    assert prop.offset_percent == 95.0


def test_line_zero_size_becomes_90():
    prop = Line(size_percent=0)
    prop.make_valid()
    assert prop.size_percent == 90.0


def test_line_size_above_100_becomes_100():
    prop = Line(size_percent=101)
    prop.make_valid()
    assert prop.size_percent == 100.0


def test_line_to_map():
    m = line_prop().to_map()
    assert m["prop_color"] == "RGB(100, 50, 200)"
    assert m["prop_style"] == LineStyle.DASHED
    assert m["prop_thickness"] == 1.1
    assert m["prop_orientation"] == Orientation.VERTICAL
    assert m["prop_offset_percent"] == 50.0
    assert m["prop_size_percent"] == 20.0


def test_barcode_make_valid_defaults():
    prop = Barcode()
    prop.make_valid()
    assert prop.percent == 100.0
    assert prop.type == BarcodeType.CODE128
    assert prop.proportion.width == 1.0
    assert prop.proportion.height == pytest.approx(0.2)


def test_barcode_height_clamped_to_max_ratio():
    prop = Barcode(top=10, left=10, percent=98, proportion=Proportion(16, 9))
    prop.make_valid()
    assert prop.proportion.height == pytest.approx(3.2)
    assert prop.percent == 98
    assert prop.left == 10


def test_barcode_height_clamped_to_min_ratio():
    prop = Barcode(proportion=Proportion(100, 1))
    prop.make_valid()
    assert prop.proportion.height == pytest.approx(10.0)


def test_barcode_keeps_ean_type():
    prop = Barcode(type=BarcodeType.EAN)
    prop.make_valid()
    assert prop.type == BarcodeType.EAN


def test_barcode_center_resets_position():
    prop = Barcode(left=4, top=6, center=True)
    prop.make_valid()
    assert (prop.left, prop.top) == (0.0, 0.0)


def test_barcode_to_rect():
    rect = Barcode(left=1, top=2, percent=50, center=True).to_rect()
    assert rect == Rect(left=1, top=2, percent=50, center=True)


def test_barcode_to_map():
    m = Barcode(left=1, top=2, percent=50, proportion=Proportion(16, 2)).to_map()
    assert m == {
        "prop_left": 1,
        "prop_top": 2,
        "prop_percent": 50,
        "prop_proportion_width": 16,
        "prop_proportion_height": 2,
    }