from datetime import datetime

import pytest

from bpdf.entity import (
    Config,
    Extension,
    GenerationMode,
    Image,
    Metadata,
    Protection,
    ProtectionType,
    Utf8Text,
)
from bpdf.geometry import Dimensions, Margins


def test_image_append_map():
    image = Image(data=bytes([1, 2, 3]), extension=Extension.PNG,
                  dimensions=Dimensions(100, 200))
    m = image.append_map({})
    assert m["entity_image_bytes"] == "[1 2 3]"
    assert m["entity_extension"] == Extension.PNG
    assert m["background_dimension_width"] == 100.0
    assert m["background_dimension_height"] == 200.0


def test_image_append_map_trims_bytes():
    m = Image(data=bytes(range(20))).append_map({})
    assert m["entity_image_bytes"] == "[0 1 2 3 4 5 6 7 8 9]"
    assert "entity_extension" not in m


def test_metadata_append_map():
    metadata = Metadata(
        author=Utf8Text("author", True),
        creator=Utf8Text("creator", False),
        subject=Utf8Text("subject", True),
        title=Utf8Text("title", True),
        creation_date=datetime.now(),
        keywords=Utf8Text("keyword", True),
    )
    m = {}
    metadata.append_map(m)
    assert m["config_metadata_author"] == "Utf8Text(author, true)"
    assert m["config_metadata_creator"] == "Utf8Text(creator, false)"
    assert m["config_metadata_subject"] == "Utf8Text(subject, true)"
    assert m["config_metadata_title"] == "Utf8Text(title, true)"
    assert m["config_metadata_keywords"] == "Utf8Text(keyword, true)"
    assert m["config_metadata_creation_date"] is True


def test_protection_append_map():
    owner_password = "secret"
    user_password = "password"
    protection = Protection(type=ProtectionType.PRINT,
                            owner_password=owner_password,
                            user_password=user_password)
    m = protection.append_map({})
    assert m["config_protection_type"] == ProtectionType.PRINT
    assert m["config_user_password"] == "password"
    assert m["config_owner_password"] == "secret"


def test_protection_append_map_skips_unset():
    assert Protection().append_map({}) == {}


def test_extension_png_is_valid():
    assert Extension.PNG.is_valid() is True


@pytest.mark.parametrize("value", ["png", "jpg", "jpeg"])
def test_known_extension_is_valid(value):
    assert Extension(value).is_valid() is True


def test_extension_rejects_unknown():
    with pytest.raises(ValueError):
        Extension("invalid")


def test_config_to_map():
    config = Config(
        dimensions=Dimensions(210, 297),
        margins=Margins(left=10, top=15),
        generation_mode=GenerationMode.SEQUENTIAL,
        chunk_workers=2,
        debug=True,
        max_grid_size=12,
        compression=True,
    )
    m = config.to_map()
    assert m["bpdf_dimension_width"] == 210
    assert m["bpdf_dimension_height"] == 297
    assert m["config_margin_left"] == 10
    assert m["config_margin_top"] == 15
    assert m["generation_mode"] == GenerationMode.SEQUENTIAL
    assert m["chunk_workers"] == 2
    assert m["config_debug"] is True
    assert m["config_max_grid_sum"] == 12
    assert m["config_compression"] is True
    assert "config_disable_auto_page_break" not in m


def test_config_to_map_defaults():
    assert Config().to_map() == {"generation_mode": None, "chunk_workers": 0}