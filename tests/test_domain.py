import pytest

from domain.enums import ShapeType
from domain.models import LOVE_TEXT, ShapeKind
from utils.color import parse_hex, to_hex
from utils.constants import ZOOM_MAX, ZOOM_MIN
from utils.geometry import normalise


@pytest.mark.parametrize("shape_id, expected", [
    ("galaxy", ShapeKind(ShapeType.GALAXY)),
    ("heart", ShapeKind(ShapeType.HEART)),
    ("Saturn", ShapeKind(ShapeType.SATURN)),
    (" flower ", ShapeKind(ShapeType.FLOWER)),
    ("love", ShapeKind(ShapeType.TEXT, LOVE_TEXT)),
])
def test_shape_ids(shape_id, expected):
    assert ShapeKind.from_id(shape_id) == expected


@pytest.mark.parametrize("shape_id", ["", "cube", "text"])
def test_unknown_shape_ids(shape_id):
    with pytest.raises(ValueError):
        ShapeKind.from_id(shape_id)


def test_shape_kind_str():
    assert str(ShapeKind(ShapeType.HEART)) == "heart"
    assert str(ShapeKind.of_text("hi")) == "text('hi')"


@pytest.mark.parametrize("value, rgb", [
    ("#00ffff", (0.0, 1.0, 1.0)),
    ("FF0000", (1.0, 0.0, 0.0)),
    ("#fff", (1.0, 1.0, 1.0)),
])
def test_parse_hex(value, rgb):
    assert parse_hex(value) == pytest.approx(rgb)


@pytest.mark.parametrize("value", ["", "#12345", "#gggggg", "blue"])
def test_parse_hex_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_hex(value)


def test_to_hex_clamps():
    assert to_hex((1.2, 0.0, -0.5)) == "#ff0000"
    assert to_hex(parse_hex("#3a7bd5")) == "#3a7bd5"


@pytest.mark.parametrize("expansion, fraction", [
    (ZOOM_MIN, 0.0),
    (ZOOM_MAX, 1.0),
    (1.0, (1.0 - ZOOM_MIN) / (ZOOM_MAX - ZOOM_MIN)),
    (5.0, 1.0),
    (0.0, 0.0),
])
def test_zoom_gauge_position(expansion, fraction):
    assert normalise(expansion, ZOOM_MIN, ZOOM_MAX) == pytest.approx(fraction)
