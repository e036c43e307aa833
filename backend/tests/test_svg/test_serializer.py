"""Tests for SVG serialization."""

import pytest

from y2kgrad.engine.context import RawRect
from y2kgrad.svg.serializer import format_number, format_rect, serialize_gradient_svg


@pytest.mark.parametrize(
    "value, expected",
    [
        (8, "8"),
        (10.0, "10"),
        (2.5, "2.50"),
        (2.499, "2.50"),
        (1.999, "2"),
        (3.14159, "3.14"),
        (-0.001, "0"),
        (-1.25, "-1.25"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_plain_rect():
    rect = RawRect(x=0, y=8, w=16, h=8, fill="#fff")
    assert format_rect(rect) == '<rect x="0" y="8" width="16" height="8" fill="#fff"/>'


def test_rect_with_opacity_and_hint():
    rect = RawRect(x=1.5, y=1.5, w=5, h=5, fill="#f00", opacity=0.4, shape_hint="geometricPrecision")
    assert format_rect(rect) == (
        '<rect x="1.50" y="1.50" width="5" height="5" fill="#f00" '
        'opacity="0.400" shape-rendering="geometricPrecision"/>'
    )


def test_empty_document():
    svg = serialize_gradient_svg(400, 80, "#c0c0c0", [])
    assert svg == (
        '<svg xmlns="http://www.w3.org/2000/svg" width="400" height="80" viewBox="0 0 400 80">\n'
        '<rect width="400" height="80" fill="#c0c0c0"/>\n'
        "</svg>"
    )


def test_rects_keep_given_order():
    rects = [RawRect(x=i, y=0, w=1, h=1, fill=f"#{i}{i}{i}") for i in (3, 1, 2)]
    lines = serialize_gradient_svg(4, 1, "#000", rects).split("\n")[2:-1]
    assert [line.split('fill="')[1][:4] for line in lines] == ["#333", "#111", "#222"]
