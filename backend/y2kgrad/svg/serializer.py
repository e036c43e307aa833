"""Write the compact SVG document for a list of merged rects."""

from __future__ import annotations

from collections.abc import Iterable

from y2kgrad.engine.config import GeneratorConfig
from y2kgrad.engine.context import RawRect

SVG_NS = "http://www.w3.org/2000/svg"


def format_number(value: float, decimals: int = 2) -> str:
    """Round to ``decimals``; integral results drop the decimal point (8, 2.50)."""
    rounded = round(value, decimals)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{decimals}f}"


def format_rect(rect: RawRect, config: GeneratorConfig | None = None) -> str:
    config = config or GeneratorConfig()
    d = config.coord_decimals
    attrs = [
        f'x="{format_number(rect.x, d)}"',
        f'y="{format_number(rect.y, d)}"',
        f'width="{format_number(rect.w, d)}"',
        f'height="{format_number(rect.h, d)}"',
        f'fill="{rect.fill}"',
    ]
    if rect.opacity is not None:
        attrs.append(f'opacity="{rect.opacity:.{config.opacity_decimals}f}"')
    if rect.shape_hint:
        attrs.append(f'shape-rendering="{rect.shape_hint}"')
    return f"<rect {' '.join(attrs)}/>"


def serialize_gradient_svg(
    width: float,
    height: float,
    bg_color: str,
    rects: Iterable[RawRect],
    config: GeneratorConfig | None = None,
) -> str:
    """Full-canvas backdrop followed by one <rect> per entry, in the given order."""
    config = config or GeneratorConfig()
    w = format_number(width, config.coord_decimals)
    h = format_number(height, config.coord_decimals)

    lines = [
        f'<svg xmlns="{SVG_NS}" width="{w}" height="{h}" viewBox="0 0 {w} {h}">',
        f'<rect width="{w}" height="{h}" fill="{bg_color}"/>',
    ]
    lines.extend(format_rect(rect, config) for rect in rects)
    lines.append("</svg>")
    return "\n".join(lines)
