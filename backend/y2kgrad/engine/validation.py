"""Validate generated SVG by reading it back."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from y2kgrad.svg.parser import parse_svg

_REQUIRED_RECT_ATTRS = ("x", "y", "width", "height", "fill")


def validate_generated_svg(svg: str) -> dict:
    """Parse ``svg`` and check the gradient document shape.

    Returns a dict with:
    - valid: bool
    - element_count: int (rects after the backdrop)
    - issues: list[str]
    """
    try:
        doc = parse_svg(svg)
    except (ET.ParseError, ValueError) as e:
        return {"valid": False, "element_count": 0, "issues": [f"Parse error: {e}"]}

    issues: list[str] = []
    if not doc.elements or doc.elements[0] is not doc.background:
        issues.append("First element is not the full-canvas background rect")

    for i, el in enumerate(doc.elements[1:], start=1):
        if el.tag != "rect":
            issues.append(f"Element {i}: unexpected <{el.tag}>")
            continue
        missing = [a for a in _REQUIRED_RECT_ATTRS if a not in el.attributes]
        if missing:
            issues.append(f"Element {i}: missing {', '.join(missing)}")
        opacity = el.attributes.get("opacity")
        if opacity is not None:
            try:
                in_range = 0.0 <= float(opacity) <= 1.0
            except ValueError:
                in_range = False
            if not in_range:
                issues.append(f"Element {i}: bad opacity {opacity!r}")

    if doc.viewbox[2:] != (doc.width, doc.height):
        issues.append("viewBox does not match width/height")

    return {
        "valid": not issues,
        "element_count": max(len(doc.elements) - 1, 0),
        "issues": issues,
    }
