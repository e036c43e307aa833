"""SVG read-back: parse a generated gradient into an SvgDocument.

Uses ElementTree, so malformed markup raises ``xml.etree.ElementTree.ParseError``.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from y2kgrad.models.svg_document import SvgDocument, SvgElement
from y2kgrad.svg.serializer import SVG_NS

logger = logging.getLogger(__name__)

_NS_PREFIX = f"{{{SVG_NS}}}"


def _local_name(tag: str) -> str:
    return tag[len(_NS_PREFIX):] if tag.startswith(_NS_PREFIX) else tag


def _to_float(value: str | None, default: float = 0.0) -> float:
    if value is None:
        return default
    try:
        return float(value.replace("px", ""))
    except ValueError:
        return default


def parse_svg(svg_text: str) -> SvgDocument:
    """Parse SVG markup into an SvgDocument with one SvgElement per child."""
    root = ET.fromstring(svg_text)
    if _local_name(root.tag) != "svg":
        raise ValueError(f"Root element is <{_local_name(root.tag)}>, expected <svg>")

    doc = SvgDocument(raw_svg=svg_text)
    doc.width = _to_float(root.get("width"))
    doc.height = _to_float(root.get("height"))

    viewbox = root.get("viewBox")
    if viewbox:
        parts = viewbox.replace(",", " ").split()
        if len(parts) == 4:
            doc.viewbox = tuple(float(p) for p in parts)

    for child in root:
        doc.elements.append(
            SvgElement(tag=_local_name(child.tag), attributes=dict(child.attrib))
        )

    logger.debug("Parsed SVG: %d elements, canvas %.0f×%.0f", len(doc.elements), doc.width, doc.height)
    return doc
