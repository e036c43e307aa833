"""Export helpers: download metadata, data URLs and the apply-to-element snippet."""

from __future__ import annotations

import json
from urllib.parse import quote

from y2kgrad.svg.serializer import format_number

DOWNLOAD_FILENAME = "y2k-gradient.svg"
SVG_MEDIA_TYPE = "image/svg+xml"

# Characters encodeURIComponent leaves alone besides alphanumerics
_URI_COMPONENT_SAFE = "-_.!~*'()"


def content_disposition(filename: str = DOWNLOAD_FILENAME) -> str:
    return f'attachment; filename="{filename}"'


def svg_data_url(svg: str) -> str:
    return f"data:{SVG_MEDIA_TYPE}," + quote(svg, safe=_URI_COMPONENT_SAFE)


def build_apply_snippet(svg: str, selector: str, width: float, height: float) -> str:
    """JavaScript that paints ``svg`` as the background of ``selector``.

    The selector and data URL are embedded as JSON string literals.
    """
    size = f"{format_number(width)}px {format_number(height)}px"
    return "\n".join(
        [
            f"// Y2K Gradient - Apply to {json.dumps(selector)}",
            "function applyY2KGradient() {",
            f"  const selector = {json.dumps(selector)};",
            "  const target = document.querySelector(selector);",
            "  if (!target) { console.warn('Target not found: ' + selector); return; }",
            f"  const encoded = {json.dumps(svg_data_url(svg))};",
            "  target.style.backgroundImage = 'url(\"' + encoded + '\")';",
            f"  target.style.backgroundSize = {json.dumps(size)};",
            "}",
            "applyY2KGradient();",
        ]
    )
