"""Parsed SVG document model."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SvgElement(BaseModel):
    tag: str
    attributes: dict[str, str] = Field(default_factory=dict)


class SvgDocument(BaseModel):
    """A generated gradient SVG read back into elements."""

    viewbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    width: float = 0.0
    height: float = 0.0
    elements: list[SvgElement] = Field(default_factory=list)
    raw_svg: str = ""

    @property
    def rects(self) -> list[SvgElement]:
        return [e for e in self.elements if e.tag == "rect"]

    @property
    def background(self) -> SvgElement | None:
        """The full-canvas backdrop: a rect with no position attributes."""
        for el in self.rects:
            if "x" not in el.attributes and "y" not in el.attributes:
                return el
        return None
