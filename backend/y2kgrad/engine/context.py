"""Shared engine types: cells, raw rectangles and the three z-ordered layers.

Layer order is the z-order of the final document:
BACKGROUND fills sit under SOLID squares, which sit under FRACTIONAL blends.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class RectLayer(enum.IntEnum):
    BACKGROUND = 0
    SOLID = 1
    FRACTIONAL = 2


@dataclass(frozen=True)
class CellInfo:
    """Resolved colors and size fraction for one grid cell."""

    fg: str | None
    bg: str | None
    size: float


@dataclass(frozen=True)
class RawRect:
    x: float
    y: float
    w: float
    h: float
    fill: str
    opacity: float | None = None
    shape_hint: str | None = None

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h

    @property
    def area(self) -> float:
        return self.w * self.h

    @property
    def attributes(self) -> tuple[str, float | None, str | None]:
        """Visual attributes that must match for two rects to merge."""
        return (self.fill, self.opacity, self.shape_hint)


@dataclass
class RectLayers:
    """Rectangles grouped by layer, kept apart until serialization."""

    background: list[RawRect] = field(default_factory=list)
    solid: list[RawRect] = field(default_factory=list)
    fractional: list[RawRect] = field(default_factory=list)

    def get(self, layer: RectLayer) -> list[RawRect]:
        if layer == RectLayer.BACKGROUND:
            return self.background
        if layer == RectLayer.SOLID:
            return self.solid
        return self.fractional

    def items(self) -> list[tuple[RectLayer, list[RawRect]]]:
        return [(layer, self.get(layer)) for layer in RectLayer]

    def flatten(self) -> list[RawRect]:
        """All rects in z-order: background, solid, fractional."""
        return [*self.background, *self.solid, *self.fractional]

    @property
    def count(self) -> int:
        return len(self.background) + len(self.solid) + len(self.fractional)
