"""Y2K grid gradient compiler: stops and canvas in, layered rects out."""

from y2kgrad.engine.config import GeneratorConfig
from y2kgrad.engine.context import CellInfo, RawRect, RectLayer, RectLayers

__all__ = [
    "GeneratorConfig",
    "CellInfo",
    "RawRect",
    "RectLayer",
    "RectLayers",
]
