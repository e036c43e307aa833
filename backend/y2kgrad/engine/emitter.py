"""Rectangle emitter: walk the grid and collect raw rects per layer."""

from __future__ import annotations

import logging
import math

from y2kgrad.engine.config import GeneratorConfig
from y2kgrad.engine.context import RawRect, RectLayers
from y2kgrad.engine.projection import AxisProjection
from y2kgrad.engine.quantizer import quantize_square
from y2kgrad.engine.resolver import CellResolver

logger = logging.getLogger(__name__)


def grid_shape(width: float, height: float, square_size: float) -> tuple[int, int]:
    """(cols, rows) needed to cover the canvas; partial cells count."""
    return math.ceil(width / square_size), math.ceil(height / square_size)


def emit_layers(
    width: float,
    height: float,
    square_size: float,
    resolver: CellResolver,
    projection: AxisProjection,
    size_step: float,
    config: GeneratorConfig | None = None,
) -> RectLayers:
    """Resolve every cell, row-major, into background/solid/fractional rects."""
    config = config or GeneratorConfig()
    cols, rows = grid_shape(width, height, square_size)
    layers = RectLayers()
    half = square_size / 2

    for row in range(rows):
        cell_y = row * square_size
        for col in range(cols):
            cell_x = col * square_size
            pct = projection.percent(cell_x + half, cell_y + half)
            cell = resolver.resolve(pct)

            # Cells matching the canvas fill are already painted by the backdrop
            if cell.bg is not None and cell.bg != resolver.global_bg:
                layers.background.append(
                    RawRect(x=cell_x, y=cell_y, w=square_size, h=square_size, fill=cell.bg)
                )

            solid, fractional = quantize_square(
                cell_x, cell_y, square_size, cell.size, cell.fg, size_step, config
            )
            layers.solid.extend(solid)
            layers.fractional.extend(fractional)

    logger.debug(
        "Emitted %d cells (%dx%d): %d background, %d solid, %d fractional",
        cols * rows,
        cols,
        rows,
        len(layers.background),
        len(layers.solid),
        len(layers.fractional),
    )
    return layers
