"""Size quantizer: turn a continuous size fraction into stepped squares.

With a step configured, a size between two steps is drawn as an opaque
square at the lower step plus a translucent square at the upper step whose
opacity is the remainder. This keeps the pixel-snap look while growth still
reads as smooth.
"""

from __future__ import annotations

import math

from y2kgrad.engine.config import GeneratorConfig
from y2kgrad.engine.context import RawRect


def _centered_square(cx: float, cy: float, side: float, fill: str, **extra) -> RawRect:
    return RawRect(x=cx - side / 2, y=cy - side / 2, w=side, h=side, fill=fill, **extra)


def quantize_square(
    cell_x: float,
    cell_y: float,
    square_size: float,
    size: float,
    fg: str | None,
    size_step: float,
    config: GeneratorConfig | None = None,
) -> tuple[list[RawRect], list[RawRect]]:
    """Foreground squares for one cell as (solid, fractional)."""
    config = config or GeneratorConfig()
    solid: list[RawRect] = []
    fractional: list[RawRect] = []

    if fg is None or size <= config.size_dead_zone:
        return solid, fractional

    cx = cell_x + square_size / 2
    cy = cell_y + square_size / 2
    raw_size = square_size * size
    hint = config.shape_hint

    if 0 < size_step < square_size:
        lower = math.floor(raw_size / size_step) * size_step
        upper = lower + size_step
        frac = (raw_size - lower) / size_step

        if lower > 0:
            solid.append(_centered_square(cx, cy, lower, fg, shape_hint=hint))
        if frac > config.fraction_dead_zone and upper <= square_size:
            fractional.append(
                _centered_square(cx, cy, upper, fg, opacity=frac, shape_hint=hint)
            )
    elif raw_size > 0:
        solid.append(_centered_square(cx, cy, raw_size, fg, shape_hint=hint))

    return solid, fractional
