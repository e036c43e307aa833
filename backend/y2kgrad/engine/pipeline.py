"""Generation pipeline: stops + canvas in, compact SVG out.

Stages: stop model and projection (once per call) → per-cell emission →
per-layer merge → serialization. Pure: no shared state between calls.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Sequence
from dataclasses import dataclass

from y2kgrad.engine.config import GeneratorConfig
from y2kgrad.engine.context import RectLayers
from y2kgrad.engine.emitter import emit_layers, grid_shape
from y2kgrad.engine.merge import merge_layers
from y2kgrad.engine.projection import AxisProjection
from y2kgrad.engine.resolver import CellResolver
from y2kgrad.models.gradient import GradientConfig, Stop
from y2kgrad.svg.serializer import serialize_gradient_svg

logger = logging.getLogger(__name__)


@dataclass
class GradientResult:
    svg: str
    raw_layers: RectLayers
    layers: RectLayers
    cols: int
    rows: int

    @property
    def rect_count(self) -> int:
        return self.layers.count

    @property
    def raw_rect_count(self) -> int:
        return self.raw_layers.count


def compile_gradient(
    width: float,
    height: float,
    square_size: float,
    stops: Sequence[Stop],
    background_color: str,
    size_step: float = 1,
    angle: float = 0,
    merge_enabled: bool = True,
    config: GeneratorConfig | None = None,
) -> GradientResult:
    """Run every stage and keep the intermediate layers alongside the SVG."""
    config = config or GeneratorConfig()
    start = time.perf_counter()

    projection = AxisProjection.from_canvas(width, height, angle)
    resolver = CellResolver(stops, background_color, config)

    t0 = time.perf_counter()
    raw_layers = emit_layers(width, height, square_size, resolver, projection, size_step, config)
    logger.debug("  emit completed in %.1fms", (time.perf_counter() - t0) * 1000)

    if merge_enabled:
        t0 = time.perf_counter()
        layers = merge_layers(raw_layers, config)
        logger.debug("  merge completed in %.1fms", (time.perf_counter() - t0) * 1000)
        if config.verify_merge:
            _verify_merge(raw_layers, layers)
    else:
        layers = raw_layers

    svg = serialize_gradient_svg(width, height, background_color, layers.flatten(), config)
    cols, rows = grid_shape(width, height, square_size)

    logger.info(
        "Gradient %dx%d cells: %d rects (%d before merge) in %.0fms",
        cols,
        rows,
        layers.count,
        raw_layers.count,
        (time.perf_counter() - start) * 1000,
    )
    return GradientResult(svg=svg, raw_layers=raw_layers, layers=layers, cols=cols, rows=rows)


def generate(
    width: float,
    height: float,
    square_size: float,
    stops: Sequence[Stop],
    background_color: str,
    size_step: float = 1,
    angle: float = 0,
    merge_enabled: bool = True,
    config: GeneratorConfig | None = None,
) -> str:
    """Render the stepped grid gradient as an SVG document string."""
    return compile_gradient(
        width,
        height,
        square_size,
        stops,
        background_color,
        size_step=size_step,
        angle=angle,
        merge_enabled=merge_enabled,
        config=config,
    ).svg


def generate_from_config(
    gradient: GradientConfig, config: GeneratorConfig | None = None
) -> GradientResult:
    return compile_gradient(
        gradient.width,
        gradient.height,
        gradient.square_size,
        gradient.stops,
        gradient.bg_color,
        size_step=gradient.size_step,
        angle=gradient.angle,
        merge_enabled=gradient.merge_rects,
        config=config,
    )


def _verify_merge(raw_layers: RectLayers, merged_layers: RectLayers) -> None:
    """Log an error if merging changed what any layer paints."""
    from y2kgrad.utils.geometry import area_by_attributes, same_coverage

    for (layer, raw), (_, merged) in zip(raw_layers.items(), merged_layers.items()):
        raw_areas = area_by_attributes(raw)
        merged_areas = area_by_attributes(merged)
        areas_match = raw_areas.keys() == merged_areas.keys() and all(
            math.isclose(raw_areas[k], merged_areas[k], rel_tol=1e-9, abs_tol=1e-6)
            for k in raw_areas
        )
        if not areas_match or not same_coverage(raw, merged):
            logger.error("Merge changed coverage of %s layer", layer.name)
