"""Merge compactor: coalesce touching rects with identical attributes.

Runs per layer so z-order survives: vertical runs first (same x/width,
stacked along y), then horizontal runs over the result (same y/height,
adjacent along x). Vertical first matters: whole columns only become
uniform, and so mergeable sideways, after their cells are joined.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from dataclasses import replace
from typing import Callable

from y2kgrad.engine.config import GeneratorConfig
from y2kgrad.engine.context import RawRect, RectLayers

logger = logging.getLogger(__name__)


def _coalesce(
    rects: Sequence[RawRect],
    key: Callable[[RawRect], Hashable],
    start: Callable[[RawRect], float],
    end: Callable[[RawRect], float],
    extend: Callable[[RawRect, RawRect], RawRect],
    config: GeneratorConfig,
) -> list[RawRect]:
    """Group by ``key``, sort each group along the axis, join touching neighbours."""
    groups: dict[Hashable, list[RawRect]] = {}
    for rect in rects:
        groups.setdefault(key(rect), []).append(rect)

    digits = config.merge_round_digits
    merged: list[RawRect] = []
    for group in groups.values():
        group.sort(key=start)
        acc = group[0]
        for rect in group[1:]:
            if abs(round(start(rect), digits) - round(end(acc), digits)) < config.merge_tolerance:
                acc = extend(acc, rect)
            else:
                merged.append(acc)
                acc = rect
        merged.append(acc)
    return merged


def merge_vertical(
    rects: Sequence[RawRect], config: GeneratorConfig | None = None
) -> list[RawRect]:
    config = config or GeneratorConfig()
    digits = config.merge_round_digits
    return _coalesce(
        rects,
        key=lambda r: (*r.attributes, round(r.x, digits), round(r.w, digits)),
        start=lambda r: r.y,
        end=lambda r: r.bottom,
        extend=lambda acc, r: replace(acc, h=r.bottom - acc.y),
        config=config,
    )


def merge_horizontal(
    rects: Sequence[RawRect], config: GeneratorConfig | None = None
) -> list[RawRect]:
    config = config or GeneratorConfig()
    digits = config.merge_round_digits
    return _coalesce(
        rects,
        key=lambda r: (*r.attributes, round(r.y, digits), round(r.h, digits)),
        start=lambda r: r.x,
        end=lambda r: r.right,
        extend=lambda acc, r: replace(acc, w=r.right - acc.x),
        config=config,
    )


def merge_rects(
    rects: Sequence[RawRect], config: GeneratorConfig | None = None
) -> list[RawRect]:
    """Vertical then horizontal pass over one layer."""
    if not rects:
        return []
    return merge_horizontal(merge_vertical(rects, config), config)


def merge_layers(layers: RectLayers, config: GeneratorConfig | None = None) -> RectLayers:
    merged = RectLayers(
        background=merge_rects(layers.background, config),
        solid=merge_rects(layers.solid, config),
        fractional=merge_rects(layers.fractional, config),
    )
    logger.debug("Merged %d rects into %d", layers.count, merged.count)
    return merged
