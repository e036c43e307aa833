"""Cell resolver: map an axis percentage to foreground, background and size."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from y2kgrad.engine.config import GeneratorConfig
from y2kgrad.engine.context import CellInfo
from y2kgrad.engine.stops import SizeRamp, build_segments, sort_stops
from y2kgrad.models.gradient import Stop

logger = logging.getLogger(__name__)


def smoothstep(t: float) -> float:
    """Cubic ease t²(3 − 2t). The only size curve in the generator."""
    return t * t * (3 - 2 * t)


class CellResolver:
    """Resolves cells against one snapshot of stops. Built once per generation."""

    def __init__(
        self,
        stops: Sequence[Stop],
        global_bg: str,
        config: GeneratorConfig | None = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.global_bg = global_bg
        self.stops = sort_stops(stops)
        self.segments = build_segments(self.stops)

    def _single_stop(self, stop: Stop) -> CellInfo:
        if stop.is_large_end:
            return CellInfo(fg=stop.color, bg=self.global_bg, size=1.0)
        return CellInfo(fg=None, bg=stop.color, size=0.0)

    def _fallback(self) -> CellInfo:
        return CellInfo(fg=self.config.fallback_fg, bg=self.global_bg, size=1.0)

    def resolve(self, pct: float) -> CellInfo:
        if not self.stops:
            return self._fallback()

        first, last = self.stops[0], self.stops[-1]
        if pct <= first.position:
            return self._single_stop(first)
        if pct >= last.position:
            return self._single_stop(last)

        for seg in self.segments:
            if not seg.contains(pct):
                continue
            t = 0.0 if seg.width == 0 else (pct - seg.start_pct) / seg.width
            eased = smoothstep(t)

            if seg.ramp is SizeRamp.SHRINKING:
                return CellInfo(fg=seg.fg_color, bg=seg.bg_color, size=1.0 - eased)
            if seg.ramp is SizeRamp.GROWING:
                return CellInfo(fg=seg.fg_color, bg=seg.bg_color, size=eased)
            if seg.fg_color is not None:
                return CellInfo(fg=seg.start_color, bg=self.global_bg, size=1.0)
            return CellInfo(fg=None, bg=seg.bg_color, size=0.0)

        # Segments tile [first, last]; only a non-comparable pct (NaN) gets here.
        logger.error("No segment covers axis position %r; using fallback cell", pct)
        return self._fallback()
