"""Stop model: sort user stops and classify each adjacent pair into a segment.

Classification of a pair (s0, s1) by their large-end flags:

    s0     s1     fg        bg        ramp
    large  small  s0.color  s1.color  SHRINKING
    small  large  s1.color  s0.color  GROWING
    large  large  s0.color  None      CONSTANT
    small  small  None      s0.color  CONSTANT
"""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from y2kgrad.models.gradient import Stop


class SizeRamp(enum.Enum):
    SHRINKING = "shrinking"  # full at start, zero at end
    GROWING = "growing"  # zero at start, full at end
    CONSTANT = "constant"  # both ends share a polarity


@dataclass(frozen=True)
class Segment:
    start_pct: float
    end_pct: float
    fg_color: str | None
    bg_color: str | None
    ramp: SizeRamp
    start_color: str

    @property
    def width(self) -> float:
        return self.end_pct - self.start_pct

    def contains(self, pct: float) -> bool:
        return self.start_pct <= pct <= self.end_pct


def sort_stops(stops: Sequence[Stop]) -> list[Stop]:
    """Copy of ``stops`` ordered by position; ties keep their input order."""
    return sorted(stops, key=lambda s: s.position)


def classify_pair(s0: Stop, s1: Stop) -> Segment:
    if s0.is_large_end and not s1.is_large_end:
        fg, bg, ramp = s0.color, s1.color, SizeRamp.SHRINKING
    elif not s0.is_large_end and s1.is_large_end:
        fg, bg, ramp = s1.color, s0.color, SizeRamp.GROWING
    elif s0.is_large_end and s1.is_large_end:
        fg, bg, ramp = s0.color, None, SizeRamp.CONSTANT
    else:
        fg, bg, ramp = None, s0.color, SizeRamp.CONSTANT

    return Segment(
        start_pct=s0.position,
        end_pct=s1.position,
        fg_color=fg,
        bg_color=bg,
        ramp=ramp,
        start_color=s0.color,
    )


def build_segments(sorted_stops: Sequence[Stop]) -> list[Segment]:
    """One segment per adjacent pair of already-sorted stops."""
    return [classify_pair(s0, s1) for s0, s1 in zip(sorted_stops, sorted_stops[1:])]
