"""Project canvas points onto the rotated gradient axis as a 0-100 percentage."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

# Zero-length axis (empty canvas): every point sits mid-gradient.
_DEGENERATE_PERCENT = 50.0


@dataclass(frozen=True)
class AxisProjection:
    """Unit direction plus the projected extent of the canvas corners.

    Angle 0 points up the canvas; angles increase clockwise.
    """

    dir_x: float
    dir_y: float
    min_proj: float
    max_proj: float

    @classmethod
    def from_canvas(cls, width: float, height: float, angle: float) -> AxisProjection:
        rad = math.radians(angle % 360)
        direction = np.array([math.sin(rad), -math.cos(rad)])
        corners = np.array([[0.0, 0.0], [width, 0.0], [0.0, height], [width, height]])
        proj = corners @ direction
        return cls(
            dir_x=float(direction[0]),
            dir_y=float(direction[1]),
            min_proj=float(np.min(proj)),
            max_proj=float(np.max(proj)),
        )

    @property
    def span(self) -> float:
        return self.max_proj - self.min_proj

    def percent(self, x: float, y: float) -> float:
        """Axis percentage of (x, y); 0 at the trailing corner, 100 at the leading one."""
        span = self.span
        if span == 0:
            return _DEGENERATE_PERCENT
        return ((x * self.dir_x + y * self.dir_y) - self.min_proj) / span * 100.0
