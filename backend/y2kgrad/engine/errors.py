"""Gradient engine errors."""

from __future__ import annotations

import math

from y2kgrad.engine.emitter import grid_shape


class GradientError(Exception):
    """Base class for errors raised around the generator."""


class GridTooLargeError(GradientError):
    def __init__(self, cols: float, rows: float, max_cells: int) -> None:
        self.cols = cols
        self.rows = rows
        self.max_cells = max_cells
        if math.isinf(cols) or math.isinf(rows):
            message = f"Grid cell count overflows and exceeds the limit of {max_cells}"
        else:
            message = f"Grid of {cols}x{rows} = {cols * rows} cells exceeds the limit of {max_cells}"
        super().__init__(message)


def check_grid_size(width: float, height: float, square_size: float, max_cells: int) -> None:
    """Raise GridTooLargeError when the cell count would exceed ``max_cells``."""
    # A denormal square size makes the column count overflow to inf
    if not (math.isfinite(width / square_size) and math.isfinite(height / square_size)):
        raise GridTooLargeError(math.inf, math.inf, max_cells)
    cols, rows = grid_shape(width, height, square_size)
    if cols * rows > max_cells:
        raise GridTooLargeError(cols, rows, max_cells)
