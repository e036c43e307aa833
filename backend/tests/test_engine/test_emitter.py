"""Tests for per-cell rect emission."""

from y2kgrad.engine.context import RectLayer
from y2kgrad.engine.emitter import emit_layers, grid_shape
from y2kgrad.engine.projection import AxisProjection
from y2kgrad.engine.resolver import CellResolver
from tests.conftest import GLOBAL_BG


def _emit(width, height, square, stops, angle=0, step=1):
    return emit_layers(
        width,
        height,
        square,
        CellResolver(stops, GLOBAL_BG),
        AxisProjection.from_canvas(width, height, angle),
        step,
    )


def test_grid_shape_counts_partial_cells():
    assert grid_shape(100, 10, 10) == (10, 1)
    assert grid_shape(101, 10, 10) == (11, 1)
    assert grid_shape(0, 0, 8) == (0, 0)


def test_both_large_fills_every_cell(both_large_stops):
    layers = _emit(100, 10, 10, both_large_stops)
    assert layers.background == []
    assert layers.fractional == []
    assert len(layers.solid) == 10
    for i, sq in enumerate(layers.solid):
        assert sq.fill == "#000"
        assert (sq.x, sq.y, sq.w, sq.h) == (i * 10, 0, 10, 10)


def test_past_last_stop_paints_background(half_range_stops):
    layers = _emit(50, 10, 10, half_range_stops, angle=90)
    # Every cell's background is #fff, which differs from the canvas fill
    assert len(layers.background) == 5
    last = layers.background[-1]
    assert (last.x, last.y, last.w, last.h, last.fill) == (40, 0, 10, 10, "#fff")
    # The cell at x=45 (p=90%) has no foreground square
    assert all(sq.x < 40 for sq in layers.solid + layers.fractional)


def test_background_matching_canvas_is_skipped(default_stops):
    # Default stops use the canvas color (#c0c0c0) as their small-end color
    layers = _emit(400, 80, 8, default_stops)
    assert all(r.fill != GLOBAL_BG for r in layers.background)


def test_emission_order_is_row_major(both_large_stops):
    layers = _emit(30, 20, 10, both_large_stops)
    positions = [(r.y, r.x) for r in layers.solid]
    assert positions == sorted(positions)
    assert len(positions) == 6


def test_layers_items_in_z_order(mixed_stops):
    layers = _emit(120, 24, 8, mixed_stops, angle=90)
    assert [layer for layer, _ in layers.items()] == [
        RectLayer.BACKGROUND,
        RectLayer.SOLID,
        RectLayer.FRACTIONAL,
    ]
    assert layers.flatten() == layers.background + layers.solid + layers.fractional
    assert all(r.opacity is not None for r in layers.fractional)
    assert all(r.opacity is None for r in layers.solid + layers.background)
