"""Tests for stop sorting and segment classification."""

import pytest

from y2kgrad.engine.stops import SizeRamp, build_segments, classify_pair, sort_stops
from y2kgrad.models.gradient import Stop


def _stop(pos: float, color: str, large: bool) -> Stop:
    return Stop(position=pos, color=color, is_large_end=large)


@pytest.mark.parametrize(
    "large0, large1, fg, bg, ramp",
    [
        (True, False, "#s0", "#s1", SizeRamp.SHRINKING),
        (False, True, "#s1", "#s0", SizeRamp.GROWING),
        (True, True, "#s0", None, SizeRamp.CONSTANT),
        (False, False, None, "#s0", SizeRamp.CONSTANT),
    ],
)
def test_classification_table(large0, large1, fg, bg, ramp):
    seg = classify_pair(_stop(10, "#s0", large0), _stop(60, "#s1", large1))
    assert seg.fg_color == fg
    assert seg.bg_color == bg
    assert seg.ramp is ramp
    assert seg.start_pct == 10
    assert seg.end_pct == 60
    assert seg.start_color == "#s0"


def test_sort_is_stable_for_ties():
    stops = [_stop(50, "#b", False), _stop(0, "#a", True), _stop(50, "#c", True)]
    ordered = sort_stops(stops)
    assert [s.color for s in ordered] == ["#a", "#b", "#c"]


def test_sort_does_not_mutate_input(mixed_stops):
    before = [s.position for s in mixed_stops]
    sort_stops(mixed_stops)
    assert [s.position for s in mixed_stops] == before


def test_segments_are_contiguous(mixed_stops):
    segments = build_segments(sort_stops(mixed_stops))
    assert len(segments) == 3
    for prev, nxt in zip(segments, segments[1:]):
        assert prev.end_pct == nxt.start_pct
    assert [s.ramp for s in segments] == [
        SizeRamp.SHRINKING,
        SizeRamp.GROWING,
        SizeRamp.SHRINKING,
    ]


def test_no_segments_for_short_lists():
    assert build_segments([]) == []
    assert build_segments([_stop(0, "#a", True)]) == []


def test_zero_width_segment(default_stops):
    segments = build_segments(sort_stops(default_stops))
    middle = segments[1]
    assert middle.width == 0
    assert middle.contains(50)
    assert not middle.contains(50.01)
