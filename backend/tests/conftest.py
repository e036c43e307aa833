"""Shared test fixtures."""

from __future__ import annotations

import pytest

from y2kgrad.models.gradient import DEFAULT_STOPS, Stop

GLOBAL_BG = "#c0c0c0"

# Example 1: both ends large -> constant full #000 foreground
BOTH_LARGE_STOPS = [
    Stop(position=0, color="#000", is_large_end=True),
    Stop(position=100, color="#fff", is_large_end=True),
]

# Example 2: last stop at 50, small end
HALF_RANGE_STOPS = [
    Stop(position=0, color="#000", is_large_end=True),
    Stop(position=50, color="#fff", is_large_end=False),
]

SHRINKING_STOPS = [
    Stop(position=0, color="#a00", is_large_end=True),
    Stop(position=100, color="#0a0", is_large_end=False),
]

GROWING_STOPS = [
    Stop(position=0, color="#a00", is_large_end=False),
    Stop(position=100, color="#0a0", is_large_end=True),
]

# Deliberately out of order; sorted: 0 (large), 40 (small), 70 (large), 100 (small)
MIXED_STOPS = [
    Stop(position=70, color="#00f", is_large_end=True),
    Stop(position=0, color="#f00", is_large_end=True),
    Stop(position=100, color="#ff0", is_large_end=False),
    Stop(position=40, color="#0f0", is_large_end=False),
]


@pytest.fixture
def default_stops() -> list[Stop]:
    return list(DEFAULT_STOPS)


@pytest.fixture
def both_large_stops() -> list[Stop]:
    return list(BOTH_LARGE_STOPS)


@pytest.fixture
def half_range_stops() -> list[Stop]:
    return list(HALF_RANGE_STOPS)


@pytest.fixture
def shrinking_stops() -> list[Stop]:
    return list(SHRINKING_STOPS)


@pytest.fixture
def growing_stops() -> list[Stop]:
    return list(GROWING_STOPS)


@pytest.fixture
def mixed_stops() -> list[Stop]:
    return list(MIXED_STOPS)
