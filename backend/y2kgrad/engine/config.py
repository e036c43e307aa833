"""Generator configuration: tunables for the gradient compiler."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GeneratorConfig:
    """Thresholds and output formatting used by a single generation call."""

    # Sizes at or below this fraction draw no foreground square
    size_dead_zone: float = 0.001
    # Sub-step blends at or below this opacity are dropped
    fraction_dead_zone: float = 0.001

    # Edge adjacency for merging: round to 6 decimals, then compare within 1e-4
    merge_round_digits: int = 6
    merge_tolerance: float = 1e-4

    # Serializer precision
    coord_decimals: int = 2
    opacity_decimals: int = 3

    # Rendering hint carried by every foreground square
    shape_hint: str = "geometricPrecision"

    # Foreground used when there are no stops (or no segment matched)
    fallback_fg: str = "#000"

    # Check that merging kept the exact coverage (costly, debugging only)
    verify_merge: bool = False
