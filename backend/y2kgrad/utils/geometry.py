"""Coverage geometry for rect sets. No engine imports beyond the rect type."""

from __future__ import annotations

from collections.abc import Iterable

from shapely.geometry import box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from y2kgrad.engine.context import RawRect

AttributeKey = tuple[str, float | None, str | None]

# Area slack for float noise in coordinates that passed through addition.
_AREA_EPS = 1e-6


def rect_polygon(rect: RawRect) -> BaseGeometry:
    return box(rect.x, rect.y, rect.right, rect.bottom)


def coverage_by_attributes(rects: Iterable[RawRect]) -> dict[AttributeKey, BaseGeometry]:
    """Union of rect footprints per (fill, opacity, shape hint)."""
    buckets: dict[AttributeKey, list[BaseGeometry]] = {}
    for rect in rects:
        buckets.setdefault(rect.attributes, []).append(rect_polygon(rect))
    return {key: unary_union(polys) for key, polys in buckets.items()}


def area_by_attributes(rects: Iterable[RawRect]) -> dict[AttributeKey, float]:
    """Plain area sum per attribute class (overlaps counted twice)."""
    areas: dict[AttributeKey, float] = {}
    for rect in rects:
        areas[rect.attributes] = areas.get(rect.attributes, 0.0) + rect.area
    return areas


def same_coverage(
    a: Iterable[RawRect], b: Iterable[RawRect], eps: float = _AREA_EPS
) -> bool:
    """True when both rect sets paint the same region with the same attributes."""
    cov_a = coverage_by_attributes(a)
    cov_b = coverage_by_attributes(b)
    if cov_a.keys() != cov_b.keys():
        return False
    return all(cov_a[k].symmetric_difference(cov_b[k]).area <= eps for k in cov_a)
