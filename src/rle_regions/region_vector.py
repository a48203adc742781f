"""Aggregate bounds over a collection of regions.

Each member must be plain and non-empty (the :meth:`Region.left
<rle_regions.region.Region.left>` precondition applies per region). An empty
collection has no bounds: the functions return ``None``.
"""

from __future__ import annotations

from typing import Sequence

from rle_regions.region import Bounds, Region


def left(regions: Sequence[Region]) -> int | None:
    if not regions:
        return None
    return min(r.left() for r in regions)


def top(regions: Sequence[Region]) -> int | None:
    if not regions:
        return None
    return max(r.top() for r in regions)


def right(regions: Sequence[Region]) -> int | None:
    if not regions:
        return None
    return max(r.right() for r in regions)


def bottom(regions: Sequence[Region]) -> int | None:
    if not regions:
        return None
    return min(r.bottom() for r in regions)


def width(regions: Sequence[Region]) -> int | None:
    if not regions:
        return None
    return right(regions) - left(regions) + 1


def height(regions: Sequence[Region]) -> int | None:
    if not regions:
        return None
    return top(regions) - bottom(regions) + 1


def bounds(regions: Sequence[Region]) -> Bounds | None:
    if not regions:
        return None
    boxes = [r.bounds() for r in regions]
    return Bounds(
        left=min(b.left for b in boxes),
        top=max(b.top for b in boxes),
        right=max(b.right for b in boxes),
        bottom=min(b.bottom for b in boxes),
    )
