"""Regions: discrete 2-D point sets stored as sorted, packed runs.

A :class:`Region` holds a list of runs and a ``complement`` flag.

- ``complement=False``: the runs *are* the region.
- ``complement=True``: the runs are what is *excluded* from an otherwise
  infinite region.

Set algebra removes the complement flag with De Morgan's rules so that the
run-list functions of :mod:`rle_regions.runs` only ever see finite lists.

Coordinates
-----------
``x`` is the column, ``y`` the row. Offsets are ``(dx, dy)``. Bounds follow
the mathematical convention: :meth:`Region.top` is the *largest* row and
:meth:`Region.bottom` the smallest.

Copy semantics
--------------
Every operation returns a new region with its own run list. The only
mutating methods are :meth:`Region.translate_inplace` and
:meth:`Region.center_inplace`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Sequence

from rle_regions import runs as rl
from rle_regions.contracts import (
    require_finite,
    require_non_empty,
    require_packed,
    require_sorted,
    require_structuring_element,
)
from rle_regions.interval import Interval
from rle_regions.log import timer
from rle_regions.run import Run


log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    """Inclusive bounding box; ``top >= bottom``."""

    left: int
    top: int
    right: int
    bottom: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.top - self.bottom + 1


def _half_toward_zero(v: int) -> int:
    return v // 2 if v >= 0 else -((-v) // 2)


def _as_offset(value) -> tuple[int, int] | None:
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return int(value[0]), int(value[1])
    return None


@dataclass
class Region:
    runs: list[Run] = field(default_factory=list)
    complement: bool = False

    # ------------------------------------------------------------ construction

    @classmethod
    def from_runs(cls, runs: Iterable[Run], complement: bool = False) -> Region:
        """Build a region from runs in any order: drop empties, sort, pack."""
        res = [r for r in runs if not r.is_empty()]
        rl.sort_inplace(res)
        rl.pack_inplace(res)
        return cls(res, complement)

    @classmethod
    def rectangle(cls, left: int, bottom: int, right: int, top: int) -> Region:
        """Axis-aligned box covering columns ``left..right``, rows ``bottom..top``."""
        if right < left or top < bottom:
            return cls()
        return cls([Run(y, Interval(left, right)) for y in range(bottom, top + 1)])

    @classmethod
    def everything(cls) -> Region:
        """The infinite region: the complement of the empty region."""
        return cls([], True)

    def copy(self) -> Region:
        return Region(list(self.runs), self.complement)

    def is_empty(self) -> bool:
        return not self.complement and not self.runs

    def __iter__(self) -> Iterator[Run]:
        return iter(self.runs)

    # -------------------------------------------------------------- transforms

    def invert(self) -> Region:
        """Mirror at the origin (point reflection), keeping the flag."""
        return Region(rl.transpose(self.runs), self.complement)

    def __neg__(self) -> Region:
        return self.invert()

    def complemented(self) -> Region:
        return Region(list(self.runs), not self.complement)

    def __invert__(self) -> Region:
        return self.complemented()

    def translate(self, dx: int, dy: int) -> Region:
        return Region([r.translate(dx, dy) for r in self.runs], self.complement)

    def translate_inplace(self, dx: int, dy: int) -> None:
        self.runs[:] = [r.translate(dx, dy) for r in self.runs]

    def _center_offset(self) -> tuple[int, int]:
        b = self.bounds()
        return -_half_toward_zero(b.left + b.right), -_half_toward_zero(b.bottom + b.top)

    def center(self) -> Region:
        """Translate so the bounding box is centred on the origin."""
        return self.translate(*self._center_offset())

    def center_inplace(self) -> None:
        self.translate_inplace(*self._center_offset())

    # --------------------------------------------------------------- predicates

    def contains(self, x: int, y: int) -> bool:
        hit = any(r.contains(x, y) for r in self.runs)
        return not hit if self.complement else hit

    def __contains__(self, position: Sequence[int]) -> bool:
        x, y = position
        return self.contains(x, y)

    # ------------------------------------------------------------------ bounds

    def _require_bounded(self, what: str) -> None:
        require_finite(self, what=what)
        require_non_empty(self, what=what)

    def left(self) -> int:
        self._require_bounded("left")
        return min(r.columns.start for r in self.runs)

    def top(self) -> int:
        self._require_bounded("top")
        return max(r.row for r in self.runs)

    def right(self) -> int:
        self._require_bounded("right")
        return max(r.columns.stop for r in self.runs)

    def bottom(self) -> int:
        self._require_bounded("bottom")
        return min(r.row for r in self.runs)

    def width(self) -> int:
        return self.right() - self.left() + 1

    def height(self) -> int:
        return self.top() - self.bottom() + 1

    def bounds(self) -> Bounds:
        return Bounds(left=self.left(), top=self.top(), right=self.right(), bottom=self.bottom())

    def area(self) -> int:
        from rle_regions.moments import moment00

        return moment00(self)

    # ------------------------------------------------------------- set algebra

    def union(self, other: Region) -> Region:
        require_packed(self.runs, where="union")
        require_packed(other.runs, where="union")
        a, b = self.runs, other.runs
        if self.complement and other.complement:
            return Region(rl.intersection(a, b), True)
        elif self.complement:
            return Region(rl.difference(a, b), True)
        elif other.complement:
            return Region(rl.difference(b, a), True)
        else:
            return Region(rl.union(a, b), False)

    def intersection(self, other: Region) -> Region:
        require_packed(self.runs, where="intersection")
        require_packed(other.runs, where="intersection")
        a, b = self.runs, other.runs
        if self.complement and other.complement:
            return Region(rl.union(a, b), True)
        elif self.complement:
            return Region(rl.difference(b, a), False)
        elif other.complement:
            return Region(rl.difference(a, b), False)
        else:
            return Region(rl.intersection(a, b), False)

    def difference(self, other: Region) -> Region:
        require_packed(self.runs, where="difference")
        require_packed(other.runs, where="difference")
        a, b = self.runs, other.runs
        if self.complement and other.complement:
            return Region(rl.difference(b, a), False)
        elif self.complement:
            return Region(rl.union(a, b), True)
        elif other.complement:
            return Region(rl.intersection(a, b), False)
        else:
            return Region(rl.difference(a, b), False)

    def __or__(self, other: Region) -> Region:
        if not isinstance(other, Region):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: Region) -> Region:
        if not isinstance(other, Region):
            return NotImplemented
        return self.intersection(other)

    def __add__(self, offset: Sequence[int]) -> Region:
        d = _as_offset(offset)
        if d is None:
            return NotImplemented
        return self.translate(*d)

    __radd__ = __add__

    def __sub__(self, other) -> Region:
        if isinstance(other, Region):
            return self.difference(other)
        d = _as_offset(other)
        if d is None:
            return NotImplemented
        return self.translate(-d[0], -d[1])

    # ---------------------------------------------------------------- morphology

    # A complement operand swaps addition <-> subtraction (dilation <->
    # erosion) on its runs; the structuring element must be finite.

    def _morph(self, element: Region, what: str, plain_op, complement_op) -> Region:
        require_structuring_element(element, what=what)
        require_packed(self.runs, where=what)
        require_sorted(element.runs, where=what)
        with timer(what, log):
            if self.complement:
                return Region(complement_op(self.runs, element.runs), True)
            return Region(plain_op(self.runs, element.runs), False)

    def minkowski_addition(self, element: Region) -> Region:
        return self._morph(element, "minkowski_addition", rl.minkowski_addition, rl.minkowski_subtraction)

    def minkowski_subtraction(self, element: Region) -> Region:
        return self._morph(element, "minkowski_subtraction", rl.minkowski_subtraction, rl.minkowski_addition)

    def dilation(self, element: Region) -> Region:
        return self._morph(element, "dilation", rl.dilation, rl.erosion)

    def erosion(self, element: Region) -> Region:
        return self._morph(element, "erosion", rl.erosion, rl.dilation)

    def opening(self, element: Region) -> Region:
        """Erosion followed by Minkowski addition.

        Structures smaller than the element disappear, boundaries smooth out.
        """
        return self.erosion(element).minkowski_addition(element)

    def closing(self, element: Region) -> Region:
        """Dilation followed by Minkowski subtraction.

        Gaps and holes smaller than the element are closed.
        """
        return self.dilation(element).minkowski_subtraction(element)

    def morph_gradient(self, element: Region) -> Region:
        return self.dilation(element).difference(self.erosion(element))

    # ------------------------------------------------------------------ labeling

    def components(self, dx: int | None = None, dy: int | None = None) -> list[Region]:
        from rle_regions.labeling import connected_components

        return connected_components(self, dx, dy)


def complement(region: Region) -> Region:
    return region.complemented()
