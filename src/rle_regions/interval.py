"""Inclusive integer intervals (the column part of a run).

An :class:`Interval` ``[start, stop]`` covers every integer ``x`` with
``start <= x <= stop``. ``stop < start`` is a legal, meaningful state: the
interval is empty. Empty intervals are never normalized.

Ordering compares ``start`` only, so two intervals with the same start are
neither ``<`` nor ``>`` each other even when they differ in ``stop``.
Equality is structural.

Examples
--------
>>> Interval(5, 10).invert()
Interval(start=-10, stop=-5)
>>> Interval(0, 10).is_touching(Interval(11, 21))
True
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Interval:
    start: int
    stop: int

    # ------------------------------------------------------------------ basics

    def is_empty(self) -> bool:
        return self.stop < self.start

    def length(self) -> int:
        return max(0, self.stop - self.start + 1)

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.start, self.stop + 1))

    # ---------------------------------------------------------------- ordering

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.start < other.start

    def __le__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.start <= other.start

    def __gt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.start > other.start

    def __ge__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.start >= other.start

    # -------------------------------------------------------------- transforms

    def invert(self) -> Interval:
        """Mirror at the origin."""
        return Interval(-self.stop, -self.start)

    def __neg__(self) -> Interval:
        return self.invert()

    def translate(self, offset: int) -> Interval:
        return Interval(self.start + offset, self.stop + offset)

    def __add__(self, offset: int) -> Interval:
        if isinstance(offset, bool) or not isinstance(offset, int):
            return NotImplemented
        return self.translate(offset)

    __radd__ = __add__

    def __sub__(self, offset: int) -> Interval:
        if isinstance(offset, bool) or not isinstance(offset, int):
            return NotImplemented
        return self.translate(-offset)

    # -------------------------------------------------------------- predicates

    def contains(self, value: int) -> bool:
        return self.start <= value <= self.stop

    def __contains__(self, value: int) -> bool:
        return self.contains(value)

    def is_close(self, other: Interval, distance: int) -> bool:
        """Test whether two intervals are at most ``distance`` apart.

        ``distance == 0`` is :meth:`is_overlapping`, ``distance == 1`` is
        :meth:`is_touching`, larger values allow a gap of ``distance - 1``.
        """
        if self < other:
            return self.stop + distance >= other.start
        return other.stop + distance >= self.start

    def is_overlapping(self, other: Interval) -> bool:
        return self.is_close(other, 0)

    def is_touching(self, other: Interval) -> bool:
        return self.is_close(other, 1)

    # --------------------------------------------------------------- minkowski

    def minkowski_addition(self, other: Interval) -> Interval:
        return Interval(self.start + other.start, self.stop + other.stop)

    def minkowski_subtraction(self, other: Interval) -> Interval:
        # Empty when ``other`` is wider than ``self``.
        return Interval(self.start + other.stop, self.stop + other.start)
