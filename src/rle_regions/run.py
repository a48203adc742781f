"""Runs: one row coordinate plus an interval of columns.

Runs sort top-to-bottom, then left-to-right: by ``row`` first, then by the
start of ``columns``. Runs that overlap or touch within a row are *not*
merged automatically; see :func:`rle_regions.runs.pack`.

Offsets are ``(dx, dy)`` pairs, i.e. column offset first, as everywhere in
this package (``x`` is the column, ``y`` is the row).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from rle_regions.interval import Interval


def _offset(value) -> tuple[int, int] | None:
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return int(value[0]), int(value[1])
    return None


@dataclass(frozen=True)
class Run:
    row: int
    columns: Interval

    def __post_init__(self) -> None:
        if not isinstance(self.columns, Interval):
            start, stop = self.columns
            object.__setattr__(self, "columns", Interval(int(start), int(stop)))

    def __repr__(self) -> str:
        return f"Run({self.row}, {self.columns.start}..{self.columns.stop})"

    def is_empty(self) -> bool:
        return self.columns.is_empty()

    def __lt__(self, other: Run) -> bool:
        if not isinstance(other, Run):
            return NotImplemented
        return self.row < other.row or (self.row == other.row and self.columns < other.columns)

    def __le__(self, other: Run) -> bool:
        if not isinstance(other, Run):
            return NotImplemented
        return not other < self

    def __gt__(self, other: Run) -> bool:
        if not isinstance(other, Run):
            return NotImplemented
        return other < self

    def __ge__(self, other: Run) -> bool:
        if not isinstance(other, Run):
            return NotImplemented
        return not self < other

    def invert(self) -> Run:
        return Run(-self.row, self.columns.invert())

    def __neg__(self) -> Run:
        return self.invert()

    def translate(self, dx: int, dy: int) -> Run:
        return Run(self.row + dy, self.columns.translate(dx))

    def __add__(self, offset: Sequence[int]) -> Run:
        d = _offset(offset)
        if d is None:
            return NotImplemented
        return self.translate(*d)

    __radd__ = __add__

    def __sub__(self, offset: Sequence[int]) -> Run:
        d = _offset(offset)
        if d is None:
            return NotImplemented
        return self.translate(-d[0], -d[1])

    def contains(self, x: int, y: int) -> bool:
        return self.row == y and self.columns.contains(x)

    def __contains__(self, position: Sequence[int]) -> bool:
        x, y = position
        return self.contains(x, y)

    def is_overlapping(self, other: Run) -> bool:
        return self.row == other.row and self.columns.is_overlapping(other.columns)

    def is_touching(self, other: Run) -> bool:
        # Rows always use a fixed one-row band here.
        return abs(self.row - other.row) <= 1 and self.columns.is_touching(other.columns)

    def is_close(self, other: Run, dx: int, dy: int | None = None) -> bool:
        """Rows at most ``dy`` apart and columns close within ``dx``.

        ``dy`` defaults to ``dx``.
        """
        if dy is None:
            dy = dx
        return abs(self.row - other.row) <= dy and self.columns.is_close(other.columns, dx)

    # The row behaves like the one-element interval [row, row]; both formulas
    # then reduce to row + other.row.

    def minkowski_addition(self, other: Run) -> Run:
        return Run(self.row + other.row, self.columns.minkowski_addition(other.columns))

    def minkowski_subtraction(self, other: Run) -> Run:
        return Run(self.row + other.row, self.columns.minkowski_subtraction(other.columns))
