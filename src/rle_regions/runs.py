"""Run-list algebra.

Free functions on lists of :class:`~rle_regions.run.Run`. Every function
assumes its inputs are sorted (and, where noted, packed) and does **not**
check it; unsorted input gives undefined results. Region-level wrappers in
:mod:`rle_regions.region` do the checking.

Naming
------
Functions that return a new list never mutate their arguments. The
``*_inplace`` variants mutate the list passed to them and return ``None``,
like :meth:`list.sort`.

Complexity
----------
- :func:`merge`, :func:`pack`, :func:`union`, :func:`intersection`: O(n + m)
- :func:`difference`: O(n log m + k) with k the number of overlapping pairs
- :func:`sort_runs`: O(n log n)
- Minkowski operations: O(n * m) over the structuring element run count
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Sequence

from rle_regions.interval import Interval
from rle_regions.run import Run


def _row(r: Run) -> int:
    return r.row


# ----------------------------------------------------------------- checkers


def is_sorted(runs: Sequence[Run]) -> bool:
    return all(not runs[i + 1] < runs[i] for i in range(len(runs) - 1))


def is_packed(runs: Sequence[Run]) -> bool:
    """True if sorted, free of empty runs, and no two runs in a row touch."""
    if any(r.is_empty() for r in runs):
        return False
    for a, b in zip(runs, runs[1:]):
        if b < a:
            return False
        if a.row == b.row and a.columns.stop + 1 >= b.columns.start:
            return False
    return True


# ------------------------------------------------------------ merge / sort


def merge(a: Sequence[Run], b: Sequence[Run]) -> list[Run]:
    """Stable merge of two sorted lists; on ties runs of ``a`` come first."""
    res: list[Run] = []
    i = j = 0
    na, nb = len(a), len(b)
    while i < na and j < nb:
        if b[j] < a[i]:
            res.append(b[j])
            j += 1
        else:
            res.append(a[i])
            i += 1
    res.extend(a[i:])
    res.extend(b[j:])
    return res


def sort_runs(runs: Sequence[Run]) -> list[Run]:
    """Return a sorted copy (e.g. after downsampling destroyed the order)."""
    return sorted(runs)


def sort_inplace(runs: list[Run]) -> None:
    runs.sort()


# -------------------------------------------------------------------- pack


def pack_inplace(runs: list[Run]) -> None:
    """Coalesce overlapping or touching runs of the same row.

    Requires sorted input. Single pass: ``write`` points at the run being
    grown, ``read`` at the next candidate; the tail is cut off at the end.
    """
    n = len(runs)
    read = 0
    write = 0
    while read < n:
        cur = runs[read]
        read += 1
        while read < n and cur.row == runs[read].row and cur.columns.stop + 1 >= runs[read].columns.start:
            nxt = runs[read]
            if nxt.columns.stop > cur.columns.stop:
                cur = Run(cur.row, Interval(cur.columns.start, nxt.columns.stop))
            read += 1
        runs[write] = cur
        write += 1
    del runs[write:]


def pack(runs: Sequence[Run]) -> list[Run]:
    res = list(runs)
    pack_inplace(res)
    return res


def union(a: Sequence[Run], b: Sequence[Run] | None = None) -> list[Run]:
    """Union of two sorted lists; with one argument, pack a copy of ``a``."""
    if b is None:
        return pack(a)
    res = merge(a, b)
    pack_inplace(res)
    return res


# ------------------------------------------------------------ intersection


def intersect_inplace(runs: list[Run]) -> None:
    """Collapse a merged (not packed) list to its pairwise overlaps.

    Adjacent runs of the same row that overlap are replaced by their common
    part. The run reaching further right is carried forward so it can still
    overlap later runs of the row. Runs without an overlapping neighbour
    are dropped.
    """
    n = len(runs)
    if n == 0:
        return
    read = 0
    nxt = 1
    write = 0
    while nxt < n:
        r = runs[read]
        s = runs[nxt]
        if r.row == s.row and s.columns.start <= r.columns.stop:
            runs[write] = Run(r.row, Interval(s.columns.start, min(r.columns.stop, s.columns.stop)))
            write += 1
            if s.columns.stop < r.columns.stop:
                runs[nxt] = r
        read = nxt
        nxt += 1
    del runs[write:]


def intersect(runs: Sequence[Run]) -> list[Run]:
    res = list(runs)
    intersect_inplace(res)
    return res


def intersection(a: Sequence[Run], b: Sequence[Run]) -> list[Run]:
    """Intersection of two sorted, packed lists."""
    res = merge(a, b)
    intersect_inplace(res)
    return res


# -------------------------------------------------------------- difference


def difference(a: Sequence[Run], b: Sequence[Run]) -> list[Run]:
    """Runs of ``a`` with every overlapping run of ``b`` cut away.

    For each run of ``a`` only the runs of ``b`` in the same row are
    visited; they are found by bisecting on the row (``first``/``last``
    window). A run of ``b`` can remove the whole run, shorten it at either
    end, or split it in two.
    """
    if not a:
        return []
    if not b:
        return list(a)

    res: list[Run] = []
    first = last = 0
    window_row: int | None = None

    for run in a:
        if run.row != window_row:
            window_row = run.row
            first = bisect_left(b, run.row, lo=first, key=_row)
            last = bisect_right(b, run.row, lo=first, key=_row)
        if first == last:
            res.append(run)
            continue

        row = run.row
        start, stop = run.columns.start, run.columns.stop
        for k in range(first, last):
            cut = b[k].columns
            if cut.start > stop:
                break
            if cut.stop < start:
                continue
            if cut.start <= start and cut.stop >= stop:
                # total overlap
                stop = start - 1
                break
            if cut.start <= start:
                start = cut.stop + 1
            elif cut.stop >= stop:
                stop = cut.start - 1
            else:
                # hole in the middle: emit the left part, keep the right one
                res.append(Run(row, Interval(start, cut.start - 1)))
                start = cut.stop + 1
        if start <= stop:
            res.append(Run(row, Interval(start, stop)))

    return res


# ---------------------------------------------------------------- morphology


def transpose(runs: Sequence[Run]) -> list[Run]:
    """Point reflection at the origin.

    Inversion reverses both row and column order, so the list is walked
    back to front to stay sorted.
    """
    return [r.invert() for r in reversed(runs)]


def minkowski_addition(a: Sequence[Run], b: Sequence[Run]) -> list[Run]:
    """Union over ``b`` of ``a`` shifted by each run of ``b``.

    An empty ``a`` or ``b`` returns a copy of ``a``.
    """
    if not a or not b:
        return list(a)

    res: list[Run] = []
    for brun in b:
        partial = [arun.minkowski_addition(brun) for arun in a]
        pack_inplace(partial)
        res = union(res, partial)
    return res


def minkowski_subtraction(a: Sequence[Run], b: Sequence[Run]) -> list[Run]:
    """Intersection over ``b`` of ``a`` shrunk by each run of ``b``.

    Runs narrower than the structuring run come out empty from the interval
    formula and are dropped. An empty ``a`` or ``b`` returns a copy of ``a``.
    """
    if not a or not b:
        return list(a)

    res: list[Run] | None = None
    for brun in b:
        partial = [r for r in (arun.minkowski_subtraction(brun) for arun in a) if not r.is_empty()]
        pack_inplace(partial)
        res = partial if res is None else intersection(res, partial)
        if not res:
            break
    return res


def dilation(a: Sequence[Run], b: Sequence[Run]) -> list[Run]:
    return minkowski_addition(a, transpose(b))


def erosion(a: Sequence[Run], b: Sequence[Run]) -> list[Run]:
    return minkowski_subtraction(a, transpose(b))
