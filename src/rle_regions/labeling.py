"""Connected-component labeling of a region's runs.

Algorithm
---------
Quick-union over run indices in a flat ``parent`` array:

1) every run starts as its own root; roots store ``-size``.
2) runs are scanned in order; each run ``i`` is compared with the following
   runs ``j`` whose row is at most ``dy`` below it (the scan stops at the
   first run further away) and joined when
   :meth:`Run.is_close(runs[i], runs[j], dx, dy) <rle_regions.run.Run.is_close>`.
3) a union always hangs the higher-indexed root below the lower-indexed
   one, so a component's root is its first run in scan order. Paths are
   compressed while finding roots.
4) roots are numbered in ascending index order and every run is appended to
   the region of its root's label.

The output is ordered by the first run of each component. Runs keep their
scan order inside each component, so sorted input yields sorted output.

Gap tolerances
--------------
``dx`` is the column gap accepted between runs of neighbouring rows (``0``:
columns must overlap, 4-connectivity; ``1``: diagonal contact counts,
8-connectivity). ``dy`` is the row distance; ``0`` is raised to ``1`` since
runs of one row are already packed apart.
"""

from __future__ import annotations

import logging

from rle_regions.config import current_config
from rle_regions.contracts import require_finite, require_gap, require_packed
from rle_regions.log import timer
from rle_regions.region import Region


log = logging.getLogger(__name__)


def _find(parent: list[int], i: int) -> int:
    root = i
    while parent[root] >= 0:
        root = parent[root]
    while parent[i] >= 0 and parent[i] != root:
        parent[i], i = root, parent[i]
    return root


def _union(parent: list[int], i: int, j: int) -> None:
    ri = _find(parent, i)
    rj = _find(parent, j)
    if ri == rj:
        return
    if rj < ri:
        ri, rj = rj, ri
    parent[ri] += parent[rj]
    parent[rj] = ri


def connected_components(region: Region, dx: int | None = None, dy: int | None = None) -> list[Region]:
    """Partition ``region`` into connected components.

    ``dx``/``dy`` default to ``labeling.dx``/``labeling.dy`` of the active
    config. Raises :class:`~rle_regions.contracts.PreconditionViolation` for
    negative tolerances or a complement region.
    """
    cfg = current_config().labeling
    dx = cfg.dx if dx is None else int(dx)
    dy = cfg.dy if dy is None else int(dy)
    require_gap("dx", dx)
    require_gap("dy", dy)
    require_finite(region, what="connected components")
    require_packed(region.runs, where="connected_components")
    dy = max(dy, 1)

    runs = region.runs
    n = len(runs)
    parent = [-1] * n

    with timer("connected_components scan", log):
        for i in range(n):
            limit = runs[i].row + dy
            for j in range(i + 1, n):
                if runs[j].row > limit:
                    break
                if runs[i].is_close(runs[j], dx, dy):
                    _union(parent, i, j)

    labels: dict[int, int] = {}
    for i in range(n):
        if parent[i] < 0:
            labels[i] = len(labels)

    components = [Region() for _ in range(len(labels))]
    for i, run in enumerate(runs):
        components[labels[_find(parent, i)]].runs.append(run)

    log.debug("connected_components: %d runs -> %d components (dx=%d, dy=%d)", n, len(components), dx, dy)
    return components
