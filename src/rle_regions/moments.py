"""Raw geometric moments of runs and regions.

``moment00`` is the pixel count, ``moment10`` the sum of column (``x``)
coordinates, ``moment01`` the sum of row (``y``) coordinates. Each is
computed per run from its end points, never per pixel.
"""

from __future__ import annotations

from rle_regions.contracts import require_finite, require_non_empty
from rle_regions.region import Region
from rle_regions.run import Run


def moment00(x: Run | Region) -> int:
    if isinstance(x, Run):
        return x.columns.length()
    require_finite(x, what="moment00")
    return sum(moment00(r) for r in x.runs)


def moment10(x: Run | Region) -> float:
    if isinstance(x, Run):
        if x.is_empty():
            return 0.0
        # sum of j..n
        n = x.columns.stop
        j = x.columns.start
        return (n * (n + 1) - (j - 1) * j) / 2.0
    require_finite(x, what="moment10")
    return float(sum(moment10(r) for r in x.runs))


def moment01(x: Run | Region) -> int:
    if isinstance(x, Run):
        return x.row * x.columns.length()
    require_finite(x, what="moment01")
    return sum(moment01(r) for r in x.runs)


def centroid(region: Region) -> tuple[float, float]:
    """Centre of mass ``(x, y)`` of a plain, non-empty region."""
    require_finite(region, what="centroid")
    require_non_empty(region, what="centroid")
    m00 = moment00(region)
    return moment10(region) / m00, moment01(region) / m00
