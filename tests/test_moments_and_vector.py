from __future__ import annotations

import numpy as np
import pytest

from rle_regions import Bounds, PreconditionViolation, Region, complement, region_vector
from rle_regions.imaging import from_mask
from rle_regions.interval import Interval
from rle_regions.moments import centroid, moment00, moment01, moment10
from rle_regions.run import Run


def R(row: int, start: int, stop: int) -> Run:
    return Run(row, Interval(start, stop))


def test_run_moments() -> None:
    r = R(3, 2, 4)
    assert moment00(r) == 3
    assert moment10(r) == 9.0  # 2 + 3 + 4
    assert moment01(r) == 9  # 3 * 3
    assert moment10(R(0, -2, 1)) == -2.0


def test_empty_run_moments_are_zero() -> None:
    e = R(5, 3, 2)
    assert moment00(e) == 0
    assert moment10(e) == 0.0
    assert moment01(e) == 0


def test_region_moments_match_pixel_sums() -> None:
    rng = np.random.default_rng(5)
    mask = rng.random((20, 30)) > 0.5
    region = from_mask(mask)
    ys, xs = np.nonzero(mask)
    assert moment00(region) == mask.sum()
    assert moment10(region) == pytest.approx(float(xs.sum()))
    assert moment01(region) == int(ys.sum())


def test_centroid() -> None:
    box = Region.rectangle(0, 0, 2, 4)
    assert centroid(box) == pytest.approx((1.0, 2.0))
    assert centroid(box.translate(-10, 3)) == pytest.approx((-9.0, 5.0))


def test_moments_preconditions() -> None:
    with pytest.raises(PreconditionViolation):
        moment00(complement(Region([R(0, 0, 0)])))
    with pytest.raises(PreconditionViolation) as e:
        centroid(Region())
    assert e.value.code == "EMPTY_REGION"


# ------------------------------------------------------------ region_vector


REGIONS = [
    Region([R(0, 0, 2)]),
    Region([R(-3, 5, 6), R(-2, 4, 4)]),
    Region([R(7, -1, 0)]),
]


def test_region_vector_bounds() -> None:
    assert region_vector.left(REGIONS) == -1
    assert region_vector.right(REGIONS) == 6
    assert region_vector.bottom(REGIONS) == -3
    assert region_vector.top(REGIONS) == 7
    assert region_vector.width(REGIONS) == 8
    assert region_vector.height(REGIONS) == 11
    assert region_vector.bounds(REGIONS) == Bounds(left=-1, top=7, right=6, bottom=-3)


@pytest.mark.parametrize("name", ["left", "top", "right", "bottom", "width", "height", "bounds"])
def test_region_vector_of_nothing_is_none(name: str) -> None:
    assert getattr(region_vector, name)([]) is None


def test_region_vector_rejects_empty_member() -> None:
    with pytest.raises(PreconditionViolation):
        region_vector.left([REGIONS[0], Region()])
