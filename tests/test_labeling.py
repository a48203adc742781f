from __future__ import annotations

import numpy as np
import pytest

from rle_regions import ContractViolation, PreconditionViolation, Region, complement
from rle_regions.config import configure
from rle_regions.imaging import from_mask
from rle_regions.interval import Interval
from rle_regions.labeling import connected_components
from rle_regions.run import Run


def R(row: int, start: int, stop: int) -> Run:
    return Run(row, Interval(start, stop))


def test_far_apart_rows_split_or_join_by_dy() -> None:
    r = Region([R(0, 0, 3), R(10, 0, 3)])
    parts = connected_components(r, dx=1, dy=1)
    assert parts == [Region([R(0, 0, 3)]), Region([R(10, 0, 3)])]

    joined = connected_components(r, dx=1, dy=10)
    assert joined == [r]


def test_diagonal_contact_depends_on_dx() -> None:
    # two pixels touching at a corner
    r = Region([R(0, 0, 0), R(1, 1, 1)])
    assert len(connected_components(r, dx=1, dy=1)) == 1
    assert len(connected_components(r, dx=0, dy=1)) == 2


def test_dy_zero_is_raised_to_one() -> None:
    r = Region([R(0, 0, 2), R(1, 1, 1)])
    assert connected_components(r, dx=0, dy=0) == [r]


def test_same_row_gap_uses_dx() -> None:
    r = Region([R(0, 0, 1), R(0, 3, 4)])
    assert len(connected_components(r, dx=1, dy=1)) == 2
    assert len(connected_components(r, dx=2, dy=1)) == 1


def test_u_shape_joins_late_and_keeps_scan_order() -> None:
    # two arms that only meet in the last row
    r = Region(
        [
            R(0, 0, 0),
            R(0, 4, 4),
            R(1, 0, 0),
            R(1, 4, 4),
            R(2, 0, 4),
        ]
    )
    parts = connected_components(r, dx=0, dy=1)
    assert parts == [r]
    assert parts[0].runs is not r.runs


def test_components_ordered_by_first_run() -> None:
    mask = np.zeros((6, 10), dtype=bool)
    mask[0:2, 6:9] = True  # first in scan order
    mask[1:4, 0:2] = True
    mask[5, 3:5] = True
    parts = connected_components(from_mask(mask), dx=1, dy=1)
    assert [p.runs[0] for p in parts] == [R(0, 6, 8), R(1, 0, 1), R(5, 3, 4)]
    assert [p.area() for p in parts] == [6, 6, 2]
    for p in parts:
        assert p.complement is False


def test_components_partition_the_runs() -> None:
    rng = np.random.default_rng(7)
    mask = rng.random((30, 40)) > 0.6
    region = from_mask(mask)
    parts = connected_components(region, dx=1, dy=1)
    all_runs = sorted(run for p in parts for run in p.runs)
    assert all_runs == region.runs
    # sorted input gives sorted components
    for p in parts:
        assert p.runs == sorted(p.runs)


def test_eight_connectivity_matches_pixel_flood_fill() -> None:
    rng = np.random.default_rng(11)
    mask = rng.random((25, 25)) > 0.55
    parts = connected_components(from_mask(mask), dx=1, dy=1)

    seen = np.zeros_like(mask)
    count = 0
    for y0, x0 in zip(*np.nonzero(mask)):
        if seen[y0, x0]:
            continue
        count += 1
        stack = [(y0, x0)]
        seen[y0, x0] = True
        while stack:
            y, x = stack.pop()
            for yy in range(y - 1, y + 2):
                for xx in range(x - 1, x + 2):
                    if 0 <= yy < 25 and 0 <= xx < 25 and mask[yy, xx] and not seen[yy, xx]:
                        seen[yy, xx] = True
                        stack.append((yy, xx))
    assert len(parts) == count


def test_empty_region_has_no_components() -> None:
    assert connected_components(Region()) == []


def test_defaults_come_from_config() -> None:
    r = Region([R(0, 0, 0), R(3, 0, 0)])
    assert len(connected_components(r)) == 2
    configure({"labeling": {"dx": 1, "dy": 3}})
    assert len(connected_components(r)) == 1
    assert len(r.components()) == 1


@pytest.mark.parametrize("dx,dy", [(-1, 1), (1, -1)])
def test_negative_gaps_are_fatal(dx: int, dy: int) -> None:
    with pytest.raises(PreconditionViolation) as e:
        connected_components(Region([R(0, 0, 0)]), dx=dx, dy=dy)
    assert e.value.code == "NEGATIVE_GAP"


def test_complement_region_is_fatal() -> None:
    with pytest.raises(PreconditionViolation):
        connected_components(complement(Region([R(0, 0, 0)])))


def test_unpacked_input_is_rejected() -> None:
    with pytest.raises(ContractViolation):
        connected_components(Region([R(0, 0, 1), R(0, 1, 2)]))
