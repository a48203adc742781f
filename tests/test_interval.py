from __future__ import annotations

import pytest

from rle_regions.interval import Interval


def test_empty_and_length() -> None:
    assert Interval(0, -1).is_empty()
    assert Interval(0, -1).length() == 0
    assert len(Interval(0, -1)) == 0

    assert not Interval(0, 0).is_empty()
    assert Interval(0, 0).length() == 1

    assert Interval(0, 1).length() == 2
    # far-reversed intervals are empty, not negative-length
    assert Interval(10, 0).length() == 0


def test_equality_is_structural() -> None:
    assert Interval(0, 1) == Interval(0, 1)
    assert Interval(0, 1) != Interval(1, 2)
    assert Interval(0, 1) != Interval(0, 2)
    assert hash(Interval(3, 4)) == hash(Interval(3, 4))


def test_ordering_uses_start_only() -> None:
    assert Interval(0, 1) < Interval(1, 2)
    assert Interval(0, 1) <= Interval(1, 2)
    assert Interval(0, 1) <= Interval(0, 1)
    assert Interval(1, 2) > Interval(0, 1)
    assert Interval(1, 2) >= Interval(0, 1)
    assert Interval(0, 1) >= Interval(0, 1)

    # same start, different stop: neither is smaller
    assert not Interval(0, 1) < Interval(0, 5)
    assert not Interval(0, 5) < Interval(0, 1)
    assert Interval(0, 1) <= Interval(0, 5)
    assert Interval(0, 5) <= Interval(0, 1)

    assert sorted([Interval(3, 3), Interval(0, 9), Interval(1, 1)]) == [
        Interval(0, 9),
        Interval(1, 1),
        Interval(3, 3),
    ]


def test_translate() -> None:
    assert Interval(1, 2).translate(-5) == Interval(-4, -3)
    assert Interval(1, 2).translate(5) == Interval(6, 7)
    assert Interval(1, 2) + 5 == Interval(6, 7)
    assert 10 + Interval(5, 15) == Interval(15, 25)
    assert Interval(1, 2) - 5 == Interval(-4, -3)


def test_invert() -> None:
    assert Interval(5, 10).invert() == Interval(-10, -5)
    assert Interval(1, 2).invert() == Interval(-2, -1)
    assert -Interval(-1, 0) == Interval(0, 1)
    assert Interval(0, 100).invert().invert() == Interval(0, 100)
    # empty stays empty
    assert Interval(0, -1).invert().is_empty()


def test_contains() -> None:
    assert not Interval(0, -1).contains(0)
    assert not Interval(0, 0).contains(-1)
    assert Interval(0, 0).contains(0)
    assert not Interval(0, 0).contains(1)
    assert Interval(0, 1).contains(1)
    assert not Interval(0, 1).contains(2)
    assert 5 in Interval(0, 10)
    assert 15 not in Interval(0, 10)


def test_iteration() -> None:
    assert list(Interval(2, 4)) == [2, 3, 4]
    assert list(Interval(0, -1)) == []


@pytest.mark.parametrize(
    "a,b,overlap,touch",
    [
        (Interval(0, 10), Interval(5, 15), True, True),
        (Interval(0, 10), Interval(10, 20), True, True),
        (Interval(0, 10), Interval(11, 21), False, True),
        (Interval(0, 10), Interval(12, 22), False, False),
        (Interval(0, 10), Interval(20, 30), False, False),
        (Interval(0, 10), Interval(2, 3), True, True),
        (Interval(0, 3), Interval(0, 10), True, True),
    ],
)
def test_overlap_and_touch_both_orders(a: Interval, b: Interval, overlap: bool, touch: bool) -> None:
    assert a.is_overlapping(b) is overlap
    assert b.is_overlapping(a) is overlap
    assert a.is_touching(b) is touch
    assert b.is_touching(a) is touch


def test_is_close_generalizes_overlap_and_touch() -> None:
    a, b = Interval(0, 10), Interval(13, 20)
    assert not a.is_close(b, 0)
    assert not a.is_close(b, 1)
    assert not a.is_close(b, 2)
    assert a.is_close(b, 3)
    assert b.is_close(a, 3)

    for d in range(4):
        assert a.is_close(b, d) == b.is_close(a, d)
    assert a.is_close(Interval(5, 6), 0) == a.is_overlapping(Interval(5, 6))
    assert a.is_close(Interval(11, 12), 1) == a.is_touching(Interval(11, 12))


def test_minkowski_addition() -> None:
    assert Interval(0, 10).minkowski_addition(Interval(-1, 1)) == Interval(-1, 11)
    assert Interval(5, 5).minkowski_addition(Interval(0, 2)) == Interval(5, 7)


def test_minkowski_subtraction() -> None:
    assert Interval(0, 10).minkowski_subtraction(Interval(-1, 1)) == Interval(1, 9)
    assert Interval(0, 10).minkowski_subtraction(Interval(0, 0)) == Interval(0, 10)


def test_minkowski_subtraction_wider_element_is_empty() -> None:
    # the element does not fit into the interval
    res = Interval(0, 2).minkowski_subtraction(Interval(-3, 3))
    assert res == Interval(3, -1)
    assert res.is_empty()
    assert res.length() == 0
