"""Tests for reactor_reboot/core/split.py: slab cutting."""

from __future__ import annotations

import itertools
import random

from reactor_reboot.core.cuboid import Cuboid, cube
from reactor_reboot.core.split import MAX_FRAGMENTS, cut_axis, split
from reactor_reboot.core.volume import count_on


def _points(c: Cuboid) -> set[tuple[int, int, int]]:
    return set(itertools.product(*(range(lo, hi + 1) for lo, hi in c.axes())))


def _random_cuboid(rng: random.Random, lo: int = -4, hi: int = 4) -> Cuboid:
    axes = []
    for _ in range(3):
        a, b = rng.randint(lo, hi), rng.randint(lo, hi)
        axes.append((min(a, b), max(a, b)))
    return Cuboid(*axes)


def _assert_split_contract(a: Cuboid, b: Cuboid) -> None:
    fragments = split(a, b)
    assert len(fragments) <= MAX_FRAGMENTS
    for f in fragments:
        assert not f.overlaps(b)
        assert a.contains(f)
    for f, g in itertools.combinations(fragments, 2):
        assert not f.overlaps(g)
    assert count_on(fragments) + a.intersect(b).volume() == a.volume()
    covered: set[tuple[int, int, int]] = set()
    for f in fragments:
        covered |= _points(f)
    assert covered == _points(a) - _points(b)


def test_cut_axis_cutter_strictly_inside() -> None:
    assert cut_axis((0, 10), (3, 5)) == [(0, 2), (3, 5), (6, 10)]


def test_cut_axis_cutter_covers_lower_end() -> None:
    assert cut_axis((0, 10), (-5, 5)) == [(0, 5), (6, 10)]


def test_cut_axis_cutter_covers_upper_end() -> None:
    assert cut_axis((0, 10), (3, 20)) == [(0, 2), (3, 10)]


def test_cut_axis_cutter_covers_everything() -> None:
    assert cut_axis((0, 10), (-5, 20)) == [(0, 10)]
    assert cut_axis((0, 10), (0, 10)) == [(0, 10)]


def test_cut_axis_cutter_touches_edges() -> None:
    # Cutter starting on the upper edge leaves a single-cube slab there.
    assert cut_axis((0, 10), (10, 12)) == [(0, 9), (10, 10)]
    assert cut_axis((0, 10), (-2, 0)) == [(0, 0), (1, 10)]


def test_cut_axis_single_point_interval() -> None:
    assert cut_axis((4, 4), (4, 4)) == [(4, 4)]
    assert cut_axis((4, 4), (0, 9)) == [(4, 4)]


def test_split_centered_hole_yields_26_fragments() -> None:
    a = cube(0, 8)
    b = cube(3, 5)
    fragments = split(a, b)
    assert len(fragments) == MAX_FRAGMENTS
    assert count_on(fragments) == 9 ** 3 - 3 ** 3
    _assert_split_contract(a, b)


def test_split_full_cover_is_empty() -> None:
    assert split(cube(2, 3), cube(0, 10)) == frozenset()


def test_split_disjoint_returns_cuboid_whole() -> None:
    a = cube(0, 1)
    assert split(a, cube(5, 6)) == frozenset({a})


def test_split_corner_overlap() -> None:
    a = Cuboid((10, 12), (10, 12), (10, 12))
    b = Cuboid((9, 11), (9, 11), (9, 11))
    fragments = split(a, b)
    assert count_on(fragments) == 27 - 8
    _assert_split_contract(a, b)


def test_cuboid_split_delegates() -> None:
    a = cube(0, 4)
    b = Cuboid((2, 2), (0, 4), (0, 4))
    assert a.split(b) == split(a, b)
    assert a.split(b) == frozenset({Cuboid((0, 1), (0, 4), (0, 4)), Cuboid((3, 4), (0, 4), (0, 4))})


def test_split_contract_random_pairs() -> None:
    rng = random.Random(22)
    checked = 0
    while checked < 300:
        a, b = _random_cuboid(rng), _random_cuboid(rng)
        if not a.overlaps(b):
            continue
        _assert_split_contract(a, b)
        checked += 1


def test_split_conservation_at_large_coordinates() -> None:
    a = Cuboid((-54112, -39298), (-85059, -49293), (-27449, 7877))
    b = Cuboid((-50000, -40000), (-60000, 0), (0, 100000))
    fragments = split(a, b)
    assert count_on(fragments) + a.intersect(b).volume() == a.volume()
    for f, g in itertools.combinations(fragments, 2):
        assert not f.overlaps(g)
