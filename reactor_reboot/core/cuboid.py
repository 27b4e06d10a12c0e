"""
Axis-aligned integer cuboids.

A cuboid is three closed integer intervals, one per axis. Every lattice point
(x, y, z) with lo <= coord <= hi on all three axes is one unit cube of the
reactor core.

Algorithm Design:
- Type: Closed-Interval Geometry
- Time Complexity: O(1) per predicate
- Invariant: lo <= hi on every axis (enforced at construction)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple


Interval = Tuple[int, int]


def _check_interval(name: str, interval: Interval) -> None:
    if len(interval) != 2:
        raise ValueError(f"{name} must be a (lo, hi) pair: {interval!r}")
    lo, hi = interval
    if isinstance(lo, bool) or isinstance(hi, bool) or not isinstance(lo, int) or not isinstance(hi, int):
        raise ValueError(f"{name} bounds must be integers: {interval!r}")
    if lo > hi:
        raise ValueError(f"{name} lower bound exceeds upper bound: {interval!r}")


def _intervals_overlap(a: Interval, b: Interval) -> bool:
    return a[0] <= b[1] and b[0] <= a[1]


@dataclass(frozen=True)
class Cuboid:
    """Immutable box over closed integer intervals. Compared and hashed by value."""

    x: Interval
    y: Interval
    z: Interval

    def __post_init__(self) -> None:
        for name in ("x", "y", "z"):
            interval = tuple(getattr(self, name))
            _check_interval(name, interval)
            # Lists (e.g. from YAML) become tuples so the cuboid stays hashable.
            object.__setattr__(self, name, interval)

    def axes(self) -> Tuple[Interval, Interval, Interval]:
        return self.x, self.y, self.z

    def volume(self) -> int:
        """Number of unit cubes covered: product of (hi - lo + 1) per axis."""
        result = 1
        for lo, hi in self.axes():
            result *= hi - lo + 1
        return result

    def overlaps(self, other: Cuboid) -> bool:
        """True iff the two cuboids share at least one lattice point."""
        return (
            _intervals_overlap(self.x, other.x)
            and _intervals_overlap(self.y, other.y)
            and _intervals_overlap(self.z, other.z)
        )

    def intersect(self, other: Cuboid) -> Optional[Cuboid]:
        """Common part of both cuboids, or None when they do not overlap."""
        if not self.overlaps(other):
            return None
        x, y, z = (
            (max(a[0], b[0]), min(a[1], b[1]))
            for a, b in zip(self.axes(), other.axes())
        )
        return Cuboid(x, y, z)

    def contains(self, other: Cuboid) -> bool:
        """True iff `other` lies entirely inside this cuboid."""
        return all(
            a[0] <= b[0] and b[1] <= a[1]
            for a, b in zip(self.axes(), other.axes())
        )

    def split(self, other: Cuboid) -> FrozenSet[Cuboid]:
        """Fragments of this cuboid lying outside `other` (see `core.split`)."""
        from .split import split

        return split(self, other)

    def __str__(self) -> str:
        return "x={}..{},y={}..{},z={}..{}".format(*self.x, *self.y, *self.z)


def cube(lo: int, hi: int) -> Cuboid:
    """Cuboid with the same [lo, hi] range on all three axes."""
    return Cuboid((lo, hi), (lo, hi), (lo, hi))


# Steps outside this window are ignored during the initialization phase.
INITIALIZATION_WINDOW = cube(-50, 50)
