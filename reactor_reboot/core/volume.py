"""Volume accumulator: number of lit cubes in a reactor state."""

from __future__ import annotations

from typing import Iterable

from .cuboid import Cuboid


def count_on(state: Iterable[Cuboid]) -> int:
    """
    Sum of member volumes.

    Exact only because the members of a reactor state are pairwise disjoint;
    no inclusion-exclusion correction is applied. Accepts a `ReactorState` or
    any iterable of cuboids.
    """
    return sum(cuboid.volume() for cuboid in state)
