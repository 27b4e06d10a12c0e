"""Invariant checkers for reactor states.

Each function returns True when the invariant holds, and `check_all()` returns
the list of violated invariant IDs (empty = all pass).

`count_on()` trusts these invariants blindly: an overlap between two members
would be double counted with no other detection.
"""

from __future__ import annotations

from itertools import combinations
from typing import Callable

from .cuboid import Cuboid
from .types import ReactorState


def inv_members_are_cuboids(s: ReactorState) -> bool:
    return all(isinstance(c, Cuboid) for c in s)


def inv_pairwise_disjoint(s: ReactorState) -> bool:
    # O(n^2); meant for tests and --check-invariants runs.
    members = [c for c in s if isinstance(c, Cuboid)]
    return not any(a.overlaps(b) for a, b in combinations(members, 2))


# ---------------------------------------------------------------------------
# Registry + check_all
# ---------------------------------------------------------------------------

INVARIANT_REGISTRY: dict[str, Callable[[ReactorState], bool]] = {
    "inv_members_are_cuboids": inv_members_are_cuboids,
    "inv_pairwise_disjoint": inv_pairwise_disjoint,
}


def check_all(state: ReactorState) -> list[str]:
    """Return list of violated invariant IDs (empty = all pass)."""
    return [
        inv_id
        for inv_id, check_fn in INVARIANT_REGISTRY.items()
        if not check_fn(state)
    ]
