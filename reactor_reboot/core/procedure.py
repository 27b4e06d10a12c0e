"""
Reactor initialization procedure: replay of reboot steps.

The engine is a strict left fold over the step sequence. The only state is a
`ReactorState`, a disjoint cover of the lit cubes.

`process_step(state, step)`:

1. Every member overlapping the step's cuboid is replaced by the fragments of
   it lying outside the step's cuboid (for ON and OFF alike).
2. Members not overlapping the step are carried unchanged.
3. For ON, the step's cuboid is added whole. Step 1 removed everything it
   overlapped, so the cover stays disjoint.

Members are only ever split against the step's cuboid, never against fragments
produced in the same step, so one step multiplies the member count by at most
`MAX_FRAGMENTS`.

Step order is load-bearing: later steps override earlier ones in their
footprint. No step may be reordered or replayed concurrently.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from .cuboid import Cuboid, INITIALIZATION_WINDOW
from .errors import ReactorInvariantError
from .invariants import check_all
from .split import split
from .types import ReactorState, RebootStep, StepResult
from .volume import count_on

logger = logging.getLogger(__name__)


def initial_state() -> ReactorState:
    """Return the empty reactor state (every cube off)."""
    return ReactorState()


def in_window(step: RebootStep, window: Optional[Cuboid]) -> bool:
    """True when no window is set or the step's cuboid lies fully inside it."""
    return window is None or window.contains(step.cuboid)


def process_step(state: ReactorState, step: RebootStep) -> ReactorState:
    """Apply one step to `state` and return the new state."""
    target = step.cuboid
    cuboids: set[Cuboid] = set()
    for current in state:
        if current.overlaps(target):
            cuboids.update(split(current, target))
        else:
            cuboids.add(current)
    if step.is_on:
        cuboids.add(target)
    return ReactorState(frozenset(cuboids))


def _check_or_raise(state: ReactorState) -> None:
    violations = check_all(state)
    if violations:
        raise ReactorInvariantError(violations)


def iter_run(
    steps: Iterable[RebootStep],
    window: Optional[Cuboid] = None,
    *,
    check_invariants: bool = False,
) -> Iterator[StepResult]:
    """
    Replay `steps` from the empty state, yielding one `StepResult` per step.

    Steps whose cuboid is not contained in `window` are skipped: their result
    has `applied=False` and carries the unchanged state.

    Raises:
        ReactorInvariantError: `check_invariants` is set and a post-state
            violates an invariant.
    """
    state = initial_state()
    for index, step in enumerate(steps):
        if not in_window(step, window):
            logger.debug("step %d skipped (outside window): %s %s", index, step.switch.value, step.cuboid)
            yield StepResult(index=index, step=step, applied=False, state=state)
            continue

        state = process_step(state, step)
        if check_invariants:
            _check_or_raise(state)
        logger.debug("step %d applied: %s %s -> %d cuboids", index, step.switch.value, step.cuboid, len(state))
        yield StepResult(index=index, step=step, applied=True, state=state)


def run(
    steps: Iterable[RebootStep],
    window: Optional[Cuboid] = None,
    *,
    check_invariants: bool = False,
) -> ReactorState:
    """Replay `steps` and return the final reactor state."""
    state = initial_state()
    applied = 0
    total = 0
    for result in iter_run(steps, window, check_invariants=check_invariants):
        state = result.state
        total += 1
        if result.applied:
            applied += 1
    logger.info("replayed %d of %d steps; %d cuboids in cover", applied, total, len(state))
    return state


def run_count(steps: Iterable[RebootStep], window: Optional[Cuboid] = None) -> int:
    """Replay `steps` and return the number of lit cubes."""
    return count_on(run(steps, window))


@dataclass(frozen=True)
class InitializationProcedure:
    """An ordered reboot step sequence, as loaded from an instruction file."""

    steps: Tuple[RebootStep, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> InitializationProcedure:
        from ..integration.parsing import parse_reboot_steps

        return cls(tuple(parse_reboot_steps(lines)))

    @classmethod
    def load(cls, path: Union[str, Path]) -> InitializationProcedure:
        from ..integration.parsing import load_reboot_steps

        return cls(tuple(load_reboot_steps(path)))

    def run(self, window: Optional[Cuboid] = None, *, check_invariants: bool = False) -> ReactorState:
        return run(self.steps, window, check_invariants=check_invariants)

    def count_on(self, window: Optional[Cuboid] = None) -> int:
        return count_on(self.run(window))

    def initialize(self) -> int:
        """Lit cubes after the initialization phase (steps inside [-50, 50]^3)."""
        return self.count_on(INITIALIZATION_WINDOW)

    def reboot(self) -> int:
        """Lit cubes after replaying every step."""
        return self.count_on(None)

    def __len__(self) -> int:
        return len(self.steps)
