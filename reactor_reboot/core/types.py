"""Data types for the reactor reboot engine.

All types are frozen dataclasses (immutable). A `ReactorState` is a value: every
step produces a new state and never mutates the previous one.

Conventions:
- Coordinates are signed integers; intervals are closed on both ends.
- `ReactorState.cuboids` is a disjoint cover of the lit cubes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, unique
from typing import FrozenSet, Iterator

from .cuboid import Cuboid


@unique
class Switch(Enum):
    """Instruction token: turn the cubes of a cuboid on or off."""
    ON = "on"
    OFF = "off"


@dataclass(frozen=True)
class RebootStep:
    """One (switch, cuboid) instruction of the reboot sequence."""

    switch: Switch
    cuboid: Cuboid

    @classmethod
    def new_on(cls, cuboid: Cuboid) -> RebootStep:
        return cls(Switch.ON, cuboid)

    @classmethod
    def new_off(cls, cuboid: Cuboid) -> RebootStep:
        return cls(Switch.OFF, cuboid)

    @property
    def is_on(self) -> bool:
        return self.switch is Switch.ON


@dataclass(frozen=True)
class ReactorState:
    """Lit region of the reactor core, held as pairwise disjoint cuboids."""

    cuboids: FrozenSet[Cuboid] = field(default_factory=frozenset)

    def __iter__(self) -> Iterator[Cuboid]:
        return iter(self.cuboids)

    def __len__(self) -> int:
        return len(self.cuboids)

    def __contains__(self, cuboid: object) -> bool:
        return cuboid in self.cuboids


@dataclass(frozen=True)
class StepResult:
    """Result of replaying one step (applied or skipped by the window)."""

    index: int
    step: RebootStep
    applied: bool
    state: ReactorState

    @property
    def lit(self) -> int:
        from .volume import count_on

        return count_on(self.state)
