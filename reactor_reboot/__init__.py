"""
reactor_reboot: exact lit-cube accounting for reactor reboot sequences.

Steps are replayed against a disjoint cover of axis-aligned cuboids, so the
count is exact without enumerating individual cubes.
"""

from .core import (
    Cuboid,
    INITIALIZATION_WINDOW,
    InitializationProcedure,
    ParseRebootStepError,
    ReactorState,
    RebootStep,
    Switch,
    count_on,
    process_step,
    run,
    run_count,
    split,
)

__version__ = "0.1.0"

__all__ = [
    "Cuboid",
    "INITIALIZATION_WINDOW",
    "InitializationProcedure",
    "ParseRebootStepError",
    "ReactorState",
    "RebootStep",
    "Switch",
    "count_on",
    "process_step",
    "run",
    "run_count",
    "split",
]
