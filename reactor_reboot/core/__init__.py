"""
Core reactor reboot algorithms
"""

from .cuboid import Cuboid, INITIALIZATION_WINDOW, cube
from .split import MAX_FRAGMENTS, cut_axis, split
from .types import ReactorState, RebootStep, StepResult, Switch
from .errors import ConfigError, ParseRebootStepError, ReactorError, ReactorInvariantError
from .invariants import INVARIANT_REGISTRY, check_all
from .volume import count_on
from .procedure import (
    InitializationProcedure,
    in_window,
    initial_state,
    iter_run,
    process_step,
    run,
    run_count,
)

__all__ = [
    "Cuboid",
    "INITIALIZATION_WINDOW",
    "cube",
    "MAX_FRAGMENTS",
    "cut_axis",
    "split",
    "ReactorState",
    "RebootStep",
    "StepResult",
    "Switch",
    "ConfigError",
    "ParseRebootStepError",
    "ReactorError",
    "ReactorInvariantError",
    "INVARIANT_REGISTRY",
    "check_all",
    "count_on",
    "InitializationProcedure",
    "in_window",
    "initial_state",
    "iter_run",
    "process_step",
    "run",
    "run_count",
]
