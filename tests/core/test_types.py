from __future__ import annotations

from reactor_reboot.core.cuboid import cube
from reactor_reboot.core.types import ReactorState, RebootStep, StepResult, Switch
from reactor_reboot.core.volume import count_on


def test_switch_values_are_instruction_tokens() -> None:
    assert Switch("on") is Switch.ON
    assert Switch("off") is Switch.OFF


def test_reboot_step_constructors() -> None:
    c = cube(0, 1)
    assert RebootStep.new_on(c) == RebootStep(Switch.ON, c)
    assert RebootStep.new_off(c) == RebootStep(Switch.OFF, c)
    assert RebootStep.new_on(c).is_on
    assert not RebootStep.new_off(c).is_on
    assert RebootStep.new_on(c) != RebootStep.new_off(c)


def test_reactor_state_is_a_value() -> None:
    a, b = cube(0, 1), cube(5, 6)
    s = ReactorState(frozenset({a, b}))
    assert s == ReactorState(frozenset({b, a}))
    assert len(s) == 2
    assert a in s
    assert set(s) == {a, b}
    assert hash(s) == hash(ReactorState(frozenset({a, b})))


def test_count_on_sums_volumes() -> None:
    s = ReactorState(frozenset({cube(0, 1), cube(5, 7)}))
    assert count_on(s) == 8 + 27
    assert count_on(ReactorState()) == 0
    assert count_on([cube(0, 0)]) == 1


def test_step_result_lit() -> None:
    s = ReactorState(frozenset({cube(0, 2)}))
    r = StepResult(index=0, step=RebootStep.new_on(cube(0, 2)), applied=True, state=s)
    assert r.lit == 27
