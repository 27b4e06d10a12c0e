"""
Reboot instruction text format.

One instruction per line:

    <on|off> x=<lo>..<hi>,y=<lo>..<hi>,z=<lo>..<hi>

Bounds are signed decimal integers with lo <= hi. Parsing is fail-closed: the
first malformed line raises `ParseRebootStepError` and nothing is returned.
Blank lines are skipped by the multi-line loaders.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from ..core.cuboid import Cuboid
from ..core.errors import ParseRebootStepError
from ..core.types import RebootStep, Switch

_AXES = ("x", "y", "z")

_AXIS_RE = {
    axis: re.compile(rf"^{axis}=([+-]?[0-9]+)\.\.([+-]?[0-9]+)$")
    for axis in _AXES
}


def _parse_axis(axis: str, text: str) -> tuple[int, int]:
    m = _AXIS_RE[axis].match(text)
    if m is None:
        raise ParseRebootStepError(f"cannot parse {axis} coordinate field", field=axis, text=text)
    lo, hi = int(m.group(1)), int(m.group(2))
    if lo > hi:
        raise ParseRebootStepError(f"{axis} lower bound exceeds upper bound", field=axis, text=text)
    return lo, hi


def parse_cuboid(text: str) -> Cuboid:
    """Parse `x=<lo>..<hi>,y=<lo>..<hi>,z=<lo>..<hi>`."""
    fields = text.strip().split(",")
    if len(fields) != len(_AXES):
        raise ParseRebootStepError(
            f"expected {len(_AXES)} comma-separated coordinate fields, got {len(fields)}",
            field="coordinates",
            text=text,
        )
    x, y, z = (_parse_axis(axis, field) for axis, field in zip(_AXES, fields))
    return Cuboid(x, y, z)


def parse_reboot_step(text: str) -> RebootStep:
    """Parse one `<on|off> <coordinates>` instruction."""
    parts = text.split()
    if not parts:
        raise ParseRebootStepError("missing instruction field (on/off)", field="switch", text=text)
    token = parts[0]
    try:
        switch = Switch(token)
    except ValueError:
        raise ParseRebootStepError("unrecognized instruction (expected on/off)", field="switch", text=token) from None
    if len(parts) != 2:
        raise ParseRebootStepError(
            "expected exactly one coordinates field after the instruction",
            field="coordinates",
            text=text,
        )
    return RebootStep(switch, parse_cuboid(parts[1]))


def format_reboot_step(step: RebootStep) -> str:
    """Inverse of `parse_reboot_step`."""
    return f"{step.switch.value} {step.cuboid}"


def iter_reboot_steps(lines: Iterable[str]) -> Iterator[RebootStep]:
    """Parse `lines` lazily; errors carry the 1-based line number."""
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield parse_reboot_step(line)
        except ParseRebootStepError as exc:
            raise exc.with_line(line_no) from None


def parse_reboot_steps(lines: Iterable[str]) -> List[RebootStep]:
    """Parse every line before returning, so a bad line leaves no partial result."""
    return list(iter_reboot_steps(lines))


def load_reboot_steps(path: Union[str, Path]) -> List[RebootStep]:
    """Read an instruction file (UTF-8) and parse it."""
    raw = Path(path).read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        line_no = raw.count(b"\n", 0, exc.start) + 1
        bad = raw[exc.start:exc.end]
        raise ParseRebootStepError(
            "input is not valid UTF-8", field="encoding", text=repr(bad), line_no=line_no
        ) from None
    return parse_reboot_steps(text.splitlines())
