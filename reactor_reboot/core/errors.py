"""Exception types for the reactor reboot engine.

Parsing and configuration errors are fatal: the run is aborted and no partial
result is produced.
"""

from __future__ import annotations

from typing import Optional


class ReactorError(Exception):
    """Base class for all reactor reboot errors."""


class ParseRebootStepError(ReactorError, ValueError):
    """Raised when an instruction line does not match the reboot step grammar."""

    def __init__(self, message: str, *, field: str, text: str, line_no: Optional[int] = None) -> None:
        self.message = message
        self.field = field
        self.text = text
        self.line_no = line_no
        super().__init__(str(self))

    def with_line(self, line_no: int) -> "ParseRebootStepError":
        return ParseRebootStepError(self.message, field=self.field, text=self.text, line_no=line_no)

    def __str__(self) -> str:
        where = f"line {self.line_no}: " if self.line_no is not None else ""
        return f"{where}{self.message} ({self.field}): {self.text!r}"


class ReactorInvariantError(ReactorError):
    """Raised when a reactor state violates one or more invariants."""

    def __init__(self, violations: list[str]) -> None:
        self.violations = violations
        super().__init__(f"invariant violations: {', '.join(violations)}")


class ConfigError(ReactorError, ValueError):
    """Raised when a run configuration is malformed."""
