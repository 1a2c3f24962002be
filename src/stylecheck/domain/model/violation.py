"""Rule violation value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from stylecheck.domain.model.enums import RuleId


@dataclass(frozen=True, slots=True)
class Violation:
    """Single rule failure tied to one declaration record.

    Attributes:
        record_name: Name of the offending record (may be empty)
        rule: Violated rule
        message: Human-readable message
        line: 1-based input line, when the record came from a file
    """

    record_name: str
    rule: RuleId
    message: str
    line: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.record_name is None:
            raise TypeError("record_name must not be None")
        if not self.message:
            raise ValueError("message must not be empty")
        if self.line is not None and self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")

    def __str__(self) -> str:
        """Format as [line:]name: rule: message."""
        prefix = f"{self.line}:" if self.line is not None else ""
        return f"{prefix}{self.record_name}: {self.rule.value}: {self.message}"
