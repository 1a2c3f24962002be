"""Input line entry: a parsed record or the violation that replaced it."""

from __future__ import annotations

from dataclasses import dataclass

from stylecheck.domain.model.declaration import DeclarationRecord
from stylecheck.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class LineEntry:
    """One non-blank input line after parsing.

    Exactly one of record/error is set.

    Attributes:
        line: 1-based line number
        record: Parsed record
        error: Synthesized violation for an unparseable line
    """

    line: int
    record: DeclarationRecord | None = None
    error: Violation | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if (self.record is None) == (self.error is None):
            raise ValueError("exactly one of record or error must be set")

    @property
    def is_malformed(self) -> bool:
        """True if the line could not be parsed."""
        return self.error is not None
