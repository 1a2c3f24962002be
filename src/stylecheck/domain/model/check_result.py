"""Check result aggregate."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from stylecheck.domain.model.enums import RuleId
from stylecheck.domain.model.violation import Violation


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of a style check run.

    Immutable aggregate consumed by reporters.

    Attributes:
        violations: All violations, in input order
        records_checked: Number of records evaluated
    """

    violations: tuple[Violation, ...]
    records_checked: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.records_checked < 0:
            raise ValueError(f"records_checked must be >= 0, got {self.records_checked}")

    @property
    def passed(self) -> bool:
        """Check if run passed (no violations)."""
        return len(self.violations) == 0

    @property
    def violation_count(self) -> int:
        """Number of violations."""
        return len(self.violations)

    def count_by_rule(self) -> dict[RuleId, int]:
        """Violation count per rule, in RuleId declaration order."""
        counts = Counter(v.rule for v in self.violations)
        return {rule: counts[rule] for rule in RuleId if counts[rule]}

    @classmethod
    def empty(cls) -> CheckResult:
        """Create empty check result (passed, nothing checked)."""
        return cls(violations=(), records_checked=0)
