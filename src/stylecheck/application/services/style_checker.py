"""Main facade for style checking.

StyleChecker is the primary entry point for running the rules.
Composition-based: accepts rules, config and an optional reporter.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import TYPE_CHECKING, Self

from stylecheck.application.rules import Rule, default_rules, rules_from_config
from stylecheck.domain.model.check_result import CheckResult
from stylecheck.domain.model.configuration import StyleConfig
from stylecheck.domain.model.violation import Violation

if TYPE_CHECKING:
    from stylecheck.domain.model.declaration import DeclarationRecord
    from stylecheck.domain.model.line_entry import LineEntry
    from stylecheck.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)


class StyleChecker:
    """Evaluates declaration records against an ordered rule set.

    Stateless after construction: check() is pure and total, so one
    instance can be shared by concurrent callers.

    Factory methods:
    - with_defaults(): All built-in rules, default config
    - from_config(): Built-in rules enabled by StyleConfig

    Example:
        checker = StyleChecker.with_defaults()
        violations = checker.check(records)
    """

    def __init__(
        self,
        rules: Sequence[Rule] = (),
        config: StyleConfig | None = None,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize checker with dependencies.

        Args:
            rules: Rules to evaluate, in order
            config: Style configuration (default: StyleConfig())
            reporter: Optional reporter used by run()
        """
        self._rules = tuple(rules)
        self._config = config or StyleConfig()
        self._reporter = reporter

    @classmethod
    def with_defaults(cls, *, reporter: ReporterProtocol | None = None) -> Self:
        """Create checker with all built-in rules and default config."""
        return cls(default_rules(), StyleConfig(), reporter=reporter)

    @classmethod
    def from_config(
        cls,
        config: StyleConfig,
        *,
        reporter: ReporterProtocol | None = None,
    ) -> Self:
        """Create checker with the built-in rules enabled by config.

        Args:
            config: Style configuration
            reporter: Optional reporter

        Returns:
            StyleChecker with config-based rules
        """
        return cls(rules_from_config(config), config, reporter=reporter)

    @property
    def rules(self) -> tuple[Rule, ...]:
        """Configured rules, in evaluation order."""
        return self._rules

    @property
    def config(self) -> StyleConfig:
        """Active configuration."""
        return self._config

    def check(self, records: Iterable[DeclarationRecord]) -> tuple[Violation, ...]:
        """Evaluate every rule against every record.

        Violations follow input order, then rule order within a record.
        All rules run for every record.

        Args:
            records: Records to check

        Returns:
            Tuple of violations (empty if all records comply)
        """
        violations: list[Violation] = []
        for record in records:
            violations.extend(self._check_record(record))
        return tuple(violations)

    def run(self, records: Iterable[DeclarationRecord]) -> CheckResult:
        """Check records, build a CheckResult and report it.

        Args:
            records: Records to check

        Returns:
            CheckResult with all violations
        """
        records = tuple(records)
        return self._finish(self.check(records), len(records))

    def run_entries(self, entries: Iterable[LineEntry]) -> CheckResult:
        """Check parsed input lines, keeping line order.

        Malformed lines contribute their synthesized violation in place.
        Rule violations are stamped with the record's line number.

        Args:
            entries: Parsed input lines

        Returns:
            CheckResult with all violations
        """
        violations: list[Violation] = []
        records_checked = 0

        for entry in entries:
            if entry.error is not None:
                violations.append(entry.error)
                continue
            records_checked += 1
            violations.extend(
                replace(v, line=entry.line) for v in self._check_record(entry.record)
            )

        return self._finish(tuple(violations), records_checked)

    def _finish(self, violations: tuple[Violation, ...], records_checked: int) -> CheckResult:
        result = CheckResult(violations=violations, records_checked=records_checked)
        logger.debug(
            "checked %d record(s) with %d rule(s): %d violation(s)",
            result.records_checked,
            len(self._rules),
            result.violation_count,
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result

    def _check_record(self, record: DeclarationRecord) -> list[Violation]:
        found: list[Violation] = []
        for rule in self._rules:
            message = rule.evaluate(record, self._config)
            if message is not None:
                found.append(Violation(record_name=record.name, rule=rule.rule_id, message=message))
        return found


def check(
    records: Iterable[DeclarationRecord],
    config: StyleConfig | None = None,
) -> tuple[Violation, ...]:
    """Check records with the built-in rules.

    Args:
        records: Records to check
        config: Optional configuration (default: StyleConfig())

    Returns:
        Tuple of violations in input order
    """
    checker = StyleChecker.from_config(config) if config is not None else StyleChecker.with_defaults()
    return checker.check(records)
