"""Reporter protocol for output formatting.

Users extend stylecheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from stylecheck.domain.model.check_result import CheckResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    stylecheck provides PlainTextReporter, JSONReporter and ConsoleReporter.

    Example:
        class CountReporter:
            def report(self, result: CheckResult) -> None:
                print(f"{result.violation_count} violation(s)")
    """

    def report(self, result: CheckResult) -> None:
        """Report check results.

        Implementation decides output format and destination.

        Args:
            result: Complete check result
        """
        ...
