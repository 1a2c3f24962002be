"""Plain text reporter: one violation per line."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from stylecheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from stylecheck.domain.model.check_result import CheckResult


class PlainTextReporter(BaseReporter):
    """Writes each violation on its own line.

    Line format is str(Violation): [line:]name: rule: message.
    Grep-friendly; nothing else is written unless summary is enabled.
    """

    def __init__(self, output: TextIO | None = None, *, summary: bool = False) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            summary: Append a "N violation(s) in M record(s)" line
        """
        self._output = output if output is not None else sys.stdout
        self._summary = summary

    def report(self, result: CheckResult) -> None:
        """Report check results as plain text.

        Args:
            result: Complete check result
        """
        for violation in result.violations:
            self._write(str(violation))

        if self._summary:
            self._write(
                f"{result.violation_count} violation(s) in {result.records_checked} record(s)"
            )

    def _write(self, text: str) -> None:
        print(text, file=self._output)
