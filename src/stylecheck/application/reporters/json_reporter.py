"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from stylecheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from stylecheck.domain.model.check_result import CheckResult
    from stylecheck.domain.model.violation import Violation


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs check results as JSON for CI integration or
    parsing by other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: CheckResult) -> None:
        """Report check results as JSON.

        Args:
            result: Complete check result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: CheckResult) -> dict[str, object]:
        return {
            "passed": result.passed,
            "summary": {
                "records_checked": result.records_checked,
                "violation_count": result.violation_count,
                "by_rule": {rule.value: n for rule, n in result.count_by_rule().items()},
            },
            "violations": [self._violation_to_dict(v) for v in result.violations],
        }

    def _violation_to_dict(self, violation: Violation) -> dict[str, object]:
        return {
            "record_name": violation.record_name,
            "rule": violation.rule.value,
            "message": violation.message,
            "line": violation.line,
        }
