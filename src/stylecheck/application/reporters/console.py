"""Console reporter: renders a CheckResult as a rich table."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stylecheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from stylecheck.domain.model.check_result import CheckResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in columns.
        force_terminal: Emit colors even when output is not a tty.
        max_rows: Max violations listed. None = unlimited.
    """

    width: int = 120
    force_terminal: bool = False
    max_rows: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")
        if self.max_rows is not None and self.max_rows < 0:
            raise ValueError(f"max_rows must be >= 0, got {self.max_rows}")


class ConsoleReporter(BaseReporter):
    """Renders violations as a rich table with a per-rule summary."""

    def __init__(self, output: TextIO | None = None, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()
        self._console = Console(
            file=output if output is not None else sys.stdout,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

    def report(self, result: CheckResult) -> None:
        """Render check result.

        Args:
            result: Complete check result
        """
        console = self._console
        console.rule("[bold]STYLE CHECK[/bold]")

        if result.violations:
            console.print(self._build_table(result))

        self._render_summary(console, result)

    def _build_table(self, result: CheckResult) -> Table:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Name", style="cyan")
        table.add_column("Rule", style="yellow")
        table.add_column("Message")

        rows = result.violations
        if self._config.max_rows is not None:
            rows = rows[: self._config.max_rows]

        for violation in rows:
            table.add_row(
                str(violation.line) if violation.line is not None else "",
                escape(violation.record_name) or "[dim]<empty>[/dim]",
                violation.rule.value,
                escape(violation.message),
            )

        hidden = result.violation_count - len(rows)
        if hidden:
            table.caption = f"... {hidden} more"
        return table

    def _render_summary(self, console: Console, result: CheckResult) -> None:
        parts = [
            f"[bold]Records:[/bold] {result.records_checked}",
            f"[bold]Violations:[/bold] {result.violation_count}",
        ]
        by_rule = result.count_by_rule()
        if by_rule:
            parts.append("(" + ", ".join(f"{rule.value}: {n}" for rule, n in by_rule.items()) + ")")
        console.print(" ".join(parts))

        if result.passed:
            console.print("[bold green]PASSED[/bold green]")
        else:
            console.print("[bold red]FAILED[/bold red]")
