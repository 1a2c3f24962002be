"""stylecheck command line interface (Typer).

    stylecheck records.txt
    stylecheck - --format json < records.txt

Exit codes: 0 no violations, 1 violations found, 2 usage or config error.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import TextIO

import typer
from rich.console import Console
from rich.logging import RichHandler

from stylecheck import __version__
from stylecheck.application.reporters import ConsoleReporter, JSONReporter, PlainTextReporter
from stylecheck.application.services.style_checker import StyleChecker
from stylecheck.domain.exceptions import ConfigError
from stylecheck.domain.model.configuration import StyleConfig
from stylecheck.domain.model.enums import RuleId
from stylecheck.domain.ports.reporter import ReporterProtocol
from stylecheck.infrastructure.config_loader import load_config
from stylecheck.infrastructure.record_reader import read_lines, read_path

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_USAGE = 2

STDIN_PATH = Path("-")


class OutputFormat(str, Enum):
    """Output format selected with --format."""

    TEXT = "text"
    JSON = "json"
    RICH = "rich"


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def make_reporter(fmt: OutputFormat, output: TextIO) -> ReporterProtocol:
    """Reporter for an output format."""
    match fmt:
        case OutputFormat.JSON:
            return JSONReporter(output)
        case OutputFormat.RICH:
            return ConsoleReporter(output)
        case _:
            return PlainTextReporter(output)


def apply_overrides(
    config: StyleConfig,
    *,
    indent_width: int | None,
    disable: list[str],
) -> StyleConfig:
    """Apply command line options on top of file configuration.

    Raises:
        ConfigError: Unknown rule id or invalid indent width
    """
    disabled = set(config.disabled_rules)
    for value in disable:
        try:
            disabled.add(RuleId(value.lower()))
        except ValueError:
            raise ConfigError("--disable", f"unknown rule {value!r}") from None

    try:
        return StyleConfig(
            indent_width=indent_width if indent_width is not None else config.indent_width,
            documented_kinds=config.documented_kinds,
            disabled_rules=frozenset(disabled),
        )
    except ValueError as exc:
        raise ConfigError("--indent-width" if indent_width is not None else "--disable", str(exc)) from exc


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"stylecheck {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="stylecheck",
    help="Check declaration records against naming, indentation and doc conventions.",
    add_completion=False,
)


@app.command()
def run(
    input_file: Path = typer.Argument(  # noqa: B008
        ...,
        help="Record file: kind,name,indentSpaces,isPublic,hasDocComment per line ('-' for stdin)",
    ),
    fmt: OutputFormat = typer.Option(OutputFormat.TEXT, "--format", "-f", help="Output format"),
    indent_width: int | None = typer.Option(None, "--indent-width", help="Indentation unit in spaces"),
    disable: list[str] | None = typer.Option(None, "--disable", help="Rule id to disable (repeatable)"),
    config_path: Path | None = typer.Option(  # noqa: B008
        None, "--config", help="TOML file with a [tool.stylecheck] table"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    version: bool = typer.Option(  # noqa: ARG001
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Check INPUT_FILE and print one violation per line."""
    configure_logging(verbose)

    try:
        config = apply_overrides(
            load_config(config_path),
            indent_width=indent_width,
            disable=disable or [],
        )
    except ConfigError as exc:
        typer.echo(f"stylecheck: {exc}", err=True)
        raise typer.Exit(EXIT_USAGE) from exc

    try:
        if input_file == STDIN_PATH:
            entries = tuple(read_lines(getattr(sys.stdin, "buffer", sys.stdin)))
        else:
            entries = read_path(input_file)
    except OSError as exc:
        typer.echo(f"stylecheck: cannot read {input_file}: {exc.strerror or exc}", err=True)
        raise typer.Exit(EXIT_USAGE) from exc
    except UnicodeDecodeError as exc:
        typer.echo(f"stylecheck: cannot decode {input_file}: {exc}", err=True)
        raise typer.Exit(EXIT_USAGE) from exc

    checker = StyleChecker.from_config(config, reporter=make_reporter(fmt, sys.stdout))
    result = checker.run_entries(entries)

    raise typer.Exit(EXIT_OK if result.passed else EXIT_VIOLATIONS)


def main() -> None:
    """Console script entry point."""
    app()
