"""Tests for ConsoleReporter."""

import io

import pytest

from stylecheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from stylecheck.domain.model.check_result import CheckResult
from stylecheck.domain.model.enums import RuleId
from tests.factories import make_result, make_violation


class TestConsoleConfig:
    """Tests for ConsoleConfig."""

    def test_default_values(self) -> None:
        config = ConsoleConfig()
        assert config.width == 120
        assert config.force_terminal is False
        assert config.max_rows is None

    def test_narrow_width_raises(self) -> None:
        with pytest.raises(ValueError, match="width must be >= 20"):
            ConsoleConfig(width=10)

    def test_negative_max_rows_raises(self) -> None:
        with pytest.raises(ValueError, match="max_rows must be >= 0"):
            ConsoleConfig(max_rows=-1)


class TestConsoleReporter:
    """Tests for ConsoleReporter."""

    def test_passed(self) -> None:
        output = io.StringIO()
        ConsoleReporter(output).report(CheckResult.empty())

        text = output.getvalue()
        assert "STYLE CHECK" in text
        assert "Violations: 0" in text
        assert "PASSED" in text

    def test_failed_lists_violations(self) -> None:
        output = io.StringIO()
        result = make_result(
            make_violation("person", RuleId.NAMING_CASE, "bad case", line=3),
            make_violation("getName", RuleId.MISSING_DOC, "no doc"),
        )

        ConsoleReporter(output).report(result)

        text = output.getvalue()
        assert "FAILED" in text
        assert "person" in text
        assert "naming-case" in text
        assert "bad case" in text
        assert "missing-doc: 1" in text

    def test_markup_in_names_is_escaped(self) -> None:
        output = io.StringIO()
        result = make_result(make_violation("[bold]x", RuleId.NAMING_CASE, "msg [red]"))

        ConsoleReporter(output).report(result)

        text = output.getvalue()
        assert "[bold]x" in text
        assert "msg [red]" in text

    def test_max_rows_truncates(self) -> None:
        output = io.StringIO()
        result = make_result(*(make_violation(f"name{i}", message=f"msg{i}") for i in range(5)))

        ConsoleReporter(output, ConsoleConfig(max_rows=2)).report(result)

        text = output.getvalue()
        assert "name1" in text
        assert "name4" not in text
        assert "3 more" in text
