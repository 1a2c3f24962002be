"""Tests for domain/model/check_result.py."""

import pytest

from stylecheck.domain.model.check_result import CheckResult
from stylecheck.domain.model.enums import RuleId
from tests.factories import make_result, make_violation


class TestCheckResult:
    """Tests for CheckResult aggregate."""

    def test_empty_passes(self) -> None:
        result = CheckResult.empty()
        assert result.passed
        assert result.violation_count == 0
        assert result.records_checked == 0
        assert result.count_by_rule() == {}

    def test_with_violations_fails(self) -> None:
        result = make_result(make_violation(), records_checked=3)
        assert not result.passed
        assert result.violation_count == 1
        assert result.records_checked == 3

    def test_count_by_rule_in_enum_order(self) -> None:
        result = make_result(
            make_violation(rule=RuleId.MISSING_DOC),
            make_violation(rule=RuleId.NAMING_CASE),
            make_violation(rule=RuleId.MISSING_DOC),
        )
        counts = result.count_by_rule()
        assert counts == {RuleId.NAMING_CASE: 1, RuleId.MISSING_DOC: 2}
        assert list(counts) == [RuleId.NAMING_CASE, RuleId.MISSING_DOC]

    def test_negative_records_checked_raises(self) -> None:
        with pytest.raises(ValueError, match="records_checked must be >= 0"):
            CheckResult(violations=(), records_checked=-1)
