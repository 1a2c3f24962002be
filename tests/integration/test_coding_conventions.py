"""End-to-end: declarations from a Kotlin coding-conventions sample.

Records are read from the delimited text format, checked with the
default rules and rendered by each built-in reporter.
"""

import io
import json

from stylecheck.application.reporters import JSONReporter, PlainTextReporter
from stylecheck.application.services.style_checker import StyleChecker
from stylecheck.domain.model.enums import RuleId
from stylecheck.infrastructure.record_reader import read_lines

SAMPLE = """\
# kind,name,indentSpaces,isPublic,hasDocComment
type,Bar,0,true,true
type,Foo,0,true,true
function,foo,4,true,true
function,lambda,0,true,true
variable,list,4,false,false
type,Person,0,true,false
type,KotlinPerson,0,true,true
property,full_name,8,true,false
function,Foo,0,true,false
variable,element,6,false,false
object,Singleton,0,true,true
"""


class TestCodingConventionsSample:
    """Default rules over a mixed sample."""

    def test_violations(self) -> None:
        result = StyleChecker.with_defaults().run_entries(read_lines(SAMPLE.splitlines()))

        assert [(v.line, v.record_name, v.rule) for v in result.violations] == [
            (9, "full_name", RuleId.NAMING_CASE),
            (10, "Foo", RuleId.NAMING_CASE),
            (10, "Foo", RuleId.MISSING_DOC),
            (11, "element", RuleId.INDENT_WIDTH),
            (12, "Singleton", RuleId.NAMING_CASE),
        ]
        assert result.violations[-1].message == "malformed record: unknown kind 'object'"
        assert result.records_checked == 10
        assert not result.passed

    def test_plain_and_json_agree(self) -> None:
        text_out = io.StringIO()
        json_out = io.StringIO()
        entries = tuple(read_lines(SAMPLE.splitlines()))

        StyleChecker.with_defaults(reporter=PlainTextReporter(text_out)).run_entries(entries)
        StyleChecker.with_defaults(reporter=JSONReporter(json_out)).run_entries(entries)

        lines = text_out.getvalue().splitlines()
        data = json.loads(json_out.getvalue())
        assert len(lines) == len(data["violations"]) == 5
        assert data["summary"]["by_rule"] == {
            "naming-case": 3,
            "indent-width": 1,
            "missing-doc": 1,
        }
