"""Domain model: records, violations, results, configuration."""

from stylecheck.domain.model.check_result import CheckResult
from stylecheck.domain.model.configuration import DEFAULT_INDENT_WIDTH, StyleConfig
from stylecheck.domain.model.declaration import DeclarationRecord
from stylecheck.domain.model.enums import DeclarationKind, RuleId
from stylecheck.domain.model.line_entry import LineEntry
from stylecheck.domain.model.violation import Violation

__all__ = [
    "DEFAULT_INDENT_WIDTH",
    "CheckResult",
    "DeclarationKind",
    "DeclarationRecord",
    "LineEntry",
    "RuleId",
    "StyleConfig",
    "Violation",
]
