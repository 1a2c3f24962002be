"""Test factories for creating domain objects.

Centralized factory functions to avoid duplication across test modules.
Defaults describe a compliant public, documented function.
"""

from stylecheck.domain.model.check_result import CheckResult
from stylecheck.domain.model.declaration import DeclarationRecord
from stylecheck.domain.model.enums import DeclarationKind, RuleId
from stylecheck.domain.model.violation import Violation


def make_record(
    name: str = "getName",
    kind: DeclarationKind = DeclarationKind.FUNCTION,
    indent_spaces: int = 4,
    *,
    is_public: bool = True,
    has_doc_comment: bool = True,
) -> DeclarationRecord:
    """Create a DeclarationRecord for tests.

    Args:
        name: Declared name (default "getName")
        kind: Declaration kind (default FUNCTION)
        indent_spaces: Indentation (default 4)
        is_public: Visibility (default public)
        has_doc_comment: Doc comment present (default True)

    Returns:
        DeclarationRecord instance
    """
    return DeclarationRecord(
        name=name,
        kind=kind,
        indent_spaces=indent_spaces,
        is_public=is_public,
        has_doc_comment=has_doc_comment,
    )


def make_violation(
    record_name: str = "person",
    rule: RuleId = RuleId.NAMING_CASE,
    message: str = "type name 'person' must start with an upper-case letter",
    line: int | None = None,
) -> Violation:
    """Create a Violation for tests."""
    return Violation(record_name=record_name, rule=rule, message=message, line=line)


def make_result(*violations: Violation, records_checked: int | None = None) -> CheckResult:
    """Create a CheckResult; records_checked defaults to len(violations)."""
    return CheckResult(
        violations=violations,
        records_checked=len(violations) if records_checked is None else records_checked,
    )
