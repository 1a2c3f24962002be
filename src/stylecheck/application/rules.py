"""Style rules as data.

Each rule is an independent value: a RuleId plus a pure predicate.
Rules live in an ordered tuple; new rules are added by appending.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from stylecheck.domain.model.configuration import StyleConfig
from stylecheck.domain.model.declaration import DeclarationRecord
from stylecheck.domain.model.enums import DeclarationKind, RuleId

EMPTY_NAME_MESSAGE = "empty name"

Predicate = Callable[[DeclarationRecord, StyleConfig], "str | None"]
"""Returns a violation message, or None if the record complies."""


@dataclass(frozen=True, slots=True)
class Rule:
    """Single style rule.

    Attributes:
        rule_id: Identifier reported in violations
        description: One-line summary of the convention
        evaluate: Pure predicate over a record
    """

    rule_id: RuleId
    description: str
    evaluate: Predicate

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.description:
            raise ValueError("description must not be empty")
        if not callable(self.evaluate):
            raise TypeError(f"evaluate must be callable, got {type(self.evaluate).__name__}")


def _naming_case(record: DeclarationRecord, config: StyleConfig) -> str | None:
    """Types are UpperCamelCase, everything else lowerCamelCase."""
    name = record.name
    if not name:
        return EMPTY_NAME_MESSAGE

    if record.kind is DeclarationKind.TYPE:
        if not name[0].isupper():
            return f"type name {name!r} must start with an upper-case letter"
        return None

    kind = record.kind.value
    if not name[0].islower():
        return f"{kind} name {name!r} must start with a lower-case letter"
    if "_" in name:
        return f"{kind} name {name!r} must not contain underscores"
    return None


def _indent_width(record: DeclarationRecord, config: StyleConfig) -> str | None:
    if record.indent_spaces % config.indent_width != 0:
        return (
            f"indentation of {record.indent_spaces} spaces "
            f"is not a multiple of {config.indent_width}"
        )
    return None


def _missing_doc(record: DeclarationRecord, config: StyleConfig) -> str | None:
    if not record.is_public or record.has_doc_comment:
        return None
    if record.kind not in config.documented_kinds:
        return None
    return f"public {record.kind.value} {record.name!r} has no doc comment"


# Registry - tuple for immutability
# Order matters: rules are evaluated in this order for each record
DEFAULT_RULES: tuple[Rule, ...] = (
    Rule(
        RuleId.NAMING_CASE,
        "Types start upper-case; functions, properties and variables are lowerCamelCase",
        _naming_case,
    ),
    Rule(
        RuleId.INDENT_WIDTH,
        "Indentation is a multiple of the indent width",
        _indent_width,
    ),
    Rule(
        RuleId.MISSING_DOC,
        "Public functions carry a doc comment",
        _missing_doc,
    ),
)


def default_rules() -> tuple[Rule, ...]:
    """All built-in rules, in evaluation order."""
    return DEFAULT_RULES


def rules_from_config(config: StyleConfig) -> tuple[Rule, ...]:
    """Built-in rules minus those disabled in config.

    Args:
        config: Style configuration

    Returns:
        Enabled rules, in evaluation order
    """
    return tuple(rule for rule in DEFAULT_RULES if config.is_enabled(rule.rule_id))
