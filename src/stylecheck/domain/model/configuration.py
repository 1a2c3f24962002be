"""Style configuration.

User-provided settings that parameterize and select rules.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from stylecheck.domain.model.enums import DeclarationKind, RuleId

DEFAULT_INDENT_WIDTH = 4


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """Immutable configuration with FAIL-FIRST validation.

    Attributes:
        indent_width: Indentation unit in spaces (>= 1)
        documented_kinds: Kinds whose public declarations need a doc comment
        disabled_rules: Rules that are not run
    """

    indent_width: int = DEFAULT_INDENT_WIDTH
    documented_kinds: frozenset[DeclarationKind] = field(
        default_factory=lambda: frozenset({DeclarationKind.FUNCTION})
    )
    disabled_rules: frozenset[RuleId] = frozenset()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if isinstance(self.indent_width, bool) or not isinstance(self.indent_width, int):
            raise TypeError(f"indent_width must be int, got {type(self.indent_width).__name__}")
        if self.indent_width < 1:
            raise ValueError(f"indent_width must be >= 1, got {self.indent_width}")

    def is_enabled(self, rule: RuleId) -> bool:
        """Check if rule is enabled."""
        return rule not in self.disabled_rules
