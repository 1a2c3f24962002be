"""stylecheck - rule-based naming, indentation and documentation checker."""

__version__ = "0.1.0"

from stylecheck.application.services.style_checker import StyleChecker, check
from stylecheck.domain.model import (
    CheckResult,
    DeclarationKind,
    DeclarationRecord,
    RuleId,
    StyleConfig,
    Violation,
)

__all__ = [
    "CheckResult",
    "DeclarationKind",
    "DeclarationRecord",
    "RuleId",
    "StyleChecker",
    "StyleConfig",
    "Violation",
    "__version__",
    "check",
]
