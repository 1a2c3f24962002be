"""stylecheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, collections.abc
"""

from stylecheck.domain.exceptions import (
    ConfigError,
    RecordFormatError,
    StyleCheckError,
)
from stylecheck.domain.model import (
    CheckResult,
    DeclarationKind,
    DeclarationRecord,
    RuleId,
    StyleConfig,
    Violation,
)
from stylecheck.domain.ports import ReporterProtocol

__all__ = [
    # Exceptions
    "StyleCheckError",
    "RecordFormatError",
    "ConfigError",
    # Enums
    "DeclarationKind",
    "RuleId",
    # Value objects
    "DeclarationRecord",
    "Violation",
    "CheckResult",
    "StyleConfig",
    # Ports
    "ReporterProtocol",
]
