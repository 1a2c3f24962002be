"""Domain exceptions: all public errors of stylecheck.

Malformed input records are NOT errors at the checker boundary: they are
reported as violations. These exceptions cover the seams where that
conversion happens and configuration problems.
"""


class StyleCheckError(Exception):
    """Base for all stylecheck error exceptions.

    Allows: except StyleCheckError to catch all library errors.
    """


class RecordFormatError(StyleCheckError, ValueError):
    """Input line cannot be turned into a DeclarationRecord.

    Raised by the line parser. The record reader catches it and
    synthesizes a naming-case violation instead.

    Attributes:
        line: 1-based input line number.
        reason: Why the line is malformed.
        name: Raw name field, if the line had one.
    """

    def __init__(self, *, line: int, reason: str, name: str = "") -> None:
        """Initialize with line number, reason and raw name."""
        if line <= 0:
            raise ValueError(f"line must be > 0, got {line}")
        if not reason:
            raise ValueError("reason must not be empty")

        self.line = line
        self.reason = reason
        self.name = name
        super().__init__(f"line {line}: {reason}")


class ConfigError(StyleCheckError, ValueError):
    """Invalid stylecheck configuration.

    Attributes:
        key: Offending configuration key.
        reason: Why the value is invalid.
    """

    def __init__(self, key: str, reason: str) -> None:
        """Initialize with key and reason."""
        self.key = key
        self.reason = reason
        super().__init__(f"invalid config {key!r}: {reason}")
