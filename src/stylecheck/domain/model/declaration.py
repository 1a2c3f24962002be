"""Declaration record value object."""

from dataclasses import dataclass

from stylecheck.domain.model.enums import DeclarationKind


@dataclass(frozen=True, slots=True)
class DeclarationRecord:
    """One named code element with its formatting metadata.

    Produced by a tokenizer, parser or the record reader.
    An empty name is allowed here: the checker reports it as a violation.

    Attributes:
        name: Declared identifier
        kind: TYPE/FUNCTION/PROPERTY/VARIABLE
        indent_spaces: Leading spaces before the declaration (>= 0)
        is_public: Declared visibility is public
        has_doc_comment: Declaration is preceded by a doc comment
    """

    name: str
    kind: DeclarationKind
    indent_spaces: int
    is_public: bool
    has_doc_comment: bool

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.name is None:
            raise TypeError("name must not be None")
        if not isinstance(self.kind, DeclarationKind):
            raise TypeError(f"kind must be DeclarationKind, got {type(self.kind).__name__}")
        if isinstance(self.indent_spaces, bool) or not isinstance(self.indent_spaces, int):
            raise TypeError(f"indent_spaces must be int, got {type(self.indent_spaces).__name__}")
        if self.indent_spaces < 0:
            raise ValueError(f"indent_spaces must be >= 0, got {self.indent_spaces}")
