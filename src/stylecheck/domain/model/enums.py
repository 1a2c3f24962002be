"""Domain enumerations."""

from enum import Enum


class DeclarationKind(Enum):
    """Kind of declared code element.

    Values are the spellings used by the record input format.
    """

    TYPE = "type"  # class, interface, object
    FUNCTION = "function"
    PROPERTY = "property"
    VARIABLE = "variable"  # local val/var


class RuleId(Enum):
    """Style rule identifier.

    Values are the spellings accepted by --disable and [tool.stylecheck].
    """

    NAMING_CASE = "naming-case"
    INDENT_WIDTH = "indent-width"
    MISSING_DOC = "missing-doc"
