"""Delimited record reader.

Line format: kind,name,indentSpaces,isPublic,hasDocComment

    function,getName,4,true,true
    type,Person,0,true,false

Blank lines and lines starting with '#' are skipped.
A malformed line becomes one naming-case violation whose message starts
with "malformed record: "; reading goes on.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from stylecheck.domain.exceptions import RecordFormatError
from stylecheck.domain.model.declaration import DeclarationRecord
from stylecheck.domain.model.enums import DeclarationKind, RuleId
from stylecheck.domain.model.line_entry import LineEntry
from stylecheck.domain.model.violation import Violation

logger = logging.getLogger(__name__)

FIELD_COUNT = 5
COMMENT_PREFIX = "#"
ENCODING = "utf-8"
MALFORMED_PREFIX = "malformed record: "

_TRUE = frozenset({"true", "yes", "1"})
_FALSE = frozenset({"false", "no", "0"})
_KINDS = {kind.value: kind for kind in DeclarationKind}


def _parse_bool(value: str, field: str, *, line: int, name: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise RecordFormatError(line=line, reason=f"{field} must be true or false, got {value!r}", name=name)


def parse_line(text: str, line: int) -> DeclarationRecord:
    """Parse one delimited line into a record.

    Args:
        text: Line content without trailing newline
        line: 1-based line number (for error reporting)

    Returns:
        Parsed DeclarationRecord

    Raises:
        RecordFormatError: Wrong field count, unknown kind, bad integer or boolean
    """
    fields = [field.strip() for field in text.split(",")]
    name = fields[1] if len(fields) > 1 else ""

    if len(fields) != FIELD_COUNT:
        raise RecordFormatError(
            line=line,
            reason=f"expected {FIELD_COUNT} fields, got {len(fields)}",
            name=name,
        )

    kind_text, _, indent_text, public_text, doc_text = fields

    kind = _KINDS.get(kind_text.lower())
    if kind is None:
        raise RecordFormatError(line=line, reason=f"unknown kind {kind_text!r}", name=name)

    try:
        indent = int(indent_text)
    except ValueError:
        raise RecordFormatError(
            line=line,
            reason=f"indentSpaces must be an integer, got {indent_text!r}",
            name=name,
        ) from None
    if indent < 0:
        raise RecordFormatError(line=line, reason=f"indentSpaces must be >= 0, got {indent}", name=name)

    return DeclarationRecord(
        name=name,
        kind=kind,
        indent_spaces=indent,
        is_public=_parse_bool(public_text, "isPublic", line=line, name=name),
        has_doc_comment=_parse_bool(doc_text, "hasDocComment", line=line, name=name),
    )


def _decode(raw: str | bytes, line: int) -> str:
    if isinstance(raw, str):
        return raw
    try:
        return raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise RecordFormatError(
            line=line,
            reason=f"not valid {ENCODING} at byte {exc.start}",
        ) from None


def read_lines(lines: Iterable[str | bytes]) -> Iterator[LineEntry]:
    """Parse lines lazily into entries.

    Byte lines are decoded one at a time, so an undecodable line is
    reported on its own and the lines after it are still read.

    Args:
        lines: Raw input lines, text or UTF-8 bytes (newlines allowed)

    Yields:
        LineEntry per non-blank, non-comment line, in input order
    """
    for number, raw in enumerate(lines, start=1):
        try:
            text = _decode(raw, number).strip()
            if not text or text.startswith(COMMENT_PREFIX):
                continue
            record = parse_line(text, number)
        except RecordFormatError as exc:
            logger.warning("skipping malformed record: %s", exc)
            yield LineEntry(
                line=number,
                error=Violation(
                    record_name=exc.name,
                    rule=RuleId.NAMING_CASE,
                    message=f"{MALFORMED_PREFIX}{exc.reason}",
                    line=number,
                ),
            )
            continue

        yield LineEntry(line=number, record=record)


def read_path(path: Path) -> tuple[LineEntry, ...]:
    """Read and parse a record file.

    Args:
        path: Text file, UTF-8 per line

    Returns:
        Entries in file order

    Raises:
        OSError: File cannot be read
    """
    logger.debug("reading records from %s", path)
    with path.open("rb") as f:
        return tuple(read_lines(f))
