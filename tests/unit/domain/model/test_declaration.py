"""Tests for domain/model/declaration.py."""

import pytest

from stylecheck.domain.model.declaration import DeclarationRecord
from stylecheck.domain.model.enums import DeclarationKind
from tests.factories import make_record


class TestDeclarationRecordCreation:
    """Tests for valid DeclarationRecord creation."""

    def test_fields(self) -> None:
        r = make_record("Person", DeclarationKind.TYPE, 0, is_public=False, has_doc_comment=False)
        assert r.name == "Person"
        assert r.kind is DeclarationKind.TYPE
        assert r.indent_spaces == 0
        assert r.is_public is False
        assert r.has_doc_comment is False

    def test_empty_name_allowed(self) -> None:
        """Empty name is reported by the checker, not rejected here."""
        r = make_record(name="")
        assert r.name == ""

    def test_is_frozen(self) -> None:
        r = make_record()
        with pytest.raises(AttributeError):
            r.name = "other"  # type: ignore[misc]

    def test_equal_by_value(self) -> None:
        assert make_record() == make_record()
        assert hash(make_record()) == hash(make_record())


class TestDeclarationRecordFailFirst:
    """Tests for FAIL-FIRST validation in DeclarationRecord."""

    def test_negative_indent_raises(self) -> None:
        with pytest.raises(ValueError, match="indent_spaces must be >= 0"):
            make_record(indent_spaces=-1)

    def test_kind_must_be_enum(self) -> None:
        with pytest.raises(TypeError, match="kind must be DeclarationKind"):
            DeclarationRecord(
                name="x",
                kind="function",  # type: ignore[arg-type]
                indent_spaces=0,
                is_public=False,
                has_doc_comment=False,
            )

    def test_none_name_raises(self) -> None:
        with pytest.raises(TypeError, match="name must not be None"):
            make_record(name=None)  # type: ignore[arg-type]

    def test_non_int_indent_raises(self) -> None:
        with pytest.raises(TypeError, match="indent_spaces must be int"):
            make_record(indent_spaces="4")  # type: ignore[arg-type]

    def test_bool_indent_raises(self) -> None:
        with pytest.raises(TypeError, match="indent_spaces must be int"):
            make_record(indent_spaces=True)
