#!/usr/bin/env python3
"""Tests for the parsed data containers."""

import pytest

from uml_ingest.services.domain.xmi.exceptions import (
    InvalidModelError,
    UnresolvedReferenceException,
    WrongTypeException,
)
from uml_ingest.services.domain.xmi.parsed_data import ParsedData
from tests.utils.factories import (
    ParsedAssociationFactory,
    ParsedClassFactory,
    ParsedEnumFactory,
    ParsedFieldFactory,
    ParsedTypeFactory,
)


@pytest.fixture
def data():
    data = ParsedData()
    data.add_class(ParsedClassFactory(id="_class_000", name="Order"))
    data.add_class(ParsedClassFactory(id="_class_001", name="Customer"))
    return data


class TestLookups:
    """Test suite for ParsedData getters"""

    def test_get_type(self, data):
        parsed_type = ParsedTypeFactory(id="_Long", name="Long")
        data.add_type(parsed_type)

        assert data.get_type("_Long") == parsed_type
        assert data.has_type("_Long")

    def test_get_class(self, data):
        assert data.get_class("_class_001").name == "Customer"

    def test_get_enum(self, data):
        data.add_enum(ParsedEnumFactory(id="_status", value_count=3))

        assert data.get_enum("_status").values == ("LITERAL0", "LITERAL1", "LITERAL2")

    def test_get_association(self, data):
        data.add_association(ParsedAssociationFactory(id="_assoc"))

        assert data.get_association("_assoc").source_class_id == "_class_000"

    @pytest.mark.parametrize("getter,kind", [
        ("get_type", "type"),
        ("get_class", "class"),
        ("get_field", "field"),
        ("get_enum", "enumeration"),
        ("get_association", "association"),
    ])
    def test_unknown_id(self, data, getter, kind):
        with pytest.raises(UnresolvedReferenceException) as exc_info:
            getattr(data, getter)("_unknown")

        assert exc_info.value.reference == "_unknown"
        assert exc_info.value.kind == kind

    def test_field_type_name(self, data):
        data.add_type(ParsedTypeFactory(id="_Long", name="Long"))
        data.add_enum(ParsedEnumFactory(id="_status", name="Status"))
        data.add_field(ParsedFieldFactory(id="_total", type_id="_Long"))
        data.add_field(ParsedFieldFactory(id="_state", type_id="_status"))

        assert data.get_field_type_name("_total") == "Long"
        assert data.get_field_type_name("_state") == "Status"

    def test_containers_are_read_only(self, data):
        with pytest.raises(TypeError):
            data.classes["_class_002"] = ParsedClassFactory()


class TestPopulation:
    """Tests for the add and remove operations"""

    def test_add_field_appends_to_its_class(self, data):
        data.add_field(ParsedFieldFactory(id="_f1", name="Reference"))
        data.add_field(ParsedFieldFactory(id="_f2"))

        assert data.get_class("_class_000").fields == ("_f1", "_f2")
        assert data.get_field("_f1").name == "reference"

    def test_add_field_to_unknown_class(self, data):
        with pytest.raises(UnresolvedReferenceException):
            data.add_field(ParsedFieldFactory(class_id="_class_999"))

    def test_remove_class_drops_its_fields(self, data):
        data.add_field(ParsedFieldFactory(id="_f1"))
        data.add_field(ParsedFieldFactory(id="_f2", class_id="_class_001"))

        data.remove_class("_class_000")

        assert not data.has_class("_class_000")
        assert set(data.fields) == {"_f2"}

    def test_user_class(self, data):
        data.add_class(ParsedClassFactory(id="_user", name="User"))
        assert data.user_class_id == "_user"

        data.remove_class("_user")
        assert data.user_class_id is None

    def test_summary(self, data):
        data.add_type(ParsedTypeFactory())
        data.add_field(ParsedFieldFactory())

        assert data.summary() == {
            "classes": 2, "fields": 1, "types": 1, "associations": 0, "enums": 0
        }


class TestLifecycle:
    """Tests for freezing and invalidation"""

    def test_frozen_data_rejects_writes(self, data):
        data.freeze()

        assert data.frozen
        with pytest.raises(RuntimeError, match="frozen"):
            data.add_class(ParsedClassFactory())
        assert data.get_class("_class_000").name == "Order"

    def test_invalid_data_rejects_reads(self, data):
        data.invalidate(WrongTypeException("Char"))

        assert not data.valid
        assert data.frozen
        with pytest.raises(InvalidModelError) as exc_info:
            data.get_class("_class_000")
        assert isinstance(exc_info.value.cause, WrongTypeException)
        with pytest.raises(InvalidModelError):
            _ = data.classes

    def test_first_error_is_kept(self, data):
        data.invalidate(WrongTypeException("Char"))
        data.invalidate(UnresolvedReferenceException("_x", "class"))

        with pytest.raises(InvalidModelError) as exc_info:
            data.get_class("_class_000")
        assert exc_info.value.cause.type_name == "Char"
