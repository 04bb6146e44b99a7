#!/usr/bin/env python3
"""Tests for the GenMyModel ingestion pipeline."""

import logging
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from uml_ingest.core.config import ParserConfig
from uml_ingest.services.domain.xmi.exceptions import (
    InvalidModelError,
    NullPointerException,
    WrongTypeException,
)
from uml_ingest.services.domain.xmi.genmymodel_parser import GenMyModelParser
from uml_ingest.services.domain.xmi.type_registry import DatabaseType, TypeRegistry
from uml_ingest.services.document_loader import load_document
from tests.fixtures.xmi_fixtures import (
    ENUM,
    ENUM_NO_NAME,
    EVOLVE,
    WRONG_TYPE,
    create_fixture_parser,
    fixture_path,
)


class TestParse:
    """Test suite for GenMyModelParser.parse"""

    def test_reference_diagram(self):
        data = create_fixture_parser(EVOLVE).parse()

        assert data.summary() == {
            "classes": 8, "fields": 28, "types": 3, "associations": 10, "enums": 0
        }
        assert data.frozen
        assert data.valid

    def test_enumerations_with_classes(self):
        data = create_fixture_parser(ENUM).parse()

        assert data.summary() == {
            "classes": 1, "fields": 2, "types": 1, "associations": 0, "enums": 2
        }

    def test_parse_returns_the_parser_data(self):
        parser = create_fixture_parser(EVOLVE)
        assert parser.parse() is parser.parsed_data

    def test_failure_invalidates_everything(self):
        """Containers filled before the failing stage are not readable"""
        parser = create_fixture_parser(ENUM_NO_NAME)

        with pytest.raises(NullPointerException):
            parser.parse()

        with pytest.raises(InvalidModelError):
            _ = parser.parsed_data.classes

    def test_failed_class_is_not_readable(self):
        parser = create_fixture_parser(WRONG_TYPE)

        with pytest.raises(WrongTypeException):
            parser.parse()

        with pytest.raises(InvalidModelError):
            parser.parsed_data.get_class("_Book")

    def test_separate_parsers_are_independent(self):
        failing = create_fixture_parser(WRONG_TYPE)
        with pytest.raises(WrongTypeException):
            failing.parse()

        data = create_fixture_parser(EVOLVE).parse()
        assert len(data.classes) == 8

    def test_second_parse_returns_the_same_data(self):
        parser = create_fixture_parser(EVOLVE)
        first = parser.parse()

        assert parser.parse() is first
        assert first.summary()["classes"] == 8

    def test_second_parse_after_a_failure(self):
        parser = create_fixture_parser(WRONG_TYPE)
        with pytest.raises(WrongTypeException):
            parser.parse()

        with pytest.raises(InvalidModelError) as exc_info:
            parser.parse()
        assert isinstance(exc_info.value.cause, WrongTypeException)

    def test_parsed_entities_are_immutable(self):
        data = create_fixture_parser(ENUM).parse()
        parsed_class = next(iter(data.classes.values()))
        parsed_enum = data.get_enum("_MyEnumeration")

        with pytest.raises(AttributeError):
            parsed_class.fields.append("_extra")
        with pytest.raises(ValidationError):
            parsed_class.name = "Renamed"
        with pytest.raises(AttributeError):
            parsed_enum.values.append("EXTRA")
        assert parsed_enum.values == ("LITERAL1", "LITERAL2")

    def test_class_fields_match_field_entities(self):
        data = create_fixture_parser(EVOLVE).parse()

        assert data.get_class("_Region").fields == ("_Region_regionName", "_Region_regionCode")
        assert sum(len(c.fields) for c in data.classes.values()) == len(data.fields)
        for field_id, field in data.fields.items():
            assert field_id in data.get_class(field.class_id).fields

    def test_document_name_defaults_to_model_name(self):
        parser = GenMyModelParser(load_document(path=fixture_path(EVOLVE)))
        assert parser.document_name == "jhipster-hr"

    def test_document_name_from_file(self):
        assert create_fixture_parser(EVOLVE).document_name == EVOLVE


class TestParserConfiguration:
    """Tests for settings taken from the configuration"""

    def test_explicit_database_type(self):
        parser = create_fixture_parser(EVOLVE, database_type="mongodb")
        assert parser.database_type == DatabaseType.MONGODB
        assert parser.type_registry.database_type == DatabaseType.MONGODB

    def test_explicit_empty_registry_is_used(self):
        registry = TypeRegistry.from_names(DatabaseType.SQL, [])
        parser = create_fixture_parser(EVOLVE, type_registry=registry)

        assert parser.type_registry is registry
        with pytest.raises(WrongTypeException) as exc_info:
            parser.parse()
        assert exc_info.value.type_name == "ZonedDateTime"

    def test_unknown_database_type(self):
        with pytest.raises(ValueError):
            create_fixture_parser(EVOLVE, database_type="oracle")

    @patch.dict(os.environ, {"XMI_DEFAULT_DATABASE_TYPE": "Cassandra"})
    def test_default_database_type_from_environment(self):
        """Cassandra has no ZonedDateTime, so the reference diagram is rejected"""
        with patch("uml_ingest.services.domain.xmi.genmymodel_parser.parser_config", ParserConfig()):
            parser = GenMyModelParser(load_document(path=fixture_path(EVOLVE)))

            assert parser.database_type == DatabaseType.CASSANDRA
            with pytest.raises(WrongTypeException):
                parser.parse()

    @patch.dict(os.environ, {"XMI_STRICT_ELEMENT_KINDS": "true"})
    def test_strict_element_kinds_from_environment(self):
        with patch("uml_ingest.services.domain.xmi.genmymodel_parser.parser_config", ParserConfig()):
            parser = GenMyModelParser(load_document(path=fixture_path(EVOLVE)))

        assert parser.strict_element_kinds is True

    def test_explicit_strict_flag_wins(self):
        parser = create_fixture_parser(EVOLVE, strict_element_kinds=False)
        assert parser.strict_element_kinds is False


class TestParserLogging:
    """Tests for stage logging"""

    def test_logs_completed_stages(self, caplog):
        with caplog.at_level(logging.INFO, logger="uml_ingest"):
            create_fixture_parser(EVOLVE).parse()

        messages = [record.getMessage() for record in caplog.records]
        for stage in ("find_elements", "fill_types", "fill_classes_and_fields",
                      "fill_associations", "fill_enums"):
            assert f"Completed {stage}" in messages

    def test_logs_failing_stage(self, caplog):
        with caplog.at_level(logging.INFO, logger="uml_ingest"):
            with pytest.raises(WrongTypeException):
                create_fixture_parser(WRONG_TYPE).parse()

        errors = [record for record in caplog.records if record.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].stage == "fill_classes_and_fields"
        assert errors[0].document == WRONG_TYPE
        assert "char" in errors[0].getMessage()
