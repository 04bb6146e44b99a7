#!/usr/bin/env python3

from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator

from ..utils.naming import decapitalize

# Pydantic Models


class RelationshipType(str, Enum):
    """Cardinality of an association, seen from its source class."""
    ONE_TO_ONE = "one-to-one"
    ONE_TO_MANY = "one-to-many"
    MANY_TO_ONE = "many-to-one"
    MANY_TO_MANY = "many-to-many"


class ParsedType(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # xmi:id of the PrimitiveType element, or the canonical name when inferred
    name: str  # Canonical capitalized scalar name, e.g. 'String'

    @field_validator("name")
    @classmethod
    def name_is_capitalized(cls, value: str) -> str:
        if not value or not value[0].isupper():
            raise ValueError(f"type name must be non-empty and capitalized, got {value!r}")
        return value


class ParsedClass(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    comment: str | None = None
    fields: tuple[str, ...] = ()  # Field ids in document order


class ParsedField(BaseModel):
    """A regular (non-association) attribute of a class.

    The name is decapitalized on construction so 'Name' and 'name' produce
    the same field.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type_id: str  # ParsedType id, or ParsedEnum id for enumeration-typed fields
    class_id: str  # Owning ParsedClass
    comment: str | None = None

    @field_validator("name")
    @classmethod
    def decapitalize_name(cls, value: str) -> str:
        if not value:
            raise ValueError("field name must not be empty")
        return decapitalize(value)


class ParsedAssociation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str | None = None
    source_class_id: str
    destination_class_id: str
    relationship_type: RelationshipType
    injected_field_in_source: str | None = None  # Attribute added to the source class
    injected_field_in_destination: str | None = None  # Attribute added to the destination class
    comment_in_source: str | None = None
    comment_in_destination: str | None = None


class ParsedEnum(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    values: tuple[str, ...] = ()  # Literal names in document order, duplicates kept
