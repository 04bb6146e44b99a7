"""Normalized model produced by one ingestion run."""

from types import MappingProxyType
from typing import Mapping, Optional, TypeVar

from ....models.models import ParsedAssociation, ParsedClass, ParsedEnum, ParsedField, ParsedType
from .exceptions import InvalidModelError, ModelParseError, UnresolvedReferenceException


T = TypeVar("T")


class ParsedData:
    """Identifier-keyed containers for everything read from one document.

    Entities reference each other by id only. The builders populate the
    containers through the ``add_*`` methods; once ``freeze()`` is called the
    data is read-only. A failed ingestion calls ``invalidate()``, after which
    every read raises ``InvalidModelError``.
    """

    def __init__(self):
        self._classes: dict[str, ParsedClass] = {}
        self._fields: dict[str, ParsedField] = {}
        self._types: dict[str, ParsedType] = {}
        self._associations: dict[str, ParsedAssociation] = {}
        self._enums: dict[str, ParsedEnum] = {}
        self._user_class_id: Optional[str] = None
        self._frozen = False
        self._error: Optional[ModelParseError] = None

    # Containers for bulk iteration

    @property
    def classes(self) -> Mapping[str, ParsedClass]:
        return self._read(self._classes)

    @property
    def fields(self) -> Mapping[str, ParsedField]:
        return self._read(self._fields)

    @property
    def types(self) -> Mapping[str, ParsedType]:
        return self._read(self._types)

    @property
    def associations(self) -> Mapping[str, ParsedAssociation]:
        return self._read(self._associations)

    @property
    def enums(self) -> Mapping[str, ParsedEnum]:
        return self._read(self._enums)

    @property
    def user_class_id(self) -> Optional[str]:
        """Id of the class named 'User', if the diagram declares one."""
        self._check_valid()
        return self._user_class_id

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def valid(self) -> bool:
        return self._error is None

    @property
    def error(self) -> Optional[ModelParseError]:
        """The error that invalidated the data, if any."""
        return self._error

    # Lookups

    def get_type(self, type_id: str) -> ParsedType:
        return self._get(self._types, type_id, "type")

    def get_class(self, class_id: str) -> ParsedClass:
        return self._get(self._classes, class_id, "class")

    def get_field(self, field_id: str) -> ParsedField:
        return self._get(self._fields, field_id, "field")

    def get_enum(self, enum_id: str) -> ParsedEnum:
        return self._get(self._enums, enum_id, "enumeration")

    def get_association(self, association_id: str) -> ParsedAssociation:
        return self._get(self._associations, association_id, "association")

    def has_type(self, type_id: str) -> bool:
        return type_id in self._types

    def has_class(self, class_id: str) -> bool:
        return class_id in self._classes

    def get_field_type_name(self, field_id: str) -> str:
        """Name of a field's type, whether a scalar type or an enumeration."""
        field = self.get_field(field_id)
        if field.type_id in self._types:
            return self._types[field.type_id].name
        return self.get_enum(field.type_id).name

    # Population, used by the builders

    def add_type(self, parsed_type: ParsedType) -> None:
        self._check_writable()
        self._types[parsed_type.id] = parsed_type

    def add_class(self, parsed_class: ParsedClass) -> None:
        self._check_writable()
        self._classes[parsed_class.id] = parsed_class
        if parsed_class.name.lower() == "user":
            self._user_class_id = parsed_class.id

    def add_field(self, field: ParsedField) -> None:
        """Register a field and append it to its owning class."""
        self._check_writable()
        owner = self._get(self._classes, field.class_id, "class")
        self._fields[field.id] = field
        self._classes[owner.id] = owner.model_copy(update={"fields": owner.fields + (field.id,)})

    def add_association(self, association: ParsedAssociation) -> None:
        self._check_writable()
        self._associations[association.id] = association

    def add_enum(self, parsed_enum: ParsedEnum) -> None:
        self._check_writable()
        self._enums[parsed_enum.id] = parsed_enum

    def remove_class(self, class_id: str) -> None:
        """Drop a class and the fields already attached to it."""
        self._check_writable()
        parsed_class = self._classes.pop(class_id, None)
        if parsed_class is None:
            return
        for field_id in parsed_class.fields:
            self._fields.pop(field_id, None)
        if self._user_class_id == class_id:
            self._user_class_id = None

    # Lifecycle

    def freeze(self) -> None:
        self._frozen = True

    def invalidate(self, error: ModelParseError) -> None:
        """Mark the data unusable after a failed ingestion."""
        if self._error is None:
            self._error = error
        self._frozen = True

    def summary(self) -> dict[str, int]:
        return {
            "classes": len(self._classes),
            "fields": len(self._fields),
            "types": len(self._types),
            "associations": len(self._associations),
            "enums": len(self._enums),
        }

    def _get(self, container: dict[str, T], entity_id: str, kind: str) -> T:
        self._check_valid()
        try:
            return container[entity_id]
        except KeyError:
            raise UnresolvedReferenceException(entity_id, kind)

    def _read(self, container: dict[str, T]) -> Mapping[str, T]:
        self._check_valid()
        return MappingProxyType(container)

    def _check_valid(self) -> None:
        if self._error is not None:
            raise InvalidModelError(self._error)

    def _check_writable(self) -> None:
        self._check_valid()
        if self._frozen:
            raise RuntimeError("Parsed data is frozen and can no longer be modified")
