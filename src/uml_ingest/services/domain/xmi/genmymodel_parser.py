"""GenMyModel XMI parser.

Runs the ingestion pipeline over one decoded document:

1. find_elements: classify packaged elements by kind
2. fill_types: register declared primitive types
3. fill_classes_and_fields: build classes and their fields
4. fill_associations: link the built classes
5. fill_enums: build enumerations and their values

The first error aborts the run and leaves the parsed data invalid.
"""

import logging
from typing import Callable, Optional
from xml.etree.ElementTree import Element

from ....core.config import parser_config
from .association_builder import AssociationBuilder
from .class_builder import ClassBuilder
from .enum_builder import EnumBuilder
from .exceptions import InvalidModelError, ModelParseError
from .indexer import RawElementIndex, find_elements
from .parsed_data import ParsedData
from .type_registry import DatabaseType, TypeRegistry
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class GenMyModelParser:
    """Parse a GenMyModel class diagram into ParsedData."""

    editor = "genmymodel"

    def __init__(
        self,
        root: Element,
        database_type: Optional[str] = None,
        type_registry: Optional[TypeRegistry] = None,
        strict_element_kinds: Optional[bool] = None,
        document_name: Optional[str] = None,
    ):
        """
        Initialize the parser.

        Args:
            root: The uml:Model element of the decoded document
            database_type: Target storage family, defaults to configuration
            type_registry: Registry replacing the shared one for database_type
            strict_element_kinds: Fail on unknown element kinds, defaults to configuration
            document_name: Label used in log records
        """
        self.root = root
        self.database_type = DatabaseType(database_type or parser_config.DEFAULT_DATABASE_TYPE)
        if type_registry is None:
            type_registry = TypeRegistry.for_database(self.database_type)
        self.type_registry = type_registry
        if strict_element_kinds is None:
            strict_element_kinds = parser_config.STRICT_ELEMENT_KINDS
        self.strict_element_kinds = strict_element_kinds
        self.document_name = document_name or root.get("name", "")

        self.parsed_data = ParsedData()
        self._index: Optional[RawElementIndex] = None
        self._class_builder: Optional[ClassBuilder] = None

    @property
    def raw_types_indexes(self) -> list[int]:
        return self.index.types

    @property
    def raw_classes_indexes(self) -> list[int]:
        return self.index.classes

    @property
    def raw_associations_indexes(self) -> list[int]:
        return self.index.associations

    @property
    def raw_enums_indexes(self) -> list[int]:
        return self.index.enums

    @property
    def index(self) -> RawElementIndex:
        if self._index is None:
            self.find_elements()
        return self._index

    def parse(self) -> ParsedData:
        """Run every stage and return the frozen parsed data.

        A parser runs once: later calls return the same parsed data, or
        raise InvalidModelError if the first run failed.

        Raises:
            ModelParseError: The first error met; the parsed data is invalid
        """
        if not self.parsed_data.valid:
            raise InvalidModelError(self.parsed_data.error)
        if self.parsed_data.frozen:
            logger.debug("Document already parsed", extra=self._log_extra("parse"))
            return self.parsed_data

        logger.info(f"Starting XMI parsing for {self.database_type.value} database",
                    extra=self._log_extra("parse"))

        self.find_elements()
        self.fill_types()
        self.fill_classes_and_fields()
        self.fill_associations()
        self.fill_enums()

        self.parsed_data.freeze()
        logger.info(f"Parsed {self.parsed_data.summary()}", extra=self._log_extra("parse"))
        return self.parsed_data

    def find_elements(self) -> RawElementIndex:
        self._index = self._run_stage(
            "find_elements", lambda: find_elements(self.root, strict=self.strict_element_kinds)
        )
        return self._index

    def fill_types(self) -> int:
        return self._run_stage("fill_types", self._type_resolver().resolve_declared_types)

    def fill_classes_and_fields(self) -> int:
        self._class_builder = ClassBuilder(self.index, self.parsed_data, self._type_resolver())
        return self._run_stage("fill_classes_and_fields", self._class_builder.fill_classes_and_fields)

    def fill_associations(self) -> int:
        class_owned_ends = self._class_builder.association_ends if self._class_builder else {}
        builder = AssociationBuilder(self.index, self.parsed_data, class_owned_ends)
        return self._run_stage("fill_associations", builder.fill_associations)

    def fill_enums(self) -> int:
        builder = EnumBuilder(self.index, self.parsed_data)
        return self._run_stage("fill_enums", builder.fill_enums)

    def _type_resolver(self) -> TypeResolver:
        return TypeResolver(self.index, self.parsed_data, self.type_registry)

    def _run_stage(self, stage: str, action: Callable):
        try:
            result = action()
        except ModelParseError as e:
            logger.error(f"XMI parsing failed during {stage}: {e}", extra=self._log_extra(stage))
            self.parsed_data.invalidate(e)
            raise
        logger.info(f"Completed {stage}", extra=self._log_extra(stage))
        return result

    def _log_extra(self, stage: str) -> dict[str, str]:
        return {"document": self.document_name, "stage": stage}
