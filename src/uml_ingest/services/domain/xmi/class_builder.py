"""Build classes and their regular fields from ``uml:Class`` elements."""

import logging
from dataclasses import dataclass
from xml.etree.ElementTree import Element

from ....models.models import ParsedClass, ParsedField
from .exceptions import ModelParseError, NullPointerException
from .indexer import ElementKind, RawElementIndex
from .parsed_data import ParsedData
from .type_resolver import TypeResolver
from .xmi_nodes import children, get_comment, get_name, xmi_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassOwnedEnd:
    """An association end declared as an attribute of a class."""
    class_id: str
    node: Element


class ClassBuilder:
    """Create ParsedClass and ParsedField entries in document order.

    Attributes that carry an ``association`` attribute are association ends,
    not fields: they are collected in ``association_ends`` for the
    association builder.
    """

    def __init__(self, index: RawElementIndex, parsed_data: ParsedData, type_resolver: TypeResolver):
        self.index = index
        self.parsed_data = parsed_data
        self.type_resolver = type_resolver
        self.association_ends: dict[str, ClassOwnedEnd] = {}

    def fill_classes_and_fields(self) -> int:
        """Build every class of the document with its fields.

        A class whose field fails to resolve is removed again, with the
        fields already attached, before the error propagates.

        Returns:
            Number of classes built
        """
        for node in self.index.elements_of(ElementKind.CLASS):
            class_id = self.add_class(node)
            try:
                for attribute in children(node, "ownedAttribute"):
                    if attribute.get("association"):
                        self.association_ends[xmi_id(attribute)] = ClassOwnedEnd(class_id, attribute)
                        continue
                    self.add_field(class_id, attribute)
            except ModelParseError:
                self.parsed_data.remove_class(class_id)
                raise

        return len(self.index.classes)

    def add_class(self, node: Element) -> str:
        class_id = xmi_id(node)
        name = get_name(node)
        if name is None:
            raise NullPointerException("class", class_id)

        self.parsed_data.add_class(ParsedClass(id=class_id, name=name, comment=get_comment(node)))
        logger.debug(f"Added class {name} ({class_id})")
        return class_id

    def add_field(self, class_id: str, node: Element) -> str:
        field_id = xmi_id(node)
        name = get_name(node)
        if name is None:
            raise NullPointerException("field", field_id)

        type_id = self.type_resolver.resolve_or_infer_type(node, class_id)
        field = ParsedField(
            id=field_id,
            name=name,
            type_id=type_id,
            class_id=class_id,
            comment=get_comment(node),
        )
        self.parsed_data.add_field(field)
        logger.debug(f"Added field {field.name} of type {type_id} to class {class_id}")
        return field_id
