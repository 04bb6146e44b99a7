"""Resolve scalar types declared in the document or used inline by fields."""

import logging
from typing import Optional
from xml.etree.ElementTree import Element

from ....models.models import ParsedType
from .exceptions import WrongTypeException
from .indexer import ElementKind, RawElementIndex
from .parsed_data import ParsedData
from .type_registry import TypeRegistry
from .xmi_nodes import first_child, xmi_id

logger = logging.getLogger(__name__)


class TypeResolver:
    """Turn type declarations into ParsedType entries backed by the registry.

    Explicit ``uml:PrimitiveType`` elements are keyed by their xmi:id.
    Primitives a field uses without a matching type element are keyed by
    their canonical name, so every field using ``String`` shares one entry.
    """

    def __init__(self, index: RawElementIndex, parsed_data: ParsedData, registry: TypeRegistry):
        self.index = index
        self.parsed_data = parsed_data
        self.registry = registry
        self._enum_ids = {xmi_id(node) for node in index.elements_of(ElementKind.ENUMERATION)}

    def resolve_declared_types(self) -> int:
        """Register every type element of the document.

        Returns:
            Number of types registered

        Raises:
            WrongTypeException: If a declared name is not in the registry
        """
        for node in self.index.elements_of(ElementKind.TYPE):
            name = node.get("name")
            if not self.registry.contains(name):
                logger.error(f"Type '{name}' is not supported by the {self.registry.database_type.value} registry")
                raise WrongTypeException(name)

            canonical = self.registry.canonical_name(name)
            parsed_type = ParsedType(id=xmi_id(node) or canonical, name=canonical)
            self.parsed_data.add_type(parsed_type)
            logger.debug(f"Registered type {parsed_type.id} as {parsed_type.name}")

        return len(self.index.types)

    def resolve_or_infer_type(self, field_node: Element, class_id: Optional[str] = None) -> str:
        """Id of the type a class attribute refers to.

        Args:
            field_node: The ownedAttribute element
            class_id: Owning class id, reported on failure

        Returns:
            A ParsedType id, or an enumeration id for enumeration-typed fields

        Raises:
            WrongTypeException: If the type is neither declared nor a registry type
        """
        type_ref = field_node.get("type")
        if type_ref:
            if self.parsed_data.has_type(type_ref):
                return type_ref
            if type_ref in self._enum_ids:
                return type_ref

        name = self.inline_type_name(field_node)
        if not self.registry.contains(name):
            raise WrongTypeException(name, xmi_id(field_node), class_id)

        canonical = self.registry.canonical_name(name)
        if not self.parsed_data.has_type(canonical):
            self.parsed_data.add_type(ParsedType(id=canonical, name=canonical))
            logger.debug(f"Inferred undeclared type {canonical} from field {xmi_id(field_node)}")
        return canonical

    @staticmethod
    def inline_type_name(field_node: Element) -> Optional[str]:
        """Type name written on the field itself.

        Library primitives are nested ``<type href="...#String"/>`` elements;
        otherwise the ``type`` attribute is taken as the name.
        """
        type_elem = first_child(field_node, "type")
        if type_elem is not None:
            href = type_elem.get("href", "")
            if "#" in href:
                return href.rsplit("#", 1)[1].lstrip("/") or None
        return field_node.get("type")
