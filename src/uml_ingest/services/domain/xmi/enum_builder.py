"""Build enumerations and their literal values."""

import logging
from xml.etree.ElementTree import Element

from ....models.models import ParsedEnum
from .exceptions import NullPointerException
from .indexer import ElementKind, RawElementIndex
from .parsed_data import ParsedData
from .xmi_nodes import children, get_name, xmi_id

logger = logging.getLogger(__name__)


class EnumBuilder:
    """Create a ParsedEnum per ``uml:Enumeration`` element.

    Names are mandatory on the enumeration and on each ``ownedLiteral``;
    an enumeration without literals is valid.
    """

    def __init__(self, index: RawElementIndex, parsed_data: ParsedData):
        self.index = index
        self.parsed_data = parsed_data

    def fill_enums(self) -> int:
        for node in self.index.elements_of(ElementKind.ENUMERATION):
            parsed_enum = self.build_enum(node)
            self.parsed_data.add_enum(parsed_enum)
            logger.debug(f"Added enumeration {parsed_enum.name} with {len(parsed_enum.values)} values")
        return len(self.index.enums)

    def build_enum(self, node: Element) -> ParsedEnum:
        enum_id = xmi_id(node)
        name = get_name(node)
        if name is None:
            logger.error(f"Enumeration {enum_id} has no name")
            raise NullPointerException("enumeration", enum_id)

        values = []
        for literal in children(node, "ownedLiteral"):
            value = get_name(literal)
            if value is None:
                logger.error(f"A literal of enumeration {name} has no name")
                raise NullPointerException(f"value of enumeration '{name}'", xmi_id(literal))
            values.append(value)

        return ParsedEnum(id=enum_id, name=name, values=tuple(values))
