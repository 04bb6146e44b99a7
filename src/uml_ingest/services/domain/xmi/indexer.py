"""Classify the packaged elements of an XMI model by kind.

Indexing records where each element sits so the builders can address
elements by (kind, position) instead of re-scanning the document, whatever
order the exporter wrote them in.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
from xml.etree.ElementTree import Element

from .exceptions import UnknownElementKindError
from .xmi_nodes import children, xmi_type

logger = logging.getLogger(__name__)

PACKAGED_ELEMENT = "packagedElement"


class ElementKind(str, Enum):
    """Element kinds the pipeline builds, keyed by their xmi:type."""
    TYPE = "uml:PrimitiveType"
    CLASS = "uml:Class"
    ASSOCIATION = "uml:Association"
    ENUMERATION = "uml:Enumeration"

    @classmethod
    def from_xmi_type(cls, value: Optional[str]) -> Optional["ElementKind"]:
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class RawElementIndex:
    """Positions of each element kind within ``elements``, in document order."""
    elements: list[Element]
    types: list[int] = field(default_factory=list)
    classes: list[int] = field(default_factory=list)
    associations: list[int] = field(default_factory=list)
    enums: list[int] = field(default_factory=list)
    skipped: list[int] = field(default_factory=list)

    def positions(self, kind: ElementKind) -> list[int]:
        return {
            ElementKind.TYPE: self.types,
            ElementKind.CLASS: self.classes,
            ElementKind.ASSOCIATION: self.associations,
            ElementKind.ENUMERATION: self.enums,
        }[kind]

    def elements_of(self, kind: ElementKind) -> list[Element]:
        return [self.elements[position] for position in self.positions(kind)]


def find_elements(root: Element, strict: bool = False) -> RawElementIndex:
    """Scan the model's packaged elements once and classify each one.

    Args:
        root: The uml:Model element
        strict: Fail on unknown element kinds instead of skipping them

    Returns:
        RawElementIndex with one position list per kind

    Raises:
        UnknownElementKindError: In strict mode, for the first unknown kind
    """
    index = RawElementIndex(elements=list(children(root, PACKAGED_ELEMENT)))

    for position, element in enumerate(index.elements):
        declared = xmi_type(element)
        kind = ElementKind.from_xmi_type(declared)
        if kind is None:
            if strict:
                raise UnknownElementKindError(declared, position)
            logger.debug(f"Skipping element {position} of unknown kind {declared!r}")
            index.skipped.append(position)
            continue
        index.positions(kind).append(position)

    logger.info(
        f"Indexed {len(index.elements)} elements: {len(index.classes)} classes, "
        f"{len(index.types)} types, {len(index.associations)} associations, "
        f"{len(index.enums)} enumerations, {len(index.skipped)} skipped"
    )
    return index
