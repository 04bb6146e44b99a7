"""Build associations between already-built classes."""

import logging
from typing import Optional
from xml.etree.ElementTree import Element

from ....models.models import ParsedAssociation, RelationshipType
from .class_builder import ClassOwnedEnd
from .exceptions import UnresolvedReferenceException
from .indexer import ElementKind, RawElementIndex
from .parsed_data import ParsedData
from .xmi_nodes import children, first_child, get_comment, get_name, xmi_attr, xmi_id

logger = logging.getLogger(__name__)

MANY_MARKERS = ("*", "-1")


def member_end_ids(node: Element) -> list[str]:
    """End ids from the ``memberEnd`` attribute or ``memberEnd`` children."""
    attribute = node.get("memberEnd")
    if attribute:
        return attribute.split()
    return [xmi_attr(end, "idref") for end in children(node, "memberEnd") if xmi_attr(end, "idref")]


def is_many(end: Element) -> bool:
    """True when an end's upper bound allows more than one element."""
    upper = first_child(end, "upperValue")
    if upper is None:
        return False
    value = upper.get("value", "1").strip()
    if value in MANY_MARKERS:
        return True
    try:
        return int(value) > 1
    except ValueError:
        logger.warning(f"Unreadable upper bound {value!r} on end {xmi_id(end)}, assuming 1")
        return False


def relationship_type(source_side: Element, destination_side: Element) -> RelationshipType:
    """Cardinality from the source's end (end0) and the destination's end (end1)."""
    many_destinations = is_many(source_side)
    many_sources = is_many(destination_side)
    if many_destinations and many_sources:
        return RelationshipType.MANY_TO_MANY
    if many_destinations:
        return RelationshipType.ONE_TO_MANY
    if many_sources:
        return RelationshipType.MANY_TO_ONE
    return RelationshipType.ONE_TO_ONE


class AssociationBuilder:
    """Link classes through ``uml:Association`` elements.

    With ``memberEnd="end0 end1"``, end0 is the property navigated from the
    source class, so its type is the destination; end1 is typed by the source.
    Ends are either ``ownedEnd`` children of the association or attributes
    owned by a class.
    """

    def __init__(self, index: RawElementIndex, parsed_data: ParsedData,
                 class_owned_ends: Optional[dict[str, ClassOwnedEnd]] = None):
        self.index = index
        self.parsed_data = parsed_data
        self.class_owned_ends = class_owned_ends or {}

    def fill_associations(self) -> int:
        """Build every association of the document.

        Returns:
            Number of associations built

        Raises:
            UnresolvedReferenceException: If an end or an end's class is missing,
                or a class attribute names an association that does not list it
        """
        used_ends: set[str] = set()
        for node in self.index.elements_of(ElementKind.ASSOCIATION):
            used_ends.update(member_end_ids(node))
            association = self.build_association(node)
            self.parsed_data.add_association(association)
            logger.debug(
                f"Added {association.relationship_type.value} association {association.id}: "
                f"{association.source_class_id} -> {association.destination_class_id}"
            )
        self._check_class_owned_ends(used_ends)
        return len(self.index.associations)

    def build_association(self, node: Element) -> ParsedAssociation:
        association_id = xmi_id(node)
        end_ids = member_end_ids(node)
        if len(end_ids) != 2:
            raise UnresolvedReferenceException(
                " ".join(end_ids) or None, "pair of association ends", association_id
            )

        owned_ends = {xmi_id(end): end for end in children(node, "ownedEnd")}
        end0, end1 = (self._find_end(end_id, owned_ends, association_id) for end_id in end_ids)

        return ParsedAssociation(
            id=association_id,
            name=get_name(node),
            source_class_id=self._end_class(end1, association_id),
            destination_class_id=self._end_class(end0, association_id),
            relationship_type=relationship_type(end0, end1),
            injected_field_in_source=get_name(end0),
            injected_field_in_destination=get_name(end1),
            comment_in_source=get_comment(end0),
            comment_in_destination=get_comment(end1),
        )

    def _find_end(self, end_id: str, owned_ends: dict[str, Element], association_id: str) -> Element:
        if end_id in owned_ends:
            return owned_ends[end_id]
        if end_id in self.class_owned_ends:
            return self.class_owned_ends[end_id].node
        raise UnresolvedReferenceException(end_id, "association end", association_id)

    def _end_class(self, end: Element, association_id: str) -> str:
        class_id = end.get("type")
        if not class_id or not self.parsed_data.has_class(class_id):
            logger.error(f"Association {association_id} references unknown class {class_id!r}")
            raise UnresolvedReferenceException(class_id, "class", association_id)
        return class_id

    def _check_class_owned_ends(self, used_ends: set[str]) -> None:
        """Every association end declared on a class must belong to an association."""
        for end_id, owned_end in self.class_owned_ends.items():
            if end_id in used_ends:
                continue
            association_ref = owned_end.node.get("association")
            logger.error(
                f"Attribute {end_id} of class {owned_end.class_id} is an end of "
                f"association {association_ref!r}, which does not list it"
            )
            raise UnresolvedReferenceException(association_ref, "association", owned_end.class_id)
