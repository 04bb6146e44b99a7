"""Attribute and child lookups on XMI element nodes.

GenMyModel writes XMI-namespaced attributes (``xmi:id``, ``xmi:type``) with a
namespace URI that varies across XMI versions, while UML properties (``name``,
``type``, ``memberEnd``...) and child elements (``packagedElement``,
``ownedAttribute``...) are unqualified.
"""

from typing import Iterator, Optional
from xml.etree.ElementTree import Element

XMI_NS_MARKER = "XMI"


def local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix from a tag or attribute key."""
    if tag.startswith("{"):
        return tag[tag.index("}") + 1:]
    return tag


def xmi_attr(node: Element, name: str) -> Optional[str]:
    """Read an XMI-namespaced attribute (``id``, ``type``, ``idref``...)."""
    for key, value in node.attrib.items():
        if not key.startswith("{"):
            continue
        namespace, _, attr = key[1:].partition("}")
        if attr == name and XMI_NS_MARKER in namespace.upper():
            return value
    return node.attrib.get(f"xmi:{name}")


def xmi_id(node: Element) -> Optional[str]:
    return xmi_attr(node, "id")


def xmi_type(node: Element) -> Optional[str]:
    return xmi_attr(node, "type")


def children(node: Element, tag: str) -> Iterator[Element]:
    """Direct children whose local tag name is ``tag``, in document order."""
    for child in node:
        if isinstance(child.tag, str) and local_name(child.tag) == tag:
            yield child


def first_child(node: Element, tag: str) -> Optional[Element]:
    return next(children(node, tag), None)


def get_name(node: Element) -> Optional[str]:
    """The ``name`` attribute, or None when absent or blank."""
    name = node.get("name")
    if name is None or not name.strip():
        return None
    return name.strip()


def get_comment(node: Element) -> Optional[str]:
    """Documentation attached through a nested ``ownedComment``.

    The comment text lives in a ``body`` child or a ``body`` attribute
    depending on the exporter version. Several comments are joined by
    newlines; blank comments yield None.
    """
    bodies = []
    for comment in children(node, "ownedComment"):
        body_elem = first_child(comment, "body")
        if body_elem is not None and body_elem.text:
            body = body_elem.text
        else:
            body = comment.get("body", "")
        if body.strip():
            bodies.append(body.strip())
    return "\n".join(bodies) if bodies else None
