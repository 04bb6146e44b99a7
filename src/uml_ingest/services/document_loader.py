#!/usr/bin/env python3
"""Decode XMI documents into element trees."""

import logging
from pathlib import Path
from typing import Optional, Union
from xml.etree.ElementTree import Element

# Use defusedxml for secure XML parsing (prevents XXE attacks)
import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from .domain.xmi.exceptions import DocumentLoadError
from .domain.xmi.xmi_nodes import local_name

logger = logging.getLogger(__name__)


def find_model_root(root: Element) -> Element:
    """Return the uml:Model element, unwrapping an ``xmi:XMI`` envelope.

    Raises:
        DocumentLoadError: If the document holds no model
    """
    if local_name(root.tag) == "Model":
        return root

    for child in root:
        if isinstance(child.tag, str) and local_name(child.tag) == "Model":
            return child

    raise DocumentLoadError(f"Root element is not a UML model: {root.tag}")


def load_document(path: Optional[Union[str, Path]] = None,
                  content: Optional[Union[str, bytes]] = None) -> Element:
    """Parse an XMI document from a file or from memory.

    Args:
        path: Path to the XMI file
        content: XMI document as string or bytes, used when no path is given

    Returns:
        The uml:Model element

    Raises:
        DocumentLoadError: If the document cannot be read or is not a UML model
    """
    if path is None and content is None:
        raise ValueError("Either a path or the document content is required")

    try:
        if path is not None:
            logger.info(f"Loading XMI document {path}")
            root = ET.parse(str(path)).getroot()
        else:
            root = ET.fromstring(content)
    except OSError as e:
        raise DocumentLoadError(f"Cannot read XMI document {path}: {e}")
    except ET.ParseError as e:
        raise DocumentLoadError(f"Invalid XML: {str(e)}")
    except DefusedXmlException as e:
        raise DocumentLoadError(f"Forbidden XML construct: {str(e)}")

    return find_model_root(root)
