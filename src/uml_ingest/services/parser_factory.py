#!/usr/bin/env python3
"""Create the parser matching the editor that exported a document."""

import logging
from pathlib import Path
from typing import Optional, Union
from xml.etree.ElementTree import Element

from .document_loader import load_document
from .domain.xmi.exceptions import UnsupportedEditorError
from .domain.xmi.genmymodel_parser import GenMyModelParser
from .domain.xmi.xmi_nodes import children

logger = logging.getLogger(__name__)

PARSERS = {
    GenMyModelParser.editor: GenMyModelParser,
}

# eAnnotations sources written by other modeling tools
FOREIGN_EDITOR_MARKERS = {
    "Objing": "modelio",
    "http://www.obeo.fr/dsl/viewpoint": "umldesigner",
}


def detect_editor(root: Element) -> str:
    """Name of the editor that exported the model.

    GenMyModel leaves no marker of its own, so a model without another
    tool's annotation is taken as a GenMyModel export.
    """
    for annotation in children(root, "eAnnotations"):
        source = annotation.get("source", "")
        for marker, editor in FOREIGN_EDITOR_MARKERS.items():
            if marker in source:
                return editor
    return GenMyModelParser.editor


def create_parser(
    file: Optional[Union[str, Path]] = None,
    content: Optional[Union[str, bytes]] = None,
    database_type: Optional[str] = None,
    editor: Optional[str] = None,
    **parser_options,
) -> GenMyModelParser:
    """Load a document and return a parser ready to run on it.

    Args:
        file: Path to the XMI file
        content: XMI document, used when no file is given
        database_type: Target storage family ('sql', 'mongodb', 'cassandra')
        editor: Skip detection and use this editor's parser
        **parser_options: Passed through to the parser (type_registry, strict_element_kinds)

    Raises:
        DocumentLoadError: If the document cannot be decoded
        UnsupportedEditorError: If no parser handles the exporting editor
    """
    root = load_document(path=file, content=content)
    editor = (editor or detect_editor(root)).lower()

    parser_class = PARSERS.get(editor)
    if parser_class is None:
        supported = ", ".join(sorted(PARSERS))
        raise UnsupportedEditorError(f"Documents exported by {editor} are not supported (supported: {supported})")

    document_name = Path(file).name if file is not None else None
    logger.info(f"Created {editor} parser for {document_name or 'in-memory document'}")
    return parser_class(root, database_type=database_type, document_name=document_name, **parser_options)
