"""
XMI Ingestion Domain

Turns a GenMyModel class-diagram export into parsed data:
- Element indexing (classify packaged elements by kind)
- Type resolution against the storage family's type registry
- Class, field, association and enumeration building

The library only creates module loggers. A host application opts in to
JSON log output once at startup:

    from uml_ingest.core.logging import setup_logging
    from uml_ingest.services.parser_factory import create_parser

    setup_logging()
    data = create_parser(file="diagram.xmi").parse()
"""

from .exceptions import (
    DocumentLoadError,
    InvalidModelError,
    ModelParseError,
    NullPointerException,
    UnknownElementKindError,
    UnresolvedReferenceException,
    UnsupportedEditorError,
    WrongTypeException,
)
from .genmymodel_parser import GenMyModelParser
from .indexer import ElementKind, RawElementIndex, find_elements
from .parsed_data import ParsedData
from .type_registry import DatabaseType, TypeRegistry

__all__ = [
    # Pipeline
    "GenMyModelParser",
    "ParsedData",
    "find_elements",
    "ElementKind",
    "RawElementIndex",
    # Types
    "DatabaseType",
    "TypeRegistry",
    # Errors
    "ModelParseError",
    "DocumentLoadError",
    "UnsupportedEditorError",
    "UnknownElementKindError",
    "WrongTypeException",
    "NullPointerException",
    "UnresolvedReferenceException",
    "InvalidModelError",
]
