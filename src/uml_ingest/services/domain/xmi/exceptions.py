"""Errors raised while ingesting an XMI document.

Every error is fatal to the ingestion of the current document.
"""

from typing import Optional


class ModelParseError(Exception):
    """Raised when an XMI document cannot be turned into parsed data."""
    pass


class DocumentLoadError(ModelParseError):
    """Raised when the document is unreadable or is not well-formed XML."""
    pass


class UnsupportedEditorError(ModelParseError):
    """Raised when the document was exported by an editor with no parser."""
    pass


class UnknownElementKindError(ModelParseError):
    """Raised in strict mode for a packagedElement of an unrecognized kind."""

    def __init__(self, kind: Optional[str], position: int):
        self.kind = kind
        self.position = position
        super().__init__(f"Unknown element kind {kind!r} at position {position}")


class WrongTypeException(ModelParseError):
    """Raised when a scalar type name is absent from the active type registry."""

    def __init__(self, type_name: Optional[str], field_id: Optional[str] = None,
                 class_id: Optional[str] = None):
        self.type_name = type_name
        self.field_id = field_id
        self.class_id = class_id
        message = f"The type '{type_name}' is not supported by the selected database"
        if field_id:
            message += f" (field '{field_id}'"
            message += f" of class '{class_id}')" if class_id else ")"
        super().__init__(message)


class NullPointerException(ModelParseError):
    """Raised when a name the document must declare is missing."""

    def __init__(self, what: str, element_id: Optional[str] = None):
        self.what = what
        self.element_id = element_id
        location = f" (element '{element_id}')" if element_id else ""
        super().__init__(f"The {what} must have a name{location}")


class UnresolvedReferenceException(ModelParseError):
    """Raised when an identifier does not match any built entity."""

    def __init__(self, reference: Optional[str], kind: str, referrer: Optional[str] = None):
        self.reference = reference
        self.kind = kind
        self.referrer = referrer
        message = f"No {kind} with id '{reference}'"
        if referrer:
            message += f" (referenced by '{referrer}')"
        super().__init__(message)


class InvalidModelError(ModelParseError):
    """Raised when reading parsed data left invalid by a failed pipeline."""

    def __init__(self, cause: ModelParseError):
        self.cause = cause
        super().__init__(f"Parsed data is unusable, ingestion failed: {cause}")
