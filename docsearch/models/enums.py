"""Enumeration types for docsearch."""

from enum import StrEnum


class EntityType(StrEnum):
    """Categories of documented entities that carry a ranking weight."""

    LIBRARY = "library"
    CLASS = "class"
    TYPEDEF = "typedef"
    METHOD = "method"
    ACCESSOR = "accessor"
    OPERATOR = "operator"
    PROPERTY = "property"
    CONSTRUCTOR = "constructor"
    UNKNOWN = "unknown"  # Anything the index tags with an unrecognized type


class IndexState(StrEnum):
    """Lifecycle of the index store."""

    UNLOADED = "unloaded"
    LOADED = "loaded"
