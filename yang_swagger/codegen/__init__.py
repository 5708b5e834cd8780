"""Swagger property generation for YANG types."""

from .properties import (
    Property,
    BooleanProperty,
    BaseIntegerProperty,
    IntegerProperty,
    LongProperty,
    StringProperty,
    RefProperty,
)
from .data_object_builder import DataObjectBuilder, DefinitionRegistry, definition_name
from .type_converter import TypeConverter, BaseKind, classify
from .leaf_walker import collect_leaf_properties

__all__ = [
    "Property",
    "BooleanProperty",
    "BaseIntegerProperty",
    "IntegerProperty",
    "LongProperty",
    "StringProperty",
    "RefProperty",
    "DataObjectBuilder",
    "DefinitionRegistry",
    "definition_name",
    "TypeConverter",
    "BaseKind",
    "classify",
    "collect_leaf_properties",
]
