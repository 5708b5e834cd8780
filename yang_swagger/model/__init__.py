"""YANG schema and type model."""

from .types import (
    QName,
    TypeKind,
    TypeDefinition,
    BaseTypes,
    LengthConstraint,
    RangeConstraint,
    PatternConstraint,
    EnumPair,
    Bit,
    derive_type,
    parse_length_expression,
    parse_range_expression,
)
from .schema import NodeKind, SchemaNode, Module, SchemaContext

__all__ = [
    "QName",
    "TypeKind",
    "TypeDefinition",
    "BaseTypes",
    "LengthConstraint",
    "RangeConstraint",
    "PatternConstraint",
    "EnumPair",
    "Bit",
    "derive_type",
    "parse_length_expression",
    "parse_range_expression",
    "NodeKind",
    "SchemaNode",
    "Module",
    "SchemaContext",
]
