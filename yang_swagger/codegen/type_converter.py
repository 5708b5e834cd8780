"""
Conversion of YANG types to Swagger properties.
"""

from enum import Enum
from typing import Optional

from yang_swagger.codegen.data_object_builder import DataObjectBuilder
from yang_swagger.codegen.properties import (
    BooleanProperty,
    IntegerProperty,
    LongProperty,
    Property,
    RefProperty,
    StringProperty,
)
from yang_swagger.errors import ConverterConfigurationError
from yang_swagger.gen_logging import get_logger
from yang_swagger.model.schema import SchemaContext, SchemaNode
from yang_swagger.model.types import (
    SIGNED_INTEGER_KINDS,
    UNSIGNED_INTEGER_KINDS,
    BaseTypes,
    LengthConstraint,
    TypeDefinition,
    TypeKind,
)

logger = get_logger(__name__)


class BaseKind(str, Enum):
    """What a resolved type is dispatched on."""
    BOOLEAN = "boolean"
    SIGNED_INTEGER = "signed-integer"
    UNSIGNED_INTEGER = "unsigned-integer"
    BITS = "bits"
    UNION = "union"
    ENUMERATION = "enumeration"
    STRING = "string"
    UNRECOGNIZED = "unrecognized"


def classify(type_def: TypeDefinition, base_type: TypeDefinition) -> BaseKind:
    """
    Tag a type for property dispatch. Enumeration is recognised on the
    original type as well as on its resolved base.
    """
    kind = base_type.kind
    if kind is TypeKind.BOOLEAN:
        return BaseKind.BOOLEAN
    if kind in SIGNED_INTEGER_KINDS:
        return BaseKind.SIGNED_INTEGER
    if kind in UNSIGNED_INTEGER_KINDS:
        return BaseKind.UNSIGNED_INTEGER
    if kind is TypeKind.BITS:
        return BaseKind.BITS
    if kind is TypeKind.UNION:
        return BaseKind.UNION
    if TypeKind.ENUMERATION in (type_def.kind, kind):
        return BaseKind.ENUMERATION
    if kind is TypeKind.STRING:
        return BaseKind.STRING
    return BaseKind.UNRECOGNIZED


def _qname(node) -> Optional[str]:
    return str(node.qname) if node is not None else None


class TypeConverter:
    """
    Supports type conversion between YANG and Swagger.

    The schema context is fixed at construction; the data object builder can
    be set later, but must be in place before any bits, union or enumeration
    type is converted.
    """

    def __init__(self, ctx: SchemaContext, data_object_builder: DataObjectBuilder = None,
                 enum_models: bool = True):
        self.ctx = ctx
        self.data_object_builder = data_object_builder
        self.enum_models = enum_models

    def set_data_object_builder(self, data_object_builder: DataObjectBuilder) -> None:
        self.data_object_builder = data_object_builder

    def convert(self, type_def: TypeDefinition, parent: SchemaNode) -> Property:
        """
        Convert a YANG type to a Swagger property.

        Args:
            type_def: YANG type
            parent: schema node owning the type, anchors leafref paths

        Returns:
            property
        """
        resolved = self._resolve(type_def, parent)
        base_type = resolved.root
        kind = classify(type_def, base_type)

        if kind is BaseKind.BOOLEAN:
            return BooleanProperty()

        if kind in (BaseKind.SIGNED_INTEGER, BaseKind.UNSIGNED_INTEGER):
            # TODO: int8/uint8 have no dedicated Swagger format and stay int32
            if BaseTypes.is_int64(base_type) or BaseTypes.is_uint32(base_type):
                return LongProperty()
            return IntegerProperty()

        if kind in (BaseKind.BITS, BaseKind.UNION):
            if self.data_object_builder is None:
                raise ConverterConfigurationError(
                    f"no data object builder configured to register {kind.value} type {type_def.qname}"
                )
            complex_type = resolved if type_def.kind is TypeKind.LEAFREF else type_def
            return RefProperty(ref=self.data_object_builder.add_model_for_complex_types(complex_type))

        if kind is BaseKind.ENUMERATION and self.enum_to_model():
            enum_type = type_def if type_def.kind is TypeKind.ENUMERATION else resolved
            return RefProperty(ref=self.data_object_builder.add_model(enum_type))

        if base_type.kind is TypeKind.STRING:
            return self._string_property(resolved, parent)

        return StringProperty()

    def enum_to_model(self) -> bool:
        """
        Whether enumerations become registered models.

        Raises:
            ConverterConfigurationError: no data object builder configured
        """
        if self.data_object_builder is None:
            raise ConverterConfigurationError("no data object builder configured")
        return self.enum_models

    # --------------------------------------------------------------------------
    # Base type resolution

    def _resolve(self, type_def: TypeDefinition, parent: SchemaNode) -> TypeDefinition:
        """The type whose chain decides the property: the leafref target, or the type itself."""
        if type_def.kind is TypeKind.LEAFREF:
            logger.debug(f"leaf node {type_def!r} of {_qname(parent)}")
            return self.ctx.get_base_type_for_leafref(type_def, parent)
        return type_def

    # --------------------------------------------------------------------------
    # Facets

    def _string_property(self, type_def: TypeDefinition, parent: SchemaNode) -> StringProperty:
        fields = {}

        length = self._get_length_constraint(type_def)
        if length is not None:
            fields["min_length"] = int(length.min)
            if length.max is not None:
                fields["max_length"] = int(length.max)
            logger.debug(
                f"convert: set string property range for parent={_qname(parent)}, type={type_def.qname}, "
                f"min value={length.min}, max value={length.max}"
            )

        pattern = self._get_pattern(type_def)
        if pattern:
            fields["pattern"] = pattern
            logger.debug(
                f"convert: set string property pattern for parent={_qname(parent)}, type={type_def.qname}, "
                f"pattern={pattern}"
            )

        string_property = StringProperty(**fields)
        logger.debug(
            f"convert: string property for parent={_qname(parent)}, type={type_def.qname}, "
            f"property={string_property.to_swagger()}"
        )
        return string_property

    def _get_pattern(self, type_def: Optional[TypeDefinition]) -> Optional[str]:
        if type_def is None:
            return None
        if type_def.kind is TypeKind.STRING and type_def.patterns:
            pattern = type_def.patterns[0].regular_expression
            if pattern and not pattern.isspace():
                return pattern
        return self._get_pattern(type_def.base_type)

    def _get_length_constraint(self, type_def: Optional[TypeDefinition]) -> Optional[LengthConstraint]:
        if type_def is None:
            return None
        if type_def.kind is TypeKind.STRING and type_def.lengths:
            return type_def.lengths[0]
        return self._get_length_constraint(type_def.base_type)
