"""
Registration of complex and enumerated YANG types as Swagger definitions.

The type converter only needs a name back for every bits, union or
enumeration type it meets; DataObjectBuilder is that contract and
DefinitionRegistry the implementation used by the CLI.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Dict

from yang_swagger.gen_logging import get_logger
from yang_swagger.model.types import TypeDefinition, TypeKind

logger = get_logger(__name__)


class DataObjectBuilder(ABC):
    """Registers models for types that cannot be expressed as a primitive property."""

    @abstractmethod
    def add_model_for_complex_types(self, type_def: TypeDefinition) -> str:
        """Register a bits or union type; return the definition name."""

    @abstractmethod
    def add_model(self, enum_type: TypeDefinition) -> str:
        """Register an enumeration type; return the definition name."""


def definition_name(local_name: str) -> str:
    """CamelCase a YANG identifier: "interface-state" -> "InterfaceState"."""
    parts = [p for p in re.split(r"[-_.]", local_name) if p]
    return "".join(p[:1].upper() + p[1:] for p in parts) or "Model"


def _member_label(member: TypeDefinition) -> str:
    if member.is_builtin or member.base_type is None:
        return member.kind.value
    return member.qname.local_name


class DefinitionRegistry(DataObjectBuilder):
    """
    Accumulates Swagger definitions in registration order.

    Registering the same type node again returns the name it got the first
    time. Another node that yields an identical definition under the same
    name shares it; a conflicting one gets a numeric suffix.
    """

    def __init__(self):
        self._definitions: Dict[str, Dict[str, Any]] = {}
        self._names: Dict[TypeDefinition, str] = {}

    @property
    def definitions(self) -> Dict[str, Dict[str, Any]]:
        return dict(self._definitions)

    def add_model_for_complex_types(self, type_def: TypeDefinition) -> str:
        kind = type_def.root.kind
        if kind is TypeKind.BITS:
            return self._register(type_def, self._bits_model(type_def))
        if kind is TypeKind.UNION:
            return self._register(type_def, self._union_model(type_def))
        raise ValueError(
            f"Type '{type_def.qname.local_name}' is {kind.value}; only bits and union are complex types."
        )

    def add_model(self, enum_type: TypeDefinition) -> str:
        if enum_type.kind is not TypeKind.ENUMERATION:
            raise ValueError(f"Type '{enum_type.qname.local_name}' is not an enumeration.")
        return self._register(enum_type, self._enum_model(enum_type))

    # --------------------------------------------------------------------------

    def _register(self, type_def: TypeDefinition, model: Dict[str, Any]) -> str:
        known = self._names.get(type_def)
        if known is not None:
            return known

        base_name = definition_name(type_def.qname.local_name)
        name, counter = base_name, 1
        while name in self._definitions and self._definitions[name] != model:
            counter += 1
            name = f"{base_name}{counter}"

        if name not in self._definitions:
            self._definitions[name] = model
            logger.debug(f"[MODEL] Registered {name} for {type_def.qname}")
        self._names[type_def] = name
        return name

    @staticmethod
    def _with_description(model: Dict[str, Any], type_def: TypeDefinition) -> Dict[str, Any]:
        if type_def.description:
            model["description"] = type_def.description
        return model

    def _enum_model(self, enum_type: TypeDefinition) -> Dict[str, Any]:
        model = {
            "type": "string",
            "enum": [e.name for e in enum_type.effective_enums],
        }
        return self._with_description(model, enum_type)

    def _bits_model(self, bits_type: TypeDefinition) -> Dict[str, Any]:
        model = {
            "type": "object",
            "properties": {b.name: {"type": "boolean"} for b in bits_type.effective_bits},
        }
        return self._with_description(model, bits_type)

    def _union_model(self, union_type: TypeDefinition) -> Dict[str, Any]:
        model = {
            "type": "string",
            "x-union-member-types": [_member_label(m) for m in union_type.effective_members],
        }
        return self._with_description(model, union_type)
