"""
YANG type definition model.

A TypeDefinition is one node of a derivation chain. Built-in types are the
roots (base_type is None); typedefs and restricted types point at their
immediate base and carry the kind of the root they derive from, so a kind
check on any node of the chain answers "what built-in is this?".

Structural declarations (`type enumeration {...}`, `type bits {...}`,
`type union {...}`, `type leafref {...}`) are their own base, as in YANG
itself: the declaration holds the enums/bits/members/path.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, List, Optional, Union

YANG_NAMESPACE = "urn:ietf:params:xml:ns:yang:1"


@dataclass(frozen=True)
class QName:
    """Qualified name: namespace + local name (+ optional revision)."""
    namespace: str
    local_name: str
    revision: Optional[str] = None

    def __str__(self):
        if self.revision:
            return f"({self.namespace}?revision={self.revision}){self.local_name}"
        return f"({self.namespace}){self.local_name}"


class TypeKind(str, Enum):
    """Built-in YANG types. Every TypeDefinition carries one of these."""
    BINARY = "binary"
    BITS = "bits"
    BOOLEAN = "boolean"
    DECIMAL64 = "decimal64"
    EMPTY = "empty"
    ENUMERATION = "enumeration"
    IDENTITYREF = "identityref"
    INSTANCE_IDENTIFIER = "instance-identifier"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    LEAFREF = "leafref"
    STRING = "string"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    UNION = "union"


SIGNED_INTEGER_KINDS = frozenset({TypeKind.INT8, TypeKind.INT16, TypeKind.INT32, TypeKind.INT64})
UNSIGNED_INTEGER_KINDS = frozenset({TypeKind.UINT8, TypeKind.UINT16, TypeKind.UINT32, TypeKind.UINT64})

# Built-ins that are declared with their own substatements rather than derived
SELF_BASED_KINDS = frozenset({
    TypeKind.BITS,
    TypeKind.ENUMERATION,
    TypeKind.IDENTITYREF,
    TypeKind.LEAFREF,
    TypeKind.UNION,
})

BUILTIN_TYPE_NAMES = frozenset(kind.value for kind in TypeKind)


# ------------------------------------------------------------------------------
# Facets

@dataclass(frozen=True)
class LengthConstraint:
    """One `a..b` part of a length statement. max=None means unbounded."""
    min: int
    max: Optional[int]


@dataclass(frozen=True)
class RangeConstraint:
    """One `a..b` part of a range statement. None stands for min/max of the base."""
    min: Optional[Union[int, Decimal]]
    max: Optional[Union[int, Decimal]]


@dataclass(frozen=True)
class PatternConstraint:
    regular_expression: str
    error_message: Optional[str] = None


@dataclass(frozen=True)
class EnumPair:
    name: str
    value: int
    description: Optional[str] = None


@dataclass(frozen=True)
class Bit:
    name: str
    position: int
    description: Optional[str] = None


# ------------------------------------------------------------------------------
# Type definitions

@dataclass(eq=False)
class TypeDefinition:
    """A node in a type derivation chain. Compared by identity."""
    qname: QName
    kind: TypeKind
    base_type: Optional["TypeDefinition"] = None
    lengths: List[LengthConstraint] = field(default_factory=list)
    patterns: List[PatternConstraint] = field(default_factory=list)
    ranges: List[RangeConstraint] = field(default_factory=list)
    enums: List[EnumPair] = field(default_factory=list)
    bits: List[Bit] = field(default_factory=list)
    types: List["TypeDefinition"] = field(default_factory=list)
    path: Optional[str] = None
    fraction_digits: Optional[int] = None
    description: Optional[str] = None
    units: Optional[str] = None
    default: Optional[str] = None

    @property
    def is_builtin(self) -> bool:
        return self is BaseTypes.get(self.kind)

    @property
    def root(self) -> "TypeDefinition":
        """Last node of the derivation chain."""
        node = self
        while node.base_type is not None:
            node = node.base_type
        return node

    @property
    def leafref_path(self) -> Optional[str]:
        """Nearest `path` in the derivation chain (leafrefs only)."""
        node = self
        while node is not None:
            if node.path:
                return node.path
            node = node.base_type
        return None

    @property
    def effective_enums(self) -> List[EnumPair]:
        """Enum literals of the nearest node declaring any."""
        node = self
        while node is not None:
            if node.enums:
                return list(node.enums)
            node = node.base_type
        return []

    @property
    def effective_bits(self) -> List[Bit]:
        node = self
        while node is not None:
            if node.bits:
                return sorted(node.bits, key=lambda b: b.position)
            node = node.base_type
        return []

    @property
    def effective_members(self) -> List["TypeDefinition"]:
        node = self
        while node is not None:
            if node.types:
                return list(node.types)
            node = node.base_type
        return []

    def __repr__(self):
        base = self.base_type.qname.local_name if self.base_type is not None else None
        return f"TypeDefinition({self.qname.local_name!r}, kind={self.kind.value}, base={base!r})"


def derive_type(base: TypeDefinition, qname: QName, **facets) -> TypeDefinition:
    """Create a type restricting `base`; it inherits the base's kind."""
    return TypeDefinition(qname=qname, kind=base.kind, base_type=base, **facets)


class BaseTypes:
    """Singleton roots for every built-in type."""

    _BY_KIND: Dict[TypeKind, TypeDefinition] = {
        kind: TypeDefinition(qname=QName(YANG_NAMESPACE, kind.value), kind=kind)
        for kind in TypeKind
    }

    @classmethod
    def get(cls, kind: TypeKind) -> TypeDefinition:
        return cls._BY_KIND[kind]

    @classmethod
    def by_name(cls, name: str) -> Optional[TypeDefinition]:
        if name not in BUILTIN_TYPE_NAMES:
            return None
        return cls._BY_KIND[TypeKind(name)]

    @staticmethod
    def is_int64(type_def: TypeDefinition) -> bool:
        """A root type (no base) of kind int64, singleton or not."""
        return type_def.base_type is None and type_def.kind is TypeKind.INT64

    @staticmethod
    def is_uint32(type_def: TypeDefinition) -> bool:
        return type_def.base_type is None and type_def.kind is TypeKind.UINT32


# ------------------------------------------------------------------------------
# Length / range expressions

_NUMBER_RE = re.compile(r"^[-+]?(\d+(\.\d*)?|\.\d+)$")


def _split_parts(expression: str) -> List[List[str]]:
    if expression is None or not expression.strip():
        raise ValueError("empty restriction expression")
    parts = []
    for part in expression.split("|"):
        part = part.strip()
        if not part:
            raise ValueError(f"empty part in restriction expression '{expression}'")
        bounds = [b.strip() for b in part.split("..")]
        if len(bounds) > 2 or any(not b for b in bounds):
            raise ValueError(f"malformed part '{part}' in restriction expression '{expression}'")
        parts.append(bounds)
    return parts


def _parse_number(token: str):
    if not _NUMBER_RE.match(token):
        raise ValueError(f"'{token}' is not a number")
    if "." in token:
        try:
            return Decimal(token)
        except InvalidOperation as e:
            raise ValueError(f"'{token}' is not a number") from e
    return int(token)


def parse_length_expression(expression: str) -> List[LengthConstraint]:
    """
    Parse a YANG length argument, e.g. "1..10 | 20..max".

    `min` becomes 0 and `max` becomes None (unbounded).
    """
    constraints = []
    for bounds in _split_parts(expression):
        values = []
        for token in bounds:
            if token == "min":
                values.append(0)
            elif token == "max":
                values.append(None)
            else:
                number = _parse_number(token)
                if not isinstance(number, int) or number < 0:
                    raise ValueError(f"length bound '{token}' must be a non-negative integer")
                values.append(number)
        low, high = values[0], values[-1]
        if low is None:
            raise ValueError(f"length lower bound cannot be 'max' in '{expression}'")
        if high is not None and high < low:
            raise ValueError(f"length bounds out of order in '{expression}'")
        constraints.append(LengthConstraint(min=low, max=high))
    return constraints


def parse_range_expression(expression: str) -> List[RangeConstraint]:
    """Parse a YANG range argument, e.g. "-10..10 | 100" or "min..0.5"."""
    constraints = []
    for bounds in _split_parts(expression):
        values = [None if token in ("min", "max") else _parse_number(token) for token in bounds]
        low, high = values[0], values[-1]
        if low is not None and high is not None and high < low:
            raise ValueError(f"range bounds out of order in '{expression}'")
        constraints.append(RangeConstraint(min=low, max=high))
    return constraints
