"""
Build a SchemaContext from parsed YANG modules.

Typedefs are turned into TypeDefinitions once and shared by every leaf that
uses them, so a derivation chain seen from two leaves is the same chain.
"""

from typing import Dict, List, Optional

from textx import get_location, TextXSemanticError

from yang_swagger.gen_logging import get_logger
from yang_swagger.model.schema import Module, NodeKind, SchemaContext, SchemaNode
from yang_swagger.model.types import (
    SELF_BASED_KINDS,
    BaseTypes,
    Bit,
    EnumPair,
    PatternConstraint,
    QName,
    TypeDefinition,
    TypeKind,
    derive_type,
)
from yang_swagger.utils import (
    find_top_level_typedef,
    find_typedef,
    meta_argument,
    module_imports,
    module_prefix,
    split_type_name,
    statements_of,
    type_statement_of,
)

logger = get_logger(__name__)

_NODE_KINDS = {
    "Container": NodeKind.CONTAINER,
    "YangList": NodeKind.LIST,
    "Leaf": NodeKind.LEAF,
    "LeafList": NodeKind.LEAF_LIST,
}


def _restrictions(type_stmt, class_name: str):
    return [r for r in getattr(type_stmt, "restrictions", None) or [] if r.__class__.__name__ == class_name]


def _enum_pairs(type_stmt) -> List[EnumPair]:
    """Enums in order; a missing value is one more than the highest so far."""
    pairs = []
    highest = -1
    for enum in _restrictions(type_stmt, "EnumStatement"):
        explicit = statements_of(enum, "EnumValue")
        value = explicit[0].value if explicit else highest + 1
        highest = max(highest, value)
        pairs.append(EnumPair(enum.name, value, meta_argument(enum, "description")))
    return pairs


def _bits(type_stmt) -> List[Bit]:
    bits = []
    highest = -1
    for bit in _restrictions(type_stmt, "BitStatement"):
        explicit = statements_of(bit, "BitPosition")
        position = explicit[0].position if explicit else highest + 1
        highest = max(highest, position)
        bits.append(Bit(bit.name, position, meta_argument(bit, "description")))
    return bits


class SchemaContextBuilder:
    """Turns textX module models into Module trees inside one SchemaContext."""

    def __init__(self, models):
        self.models = list(models)
        self._models_by_name = {m.name: m for m in self.models}
        self._modules: Dict[str, Module] = {}
        self._typedefs: Dict[int, TypeDefinition] = {}
        self._in_progress = set()

    def build(self) -> SchemaContext:
        ctx = SchemaContext()
        for model in self.models:
            module = self._module_node(model)
            self._modules[model.name] = module
            ctx.add_module(module)

        for model in self.models:
            module = self._modules[model.name]
            self._add_children(model, module, module.namespace)
            logger.debug(f"[BUILD] Module {module.name}: {sum(1 for _ in module.iter_descendants())} nodes")
        return ctx

    # --------------------------------------------------------------------------
    # Schema nodes

    def _module_node(self, model) -> Module:
        namespace = meta_argument(model, "namespace") or f"urn:{model.name}"
        revisions = [s.argument for s in statements_of(model, "MetaStatement") if s.keyword == "revision"]
        return Module(
            qname=QName(namespace, model.name, max(revisions) if revisions else None),
            prefix=module_prefix(model) or model.name,
            namespace=namespace,
            revision=max(revisions) if revisions else None,
            imports=module_imports(model),
            description=meta_argument(model, "description"),
        )

    def _add_children(self, stmt, node: SchemaNode, namespace: str) -> None:
        for child in getattr(stmt, "statements", None) or []:
            kind = _NODE_KINDS.get(child.__class__.__name__)
            if kind is None:
                continue
            qname = QName(namespace, child.name)
            schema_node = node.add_child(SchemaNode(
                qname=qname,
                kind=kind,
                description=meta_argument(child, "description"),
            ))
            if schema_node.is_leaf:
                schema_node.type = self._build_type(type_statement_of(child), qname)
            else:
                self._add_children(child, schema_node, namespace)

    # --------------------------------------------------------------------------
    # Types

    def _namespace_of(self, stmt) -> str:
        node = stmt
        while getattr(node, "parent", None) is not None:
            node = node.parent
        return self._modules[node.name].namespace

    def _lookup_typedef(self, type_stmt, prefix: Optional[str], name: str):
        node = type_stmt
        while getattr(node, "parent", None) is not None:
            node = node.parent
        module = self._modules[node.name]

        if prefix is None or prefix == module.prefix:
            typedef = find_typedef(type_stmt, name)
        else:
            imported = self._models_by_name.get(module.imports.get(prefix))
            typedef = find_top_level_typedef(imported, name) if imported is not None else None

        if typedef is None:
            raise TextXSemanticError(
                f"Type '{type_stmt.name}' cannot be resolved in module '{module.name}'.",
                **get_location(type_stmt),
            )
        return typedef

    def _typedef_definition(self, typedef) -> TypeDefinition:
        key = id(typedef)
        known = self._typedefs.get(key)
        if known is not None:
            return known
        if key in self._in_progress:
            raise TextXSemanticError(f"Typedef derivation cycle through '{typedef.name}'.", **get_location(typedef))

        self._in_progress.add(key)
        qname = QName(self._namespace_of(typedef), typedef.name)
        inner = self._build_type(type_statement_of(typedef), qname)
        self._in_progress.discard(key)

        definition = derive_type(
            inner,
            qname,
            description=meta_argument(typedef, "description"),
            units=meta_argument(typedef, "units"),
            default=meta_argument(typedef, "default"),
        )
        self._typedefs[key] = definition
        return definition

    @staticmethod
    def _member_qname(member_stmt, owner: QName) -> QName:
        """Union members are named after the type they restrict, not the owning leaf."""
        _, name = split_type_name(member_stmt.name)
        return QName(owner.namespace, name)

    def _build_type(self, type_stmt, owner: QName) -> TypeDefinition:
        """
        Build the type a `type` statement declares for `owner` (a leaf or
        typedef). Unrestricted references return the referenced type itself.
        """
        prefix, name = split_type_name(type_stmt.name)
        builtin = BaseTypes.by_name(name) if prefix is None else None

        if builtin is not None and builtin.kind in SELF_BASED_KINDS:
            path = _restrictions(type_stmt, "PathStatement")
            return TypeDefinition(
                qname=owner,
                kind=builtin.kind,
                enums=_enum_pairs(type_stmt),
                bits=_bits(type_stmt),
                types=[
                    self._build_type(m, self._member_qname(m, owner))
                    for m in _restrictions(type_stmt, "TypeStatement")
                ],
                path=path[0].path if path else None,
            )

        base = builtin if builtin is not None else self._typedef_definition(
            self._lookup_typedef(type_stmt, prefix, name)
        )

        facets = {}
        lengths = [c for r in _restrictions(type_stmt, "LengthRestriction") for c in r.constraints]
        if lengths:
            facets["lengths"] = lengths
        patterns = [
            PatternConstraint(r.regex, meta_argument(r, "error-message"))
            for r in _restrictions(type_stmt, "PatternRestriction")
        ]
        if patterns:
            facets["patterns"] = patterns
        ranges = [c for r in _restrictions(type_stmt, "RangeRestriction") for c in r.constraints]
        if ranges:
            facets["ranges"] = ranges
        digits = _restrictions(type_stmt, "FractionDigits")
        if digits:
            facets["fraction_digits"] = digits[0].digits
        if base.kind is TypeKind.ENUMERATION and _restrictions(type_stmt, "EnumStatement"):
            facets["enums"] = _enum_pairs(type_stmt)
        if base.kind is TypeKind.BITS and _restrictions(type_stmt, "BitStatement"):
            facets["bits"] = _bits(type_stmt)

        if not facets:
            return base
        return derive_type(base, owner, **facets)


def build_schema_context(models) -> SchemaContext:
    """Build one SchemaContext from parsed YANG module models."""
    return SchemaContextBuilder(models).build()
