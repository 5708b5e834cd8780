"""
Schema tree and schema context.

The schema context owns every loaded module and answers the one lookup the
type converter needs from it: where does a leafref point?
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

from yang_swagger.errors import LeafrefResolutionError
from yang_swagger.model.types import QName, TypeDefinition, TypeKind


class NodeKind(str, Enum):
    MODULE = "module"
    CONTAINER = "container"
    LIST = "list"
    LEAF = "leaf"
    LEAF_LIST = "leaf-list"


@dataclass(eq=False)
class SchemaNode:
    qname: QName
    kind: NodeKind
    parent: Optional["SchemaNode"] = None
    children: Dict[str, "SchemaNode"] = field(default_factory=dict)
    type: Optional[TypeDefinition] = None
    description: Optional[str] = None

    def add_child(self, child: "SchemaNode") -> "SchemaNode":
        child.parent = self
        self.children[child.qname.local_name] = child
        return child

    @property
    def module(self) -> "Module":
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def is_leaf(self) -> bool:
        return self.kind in (NodeKind.LEAF, NodeKind.LEAF_LIST)

    @property
    def path(self) -> str:
        """Schema path for diagnostics, e.g. /if:interfaces/interface/name."""
        steps = []
        node = self
        while node is not None and node.kind is not NodeKind.MODULE:
            steps.append(node.qname.local_name)
            node = node.parent
        if not steps:
            return "/"
        steps.reverse()
        prefix = getattr(node, "prefix", None)
        if prefix:
            steps[0] = f"{prefix}:{steps[0]}"
        return "/" + "/".join(steps)

    def iter_descendants(self) -> Iterator["SchemaNode"]:
        """Depth-first, in declaration order."""
        for child in self.children.values():
            yield child
            yield from child.iter_descendants()

    def __repr__(self):
        return f"SchemaNode({self.kind.value} {self.path})"


@dataclass(eq=False)
class Module(SchemaNode):
    kind: NodeKind = NodeKind.MODULE
    prefix: Optional[str] = None
    namespace: Optional[str] = None
    revision: Optional[str] = None
    imports: Dict[str, str] = field(default_factory=dict)  # prefix -> module name

    @property
    def name(self) -> str:
        return self.qname.local_name

    def __repr__(self):
        return f"Module({self.name!r}, prefix={self.prefix!r})"


_PREDICATE_RE = re.compile(r"\[[^\]]*\]")


class SchemaContext:
    """Read-only (once built) collection of modules."""

    def __init__(self, modules: List[Module] = None):
        self._modules: Dict[str, Module] = {}
        for module in modules or []:
            self.add_module(module)

    def add_module(self, module: Module) -> Module:
        if module.name in self._modules:
            raise ValueError(f"Module '{module.name}' is already part of the schema context.")
        self._modules[module.name] = module
        return module

    @property
    def modules(self) -> List[Module]:
        return list(self._modules.values())

    def get_module(self, name: str) -> Optional[Module]:
        return self._modules.get(name)

    def find_module_by_prefix(self, prefix: str, referrer: Optional[SchemaNode] = None) -> Optional[Module]:
        """
        Resolve a prefix the way the referring module sees it (own prefix or an
        import); without a referrer, fall back to the modules' own prefixes.
        """
        if referrer is not None:
            module = referrer.module
            if isinstance(module, Module):
                if prefix == module.prefix:
                    return module
                imported = module.imports.get(prefix)
                if imported is not None:
                    return self._modules.get(imported)
        for module in self._modules.values():
            if module.prefix == prefix:
                return module
        return None

    def find_data_node(self, path: str, parent: Optional[SchemaNode]) -> Optional[SchemaNode]:
        """
        Find the schema node `path` points at.

        Absolute paths start at a module root (the first step's prefix picks
        the module); relative paths start at `parent`. Predicates are ignored.
        """
        cleaned = _PREDICATE_RE.sub("", path).strip()
        steps = [s.strip() for s in cleaned.split("/")]

        if cleaned.startswith("/"):
            steps = [s for s in steps[1:] if s]
            if not steps:
                return None
            node = self._module_for_step(steps[0], parent)
        else:
            steps = [s for s in steps if s]
            node = parent

        for step in steps:
            if node is None:
                return None
            if step == "..":
                node = node.parent
            elif step == ".":
                continue
            else:
                local_name = step.split(":", 1)[-1]
                node = node.children.get(local_name)
        return node

    def _module_for_step(self, step: str, parent: Optional[SchemaNode]) -> Optional[SchemaNode]:
        if ":" in step:
            return self.find_module_by_prefix(step.split(":", 1)[0], parent)
        if parent is not None:
            return parent.module
        return None

    def get_base_type_for_leafref(self, leafref: TypeDefinition, parent: Optional[SchemaNode]) -> TypeDefinition:
        """
        Return the type of the leaf the leafref points at.

        `parent` is the schema node owning the leafref type and anchors
        relative paths. Leafrefs pointing at other leafrefs are followed, each
        hop resolved relative to its own target leaf.
        """
        seen = set()
        current, anchor = leafref, parent
        while True:
            path = current.leafref_path
            if path is None:
                raise LeafrefResolutionError(
                    f"Leafref type '{current.qname.local_name}' has no path statement."
                )
            if not path.strip().startswith("/") and anchor is None:
                raise LeafrefResolutionError(
                    f"Relative leafref path '{path}' needs an owning schema node.", path
                )

            target = self.find_data_node(path, anchor)
            if target is None:
                where = anchor.path if anchor is not None else "<root>"
                raise LeafrefResolutionError(
                    f"Leafref path '{path}' (from {where}) does not resolve to a schema node.", path
                )
            if not target.is_leaf or target.type is None:
                raise LeafrefResolutionError(
                    f"Leafref path '{path}' resolves to {target.kind.value} {target.path}, not a leaf.", path
                )
            if target in seen:
                raise LeafrefResolutionError(f"Circular leafref chain through {target.path}.", path)
            seen.add(target)

            if target.type.kind is not TypeKind.LEAFREF:
                return target.type
            current, anchor = target.type, target
