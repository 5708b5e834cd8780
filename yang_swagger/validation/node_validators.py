"""
Data-node level validation for YANG sources.
"""

from textx import get_children_of_type, get_location, TextXSemanticError

DATA_NODE_CLASSES = ("Container", "YangList", "Leaf", "LeafList")


def _data_children(node):
    return [
        s for s in getattr(node, "statements", None) or []
        if s.__class__.__name__ in DATA_NODE_CLASSES
    ]


def _ensure_unique(objs, kind, scope_name):
    seen = set()
    for o in objs:
        if o.name in seen:
            raise TextXSemanticError(
                f"{kind} '{o.name}' is already declared in {scope_name}.",
                **get_location(o),
            )
        seen.add(o.name)


def verify_unique_names(model):
    """Sibling data nodes, and typedefs of one scope, have unique names."""
    scopes = [model]
    scopes += get_children_of_type("Container", model)
    scopes += get_children_of_type("YangList", model)

    for scope in scopes:
        scope_name = f"{scope.__class__.__name__.lower()} '{scope.name}'"
        _ensure_unique(_data_children(scope), "Data node", scope_name)
        _ensure_unique(
            [s for s in getattr(scope, "statements", None) or [] if s.__class__.__name__ == "Typedef"],
            "Typedef",
            scope_name,
        )


def verify_leaf_types(model):
    """Every leaf, leaf-list and typedef has exactly one type statement."""
    for cls in ("Leaf", "LeafList", "Typedef"):
        for obj in get_children_of_type(cls, model):
            types = [s for s in obj.statements if s.__class__.__name__ == "TypeStatement"]
            if len(types) != 1:
                raise TextXSemanticError(
                    f"{cls} '{obj.name}' must have exactly one 'type' statement, found {len(types)}.",
                    **get_location(obj),
                )
