"""
Typedef validation for YANG sources.

Typedef references are resolved lexically (enclosing containers and lists
outward to the module). References through a foreign prefix are checked
later, when all modules are put into one schema context.
"""

import networkx as nx
from textx import get_children_of_type, get_location, TextXSemanticError

from yang_swagger.model.types import BUILTIN_TYPE_NAMES
from yang_swagger.utils import find_typedef, is_local_prefix, split_type_name, type_statement_of


def _referenced_typedef(type_stmt):
    """The local typedef `type_stmt` names, None for built-ins and foreign prefixes."""
    prefix, name = split_type_name(type_stmt.name)
    if prefix is None and name in BUILTIN_TYPE_NAMES:
        return None
    if not is_local_prefix(type_stmt, prefix):
        return None

    typedef = find_typedef(type_stmt, name)
    if typedef is None:
        raise TextXSemanticError(
            f"Type '{type_stmt.name}' is neither a built-in type nor a typedef in scope.",
            **get_location(type_stmt),
        )
    return typedef


def verify_typedef_references(model):
    for type_stmt in get_children_of_type("TypeStatement", model):
        _referenced_typedef(type_stmt)


def build_typedef_graph(model):
    """DiGraph with an edge typedef -> typedef it derives from."""
    graph = nx.DiGraph()
    for typedef in get_children_of_type("Typedef", model):
        graph.add_node(id(typedef), obj=typedef)
        type_stmt = type_statement_of(typedef)
        if type_stmt is None:
            continue
        base = _referenced_typedef(type_stmt)
        if base is not None:
            graph.add_edge(id(typedef), id(base))
    return graph


def verify_typedef_derivation(model):
    """Typedef derivation chains must end at a built-in type."""
    graph = build_typedef_graph(model)
    try:
        cycle = nx.find_cycle(graph)
    except nx.NetworkXNoCycle:
        return

    typedefs = [graph.nodes[edge[0]]["obj"] for edge in cycle]
    names = " -> ".join(t.name for t in typedefs + typedefs[:1])
    raise TextXSemanticError(
        f"Typedef derivation cycle: {names}.",
        **get_location(typedefs[0]),
    )
