"""
Validation module for YANG sources.

Model processors run once the whole module has been parsed:
- node_validators: unique names, one type per leaf/typedef
- typedef_validators: typedef references and derivation cycles
"""

from yang_swagger.validation.node_validators import (
    verify_unique_names,
    verify_leaf_types,
)

from yang_swagger.validation.typedef_validators import (
    build_typedef_graph,
    verify_typedef_references,
    verify_typedef_derivation,
)

__all__ = [
    "verify_unique_names",
    "verify_leaf_types",
    "build_typedef_graph",
    "verify_typedef_references",
    "verify_typedef_derivation",
]
