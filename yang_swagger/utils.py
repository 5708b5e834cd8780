"""Helpers for navigating parsed YANG (textX) models."""

from textx import get_model


def unquote(value):
    """Strip one level of matching quotes left around a statement argument."""
    if isinstance(value, str) and len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def statements_of(obj, class_name: str):
    """Direct substatements of `obj` whose textX class is `class_name`."""
    return [s for s in getattr(obj, "statements", None) or [] if s.__class__.__name__ == class_name]


def meta_argument(obj, keyword: str, default=None):
    """Argument of the first MetaStatement `keyword` directly under `obj`."""
    for statement in statements_of(obj, "MetaStatement"):
        if statement.keyword == keyword:
            return statement.argument
    for statement in getattr(obj, "restrictions", None) or []:
        if statement.__class__.__name__ == "MetaStatement" and statement.keyword == keyword:
            return statement.argument
    return default


def type_statement_of(obj):
    """The `type` substatement of a leaf, leaf-list or typedef, if any."""
    found = statements_of(obj, "TypeStatement")
    return found[0] if found else None


def split_type_name(type_name: str):
    """"pfx:name" -> ("pfx", "name"); "name" -> (None, "name")."""
    if ":" in type_name:
        prefix, name = type_name.split(":", 1)
        return prefix, name
    return None, type_name


def module_prefix(module):
    return meta_argument(module, "prefix")


def module_imports(module):
    """Map import prefix -> imported module name."""
    imports = {}
    for statement in statements_of(module, "MetaStatement"):
        if statement.keyword == "import" and statement.argument:
            prefix = meta_argument(statement, "prefix")
            if prefix:
                imports[prefix] = statement.argument
    return imports


def find_typedef(type_stmt, name: str):
    """
    Look `name` up among the typedefs visible from `type_stmt`: the enclosing
    containers and lists outward to the module.
    """
    node = getattr(type_stmt, "parent", None)
    while node is not None:
        for typedef in statements_of(node, "Typedef"):
            if typedef.name == name:
                return typedef
        node = getattr(node, "parent", None)
    return None


def find_top_level_typedef(module, name: str):
    for typedef in statements_of(module, "Typedef"):
        if typedef.name == name:
            return typedef
    return None


def is_local_prefix(type_stmt, prefix) -> bool:
    return prefix is None or prefix == module_prefix(get_model(type_stmt))
