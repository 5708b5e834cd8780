"""
TextX object processors for YANG sources.

Object processors run during model construction: they normalise statement
arguments and reject restrictions that can never be converted.
"""

from textx import get_location, TextXSemanticError

from yang_swagger.model.types import parse_length_expression, parse_range_expression
from yang_swagger.utils import unquote


# ------------------------------------------------------------------------------
# Restrictions

def length_restriction_obj_processor(length):
    """Parse `length` once; the parsed parts are kept on the statement."""
    length.expression = unquote(length.expression)
    try:
        length.constraints = parse_length_expression(length.expression)
    except ValueError as e:
        raise TextXSemanticError(
            f"Invalid length '{length.expression}': {e}",
            **get_location(length)
        )


def range_restriction_obj_processor(range_stmt):
    range_stmt.expression = unquote(range_stmt.expression)
    try:
        range_stmt.constraints = parse_range_expression(range_stmt.expression)
    except ValueError as e:
        raise TextXSemanticError(
            f"Invalid range '{range_stmt.expression}': {e}",
            **get_location(range_stmt)
        )


def pattern_restriction_obj_processor(pattern):
    pattern.regex = unquote(pattern.regex)


def path_obj_processor(path_stmt):
    path_stmt.path = unquote(path_stmt.path)
    if not path_stmt.path.strip():
        raise TextXSemanticError("Leafref path must not be empty.", **get_location(path_stmt))


def enum_obj_processor(enum):
    enum.name = unquote(enum.name)
    if not enum.name or enum.name != enum.name.strip():
        raise TextXSemanticError(
            f"Enum name '{enum.name}' must be non-empty without surrounding whitespace.",
            **get_location(enum)
        )


def meta_statement_obj_processor(statement):
    statement.argument = unquote(statement.argument)


# ------------------------------------------------------------------------------
# Type statements

def _ensure_unique(items, kind, type_stmt):
    seen = set()
    for item in items:
        if item.name in seen:
            raise TextXSemanticError(
                f"{kind} '{item.name}' is declared twice in type '{type_stmt.name}'.",
                **get_location(item)
            )
        seen.add(item.name)


def type_statement_obj_processor(type_stmt):
    """Enum and bit names are unique within one type statement."""
    restrictions = getattr(type_stmt, "restrictions", None) or []
    _ensure_unique(
        [r for r in restrictions if r.__class__.__name__ == "EnumStatement"], "Enum", type_stmt
    )
    _ensure_unique(
        [r for r in restrictions if r.__class__.__name__ == "BitStatement"], "Bit", type_stmt
    )

    if type_stmt.name == "leafref" and not any(
        r.__class__.__name__ == "PathStatement" for r in restrictions
    ):
        raise TextXSemanticError(
            "Type 'leafref' requires a 'path' substatement.", **get_location(type_stmt)
        )


def get_obj_processors():
    """Return object processor configuration for the metamodel."""
    return {
        "LengthRestriction": length_restriction_obj_processor,
        "RangeRestriction": range_restriction_obj_processor,
        "PatternRestriction": pattern_restriction_obj_processor,
        "PathStatement": path_obj_processor,
        "EnumStatement": enum_obj_processor,
        "MetaStatement": meta_statement_obj_processor,
        "TypeStatement": type_statement_obj_processor,
    }
