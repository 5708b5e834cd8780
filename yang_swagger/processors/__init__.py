"""
Processors module for YANG sources.

This module contains TextX object processors that run during model construction
to validate and normalise individual statements.
"""

from yang_swagger.processors.object_processors import (
    get_obj_processors,
    length_restriction_obj_processor,
    range_restriction_obj_processor,
    pattern_restriction_obj_processor,
    path_obj_processor,
    enum_obj_processor,
    meta_statement_obj_processor,
    type_statement_obj_processor,
)

__all__ = [
    "get_obj_processors",
    "length_restriction_obj_processor",
    "range_restriction_obj_processor",
    "pattern_restriction_obj_processor",
    "path_obj_processor",
    "enum_obj_processor",
    "meta_statement_obj_processor",
    "type_statement_obj_processor",
]
