"""
Core metamodel and model builders for YANG sources.

This module provides the main entry points for parsing YANG modules and
turning them into a SchemaContext. Validation logic is organized in the
validation/ package, and object processors are in the processors/ package.
"""

from os.path import join, dirname, abspath
from pathlib import Path

from textx import metamodel_from_file

from yang_swagger.gen_logging import get_logger
from yang_swagger.model.builder import build_schema_context as _build_context
from yang_swagger.processors import get_obj_processors
from yang_swagger.validation import (
    verify_unique_names,
    verify_leaf_types,
    verify_typedef_references,
    verify_typedef_derivation,
)

logger = get_logger(__name__)


# ------------------------------------------------------------------------------
# Constants
THIS_DIR = dirname(abspath(__file__))
GRAMMAR_DIR = join(THIS_DIR, "grammar")


# ------------------------------------------------------------------------------
# Public model builders

def build_model(model_path: str):
    """Parse & validate a YANG module from a file path."""
    path = Path(model_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    logger.debug(f"[PARSE] {path}")
    return YangMetaModel.model_from_file(str(path))


def build_model_str(model_str: str):
    """Parse & validate a YANG module from a string."""
    return YangMetaModel.model_from_str(model_str)


def build_schema_context(*models):
    """Build a SchemaContext holding the given parsed modules."""
    return _build_context(models)


def load_schema_context(*model_paths):
    """Parse YANG files and build one SchemaContext from all of them."""
    return build_schema_context(*[build_model(p) for p in model_paths])


# ------------------------------------------------------------------------------
# Model-wide validation (runs after all objects are constructed)

def model_processor(model, metamodel=None):
    """
    Main model processor - runs after parsing to perform cross-statement validation.
    Order matters: unique names -> leaf types -> typedef references -> typedef cycles
    """
    verify_unique_names(model)
    verify_leaf_types(model)
    verify_typedef_references(model)
    verify_typedef_derivation(model)


# ------------------------------------------------------------------------------
# Metamodel creation

def get_metamodel(debug: bool = False):
    """
    Load the textX metamodel from grammar/yang.tx.
    Registers object processors and model processors.
    """
    mm = metamodel_from_file(
        join(GRAMMAR_DIR, "yang.tx"),
        autokwd=True,
        auto_init_attributes=True,
        debug=debug,
    )

    # Object processors run during model construction
    mm.register_obj_processors(get_obj_processors())

    # Model processors run after the whole model is built
    mm.register_model_processor(model_processor)

    return mm


# Create the global metamodel instance
YangMetaModel = get_metamodel(debug=False)
