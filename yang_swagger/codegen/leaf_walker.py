"""Convert every leaf of a schema context with a TypeConverter."""

from typing import Dict

from yang_swagger.codegen.properties import Property
from yang_swagger.codegen.type_converter import TypeConverter
from yang_swagger.gen_logging import get_logger
from yang_swagger.model.schema import SchemaContext

logger = get_logger(__name__)


def collect_leaf_properties(ctx: SchemaContext, converter: TypeConverter) -> Dict[str, Property]:
    """
    Map the schema path of each leaf and leaf-list to its Swagger property.

    Modules are visited in load order, nodes in declaration order.
    """
    properties: Dict[str, Property] = {}
    for module in ctx.modules:
        logger.info(f"[CONVERT] Module {module.name}")
        for node in module.iter_descendants():
            if not node.is_leaf:
                continue
            properties[node.path] = converter.convert(node.type, node)
            logger.debug(f"  [OK] {node.path}")
    return properties
