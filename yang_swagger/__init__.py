"""
YANG to Swagger type conversion.

    from yang_swagger.language import load_schema_context
    from yang_swagger.codegen import TypeConverter, DefinitionRegistry

    ctx = load_schema_context("interfaces.yang")
    converter = TypeConverter(ctx, DefinitionRegistry())
    prop = converter.convert(leaf.type, leaf)
"""

__version__ = "0.1.0"
