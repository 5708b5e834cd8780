"""
Error types raised by the YANG -> Swagger conversion layer.

Grammar and semantic problems in YANG sources are reported by textX
(TextXSyntaxError / TextXSemanticError) and are not wrapped here.
"""


class YangSwaggerError(Exception):
    """Base class for conversion errors."""


class ConverterConfigurationError(YangSwaggerError, RuntimeError):
    """A conversion needs a data object builder but none is configured."""


class LeafrefResolutionError(YangSwaggerError, LookupError):
    """A leafref path does not point at a leaf or leaf-list in the schema context."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path
