"""
Loggers for YANG parsing, schema building and type conversion.

Every module logs under "yang2swagger.<module>". Nothing is printed until
configure_logging() attaches the stderr handler, which the yang2swagger
command does from its -v/-q flags and the LOG_LEVEL setting. Library users
who never call it get the standard logging defaults.
"""

import logging
import sys

_LOGGER_NAME = "yang2swagger"


def get_logger(name: str = None) -> logging.Logger:
    """Logger named after the last component of `name`; the root converter logger for None."""
    if name is None or name == _LOGGER_NAME:
        return logging.getLogger(_LOGGER_NAME)
    # "yang_swagger.codegen.type_converter" -> "yang2swagger.type_converter"
    short = name.rsplit(".", 1)[-1]
    return logging.getLogger(f"{_LOGGER_NAME}.{short}")


def configure_logging(verbose: bool = False, quiet: bool = False, level: str = None) -> None:
    """
    Set the converter log level and attach a single stderr handler.

    `verbose` (DEBUG) shows each leafref hop and string facet; `quiet`
    (WARNING) hides the per-module progress lines. Otherwise
    `level` is used, falling back to INFO when it is not a level name.
    Calling it again only updates the level.
    """
    if verbose:
        resolved = logging.DEBUG
    elif quiet:
        resolved = logging.WARNING
    elif level:
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    else:
        resolved = logging.INFO

    root_logger = logging.getLogger(_LOGGER_NAME)
    root_logger.setLevel(resolved)

    if root_logger.handlers:
        for handler in root_logger.handlers:
            handler.setLevel(resolved)
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.setFormatter(_ConverterFormatter())
    root_logger.addHandler(handler)

    root_logger.propagate = False


class _ConverterFormatter(logging.Formatter):
    """Prefix each message with its level and the short logger name."""

    def format(self, record: logging.LogRecord) -> str:
        short = record.name.rsplit(".", 1)[-1]
        return f"[{record.levelname}] {short}: {record.getMessage()}"
