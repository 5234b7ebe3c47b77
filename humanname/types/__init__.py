"""
Types package for human name parsing.

This package contains the parsed-name result type and the immutable
configuration classes used throughout the parser.
"""

from humanname.types.config import ClassificationTables, NameParserConfig, Prefer, lookup_key
from humanname.types.results import HumanName

__all__ = [
    "ClassificationTables",
    "HumanName",
    "NameParserConfig",
    "Prefer",
    "lookup_key",
]
