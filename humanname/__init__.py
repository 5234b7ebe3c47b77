"""
humanname: Human Name Parsing Library

Splits a free-form full name into title, first, middle, last, suffix and
nickname components using positional heuristics and extensible lookup tables.
"""

__version__ = "0.1.0"

__all__ = [
    "ClassificationTables",
    "HumanName",
    "HumanNameParser",
    "NameParserConfig",
    "Prefer",
    "parse_name",
]


def __getattr__(name):
    """Lazy import so `import humanname` stays cheap."""
    if name in ("HumanNameParser", "parse_name"):
        from humanname import parser

        return getattr(parser, name)
    if name in ("ClassificationTables", "HumanName", "NameParserConfig", "Prefer"):
        from humanname import types

        return getattr(types, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
