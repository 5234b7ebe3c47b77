"""
Multi-name splitting service for human name parsing.

"John D. and Catherine T. MacArthur" holds two names. The splitter cuts the
raw string at the first "&" (or, failing that, the first " and ") and keeps
cutting the remainder, producing the chain as a flat list.
"""
from __future__ import annotations

import logging

from humanname.types import NameParserConfig

logger = logging.getLogger("humanname")


class MultiNameSplitter:
    """Service for cutting a raw string into a chain of names."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def split_once(self, raw_name: str) -> tuple[str, str | None]:
        """
        Cut at the first separator.

        Returns:
            (primary, remainder); remainder is None when no separator exists
        """
        match = self._config.ampersand_pattern.search(raw_name)
        if match is None:
            match = self._config.and_separator_pattern.search(raw_name)
        if match is None:
            return raw_name, None
        return raw_name[:match.start()], raw_name[match.end():]

    def split(self, raw_name: str) -> list[tuple[str, str]]:
        """
        Return the chain as (original, name) pairs, primary first.

        `original` is the text the name was cut from, so it still contains
        every name chained after it.
        """
        if not self._config.parse_multiple_names:
            return [(raw_name, raw_name)]

        names = []
        remainder: str | None = raw_name
        while remainder is not None:
            original = remainder
            primary, remainder = self.split_once(remainder)
            names.append((original, primary))

        if len(names) > 1:
            logger.debug("split %r into %d names", raw_name, len(names))
        return names
