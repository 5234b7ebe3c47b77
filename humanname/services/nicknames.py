"""
Nickname extraction service for human name parsing.

Captures the nicknames in "john 'jack' kennedy", "richard (dick) nixon" and
'william "bill" clinton', and leaves mismatched delimiters such as
'john (j" jones' alone.
"""
from __future__ import annotations

import logging

from humanname.types import NameParserConfig

logger = logging.getLogger("humanname")


class NicknameExtractionService:
    """Service for removing parenthesized and quoted nicknames from a name."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def extract(self, full_name: str) -> tuple[str, list[str]]:
        """
        Remove every nickname span from the name.

        Returns:
            (name without nicknames, nicknames in discovery order). The name
            may come back empty when the whole input was one nickname.
        """
        pattern = self._config.nickname_pattern
        nicknames: list[str] = []

        match = pattern.search(full_name)
        while match and match.group(0):
            # drop the nickname together with its delimiters, wherever it occurs
            full_name = full_name.replace(match.group(0), "")
            nickname = match.group(1) if match.group(1) is not None else match.group(3)
            nicknames.append(nickname)
            match = pattern.search(full_name)

        if nicknames:
            logger.debug("extracted nicknames %r", nicknames)
            full_name = self._config.whitespace_pattern.sub(" ", full_name).strip()

        return full_name, nicknames
