"""
Post-processing service for human name parsing.

Fixes up the raw classification: title + single name ambiguity, last names
inherited across a multi-name chain, optional preferences, and the split of
the last name into prefix words and base words.
"""
from __future__ import annotations

import logging

from humanname.services.classification import TokenClassifier
from humanname.types import HumanName, NameParserConfig, Prefer

logger = logging.getLogger("humanname")


class PostProcessingService:
    """Service for the fix-ups applied after classification."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def fix_first_and_last(self, name: HumanName, classifier: TokenClassifier) -> None:
        """
        With a title and a single name, read the name as a last name
        ("Mr. Johnson"), unless the title implies a given name ("Sir Elton").
        """
        if (
            name.title_list
            and not classifier.is_first_name_title(name.title)
            and len(name.first_list) + len(name.last_list) == 1
        ):
            name.first_list, name.last_list = name.last_list, name.first_list

    def propagate_last_names(self, names: list[HumanName], index: int) -> None:
        """
        Share last names between `names[index]` and the names chained after it.

        Often only the second of a pair carries the last name ("John D. and
        Catherine T. MacArthur"), in which case the first inherits it. For
        "Smith, John and Jane" the last name flows forward instead, possibly
        through several names.
        """
        name = names[index]
        successors = names[index + 1:]
        if not successors:
            return

        if not name.last_list:
            name.last_list = list(successors[0].last_list)
            return

        for successor in successors:
            if successor.last_list:
                break
            logger.debug("propagating last name %r onto %r", name.last, successor.original)
            successor.last_list = list(name.last_list)

    def apply_preferences(self, name: HumanName, classifier: TokenClassifier) -> None:
        """Apply the optional `Prefer` flags of the configuration."""
        if Prefer.FIRST_OVER_PREFIX not in self._config.prefer:
            return
        if not name.title_list or name.first_list:
            return

        words = self._last_name_words(name)
        prefix_count = self._count_prefixes(words, classifier)
        if prefix_count != 1 or prefix_count == len(words):
            return

        # "Mr. Del Richards": "Del" is a first name, not a prefix
        logger.debug("reading prefix %r of %r as a first name", words[0], name.original)
        name.first_list = [words[0]]
        name.last_list = [" ".join(words[1:])]

    def split_last_name(self, name: HumanName, classifier: TokenClassifier) -> None:
        """
        Split the last name into its leading prefixes and its base, for
        sorting. See https://en.wikipedia.org/wiki/Tussenvoegsel
        """
        words = self._last_name_words(name)
        prefix_count = self._count_prefixes(words, classifier)
        name.last_prefix_list = words[:prefix_count]
        name.last_base_list = words[prefix_count:]

    @staticmethod
    def _last_name_words(name: HumanName) -> list[str]:
        return [word for piece in name.last_list for word in piece.split()]

    @staticmethod
    def _count_prefixes(words: list[str], classifier: TokenClassifier) -> int:
        count = 0
        while count < len(words) and classifier.is_prefix(words[count]):
            count += 1
        return count
