"""
Token classification service for human name parsing.

A `TokenClassifier` answers "is this piece a title / suffix / prefix /
conjunction / initial?" against the configured tables. Compounds learned while
joining conjunctions ("Mr. and Mrs.") go into an overlay owned by the
classifier, so they only influence the parse (or multi-name chain) that
learned them.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from humanname.types import ClassificationTables, lookup_key

logger = logging.getLogger("humanname")


def is_initial(piece: str) -> bool:
    """A single letter, optionally followed by a period: "J", "J."."""
    if not piece or len(piece) > 2:
        return False
    return piece[0].isalpha() and (len(piece) == 1 or piece[1] == ".")


class TokenClassifier:
    """Classification predicates over immutable tables plus a learned overlay."""

    def __init__(self, tables: ClassificationTables):
        self._tables = tables
        self._learned_titles: set[str] = set()
        self._learned_conjunctions: set[str] = set()

    @property
    def tables(self) -> ClassificationTables:
        return self._tables

    # ---------- predicates ----------
    def is_title(self, piece: str) -> bool:
        key = lookup_key(piece)
        return (key in self._tables.titles or key in self._learned_titles) and not is_initial(piece)

    def is_conjunction(self, piece: str) -> bool:
        key = lookup_key(piece)
        return (key in self._tables.conjunctions or key in self._learned_conjunctions) and not is_initial(piece)

    def is_prefix(self, piece: str) -> bool:
        return lookup_key(piece) in self._tables.prefixes and not is_initial(piece)

    def is_suffix(self, piece: str) -> bool:
        return lookup_key(piece) in self._tables.suffixes and not is_initial(piece)

    def are_suffixes(self, pieces: Iterable[str]) -> bool:
        """True when there is at least one piece and every piece is a suffix."""
        pieces = list(pieces)
        return bool(pieces) and all(self.is_suffix(piece) for piece in pieces)

    def is_rootname(self, piece: str) -> bool:
        """
        True if the piece is a given-name or surname word, as opposed to a
        prefix (de, abu, bin), suffix (jr, iv, cpa), title (mr, pope) or
        initial (x, e.).
        """
        key = lookup_key(piece)
        return (
            key not in self._tables.suffixes
            and key not in self._tables.prefixes
            and key not in self._tables.titles
            and key not in self._learned_titles
            and not is_initial(piece)
        )

    def is_first_name_title(self, title: str) -> bool:
        return lookup_key(title) in self._tables.first_name_titles

    # ---------- learned overlay ----------
    def learn_title(self, piece: str) -> None:
        logger.debug("learned title compound %r", piece)
        self._learned_titles.add(lookup_key(piece))

    def learn_conjunction(self, piece: str) -> None:
        logger.debug("learned conjunction compound %r", piece)
        self._learned_conjunctions.add(lookup_key(piece))
