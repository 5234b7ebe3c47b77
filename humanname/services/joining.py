"""
Piece splitting and joining service for human name parsing.

Splits comma segments into whitespace-delimited pieces, then glues pieces
back together around conjunctions ("Mr. and Mrs.", "King of the Hill",
"Velasquez y Garcia") and last-name prefixes ("de la Vega", "van Buren").
"""
from __future__ import annotations

from collections.abc import Iterable

from humanname.services.classification import TokenClassifier
from humanname.types import NameParserConfig


class PieceJoiningService:
    """Service for turning comma segments into classified-ready pieces."""

    def __init__(self, config: NameParserConfig):
        self._config = config

    def parse_pieces(
        self,
        parts: Iterable[str],
        classifier: TokenClassifier,
        additional_parts_count: int = 0,
    ) -> list[str]:
        """
        Split parts on whitespace, strip stray commas and join on conjunctions
        and last-name prefixes.

        Args:
            parts: name part strings from the comma split
            classifier: classifier for this parse
            additional_parts_count: pieces from other segments that count
                toward the conjunction-joining threshold
        """
        pieces = []
        for part in parts:
            for word in part.split():
                word = word.strip(",")
                if word:
                    pieces.append(word)
        return self.join_on_conjunctions(pieces, classifier, additional_parts_count)

    def join_on_conjunctions(
        self,
        pieces: list[str],
        classifier: TokenClassifier,
        additional_parts_count: int = 0,
    ) -> list[str]:
        """
        Join conjunctions to the pieces around them, then join the first
        last-name prefix to the pieces after it.

        Returns a new list; the input list is left untouched.
        """
        pieces = list(pieces)

        # two-piece names never join on conjunctions
        if len(pieces) + additional_parts_count < 3:
            return pieces

        self._join_conjunctions(pieces, classifier)
        return self._join_prefixes(pieces, classifier)

    def _join_conjunctions(self, pieces: list[str], classifier: TokenClassifier) -> None:
        threshold = self._config.min_rootnames_for_single_letter_conjunction
        conjunctions = [piece for piece in pieces if classifier.is_conjunction(piece)]

        # right to left so earlier indexes stay valid while merging
        for conj in reversed(conjunctions):
            rootnames = sum(1 for piece in pieces if classifier.is_rootname(piece))
            if len(conj) == 1 and rootnames < threshold:
                # in a short name a single letter is more likely an initial
                continue

            if conj not in pieces:
                continue
            index = pieces.index(conj)

            if index >= len(pieces) - 1:
                # a trailing conjunction has nothing to join to
                continue

            if index == 0:
                new_piece = " ".join(pieces[0:2])
                if classifier.is_title(pieces[1]):
                    classifier.learn_conjunction(new_piece)
                else:
                    classifier.learn_title(new_piece)
                pieces[0:2] = [new_piece]
                continue

            if classifier.is_conjunction(pieces[index - 1]):
                # e.g. ["Lord", "of", "the", "Universe"]: make "the Universe"
                # a conjunction so the next pass picks it up with "of"
                new_piece = " ".join(pieces[index:index + 2])
                classifier.learn_conjunction(new_piece)
                pieces[index:index + 2] = [new_piece]
                continue

            new_piece = " ".join(pieces[index - 1:index + 2])
            if classifier.is_title(pieces[index - 1]):
                # "Mr. and Mrs." is a title when "Mr." is
                classifier.learn_title(new_piece)
            pieces[index - 1:index + 2] = [new_piece]

    def _join_prefixes(self, pieces: list[str], classifier: TokenClassifier) -> list[str]:
        # The first piece is never a prefix: "van" is either a first name or
        # a preposition depending on its position.
        start = next((i for i in range(1, len(pieces)) if classifier.is_prefix(pieces[i])), None)
        if start is None:
            return pieces

        # join everything after the prefix until the next suffix
        end = next((j for j in range(start + 1, len(pieces)) if classifier.is_suffix(pieces[j])), len(pieces))
        return [*pieces[:start], " ".join(pieces[start:end]), *pieces[end:]]
