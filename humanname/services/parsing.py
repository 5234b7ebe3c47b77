"""
Name parsing service for human name processing.

Splits the nickname-free name on commas and routes it to one of three
strategies depending on the comma layout:

    no comma:        title first middle middle middle last suffix
    suffix comma:    title first middle last [suffix], suffix [suffix] [, suffix]
    lastname comma:  last [suffix], title first middles[,] suffix [,suffix]

Each strategy assigns the pieces to the token lists of a `HumanName`.
"""
from __future__ import annotations

import logging

from humanname.services.classification import TokenClassifier, is_initial
from humanname.services.joining import PieceJoiningService
from humanname.types import HumanName

logger = logging.getLogger("humanname")


class NameParsingService:
    """Service for assigning name pieces to title/first/middle/last/suffix."""

    def __init__(self, config, joiner: PieceJoiningService):
        self._config = config
        self._joiner = joiner

    def classify(
        self,
        name: HumanName,
        classifier: TokenClassifier,
        successor: HumanName | None = None,
    ) -> None:
        """
        Fill the component lists of `name` from its `full_name`.

        Args:
            name: the record to fill; `full_name` must already be free of nicknames
            classifier: classifier for this parse
            successor: the next name of a multi-name chain, already parsed
        """
        parts = [part.strip() for part in name.full_name.split(",")]
        parts = [part for part in parts if part]

        if not parts:
            # the input was all nickname (or nothing at all)
            logger.debug("no name parts left in %r", name.original)
        elif len(parts) == 1:
            logger.debug("parsing %r without commas", parts[0])
            self._parse_no_comma(name, parts, classifier, successor)
        elif classifier.are_suffixes(parts[1].split()):
            logger.debug("parsing %r with a suffix comma", name.full_name)
            self._parse_suffix_comma(name, parts, classifier, successor)
        else:
            logger.debug("parsing %r with a lastname comma", name.full_name)
            self._parse_lastname_comma(name, parts, classifier)

        name.is_unparsable = not name.has_components()

    def _parse_no_comma(
        self,
        name: HumanName,
        parts: list[str],
        classifier: TokenClassifier,
        successor: HumanName | None,
    ) -> None:
        pieces = self._joiner.parse_pieces(parts, classifier)

        for i, piece in enumerate(pieces):
            has_next = i < len(pieces) - 1

            # title must have a next piece, unless it's just a title
            if classifier.is_title(piece) and (has_next or len(pieces) == 1):
                # some last names look like titles: after a first or middle
                # name, read it as a last name
                if name.first_list or name.middle_list:
                    name.last_list.append(piece)
                else:
                    name.title_list.append(piece)
            elif not name.first_list:
                name.first_list.append(piece)
            elif classifier.are_suffixes(pieces[i + 1:]):
                name.last_list.append(piece)
                name.suffix_list.extend(pieces[i + 1:])
                break
            elif has_next:
                name.middle_list.append(piece)
            elif successor is None:
                # some last names look like suffixes
                if name.last_list and classifier.is_suffix(piece):
                    name.suffix_list.append(piece)
                else:
                    name.last_list.append(piece)
            elif successor.last_list and is_initial(piece):
                # "John D. and Catherine T. MacArthur": keep "D." as a middle
                # name, the last name is inherited later
                name.middle_list.append(piece)
            else:
                name.last_list.append(piece)

    def _parse_suffix_comma(
        self,
        name: HumanName,
        parts: list[str],
        classifier: TokenClassifier,
        successor: HumanName | None,
    ) -> None:
        name.suffix_list.extend(parts[1:])
        pieces = self._joiner.parse_pieces(parts[0].split(), classifier)

        for i, piece in enumerate(pieces):
            has_next = i < len(pieces) - 1

            if classifier.is_title(piece) and (has_next or len(pieces) == 1):
                name.title_list.append(piece)
            elif not name.first_list:
                name.first_list.append(piece)
            elif classifier.are_suffixes(pieces[i + 1:]):
                name.last_list.append(piece)
                name.suffix_list[:0] = pieces[i + 1:]
                break
            elif has_next:
                name.middle_list.append(piece)
            elif successor is None:
                name.last_list.append(piece)
            elif successor.last_list and is_initial(piece):
                name.middle_list.append(piece)
            else:
                name.last_list.append(piece)

    def _parse_lastname_comma(
        self,
        name: HumanName,
        parts: list[str],
        classifier: TokenClassifier,
    ) -> None:
        pieces = self._joiner.parse_pieces(parts[1].split(), classifier, 1)
        lastname_pieces = self._joiner.parse_pieces(parts[0].split(), classifier, 1)

        for piece in lastname_pieces:
            # the first one is always a last name, even if it looks like a suffix
            if name.last_list and classifier.is_suffix(piece):
                name.suffix_list.append(piece)
            else:
                name.last_list.append(piece)

        for i, piece in enumerate(pieces):
            has_next = i < len(pieces) - 1

            if classifier.is_title(piece) and (has_next or len(pieces) == 1):
                name.title_list.append(piece)
            elif not name.first_list:
                name.first_list.append(piece)
            elif classifier.is_suffix(piece):
                name.suffix_list.append(piece)
            else:
                name.middle_list.append(piece)

        name.suffix_list.extend(parts[2:])
