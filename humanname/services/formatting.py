"""
Name formatting service for human name processing.

This module provides context-sensitive capitalization: prefixes and
conjunctions stay lowercase ("van", "y"), known exceptions keep their
canonical form ("phd" -> "Ph.D."), Mac/Mc names get an inner capital
("macbeth" -> "MacBeth") and everything else is title-cased.
"""
from __future__ import annotations

from humanname.services.classification import TokenClassifier
from humanname.types import HumanName, NameParserConfig, lookup_key


class NameFormattingService:
    """Service for capitalizing parsed names."""

    def __init__(self, config: NameParserConfig):
        self._config = config
        self._classifier = TokenClassifier(config.tables)

    def capitalize_word(self, word: str) -> str:
        """Capitalize a single word, e.g. "smith" -> "Smith", "der" -> "der"."""
        word_key = lookup_key(word)
        if self._classifier.is_prefix(word) or self._classifier.is_conjunction(word):
            return word_key

        exception = self._config.tables.capitalization_exceptions.get(word_key)
        if exception is not None:
            return exception

        mac_match = self._config.mac_pattern.match(word)
        if mac_match:
            return self.capitalize_name_part(mac_match.group(1)) + self.capitalize_name_part(mac_match.group(2))

        return self.capitalize_name_part(word)

    def capitalize_piece(self, piece: str) -> str:
        """Capitalize every word of a (possibly compound) piece."""
        return " ".join(self.capitalize_word(word) for word in piece.split())

    def normalize(self, name: HumanName) -> None:
        """Capitalize every component of `name` in place."""
        name.title_list = [self.capitalize_piece(piece) for piece in name.title_list]
        name.first_list = [self.capitalize_piece(piece) for piece in name.first_list]
        name.middle_list = [self.capitalize_piece(piece) for piece in name.middle_list]
        # capitalize_piece keeps prefixes lowercase, so "van der waals" is safe here
        name.last_list = [self.capitalize_piece(piece) for piece in name.last_list]
        name.suffix_list = [self.capitalize_piece(piece) for piece in name.suffix_list]
        name.nickname_list = [self.capitalize_piece(piece) for piece in name.nickname_list]
        name.last_prefix_list = [self.capitalize_piece(piece) for piece in name.last_prefix_list]
        name.last_base_list = [self.capitalize_piece(piece) for piece in name.last_base_list]
        name.full_name = self.capitalize_piece(name.full_name)

    @staticmethod
    def capitalize_name_part(part: str) -> str:
        """Capitalize only the first letter: "SMITH" -> "Smith", "o'neil" -> "O'neil".

        Unlike str.title(), letters after apostrophes and hyphens are lowercased.
        """
        if not part or part.isspace():
            return ""
        return part[0].upper() + part[1:].lower()
