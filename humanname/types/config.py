"""
Configuration types for human name parsing.

Tables and settings are immutable. Callers extend the default tables through
`ClassificationTables.with_additional_entries` and hand the result to a new
`NameParserConfig`, which keeps repeated parses free of hidden global state.
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Flag
from types import MappingProxyType

from humanname.name_constants import (
    CAPITALIZATION_EXCEPTIONS,
    CONJUNCTIONS,
    FIRST_NAME_TITLES,
    PREFIXES,
    SUFFIXES,
    TITLES,
)
from humanname.patterns import (
    AMPERSAND_REGEX,
    AND_SEPARATOR_REGEX,
    MAC_REGEX,
    NICKNAME_REGEX,
    WHITESPACE_REGEX,
)


def lookup_key(piece: str) -> str:
    """Key used for every table lookup: lowercase with periods removed."""
    return piece.lower().replace(".", "")


def _keys(entries: Iterable[str]) -> frozenset[str]:
    if isinstance(entries, str):
        raise TypeError("table entries must be an iterable of strings, not a single string")
    return frozenset(lookup_key(entry) for entry in entries)


class Prefer(Flag):
    """Optional disambiguation preferences."""

    DEFAULT = 0
    # "Mr. Del Richards": read the lone last-name prefix as a first name.
    # This flips "Mr. Van Rossum" too, so only use it when the data is known
    # to carry first names.
    FIRST_OVER_PREFIX = 1


@dataclass(frozen=True)
class ClassificationTables:
    """Immutable lexical tables consulted by every classification predicate."""

    titles: frozenset[str]
    suffixes: frozenset[str]
    prefixes: frozenset[str]
    conjunctions: frozenset[str]
    first_name_titles: frozenset[str]
    capitalization_exceptions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def create_default(cls) -> ClassificationTables:
        return cls(
            titles=_keys(TITLES),
            suffixes=_keys(SUFFIXES),
            prefixes=_keys(PREFIXES),
            conjunctions=_keys(CONJUNCTIONS),
            first_name_titles=_keys(FIRST_NAME_TITLES),
            capitalization_exceptions=MappingProxyType(dict(CAPITALIZATION_EXCEPTIONS)),
        )

    def with_additional_entries(
        self,
        *,
        titles: Iterable[str] = (),
        suffixes: Iterable[str] = (),
        prefixes: Iterable[str] = (),
        conjunctions: Iterable[str] = (),
        first_name_titles: Iterable[str] = (),
        capitalization_exceptions: Mapping[str, str] | None = None,
    ) -> ClassificationTables:
        """
        Return a copy of these tables extended with extra entries.

        Entries are normalized to lookup keys, so "Hon." and "hon" are the
        same title. Capitalization exceptions map a lowercase word to the
        exact rendering wanted, e.g. {"mba": "MBA"}.
        """
        exceptions = dict(self.capitalization_exceptions)
        for word, rendered in (capitalization_exceptions or {}).items():
            exceptions[lookup_key(word)] = rendered

        return replace(
            self,
            titles=self.titles | _keys(titles),
            suffixes=self.suffixes | _keys(suffixes),
            prefixes=self.prefixes | _keys(prefixes),
            conjunctions=self.conjunctions | _keys(conjunctions),
            first_name_titles=self.first_name_titles | _keys(first_name_titles),
            capitalization_exceptions=MappingProxyType(exceptions),
        )


@dataclass(frozen=True)
class NameParserConfig:
    """Immutable parser configuration: tables, switches and compiled patterns."""

    tables: ClassificationTables = field(default_factory=ClassificationTables.create_default)

    # Split "John and Jane Smith" into two linked names.
    parse_multiple_names: bool = False
    prefer: Prefer = Prefer.DEFAULT

    # Single-letter conjunctions are read as initials unless at least this
    # many root-name pieces are present.
    min_rootnames_for_single_letter_conjunction: int = 4

    # Precompiled regex patterns (immutable)
    nickname_pattern: re.Pattern[str] = NICKNAME_REGEX
    mac_pattern: re.Pattern[str] = MAC_REGEX
    ampersand_pattern: re.Pattern[str] = AMPERSAND_REGEX
    and_separator_pattern: re.Pattern[str] = AND_SEPARATOR_REGEX
    whitespace_pattern: re.Pattern[str] = WHITESPACE_REGEX

    @classmethod
    def create_default(cls) -> NameParserConfig:
        """Factory method for the default configuration."""
        return cls()

    def with_tables(self, tables: ClassificationTables) -> NameParserConfig:
        """Immutable update method for the lookup tables."""
        return replace(self, tables=tables)

    def with_multiple_names(self, enabled: bool = True) -> NameParserConfig:
        """Immutable update method for multi-name splitting."""
        return replace(self, parse_multiple_names=enabled)
