"""
Human Name Parsing Module

This module splits a free-form full name into title, first, middle, last
(with prefix/base split), suffix and nickname using positional heuristics and
lookup tables rather than a grammar.

## Overview

The core functionality is provided by the `HumanNameParser` class, which runs
every input through the same pipeline:

1. **Multi-name splitting** (optional): "John and Jane Smith" becomes a chain
2. **Nickname extraction**: "(dick)", "'jack'" and '"bill"' are pulled out
3. **Comma routing**: picks the no-comma, suffix-comma or lastname-comma strategy
4. **Piece joining**: glues "Mr. and Mrs." and "van der Waals" into single pieces
5. **Classification**: assigns each piece to a component
6. **Post-processing**: "Mr. Jones" vs "Uncle Adam", inherited last names,
   prefix/base split of the last name

## Usage Examples

```python
parser = HumanNameParser()
name = parser.parse("president john 'jack' fitzgerald kennedy")
name.title     # "president"
name.nickname  # "jack"

name = parser.parse("johannes van der waals")
name.last_prefixes, name.last_base  # ("van der", "waals")
name.normalize()
name.last                           # "van der Waals"

config = NameParserConfig(parse_multiple_names=True)
name = HumanNameParser(config).parse("John D. and Catherine T. MacArthur")
name.last                  # "MacArthur"
name.additional_name.first  # "Catherine"
```

## Thread Safety

Configuration and tables are immutable, and compounds learned while joining
conjunctions live in a classifier created per `parse()` call, so one parser
can be shared between threads.
"""

from __future__ import annotations

from humanname.services import (
    HumanName,
    MultiNameSplitter,
    NameFormattingService,
    NameParserConfig,
    NameParsingService,
    NicknameExtractionService,
    PieceJoiningService,
    PostProcessingService,
    TokenClassifier,
)


class HumanNameParser:
    """Main human name parsing service."""

    def __init__(self, config: NameParserConfig | None = None):
        self._config = config or NameParserConfig.create_default()
        self._splitter = MultiNameSplitter(self._config)
        self._nickname_service = NicknameExtractionService(self._config)
        self._joining_service = PieceJoiningService(self._config)
        self._parsing_service = NameParsingService(self._config, self._joining_service)
        self._postprocessing_service = PostProcessingService(self._config)
        self._formatting_service = NameFormattingService(self._config)

    @property
    def config(self) -> NameParserConfig:
        return self._config

    def parse(self, full_name: str) -> HumanName:
        """
        Main API method: parse a full name into its components.

        In multi-name mode the returned name links to the rest of the chain
        through `additional_name`.
        """
        return self.parse_all(full_name)[0]

    def parse_all(self, full_name: str) -> list[HumanName]:
        """
        Parse a full name and return the whole chain, primary name first.

        Without multi-name mode the list always holds exactly one name.
        """
        if full_name is None:
            raise ValueError("full_name must be a string, not None")
        if not isinstance(full_name, str):
            raise TypeError(f"full_name must be a string, not {type(full_name).__name__}")

        # one overlay of learned compounds per chain
        classifier = TokenClassifier(self._config.tables)

        names = [
            HumanName(original=original, full_name=name, _formatter=self._formatting_service)
            for original, name in self._splitter.split(full_name)
        ]

        # tail first: a name's classification looks at its successor's last name
        for index in reversed(range(len(names))):
            name = names[index]
            successor = names[index + 1] if index + 1 < len(names) else None

            name.full_name, name.nickname_list = self._nickname_service.extract(name.full_name)
            self._parsing_service.classify(name, classifier, successor)
            self._postprocessing_service.fix_first_and_last(name, classifier)
            self._postprocessing_service.propagate_last_names(names, index)

        for name, successor in zip(names, names[1:] + [None]):
            name.additional_name = successor
            self._postprocessing_service.apply_preferences(name, classifier)
            self._postprocessing_service.split_last_name(name, classifier)
            # an inherited last name makes an empty name parsable
            name.is_unparsable = not name.has_components()

        return names

    def parse_batch(self, full_names: list[str]) -> list[HumanName]:
        """Parse several independent names; learned compounds are not shared between them."""
        return [self.parse(full_name) for full_name in full_names]

    def normalize(self, name: HumanName) -> HumanName:
        """Capitalize `name` in place with this parser's tables and return it."""
        self._formatting_service.normalize(name)
        return name


def parse_name(full_name: str, config: NameParserConfig | None = None) -> HumanName:
    """Parse `full_name` with a parser built from `config` (defaults when omitted)."""
    return HumanNameParser(config).parse(full_name)
