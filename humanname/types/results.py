"""
Result types for human name parsing.

`HumanName` holds the ordered token lists produced by the parser. Its string
accessors join a list with single spaces, so a component that was never
assigned renders as the empty string.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from humanname.services.formatting import NameFormattingService


@dataclass(eq=False)
class HumanName:
    """A parsed human name."""

    original: str
    full_name: str
    title_list: list[str] = field(default_factory=list)
    first_list: list[str] = field(default_factory=list)
    middle_list: list[str] = field(default_factory=list)
    last_list: list[str] = field(default_factory=list)
    suffix_list: list[str] = field(default_factory=list)
    nickname_list: list[str] = field(default_factory=list)
    last_prefix_list: list[str] = field(default_factory=list)
    last_base_list: list[str] = field(default_factory=list)
    is_unparsable: bool = True
    additional_name: HumanName | None = field(default=None, repr=False)
    _formatter: NameFormattingService | None = field(default=None, repr=False)

    @property
    def title(self) -> str:
        return " ".join(self.title_list)

    @property
    def first(self) -> str:
        return " ".join(self.first_list)

    @property
    def middle(self) -> str:
        return " ".join(self.middle_list)

    @property
    def last(self) -> str:
        return " ".join(self.last_list)

    @property
    def suffix(self) -> str:
        return " ".join(self.suffix_list)

    @property
    def nickname(self) -> str:
        return " ".join(self.nickname_list)

    @property
    def last_base(self) -> str:
        return " ".join(self.last_base_list)

    @property
    def last_prefixes(self) -> str:
        return " ".join(self.last_prefix_list)

    def has_components(self) -> bool:
        """True if any of title, first, middle, last, suffix or nickname holds a token."""
        return bool(
            self.title_list
            or self.first_list
            or self.middle_list
            or self.last_list
            or self.suffix_list
            or self.nickname_list
        )

    def as_dict(self, include_empty: bool = True) -> dict[str, str]:
        """
        Return the parsed name as a dictionary of its components.

        Args:
            include_empty: keep keys whose component is the empty string
        """
        components = {
            "title": self.title,
            "first": self.first,
            "middle": self.middle,
            "last": self.last,
            "lastbase": self.last_base,
            "lastprefixes": self.last_prefixes,
            "suffix": self.suffix,
            "nickname": self.nickname,
        }
        if include_empty:
            return components
        return {key: value for key, value in components.items() if value}

    def normalize(self) -> None:
        """
        Capitalize every component in place, e.g. "juan de garcia" becomes
        "Juan de Garcia". Running it again changes nothing.
        """
        formatter = self._formatter
        if formatter is None:
            from humanname.services.formatting import NameFormattingService
            from humanname.types.config import NameParserConfig

            formatter = NameFormattingService(NameParserConfig.create_default())
        formatter.normalize(self)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, HumanName):
            return NotImplemented
        # An empty nickname on either side matches any nickname.
        return (
            self.title == other.title
            and self.first == other.first
            and self.middle == other.middle
            and self.last == other.last
            and self.suffix == other.suffix
            and (not self.nickname or not other.nickname or self.nickname == other.nickname)
        )

    __hash__ = None

    def __str__(self) -> str:
        parts = [self.title, self.first, self.middle, self.last, self.suffix]
        rendered = " ".join(part for part in parts if part)
        if self.nickname:
            rendered = f"{rendered} ({self.nickname})" if rendered else f"({self.nickname})"
        return rendered
