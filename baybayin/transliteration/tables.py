"""Read-only symbol and vowel-mark tables."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

from baybayin.constants import DEFAULT_SYMBOLS, DEFAULT_VOWEL_MARKS


@dataclass(frozen=True)
class SymbolTable:
    """Character-to-glyph lookups shared by every transliteration call.

    Attributes:
        symbols: Single consonant/vowel character -> base glyph.
        vowel_marks: Vowel character -> combining mark. The implicit vowel
            has no entry.
    """

    symbols: Mapping[str, str] = field(default_factory=dict)
    vowel_marks: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", MappingProxyType(dict(self.symbols)))
        object.__setattr__(self, "vowel_marks", MappingProxyType(dict(self.vowel_marks)))

    def lookup(self, char: str) -> str | None:
        return self.symbols.get(char)

    def vowel_mark(self, char: str) -> str | None:
        return self.vowel_marks.get(char)

    def with_overrides(
        self,
        symbols: Mapping[str, str] | None = None,
        vowel_marks: Mapping[str, str] | None = None,
    ) -> Self:
        """Return a new table with the given entries replaced or added."""
        return type(self)(
            symbols={**self.symbols, **(symbols or {})},
            vowel_marks={**self.vowel_marks, **(vowel_marks or {})},
        )

    @classmethod
    def default(cls) -> Self:
        """Table covering the Unicode Tagalog block letters."""
        return cls(symbols=DEFAULT_SYMBOLS, vowel_marks=DEFAULT_VOWEL_MARKS)
