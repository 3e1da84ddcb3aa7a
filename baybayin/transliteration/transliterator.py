"""Map consonant/vowel units to Baybayin glyphs."""

import logging
from collections.abc import Iterable

from baybayin.constants import CODA_MARKS, DEFAULT_VOWEL
from baybayin.exceptions import ConfigurationError, MalformedUnitError
from baybayin.phonetics import PairKind, classify, is_consonant
from baybayin.transliteration.tables import SymbolTable

logger = logging.getLogger(__name__)


class Transliterator:
    """Unit-level Baybayin transliterator.

    Consonant glyphs carry the implicit "a"; any other vowel is written as a
    mark after the consonant. Characters missing from the table are passed
    through unchanged.
    """

    def __init__(self, table: SymbolTable | None = None, coda_mark: str = "none") -> None:
        """Initialize transliterator.

        Args:
            table: Symbol and vowel-mark lookups. Defaults to the Unicode
                Tagalog block table.
            coda_mark: Mark appended to lone consonants, one of "none",
                "virama" or "pamudpod".
        """
        if coda_mark not in CODA_MARKS:
            raise ConfigurationError(f"Unknown coda mark: {coda_mark}")

        self.table = table or SymbolTable.default()
        self.coda_mark = coda_mark
        self._coda_glyph = CODA_MARKS[coda_mark]

    def transliterate(self, unit: str) -> str:
        """Transliterate one unit of one to three characters.

        Raises:
            MalformedUnitError: If the unit is empty.
        """
        if not unit:
            raise MalformedUnitError("Empty unit reached the transliterator")

        kind = classify(unit)

        if kind is PairKind.NO_PAIR:
            return self._single(unit)
        if kind is PairKind.CONSONANT_VOWEL:
            return self._syllable(unit[0], unit[1])
        if kind is PairKind.VOWEL_CONSONANT:
            return self._syllable(unit[1], unit[0], vowel_first=True)
        return "".join(self.transliterate(piece) for piece in split_pairs(unit))

    def transliterate_word(self, units: Iterable[str]) -> str:
        return "".join(self.transliterate(unit) for unit in units)

    def _lookup(self, char: str) -> str:
        glyph = self.table.lookup(char)
        if glyph is None:
            logger.debug("No symbol for %r, passing through", char)
            return char
        return glyph

    def _single(self, char: str) -> str:
        glyph = self._lookup(char)
        if self._coda_glyph and glyph != char and is_consonant(char):
            return glyph + self._coda_glyph
        return glyph

    def _syllable(self, consonant: str, vowel: str, vowel_first: bool = False) -> str:
        """Base consonant glyph followed by the mark for ``vowel``."""
        glyph = self.table.lookup(consonant)
        if glyph is None:
            # Unknown consonant keeps its letter, the vowel is written on its own
            logger.debug("No symbol for %r, passing through", consonant)
            if vowel_first:
                return self._lookup(vowel) + consonant
            return consonant + self._lookup(vowel)
        if vowel == DEFAULT_VOWEL:
            return glyph

        mark = self.table.vowel_mark(vowel)
        if mark is None:
            logger.debug("No vowel mark for %r, passing through", vowel)
            return glyph + vowel
        return glyph + mark


def split_pairs(unit: str) -> list[str]:
    """Chunk a unit into two-character slices, down to single characters.

    Slices that still do not form a pair are split again on the next
    transliteration pass.
    """
    size = 2 if len(unit) > 2 else 1
    return [unit[i:i + size] for i in range(0, len(unit), size)]
