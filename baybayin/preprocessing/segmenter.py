"""Split normalized words into consonant/vowel units."""

import logging

from baybayin.phonetics import is_consonant, is_vowel

logger = logging.getLogger(__name__)


class Segmenter:
    """Forward scanner that groups a word into units of one to three characters.

    Consonant+vowel pairs are preferred. A consonant right after that pair
    is absorbed as a coda only when it is followed by another consonant,
    otherwise it is left to start the next unit. Units always concatenate
    back to the input word.
    """

    def segment(self, word: str) -> list[str]:
        """Split a normalized word into units.

        Args:
            word: Lowercase word without hyphens or apostrophes and with
                "ng" digraphs already collapsed.

        Returns:
            Units in left-to-right order.
        """
        units: list[str] = []
        i = 0

        while i < len(word):
            size = self._unit_size(word, i)
            units.append(word[i:i + size])
            i += size

        logger.debug("Segmented %r into %s", word, units)
        return units

    def _unit_size(self, word: str, i: int) -> int:
        char = word[i]
        lookahead = word[i + 1] if i + 1 < len(word) else ""

        if is_vowel(char):
            if i > 0 and is_consonant(lookahead) and not self._pairs_forward(word, i + 1):
                return 2
            return 1

        if is_consonant(char) and is_vowel(lookahead):
            coda = i + 2
            if coda + 1 < len(word) and is_consonant(word[coda]) and is_consonant(word[coda + 1]):
                return 3
            return 2

        # Consonant with no vowel to pair with, or a non-letter
        return 1

    @staticmethod
    def _pairs_forward(word: str, i: int) -> bool:
        """Whether the consonant at ``i`` has a vowel right after it."""
        return i + 1 < len(word) and is_vowel(word[i + 1])


_default_segmenter = Segmenter()


def segment(word: str) -> list[str]:
    """Convenience function to segment a single word."""
    return _default_segmenter.segment(word)
