"""Vowel/consonant helpers and unit pair classification."""

from enum import Enum

from baybayin.constants import VOWELS
from baybayin.exceptions import MalformedUnitError


class PairKind(Enum):
    """How the characters of a unit pair up."""

    NO_PAIR = "no-pair"
    CONSONANT_VOWEL = "consonant-vowel"
    VOWEL_CONSONANT = "vowel-consonant"
    EXCEEDS_PAIR = "exceeds-pair"


def is_vowel(char: str) -> bool:
    return char in VOWELS


def is_consonant(char: str) -> bool:
    """Any letter that is not a vowel, the nasal-velar placeholder included."""
    return char.isalpha() and not is_vowel(char)


def classify(unit: str) -> PairKind:
    """Classify a unit by its length and content.

    Two-character units that are neither consonant+vowel nor vowel+consonant
    are reported as EXCEEDS_PAIR so they get split into single characters.

    Raises:
        MalformedUnitError: If the unit is empty.
    """
    if not unit:
        raise MalformedUnitError("Cannot classify an empty unit")

    if len(unit) == 1:
        return PairKind.NO_PAIR

    if len(unit) == 2:
        first, second = unit
        if is_consonant(first) and is_vowel(second):
            return PairKind.CONSONANT_VOWEL
        if is_vowel(first) and is_consonant(second):
            return PairKind.VOWEL_CONSONANT

    return PairKind.EXCEEDS_PAIR
