"""Tests for word segmentation."""

from itertools import product

import pytest

from baybayin.constants import PLACEHOLDER
from baybayin.preprocessing.segmenter import Segmenter, segment


class TestSegmenter:
    """Tests for Segmenter."""

    def test_partition_invariant(self, sample_words: list[str]) -> None:
        segmenter = Segmenter()
        for word in sample_words:
            units = segmenter.segment(word)
            assert "".join(units) == word
            assert all(1 <= len(unit) <= 3 for unit in units)

    @pytest.mark.parametrize(
        ("word", "expected"),
        [
            ("bata", ["ba", "ta"]),
            ("bukas", ["bu", "ka", "s"]),
            ("aklat", ["a", "k", "la", "t"]),
            ("tuktok", ["tuk", "to", "k"]),
            ("aalis", ["a", "a", "li", "s"]),
            ("baon", ["ba", "on"]),
            ("trabaho", ["t", "ra", "ba", "ho"]),
            (f"{PLACEHOLDER}ayon", [f"{PLACEHOLDER}a", "yo", "n"]),
            (f"a{PLACEHOLDER}", ["a", PLACEHOLDER]),
        ],
    )
    def test_units(self, word: str, expected: list[str]) -> None:
        assert Segmenter().segment(word) == expected

    def test_initial_vowel_is_lone(self) -> None:
        assert segment("isda")[0] == "i"

    def test_placeholder_only_word(self) -> None:
        assert segment(PLACEHOLDER) == [PLACEHOLDER]

    def test_final_consonant_is_lone_unit(self) -> None:
        assert segment("bukas")[-1] == "s"

    def test_coda_absorbed_before_consonant(self) -> None:
        assert segment("sampu") == ["sam", "pu"]

    def test_empty_word(self) -> None:
        assert segment("") == []


class TestSegmenterExhaustive:
    """Partition check over every short word from a mixed alphabet."""

    def test_all_short_words_partition(self) -> None:
        segmenter = Segmenter()
        for length in range(1, 6):
            for letters in product(f"ab{PLACEHOLDER}t", repeat=length):
                word = "".join(letters)
                units = segmenter.segment(word)
                assert "".join(units) == word
                assert all(1 <= len(unit) <= 3 for unit in units)
