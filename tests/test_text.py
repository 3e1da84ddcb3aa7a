"""Tests for text normalization."""

import pytest

from baybayin.constants import PLACEHOLDER
from baybayin.preprocessing.text import (
    TagalogTextNormalizer,
    TagalogTextNormalizerConfig,
    Token,
    TokenKind,
    normalize_text,
)


def texts(tokens: list[Token]) -> list[str]:
    return [token.text for token in tokens]


class TestTagalogTextNormalizer:
    """Tests for the normalization steps."""

    def test_lowercase(self) -> None:
        normalizer = TagalogTextNormalizer()
        assert normalizer.normalize_to_string("BATA") == "bata"

    def test_standalone_ng_expanded(self) -> None:
        normalizer = TagalogTextNormalizer()
        assert normalizer.normalize_to_string("ng bata") == f"na{PLACEHOLDER} bata"

    def test_particle_expansion_runs_before_digraph_marking(self) -> None:
        normalizer = TagalogTextNormalizer()
        assert normalizer.expand_particles("ng bata") == "nang bata"
        assert normalizer.expand_particles("bata ng") == "bata nang"
        assert normalizer.expand_particles("kain ng kain") == "kain nang kain"

    def test_mga_expanded(self) -> None:
        normalizer = TagalogTextNormalizer()
        assert normalizer.expand_particles("ang mga bata") == "ang manga bata"
        assert normalizer.expand_particles("mga") == "manga"

    def test_embedded_ng_not_expanded(self) -> None:
        normalizer = TagalogTextNormalizer()
        assert normalizer.expand_particles("ngayon") == "ngayon"
        assert normalizer.expand_particles("ang") == "ang"
        assert normalizer.normalize_to_string("ngayon") == f"{PLACEHOLDER}ayon"

    def test_embedded_mga_not_expanded(self) -> None:
        normalizer = TagalogTextNormalizer()
        assert normalizer.expand_particles("mgaa") == "mgaa"

    def test_digraph_collapsed_inside_words(self) -> None:
        normalizer = TagalogTextNormalizer()
        assert normalizer.mark_nasal_velar("pangalan") == f"pa{PLACEHOLDER}alan"
        assert normalizer.mark_nasal_velar("ang") == f"a{PLACEHOLDER}"

    def test_digraph_next_to_punctuation_collapsed(self) -> None:
        normalizer = TagalogTextNormalizer()
        tokens = normalizer.normalize("ng,")
        assert texts(tokens) == [PLACEHOLDER, ","]
        assert tokens[0].is_word

    def test_hyphens_and_apostrophes_stripped(self) -> None:
        normalizer = TagalogTextNormalizer()
        assert normalizer.normalize_to_string("mag-aral") == "magaral"
        assert normalizer.normalize_to_string("'wag") == "wag"

    def test_end_to_end_tokens(self) -> None:
        tokens = normalize_text("ang mga bata")
        assert texts(tokens) == [f"a{PLACEHOLDER}", " ", f"ma{PLACEHOLDER}a", " ", "bata"]
        assert [token.kind for token in tokens] == [
            TokenKind.WORD,
            TokenKind.SEPARATOR,
            TokenKind.WORD,
            TokenKind.SEPARATOR,
            TokenKind.WORD,
        ]

    def test_separators_preserved(self) -> None:
        tokens = normalize_text("oo,  hindi!\n")
        assert texts(tokens) == ["oo", ",  ", "hindi", "!\n"]
        assert "".join(texts(tokens)) == "oo,  hindi!\n"

    def test_digits_are_separators(self) -> None:
        tokens = normalize_text("ika 3")
        assert texts(tokens) == ["ika", " 3"]
        assert not tokens[1].is_word

    def test_empty_text(self) -> None:
        assert normalize_text("") == []

    def test_foreign_letters_kept_in_words(self) -> None:
        tokens = normalize_text("café")
        assert texts(tokens) == ["café"]

    def test_no_particle_expansion(self) -> None:
        config = TagalogTextNormalizerConfig(expand_particles=False)
        normalizer = TagalogTextNormalizer(config)
        assert normalizer.normalize_to_string("ng bata") == "ng bata"

    def test_from_config(self) -> None:
        normalizer = TagalogTextNormalizer.from_config({"expand_particles": False})
        assert normalizer.config.expand_particles is False


class TestNormalizeTextFunction:
    """Tests for convenience function."""

    @pytest.mark.parametrize("text", ["Kumain ka na?", "Mabuhay!", "ng"])
    def test_tokens_are_non_empty(self, text: str) -> None:
        tokens = normalize_text(text)
        assert tokens
        assert all(token.text for token in tokens)
