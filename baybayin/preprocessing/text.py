"""Tagalog orthographic normalization and tokenization."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Self

from baybayin.constants import NG_DIGRAPH, PARTICLE_EXPANSIONS, PLACEHOLDER, STRIPPED_MARKS
from baybayin.exceptions import TextNormalizationError

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    WORD = "word"
    SEPARATOR = "separator"


@dataclass(frozen=True)
class Token:
    """A span of normalized text: either a word or a separator run."""

    text: str
    kind: TokenKind

    @property
    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD


@dataclass
class TagalogTextNormalizerConfig:
    """Configuration for text normalization."""

    expand_particles: bool = True


class TagalogTextNormalizer:
    """Normalizer for Latin-script Tagalog text.

    Steps run in a fixed order, each depending on the previous one:
    lowercase, expand the standalone particles "ng" and "mga", collapse
    the remaining "ng" digraphs to a placeholder, strip hyphens and
    apostrophes, then split into word and separator tokens.
    """

    def __init__(self, config: TagalogTextNormalizerConfig | None = None) -> None:
        """Initialize normalizer.

        Args:
            config: Normalization configuration.
        """
        self.config = config or TagalogTextNormalizerConfig()

        # Standalone = whitespace or text edge on both sides
        self._particle_patterns = [
            (re.compile(rf"(?<!\S){re.escape(word)}(?!\S)"), expansion)
            for word, expansion in PARTICLE_EXPANSIONS.items()
        ]
        self._digraph_pattern = re.compile(rf"(?<=\S){NG_DIGRAPH}|{NG_DIGRAPH}(?=\S)")
        self._marks_pattern = re.compile(f"[{re.escape(STRIPPED_MARKS)}]")
        self._token_pattern = re.compile(r"(?P<word>[^\W\d_]+)|(?P<separator>[\W\d_]+)")

    def normalize(self, text: str) -> list[Token]:
        """Normalize Tagalog text into an ordered token stream.

        Args:
            text: Input text.

        Returns:
            Word and separator tokens in their original order.

        Raises:
            TextNormalizationError: If normalization fails.
        """
        try:
            return self.tokenize(self.normalize_to_string(text))
        except TextNormalizationError:
            raise
        except Exception as e:
            raise TextNormalizationError(f"Normalization failed: {e}") from e

    def normalize_to_string(self, text: str) -> str:
        """Apply every step except tokenization."""
        text = self.lowercase(text)

        if self.config.expand_particles:
            text = self.expand_particles(text)

        text = self.mark_nasal_velar(text)
        return self.strip_marks(text)

    def lowercase(self, text: str) -> str:
        return text.lower()

    def expand_particles(self, text: str) -> str:
        """Expand standalone "ng" to "nang" and "mga" to "manga"."""
        for pattern, expansion in self._particle_patterns:
            text = pattern.sub(expansion, text)
        return text

    def mark_nasal_velar(self, text: str) -> str:
        """Collapse every "ng" touching another character to the placeholder."""
        return self._digraph_pattern.sub(PLACEHOLDER, text)

    def strip_marks(self, text: str) -> str:
        return self._marks_pattern.sub("", text)

    def tokenize(self, text: str) -> list[Token]:
        """Split text into maximal runs of letters and of everything else."""
        tokens = [
            Token(match.group(), TokenKind[match.lastgroup.upper()])
            for match in self._token_pattern.finditer(text)
        ]
        logger.debug("Tokenized %r into %d tokens", text, len(tokens))
        return tokens

    @classmethod
    def from_config(cls, config_dict: dict) -> Self:
        """Create normalizer from configuration dictionary."""
        config = TagalogTextNormalizerConfig(**config_dict)
        return cls(config=config)


def normalize_text(text: str, expand_particles: bool = True) -> list[Token]:
    """Convenience function for text normalization.

    Args:
        text: Input text.
        expand_particles: Whether to expand the standalone "ng" and "mga".

    Returns:
        Normalized tokens.
    """
    config = TagalogTextNormalizerConfig(expand_particles=expand_particles)
    return TagalogTextNormalizer(config).normalize(text)
