"""End-to-end Tagalog to Baybayin transcription."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from baybayin.config import BaybayinConfig
from baybayin.preprocessing.segmenter import Segmenter
from baybayin.preprocessing.text import TagalogTextNormalizer, TagalogTextNormalizerConfig
from baybayin.transliteration.tables import SymbolTable
from baybayin.transliteration.transliterator import Transliterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransliterationResult:
    """Original text paired with its Baybayin rendering, for side-by-side display."""

    original: str
    baybayin: str

    def __str__(self) -> str:
        return self.baybayin


class BaybayinTranscriber:
    """Runs normalization, segmentation and transliteration over whole texts.

    Holds no per-call state, so one instance can be shared between threads.
    """

    def __init__(
        self,
        config: BaybayinConfig | None = None,
        table: SymbolTable | None = None,
    ) -> None:
        """Initialize transcriber.

        Args:
            config: Transliteration configuration.
            table: Base symbol table; config overrides are applied on top.
        """
        self.config = config or BaybayinConfig()

        table = (table or SymbolTable.default()).with_overrides(
            symbols=self.config.symbol_overrides,
            vowel_marks=self.config.vowel_mark_overrides,
        )

        self.normalizer = TagalogTextNormalizer(
            TagalogTextNormalizerConfig(expand_particles=self.config.expand_particles)
        )
        self.segmenter = Segmenter()
        self.transliterator = Transliterator(table, coda_mark=self.config.coda_mark)

    def transcribe(self, text: str) -> str:
        """Transcribe Latin-script Tagalog into Baybayin.

        Args:
            text: Input text.

        Returns:
            Baybayin text with separators kept verbatim.
        """
        parts: list[str] = []
        for token in self.normalizer.normalize(text):
            if token.is_word:
                units = self.segmenter.segment(token.text)
                parts.append(self.transliterator.transliterate_word(units))
            else:
                parts.append(token.text)

        result = "".join(parts)
        logger.debug("Transcribed %r -> %r", text, result)
        return result

    def transcribe_pair(self, text: str) -> TransliterationResult:
        return TransliterationResult(original=text, baybayin=self.transcribe(text))

    def transcribe_lines(self, lines: Iterable[str]) -> Iterator[TransliterationResult]:
        for line in lines:
            yield self.transcribe_pair(line)


# Module-level instance for convenience
_default_transcriber: BaybayinTranscriber | None = None


def get_transcriber() -> BaybayinTranscriber:
    """Get or create the default transcriber instance."""
    global _default_transcriber
    if _default_transcriber is None:
        _default_transcriber = BaybayinTranscriber()
    return _default_transcriber


def transcribe(text: str) -> str:
    """Convenience function to transcribe text with the default settings.

    Args:
        text: Latin-script Tagalog text.

    Returns:
        Baybayin text.
    """
    return get_transcriber().transcribe(text)
