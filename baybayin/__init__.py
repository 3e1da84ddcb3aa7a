"""Baybayin: Latin-script Tagalog to Baybayin transliteration."""

from baybayin.exceptions import (
    BaybayinError,
    TextNormalizationError,
    SegmentationError,
    MalformedUnitError,
    ConfigurationError,
)
from baybayin.pipeline import BaybayinTranscriber, TransliterationResult, transcribe

__version__ = "0.1.0"
__all__ = [
    "BaybayinError",
    "TextNormalizationError",
    "SegmentationError",
    "MalformedUnitError",
    "ConfigurationError",
    "BaybayinTranscriber",
    "TransliterationResult",
    "transcribe",
]
