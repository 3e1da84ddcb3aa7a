"""Custom exceptions for Baybayin transliteration."""

class BaybayinError(Exception):
    """Base exception for all Baybayin errors."""

class TextNormalizationError(BaybayinError):
    """Raised when text normalization fails."""

class SegmentationError(BaybayinError):
    """Raised when a word cannot be split into phonetic units."""

class MalformedUnitError(SegmentationError):
    """Raised when an empty or otherwise impossible unit reaches the transliterator.

    This signals a broken partition in the segmenter, not unsupported input.
    """


class ConfigurationError(BaybayinError):
    """Raised when configuration is invalid."""
