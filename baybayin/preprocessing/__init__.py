"""Preprocessing module for text normalization and segmentation."""

from baybayin.preprocessing.text import (
    TagalogTextNormalizer,
    TagalogTextNormalizerConfig,
    Token,
    TokenKind,
    normalize_text,
)
from baybayin.preprocessing.segmenter import Segmenter, segment

__all__ = [
    "TagalogTextNormalizer",
    "TagalogTextNormalizerConfig",
    "Token",
    "TokenKind",
    "normalize_text",
    "Segmenter",
    "segment",
]
