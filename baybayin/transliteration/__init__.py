"""Transliteration module for unit-to-glyph mapping."""

from baybayin.transliteration.tables import SymbolTable
from baybayin.transliteration.transliterator import Transliterator, split_pairs

__all__ = [
    "SymbolTable",
    "Transliterator",
    "split_pairs",
]
