"""CLI scripts for Baybayin."""

from baybayin.scripts.transliterate import main as transliterate_main

__all__ = [
    "transliterate_main",
]
