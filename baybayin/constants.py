"""Shared constants and default Baybayin symbol tables."""

# Text constants
PLACEHOLDER = "ŋ"  # nasal-velar "ng" collapsed to one character
NG_DIGRAPH = "ng"
VOWELS = "aeiou"
DEFAULT_VOWEL = "a"
STRIPPED_MARKS = "-'"

# Standalone words expanded before digraph marking
PARTICLE_EXPANSIONS = {
    "ng": "nang",
    "mga": "manga",
}

# Unicode Tagalog block (U+1700..U+171F)
DEFAULT_SYMBOLS: dict[str, str] = {
    # Independent vowels
    "a": "\N{TAGALOG LETTER A}",
    "e": "\N{TAGALOG LETTER I}",
    "i": "\N{TAGALOG LETTER I}",
    "o": "\N{TAGALOG LETTER U}",
    "u": "\N{TAGALOG LETTER U}",
    # Consonants, each carrying the implicit "a"
    "b": "\N{TAGALOG LETTER BA}",
    "d": "\N{TAGALOG LETTER DA}",
    "g": "\N{TAGALOG LETTER GA}",
    "h": "\N{TAGALOG LETTER HA}",
    "k": "\N{TAGALOG LETTER KA}",
    "l": "\N{TAGALOG LETTER LA}",
    "m": "\N{TAGALOG LETTER MA}",
    "n": "\N{TAGALOG LETTER NA}",
    PLACEHOLDER: "\N{TAGALOG LETTER NGA}",
    "p": "\N{TAGALOG LETTER PA}",
    "r": "ᜍ",  # TAGALOG LETTER RA
    "s": "\N{TAGALOG LETTER SA}",
    "t": "\N{TAGALOG LETTER TA}",
    "w": "\N{TAGALOG LETTER WA}",
    "y": "\N{TAGALOG LETTER YA}",
}

DEFAULT_VOWEL_MARKS: dict[str, str] = {
    "e": "\N{TAGALOG VOWEL SIGN I}",
    "i": "\N{TAGALOG VOWEL SIGN I}",
    "o": "\N{TAGALOG VOWEL SIGN U}",
    "u": "\N{TAGALOG VOWEL SIGN U}",
}

# Vowel-killing marks for syllable-final consonants
CODA_MARKS: dict[str, str] = {
    "none": "",
    "virama": "\N{TAGALOG SIGN VIRAMA}",
    "pamudpod": "᜕",  # TAGALOG SIGN PAMUDPOD
}
