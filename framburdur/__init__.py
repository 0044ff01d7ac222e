"""Icelandic pronunciation approximator.

WHY: Icelandic spelling is opaque to English readers ("Þingvellir",
"Eyjafjallajökull"). This package turns a written Icelandic word into a
hyphenated, English-readable approximation of how it sounds.

HOW: A fixed two-tier rule table (digraphs before monographs) is applied
left to right over the lowercased word. The single public entry point is
transliterate(word); tokenize(word) exposes the same scan token by token.

RULES:
- transliterate() is total: every string has an output, unknown characters
  pass through unchanged.
- The rule tables are immutable and shared; calls never share mutable state.
- The mapping is a deliberate simplification, not a linguistic reference.
"""

from .core import is_vowel, normalize, tokenize, transliterate
from .models import Token
from .rules import DIGRAPHS, MONOGRAPHS, SEPARATOR, VOWELS

__version__ = "0.1.0"

__all__ = [
    "transliterate",
    "tokenize",
    "normalize",
    "is_vowel",
    "Token",
    "DIGRAPHS",
    "MONOGRAPHS",
    "VOWELS",
    "SEPARATOR",
]
