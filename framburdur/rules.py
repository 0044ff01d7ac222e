"""Pronunciation rule tables for Icelandic spelling.

WHY: The approximation is driven entirely by fixed data: which letter pairs
sound as a unit, what each single letter sounds like, and which letters are
vowels. Keeping the tables here, away from the scanning logic, makes them
easy to read and review as plain data.

HOW: Two tiers of source -> sound mappings. DIGRAPHS (two characters) are
always tried before MONOGRAPHS (one character). The letter 'f' has a voiced
variant, VOICED_F, used when a vowel sits on both sides of it. VOWELS is
consulted only for that check.

RULES:
- Tables are read-only (MappingProxyType / frozenset), built once at import.
- Keys are lowercase; the scanner lowercases input before lookup.
- 'g' is always hard and 'n', 'r' and other consonants have no entry, so
  they pass through unchanged. This simplification is intentional.
"""

from types import MappingProxyType
from typing import FrozenSet, Mapping

SEPARATOR = "-"

# Letter pairs pronounced as a unit. Checked before any single letter.
DIGRAPHS: Mapping[str, str] = MappingProxyType({
    "au": "oy",
    "ey": "ay",
    "ei": "ay",
    "hv": "kv",
    "ll": "tl",  # the famous Icelandic double-l
    "fn": "pn",
    "rl": "rtl",
    "rn": "rtn",
})

MONOGRAPHS: Mapping[str, str] = MappingProxyType({
    # Accented vowels
    "á": "ow",
    "é": "yeh",
    "í": "ee",
    "ý": "ee",
    "ó": "oh",
    "ú": "oo",
    "æ": "eye",
    "ö": "ur",
    # Special consonants
    "þ": "th",  # thorn, unvoiced as in "thin"
    "ð": "th",  # eth, voiced as in "the"
    "j": "y",
    "g": "g",
    "f": "f",
    # Plain vowels
    "a": "a",
    "e": "eh",
    "i": "i",
    "y": "i",
    "o": "o",
    "u": "uh",
})

# 'f' between two vowels sounds like 'v'
VOICED_F = "v"

VOWELS: FrozenSet[str] = frozenset("aáeéiíóúüyýæö")
