"""Core scanning logic: normalization, token scan, and joining.

WHY: This module turns a written Icelandic word into its English-readable
approximation. It is the only place where the rule tables are applied, so
the CLI, the library API and the tests all go through the same scan.

HOW: The word is stripped and lowercased, then walked left to right with an
explicit index over its code points:
  1. If a two-character pattern at the cursor is in DIGRAPHS, emit it and
     advance by two.
  2. Otherwise look up the single character: 'f' between two vowels gives
     VOICED_F, a MONOGRAPHS entry gives its sound, anything else is kept
     as-is. Advance by one.
transliterate() joins the resulting tokens with SEPARATOR.

RULES:
- Digraphs always win over monographs at the same position.
- Matches never overlap and are never revisited.
- Indexing is over str code points, never encoded bytes, so multi-byte
  letters like 'þ' and 'ö' count as one position.
- No module-level mutable state; every call builds its own token list.
"""

import logging
from typing import List

from .models import DIGRAPH, MONOGRAPH, PASSTHROUGH, VOICED, Token
from .rules import DIGRAPHS, MONOGRAPHS, SEPARATOR, VOICED_F, VOWELS

logger = logging.getLogger(__name__)


def normalize(word: str) -> str:
    """Strip surrounding whitespace and lowercase, keeping diacritics."""
    return word.strip().lower()


def is_vowel(char: str) -> bool:
    """True if char is one of the Icelandic vowel letters in VOWELS."""
    return char in VOWELS


def _is_flanked_by_vowels(chars: str, i: int) -> bool:
    """True if position i has a vowel immediately before and after it."""
    if i <= 0 or i >= len(chars) - 1:
        return False
    return is_vowel(chars[i - 1]) and is_vowel(chars[i + 1])


def tokenize(word: str) -> List[Token]:
    """Scan a word and return the tokens the rule tables produce.

    Args:
        word: Any string. Case and surrounding whitespace are ignored.

    Returns:
        Tokens in source order. Empty for empty or whitespace-only input.
    """
    chars = normalize(word)
    n = len(chars)
    tokens = []  # type: List[Token]

    i = 0
    while i < n:
        if i + 1 < n:
            pair = chars[i:i + 2]
            sound = DIGRAPHS.get(pair)
            if sound is not None:
                tokens.append(Token(source=pair, sound=sound, rule=DIGRAPH))
                i += 2
                continue

        char = chars[i]
        if char == "f" and _is_flanked_by_vowels(chars, i):
            tokens.append(Token(source=char, sound=VOICED_F, rule=VOICED))
        elif char in MONOGRAPHS:
            tokens.append(Token(source=char, sound=MONOGRAPHS[char], rule=MONOGRAPH))
        else:
            tokens.append(Token(source=char, sound=char, rule=PASSTHROUGH))
        i += 1

    return tokens


def transliterate(word: str) -> str:
    """Approximate the English-readable pronunciation of an Icelandic word.

    Args:
        word: The word to convert, in any case, optionally padded.

    Returns:
        Tokens joined by single hyphens, e.g. "þingvellir" gives
        "th-i-n-g-v-eh-tl-i-r". Empty string for blank input.
    """
    result = SEPARATOR.join(token.sound for token in tokenize(word))
    logger.debug("Transliterated %r -> %r", word, result)
    return result
