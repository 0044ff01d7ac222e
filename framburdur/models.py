"""Data model for one emitted pronunciation token.

WHY: The plain transliterate() string hides which rule produced each
piece. The CLI's --explain mode and the tests need the breakdown, so the
scan produces Token objects and the string is joined from them.

HOW: A single frozen Token dataclass holds the source slice it consumed,
the sound it emits, and the kind of rule that matched.

RULES:
- Token.source is one character (monograph, voiced, passthrough) or two
  characters (digraph), taken from the normalized word.
- Token.sound is never empty.
- Tokens are frozen; nothing downstream mutates them.
"""

from dataclasses import dataclass

# Rule kinds
DIGRAPH = "digraph"
MONOGRAPH = "monograph"
VOICED = "voiced"
PASSTHROUGH = "passthrough"

RULE_KINDS = (DIGRAPH, MONOGRAPH, VOICED, PASSTHROUGH)


@dataclass(frozen=True)
class Token:
    """One pronounced unit of the output.

    Attributes:
        source: The normalized source characters this token consumed.
        sound: The English-readable output for those characters.
        rule: Which rule matched: "digraph", "monograph", "voiced"
              (the f-between-vowels variant) or "passthrough".
    """
    source: str
    sound: str
    rule: str

    def describe(self) -> str:
        """Render as ``source -> sound (rule)`` for explain output."""
        return "{} -> {} ({})".format(self.source, self.sound, self.rule)
