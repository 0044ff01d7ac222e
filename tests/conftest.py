"""Shared test data for the framburdur test suite.

WHY: Several test modules check the same hand-verified words. Keeping
them in one place means a rule change only has to be reconciled once.

HOW: KNOWN_WORDS maps an Icelandic word to its expected approximation,
each worked out by hand against the rule tables. Fixtures hand out copies.

RULES:
- Every expected value was traced manually, digraphs before monographs.
- Words are given in their natural spelling (capitals, accents).
"""

from typing import Dict

import pytest

KNOWN_WORDS: Dict[str, str] = {
    "þingvellir": "th-i-n-g-v-eh-tl-i-r",
    "Reykjavík": "r-ay-k-y-a-v-ee-k",
    "Ísland": "ee-s-l-a-n-d",
    "jökull": "y-ur-k-uh-tl",
    "hver": "kv-eh-r",
    "Hafnarfjörður": "h-a-pn-a-r-f-y-ur-r-th-uh-r",
    "Eyjafjallajökull": "ay-y-a-f-y-a-tl-a-y-ur-k-uh-tl",
    "Ólafur": "oh-l-a-f-uh-r",
    "karl": "k-a-rtl",
    "barn": "b-a-rtn",
    "bein": "b-ay-n",
    "hafa": "h-a-v-a",
    "sæll": "s-eye-tl",
}


@pytest.fixture
def known_words():
    """Hand-verified word -> approximation pairs."""
    return dict(KNOWN_WORDS)
