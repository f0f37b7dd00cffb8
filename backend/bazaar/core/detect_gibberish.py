"""Gibberish Detection — flags keyboard mashes instead of real words.

Invariants:
    - PURE: same text always yields the same reason (no IO, no randomness)
    - Rules run in a fixed order; the first match is returned (short-circuit)
    - Returns None when nothing is flagged, never raises

Design Decisions:
    - Heuristic over statistical model: thresholds (7-letter cluster, 45% rare
      density, 8/10 char dictionary cut-offs) are product constants, kept exact
    - Per-word rules see every token longer than 4 alphanumerics, digits
      included: "15000" has no vowel and is flagged like any other token
"""

import re

from bazaar.core.domain_types import ReasonCode
from bazaar.core.word_lists import KNOWN_ROOTS

CONSONANTS = "bcdfghjklmnpqrstvwxz" + "бвгґджзйклмнпрстфхцчшщ"
VOWELS = frozenset("aeiouy" + "аеёиоуыэюяіїє")
RARE_CHARS = frozenset("щшъыїєґ")

CLUSTER_LENGTH = 7
MIN_WORD_LENGTH = 4
RARE_DENSITY_THRESHOLD = 0.45
DICTIONARY_MIN_LENGTH = 8
LONG_WORD_LENGTH = 10

_CLUSTER_RE = re.compile(
    f"[{CONSONANTS}]{{{CLUSTER_LENGTH},}}", re.IGNORECASE,
)


def _words(text: str) -> list[str]:
    """Whitespace tokens reduced to their alphanumeric characters."""
    words = []
    for raw in text.split():
        word = "".join(ch for ch in raw if ch.isalnum())
        if len(word) > MIN_WORD_LENGTH:
            words.append(word.lower())
    return words


def has_consonant_cluster(text: str) -> bool:
    return bool(_CLUSTER_RE.search(text))


def has_vowel(word: str) -> bool:
    return any(ch in VOWELS for ch in word.lower())


def rare_char_density(word: str) -> float:
    if not word:
        return 0.0
    rare = sum(1 for ch in word.lower() if ch in RARE_CHARS)
    return rare / len(word)


def contains_known_root(text: str) -> bool:
    lowered = text.lower()
    return any(root in lowered for root in KNOWN_ROOTS)


def detect_gibberish(text: str) -> ReasonCode | None:
    """Return the first gibberish rule the text trips, or None."""
    if not text:
        return None
    text = text.strip()

    if has_consonant_cluster(text):
        return ReasonCode.GIBBERISH_CLUSTER

    words = _words(text)
    for word in words:
        if not has_vowel(word):
            return ReasonCode.GIBBERISH_NO_VOWELS

    for word in words:
        if rare_char_density(word) > RARE_DENSITY_THRESHOLD:
            return ReasonCode.GIBBERISH_DENSITY

    if len(text) > DICTIONARY_MIN_LENGTH and not contains_known_root(text):
        if len(text.split()) == 1 and len(text) > LONG_WORD_LENGTH:
            return ReasonCode.GIBBERISH_UNKNOWN_LONG_WORD

    return None
