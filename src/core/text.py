"""Text preparation helpers (core domain)."""

from __future__ import annotations

import math
import re
from collections import Counter
from typing import AbstractSet

_NON_WORD_RE = re.compile(r"[^\w\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def _collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


def normalize(text: str) -> str:
    """Lower-case, drop punctuation, and collapse whitespace.

    Idempotent: normalizing an already normalized string returns it as is.
    """

    return _collapse_whitespace(_NON_WORD_RE.sub("", text.lower()))


def word_count(normalized: str) -> int:
    return len(normalized.split())


def strip_noise(normalized: str, noise_words: AbstractSet[str]) -> str:
    """Remove noise words from normalized text, keeping token order."""

    if not noise_words:
        return normalized
    return " ".join(token for token in normalized.split(" ") if token not in noise_words)


def shannon_entropy(text: str) -> float:
    """Return Shannon entropy of the character distribution, in bits per char."""

    length = len(text)
    if not length:
        return 0.0

    entropy = 0.0
    for count in Counter(text).values():
        p = count / length
        entropy -= p * math.log2(p)
    return entropy
