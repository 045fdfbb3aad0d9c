"""Similarity fingerprints (core domain).

Two complementary signals are computed from signal text:

- a SimHash-style bit vector, compared by the fraction of matching bits
  (fuzzy similarity), which tolerates reordering and small edits;
- a set of word shingles, compared by overlap normalized to the smaller
  set (fragment similarity), which catches a passage lifted from a
  longer text.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

Fingerprint = Tuple[int, ...]
ShingleSet = FrozenSet[str]

_HASH_WIDTH = 32
_UINT32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32
    return value - 0x100000000 if value & 0x80000000 else value


def token_hash(token: str) -> int:
    """Return the 32-bit signed rolling hash ``h = h * 31 + unit`` of a token.

    The hash walks UTF-16 code units so fingerprints match those produced by
    other clients of the same vault format.
    """

    data = token.encode("utf-16-le")
    h = 0
    for i in range(0, len(data), 2):
        h = (h * 31 + int.from_bytes(data[i : i + 2], "little")) & _UINT32
    return _to_int32(h)


def simhash(signal: str, hash_bits: int) -> Fingerprint:
    """Compute a ``hash_bits``-wide bit vector for signal text.

    Bit ``j`` votes with bit ``j % 32`` of every token hash. Ties (including
    an empty signal) resolve to 1.
    """

    weights = [0] * max(hash_bits, 0)
    for token in signal.split():
        h = token_hash(token)
        for j in range(len(weights)):
            if (h >> (j % _HASH_WIDTH)) & 1:
                weights[j] += 1
            else:
                weights[j] -= 1
    return tuple(1 if weight >= 0 else 0 for weight in weights)


def fuzzy_similarity(a: Fingerprint, b: Fingerprint) -> float:
    """Fraction of positions where two fingerprints agree.

    Fingerprints of different widths (taken before and after a hash_bits
    change) are not comparable and score 0.
    """

    if not a or len(a) != len(b):
        return 0.0
    same = sum(1 for left, right in zip(a, b) if left == right)
    return same / len(a)


def shingles(signal: str, length: int) -> ShingleSet:
    """Return the distinct runs of ``length`` consecutive tokens."""

    tokens = signal.split()
    if length <= 0 or len(tokens) < length:
        return frozenset()
    return frozenset(" ".join(tokens[i : i + length]) for i in range(len(tokens) - length + 1))


def fragment_similarity(a: ShingleSet, b: ShingleSet) -> float:
    """Shared shingles divided by the size of the smaller set."""

    smaller = min(len(a), len(b))
    if not smaller:
        return 0.0
    return len(a & b) / smaller
