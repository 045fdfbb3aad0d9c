"""Four-gate decision pipeline (core domain).

Gates run in a strict order and the first one that fires short-circuits:

1) Length gate: too few characters or words -> allow, skip=length
2) Noise gate: nothing left after removing noise words -> allow, skip=noise
3) Entropy gate: predictable text -> escalate thresholds for gate 4
4) Fingerprint/fragment gate: best fuzzy and best fragment score against
   every live vault record; either one over its threshold blocks

Captures go through the same preparation and the first two gates before
they are stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable

from core.config import (
    ESCALATED_FRAGMENT_THRESHOLD,
    ESCALATED_FUZZY_THRESHOLD,
    MIN_SIGNAL_CHARS,
    GuardConfig,
)
from core.fingerprint import fragment_similarity, fuzzy_similarity, shingles, simhash
from core.models import CheckVerdict, MatchKind, SkipReason, VaultRecord
from core.text import normalize, shannon_entropy, strip_noise, word_count

_EXPLANATIONS = {
    MatchKind.FUZZY_AND_FRAGMENT: "High fuzzy similarity + fragment cluster match",
    MatchKind.FRAGMENT: "Fragment cluster match - partial overlap with captured content",
    MatchKind.FUZZY: "High fuzzy similarity - resembles captured content",
    MatchKind.NONE: "No significant match found",
}


@dataclass(frozen=True)
class PreparedText:
    """Normalized and noise-stripped views of one raw input."""

    normalized: str
    signal: str
    words: int


def prepare(raw: str, noise_words: AbstractSet[str]) -> PreparedText:
    normalized = normalize(raw)
    return PreparedText(
        normalized=normalized,
        signal=strip_noise(normalized, noise_words),
        words=word_count(normalized),
    )


def is_long_enough(prepared: PreparedText, config: GuardConfig) -> bool:
    if len(prepared.normalized) < config.min_chars:
        return False
    return prepared.words >= config.min_words


def has_signal(prepared: PreparedText) -> bool:
    return len(prepared.signal) >= MIN_SIGNAL_CHARS


def effective_thresholds(entropy_bits: float, config: GuardConfig) -> tuple[float, float, bool]:
    """Return (fuzzy, fragment, escalated) thresholds for gate 4."""

    if entropy_bits < config.min_entropy_bits:
        return ESCALATED_FUZZY_THRESHOLD, ESCALATED_FRAGMENT_THRESHOLD, True
    return config.fuzzy_threshold, config.fragment_threshold, False


def classify(
    best_fuzzy: float,
    best_fragment: float,
    fuzzy_threshold: float,
    fragment_threshold: float,
) -> MatchKind:
    """Map best scores to the decision branch; anything but NONE blocks."""

    fuzzy_hit = best_fuzzy >= fuzzy_threshold
    fragment_hit = best_fragment >= fragment_threshold
    if fuzzy_hit and fragment_hit:
        return MatchKind.FUZZY_AND_FRAGMENT
    if fragment_hit:
        return MatchKind.FRAGMENT
    if fuzzy_hit:
        return MatchKind.FUZZY
    return MatchKind.NONE


def build_record(prepared: PreparedText, config: GuardConfig, created_at_ms: float) -> VaultRecord:
    return VaultRecord(
        normalized_text=prepared.normalized,
        signal_text=prepared.signal,
        fingerprint=simhash(prepared.signal, config.hash_bits),
        shingles=shingles(prepared.signal, config.shingle_length),
        entropy_bits=shannon_entropy(prepared.normalized),
        created_at_ms=created_at_ms,
    )


def evaluate(
    raw: str,
    config: GuardConfig,
    noise_words: AbstractSet[str],
    records: Iterable[VaultRecord],
) -> CheckVerdict:
    """Run the gates for one paste against a snapshot of vault records."""

    prepared = prepare(raw, noise_words)

    if not is_long_enough(prepared, config):
        return CheckVerdict(
            blocked=False,
            fuzzy_score=0.0,
            fragment_score=0.0,
            entropy_bits=0.0,
            skip_reason=SkipReason.LENGTH,
            explanation=f"Too short ({prepared.words} words) - allowed",
        )

    if not has_signal(prepared):
        return CheckVerdict(
            blocked=False,
            fuzzy_score=0.0,
            fragment_score=0.0,
            entropy_bits=0.0,
            skip_reason=SkipReason.NOISE,
            explanation="Only noise words - no signal to match",
        )

    entropy_bits = shannon_entropy(prepared.normalized)
    fuzzy_threshold, fragment_threshold, escalated = effective_thresholds(entropy_bits, config)

    paste_hash = simhash(prepared.signal, config.hash_bits)
    paste_shingles = shingles(prepared.signal, config.shingle_length)

    best_fuzzy = 0.0
    best_fragment = 0.0
    for record in records:
        best_fuzzy = max(best_fuzzy, fuzzy_similarity(paste_hash, record.fingerprint))
        best_fragment = max(best_fragment, fragment_similarity(paste_shingles, record.shingles))

    kind = classify(best_fuzzy, best_fragment, fuzzy_threshold, fragment_threshold)
    return CheckVerdict(
        blocked=kind is not MatchKind.NONE,
        fuzzy_score=best_fuzzy,
        fragment_score=best_fragment,
        entropy_bits=entropy_bits,
        skip_reason=None,
        explanation=_EXPLANATIONS[kind],
        match_kind=kind,
        escalated=escalated,
    )
