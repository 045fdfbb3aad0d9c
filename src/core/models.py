"""Core domain models.

These dataclasses are shared across the core and adapters to avoid tight
coupling to any frontend-specific types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from core.fingerprint import Fingerprint, ShingleSet


class SkipReason(str, Enum):
    """Why a check was allowed without comparing against the vault."""

    LENGTH = "length"
    NOISE = "noise"


class MatchKind(str, Enum):
    """Which signal(s) crossed their threshold in the final gate."""

    FUZZY_AND_FRAGMENT = "fuzzy+fragment"
    FRAGMENT = "fragment"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class VaultRecord:
    """Fingerprinted capture held by the vault until it expires."""

    normalized_text: str
    signal_text: str
    fingerprint: Fingerprint
    shingles: ShingleSet
    entropy_bits: float
    created_at_ms: float


@dataclass(frozen=True)
class CheckVerdict:
    """Outcome of checking one paste against the vault."""

    blocked: bool
    fuzzy_score: float
    fragment_score: float
    entropy_bits: float
    skip_reason: Optional[SkipReason]
    explanation: str
    match_kind: Optional[MatchKind] = None
    escalated: bool = False
