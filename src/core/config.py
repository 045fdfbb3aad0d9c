"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable

# Thresholds used instead of the configured ones when a paste is too
# predictable (entropy below min_entropy_bits).
ESCALATED_FUZZY_THRESHOLD = 0.90
ESCALATED_FRAGMENT_THRESHOLD = 0.70

# Signal text shorter than this carries nothing worth fingerprinting.
MIN_SIGNAL_CHARS = 10


class ConfigField(str, Enum):
    """Runtime-tunable engine settings."""

    VAULT_TTL_MS = "vault_ttl_ms"
    FUZZY_THRESHOLD = "fuzzy_threshold"
    FRAGMENT_THRESHOLD = "fragment_threshold"
    SHINGLE_LENGTH = "shingle_length"
    HASH_BITS = "hash_bits"
    MIN_CHARS = "min_chars"
    MIN_WORDS = "min_words"
    MIN_ENTROPY_BITS = "min_entropy_bits"


@dataclass(frozen=True)
class GuardConfig:
    """Detection thresholds and sizes for one engine instance."""

    vault_ttl_ms: float = 60 * 60 * 1000
    fuzzy_threshold: float = 0.70
    fragment_threshold: float = 0.35
    shingle_length: int = 5
    hash_bits: int = 64
    min_chars: int = 50
    min_words: int = 8
    min_entropy_bits: float = 2.5

    def value_of(self, field: ConfigField) -> float:
        return _READERS[field](self)

    def updated(self, field: ConfigField, value: float) -> "GuardConfig":
        """Return a copy with one field replaced.

        Values are stored as given; integer-valued fields are passed through
        int() so they can be used as sizes. That truncates fractions (5.7
        becomes 5) and raises ValueError or OverflowError for NaN and
        infinity.
        """

        return _UPDATERS[field](self, value)


_UPDATERS: dict[ConfigField, Callable[[GuardConfig, float], GuardConfig]] = {
    ConfigField.VAULT_TTL_MS: lambda cfg, v: replace(cfg, vault_ttl_ms=v),
    ConfigField.FUZZY_THRESHOLD: lambda cfg, v: replace(cfg, fuzzy_threshold=v),
    ConfigField.FRAGMENT_THRESHOLD: lambda cfg, v: replace(cfg, fragment_threshold=v),
    ConfigField.SHINGLE_LENGTH: lambda cfg, v: replace(cfg, shingle_length=int(v)),
    ConfigField.HASH_BITS: lambda cfg, v: replace(cfg, hash_bits=int(v)),
    ConfigField.MIN_CHARS: lambda cfg, v: replace(cfg, min_chars=int(v)),
    ConfigField.MIN_WORDS: lambda cfg, v: replace(cfg, min_words=int(v)),
    ConfigField.MIN_ENTROPY_BITS: lambda cfg, v: replace(cfg, min_entropy_bits=v),
}

_READERS: dict[ConfigField, Callable[[GuardConfig], float]] = {
    ConfigField.VAULT_TTL_MS: lambda cfg: cfg.vault_ttl_ms,
    ConfigField.FUZZY_THRESHOLD: lambda cfg: cfg.fuzzy_threshold,
    ConfigField.FRAGMENT_THRESHOLD: lambda cfg: cfg.fragment_threshold,
    ConfigField.SHINGLE_LENGTH: lambda cfg: cfg.shingle_length,
    ConfigField.HASH_BITS: lambda cfg: cfg.hash_bits,
    ConfigField.MIN_CHARS: lambda cfg: cfg.min_chars,
    ConfigField.MIN_WORDS: lambda cfg: cfg.min_words,
    ConfigField.MIN_ENTROPY_BITS: lambda cfg: cfg.min_entropy_bits,
}
