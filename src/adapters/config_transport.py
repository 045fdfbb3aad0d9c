"""Mapping between config.json and the core config fields.

config.json uses a flat, user-friendly schema (camelCase keys, TTL in
minutes). This module is the only place that knows about that shape.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Mapping

from core.config import ConfigField, GuardConfig

MS_PER_MINUTE = 60 * 1000

# transport key -> (core field, transport-to-core multiplier)
TRANSPORT_FIELDS: dict[str, tuple[ConfigField, float]] = {
    "vaultTtlMinutes": (ConfigField.VAULT_TTL_MS, MS_PER_MINUTE),
    "fuzzyThreshold": (ConfigField.FUZZY_THRESHOLD, 1),
    "fragmentThreshold": (ConfigField.FRAGMENT_THRESHOLD, 1),
    "shingleLength": (ConfigField.SHINGLE_LENGTH, 1),
    "hashBits": (ConfigField.HASH_BITS, 1),
    "minChars": (ConfigField.MIN_CHARS, 1),
    "minWords": (ConfigField.MIN_WORDS, 1),
    "minEntropy": (ConfigField.MIN_ENTROPY_BITS, 1),
}

INTEGER_FIELDS = frozenset(
    {
        ConfigField.SHINGLE_LENGTH,
        ConfigField.HASH_BITS,
        ConfigField.MIN_CHARS,
        ConfigField.MIN_WORDS,
    }
)


def transport_key(field: ConfigField) -> str:
    for key, (mapped, _) in TRANSPORT_FIELDS.items():
        if mapped is field:
            return key
    raise KeyError(field)


def to_core_value(field: ConfigField, transport_value: float) -> float:
    _, factor = TRANSPORT_FIELDS[transport_key(field)]
    return transport_value * factor


def overrides_from_transport(raw: Mapping[str, Any]) -> dict[ConfigField, float]:
    """Convert a config.json engine section into core field overrides.

    Unknown keys are ignored so the file can carry unrelated sections.
    """

    overrides: dict[ConfigField, float] = {}
    for key, (field, factor) in TRANSPORT_FIELDS.items():
        if key not in raw:
            continue
        value = raw[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"config field {key} must be numeric, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"config field {key} must be finite, got {value!r}")
        overrides[field] = value * factor
    return overrides


def transport_from_config(config: GuardConfig) -> dict[str, float]:
    """Render a config snapshot back into the config.json shape."""

    rendered: dict[str, float] = {}
    for key, (field, factor) in TRANSPORT_FIELDS.items():
        value = config.value_of(field)
        rendered[key] = value / factor if factor != 1 else value
    return rendered


def noise_words_from_transport(raw: Iterable[Any]) -> list[str]:
    """Normalize a stopwords.json list; non-string entries are rejected."""

    words: list[str] = []
    for entry in raw:
        if not isinstance(entry, str):
            raise ValueError(f"noise words must be strings, got {entry!r}")
        word = entry.strip().lower()
        if word:
            words.append(word)
    return words
