"""Validation helpers for settings editing."""

from __future__ import annotations

import math
from dataclasses import dataclass

from adapters.config_transport import INTEGER_FIELDS, to_core_value, transport_key
from core.config import ConfigField

RATIO_FIELDS = frozenset({ConfigField.FUZZY_THRESHOLD, ConfigField.FRAGMENT_THRESHOLD})

# Sizes below these values produce empty fingerprints or shingle sets.
MINIMUM_VALUES = {
    ConfigField.SHINGLE_LENGTH: 1,
    ConfigField.HASH_BITS: 1,
}


@dataclass
class FieldValue:
    value: float | None
    error: str | None = None


def parse_field_value(field: ConfigField, raw_value: str) -> FieldValue:
    """Parse a settings input given in config.json units into a core value."""

    raw_value = raw_value.strip()
    key = transport_key(field)
    if not raw_value:
        return FieldValue(None, f"{key} is required")

    try:
        number = float(raw_value)
    except ValueError:
        return FieldValue(None, f"{key} must be numeric")
    if not math.isfinite(number):
        return FieldValue(None, f"{key} must be a finite number")

    if field in INTEGER_FIELDS:
        if not number.is_integer():
            return FieldValue(None, f"{key} must be a whole number")
        number = int(number)

    if number < MINIMUM_VALUES.get(field, 0):
        return FieldValue(None, f"{key} must be at least {MINIMUM_VALUES.get(field, 0)}")
    if field in RATIO_FIELDS and number > 1:
        return FieldValue(None, f"{key} must be between 0 and 1")

    return FieldValue(to_core_value(field, number))
