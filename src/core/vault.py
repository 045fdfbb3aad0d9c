"""Time-bounded in-memory record store (core domain)."""

from __future__ import annotations

from typing import Tuple

from core.models import VaultRecord


class Vault:
    """Holds recent captures; records are never mutated after insertion."""

    def __init__(self) -> None:
        self._records: list[VaultRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def insert(self, record: VaultRecord) -> None:
        self._records.append(record)

    def prune(self, now_ms: float, ttl_ms: float) -> int:
        """Drop records whose age is at least ``ttl_ms``; return how many."""

        kept = [record for record in self._records if now_ms - record.created_at_ms < ttl_ms]
        removed = len(self._records) - len(kept)
        self._records = kept
        return removed

    def records(self) -> Tuple[VaultRecord, ...]:
        """Snapshot of the live records for a comparison pass."""

        return tuple(self._records)

    def clear(self) -> int:
        removed = len(self._records)
        self._records = []
        return removed
