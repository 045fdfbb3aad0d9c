from __future__ import annotations

from core.config import GuardConfig
from core.pipeline import build_record, prepare
from core.vault import Vault


def _record(created_at_ms: float):
    prepared = prepare("Falcon launch numbers for the third quarter review", frozenset())
    return build_record(prepared, GuardConfig(), created_at_ms)


def test_prune_drops_records_at_or_past_ttl() -> None:
    vault = Vault()
    vault.insert(_record(0.0))
    vault.insert(_record(500.0))

    assert vault.prune(now_ms=999.0, ttl_ms=1000.0) == 0
    assert vault.prune(now_ms=1000.0, ttl_ms=1000.0) == 1
    assert len(vault) == 1
    assert vault.records()[0].created_at_ms == 500.0


def test_records_is_a_snapshot() -> None:
    vault = Vault()
    vault.insert(_record(0.0))
    snapshot = vault.records()
    vault.clear()
    assert len(snapshot) == 1
    assert len(vault) == 0


def test_clear_reports_removed_count() -> None:
    vault = Vault()
    vault.insert(_record(0.0))
    vault.insert(_record(1.0))
    assert vault.clear() == 2
    assert vault.clear() == 0
