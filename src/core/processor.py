"""Core detection engine.

This module is frontend-agnostic. It only relies on a clock port, enabling
the Textual panel, the CLI, and tests to drive the same engine.
"""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Mapping, Optional

from core.config import ConfigField, GuardConfig
from core.models import CheckVerdict
from core.pipeline import build_record, evaluate, has_signal, is_long_enough, prepare
from core.ports import ClockPort
from core.vault import Vault

LOGGER = logging.getLogger(__name__)


class GuardEngine:
    """Owns config, noise words, and the vault; runs captures and checks.

    Every public method holds the engine lock for its whole duration, so a
    check sees one consistent vault snapshot from prune to verdict.
    """

    def __init__(
        self,
        clock: ClockPort,
        config: Optional[GuardConfig] = None,
        noise_words: Optional[Iterable[str]] = None,
    ) -> None:
        self._clock = clock
        self._config = config or GuardConfig()
        self._noise_words = _lowered(noise_words)
        self._vault = Vault()
        self._lock = threading.RLock()

    @property
    def noise_words(self) -> frozenset[str]:
        return self._noise_words

    def init(
        self,
        overrides: Optional[Mapping[ConfigField, float]] = None,
        noise_words: Optional[Iterable[str]] = None,
    ) -> None:
        """Reset config to defaults plus ``overrides`` and replace noise words."""

        config = GuardConfig()
        for field, value in (overrides or {}).items():
            config = config.updated(field, value)
        with self._lock:
            self._apply(config)
            self._noise_words = _lowered(noise_words)
        LOGGER.info("Engine initialized with %s noise words", len(self._noise_words))

    def configure(self, field: ConfigField, value: float) -> None:
        """Set one config field; takes effect for the next operation."""

        with self._lock:
            self._apply(self._config.updated(field, value))
        LOGGER.debug("Config %s set to %s", field.value, value)

    def config(self) -> GuardConfig:
        with self._lock:
            return self._config

    def add(self, raw: str) -> bool:
        """Fingerprint a capture and store it; False when it is not worth storing."""

        with self._lock:
            self._prune()
            prepared = prepare(raw, self._noise_words)
            if not is_long_enough(prepared, self._config):
                LOGGER.debug("Capture skipped: %s words", prepared.words)
                return False
            if not has_signal(prepared):
                LOGGER.debug("Capture skipped: no signal after noise removal")
                return False
            self._vault.insert(build_record(prepared, self._config, self._clock.now_ms()))
            LOGGER.info("Capture stored (%s chars); vault holds %s", len(prepared.normalized), len(self._vault))
            return True

    def check(self, raw: str) -> CheckVerdict:
        """Compare a paste against every live capture."""

        with self._lock:
            self._prune()
            verdict = evaluate(raw, self._config, self._noise_words, self._vault.records())
        if verdict.skip_reason is not None:
            LOGGER.debug("Check skipped (%s)", verdict.skip_reason.value)
        else:
            LOGGER.info(
                "Check %s: fuzzy=%.3f fragment=%.3f entropy=%.2f escalated=%s",
                "blocked" if verdict.blocked else "allowed",
                verdict.fuzzy_score,
                verdict.fragment_score,
                verdict.entropy_bits,
                verdict.escalated,
            )
        return verdict

    def prune(self) -> int:
        with self._lock:
            return self._prune()

    def count(self) -> int:
        with self._lock:
            self._prune()
            return len(self._vault)

    def clear(self) -> None:
        with self._lock:
            removed = self._vault.clear()
        LOGGER.info("Vault cleared (%s records)", removed)

    def _prune(self) -> int:
        removed = self._vault.prune(self._clock.now_ms(), self._config.vault_ttl_ms)
        if removed:
            LOGGER.debug("Pruned %s expired records", removed)
        return removed

    def _apply(self, config: GuardConfig) -> None:
        # Fingerprints of different widths cannot be compared.
        if config.hash_bits != self._config.hash_bits and len(self._vault):
            removed = self._vault.clear()
            LOGGER.info("hash_bits changed to %s; discarded %s records", config.hash_bits, removed)
        self._config = config


def _lowered(words: Optional[Iterable[str]]) -> frozenset[str]:
    return frozenset(word.lower() for word in (words or ()))
