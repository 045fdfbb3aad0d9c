from __future__ import annotations

from core.config import ConfigField, GuardConfig
from core.models import MatchKind, SkipReason
from core.processor import GuardEngine

NOISE = [
    "a", "an", "and", "are", "by", "for", "in", "is", "it", "of",
    "on", "our", "the", "to", "with", "across", "every",
]

FALCON = "Q3 revenue grew by 14.2 million, driven by the Falcon project launch across every region."
UNRELATED = "Please water tomato plants beside garden fence tonight okay thanks"

# Low-entropy pair: same opening, different filler.
REPEATED_HEAD = "aa ab ba bb ab aa bb ba"
CAPTURED_LOW = REPEATED_HEAD + " ba" * 9
PASTED_LOW = REPEATED_HEAD + " bb" * 9


class FakeClock:
    def __init__(self, now_ms: float = 0.0) -> None:
        self.now = now_ms

    def now_ms(self) -> float:
        return self.now

    def advance(self, delta_ms: float) -> None:
        self.now += delta_ms


def _engine(clock: FakeClock | None = None) -> GuardEngine:
    engine = GuardEngine(clock or FakeClock())
    engine.init(noise_words=NOISE)
    return engine


def test_captured_text_is_blocked_verbatim() -> None:
    engine = _engine()
    assert engine.add(FALCON)
    assert engine.count() == 1

    verdict = engine.check(FALCON)

    assert verdict.blocked
    assert verdict.fuzzy_score == 1.0
    assert verdict.fragment_score == 1.0
    assert verdict.match_kind is MatchKind.FUZZY_AND_FRAGMENT
    assert verdict.explanation == "High fuzzy similarity + fragment cluster match"


def test_unrelated_text_is_allowed() -> None:
    engine = _engine()
    engine.add(FALCON)

    verdict = engine.check(UNRELATED)

    assert not verdict.blocked
    assert verdict.fragment_score == 0.0
    assert verdict.fuzzy_score < 0.70
    assert verdict.match_kind is MatchKind.NONE


def test_short_and_noise_only_inputs_are_not_stored() -> None:
    engine = _engine()
    assert not engine.add("thanks see you later bye")
    assert not engine.add("the and the and the and the and the and the and the")
    assert engine.count() == 0

    verdict = engine.check("thanks see you later bye")
    assert verdict.skip_reason is SkipReason.LENGTH
    assert verdict.explanation == "Too short (5 words) - allowed"


def test_low_entropy_paste_uses_escalated_thresholds() -> None:
    engine = _engine()
    assert engine.add(CAPTURED_LOW)

    verdict = engine.check(PASTED_LOW)

    assert verdict.escalated
    assert verdict.entropy_bits < 2.5
    assert verdict.fragment_score == 0.5
    assert verdict.fuzzy_score == 25 / 32
    assert not verdict.blocked


def test_low_entropy_paste_blocks_without_escalation() -> None:
    engine = _engine()
    engine.configure(ConfigField.MIN_ENTROPY_BITS, 0)
    engine.add(CAPTURED_LOW)

    verdict = engine.check(PASTED_LOW)

    assert not verdict.escalated
    assert verdict.blocked
    assert verdict.match_kind is MatchKind.FUZZY_AND_FRAGMENT


def test_records_expire_after_ttl() -> None:
    clock = FakeClock()
    engine = _engine(clock)
    engine.configure(ConfigField.VAULT_TTL_MS, 1000)
    engine.add(FALCON)

    clock.advance(999)
    assert engine.count() == 1
    assert engine.check(FALCON).blocked

    clock.advance(1)
    assert engine.count() == 0
    assert not engine.check(FALCON).blocked


def test_negative_ttl_prunes_on_next_operation() -> None:
    engine = _engine()
    engine.add(FALCON)
    engine.configure(ConfigField.VAULT_TTL_MS, -1)
    assert engine.prune() == 1
    assert engine.count() == 0


def test_hash_bits_change_clears_vault() -> None:
    engine = _engine()
    engine.add(FALCON)

    engine.configure(ConfigField.HASH_BITS, 64)
    assert engine.count() == 1

    engine.configure(ConfigField.HASH_BITS, 32)
    assert engine.count() == 0
    assert engine.config().hash_bits == 32


def test_integer_fields_are_coerced() -> None:
    engine = _engine()
    engine.configure(ConfigField.SHINGLE_LENGTH, 3.0)
    assert engine.config().shingle_length == 3
    assert isinstance(engine.config().shingle_length, int)


def test_config_snapshot_is_unaffected_by_later_changes() -> None:
    engine = _engine()
    before = engine.config()
    engine.configure(ConfigField.FUZZY_THRESHOLD, 0.5)
    assert before.fuzzy_threshold == 0.70
    assert engine.config().fuzzy_threshold == 0.5


def test_init_merges_overrides_over_defaults_and_replaces_noise_words() -> None:
    engine = GuardEngine(FakeClock(), noise_words=["Stale"])
    engine.configure(ConfigField.MIN_WORDS, 2)

    engine.init({ConfigField.FUZZY_THRESHOLD: 0.8}, ["The", "AND"])

    assert engine.config() == GuardConfig(fuzzy_threshold=0.8)
    assert engine.noise_words == frozenset({"the", "and"})


def test_engines_do_not_share_state() -> None:
    first = _engine()
    second = _engine()
    first.add(FALCON)
    first.configure(ConfigField.FUZZY_THRESHOLD, 0.9)

    assert second.count() == 0
    assert second.config().fuzzy_threshold == 0.70
    assert not second.check(FALCON).blocked


def test_clear_empties_vault() -> None:
    engine = _engine()
    engine.add(FALCON)
    engine.clear()
    assert engine.count() == 0


def test_plain_sentence_round_trip_through_vault() -> None:
    engine = _engine()
    sentence = "Our Q3 revenue grew 142 million driven by the falcon project launch across every region"
    assert engine.add(sentence)

    verdict = engine.check(sentence)

    assert verdict.blocked
    assert verdict.fuzzy_score == 1.0
    assert verdict.fragment_score == 1.0


def test_init_with_new_hash_bits_clears_vault() -> None:
    engine = _engine()
    engine.add(FALCON)

    engine.init({ConfigField.HASH_BITS: 32}, NOISE)

    assert engine.count() == 0
    assert engine.config().hash_bits == 32


def test_init_with_same_hash_bits_keeps_vault() -> None:
    engine = _engine()
    engine.add(FALCON)

    engine.init({ConfigField.HASH_BITS: 64}, NOISE)

    assert engine.count() == 1
