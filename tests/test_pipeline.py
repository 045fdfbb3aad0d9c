from __future__ import annotations

from core.config import GuardConfig
from core.models import MatchKind, SkipReason
from core.pipeline import build_record, classify, effective_thresholds, evaluate, prepare

NOISE = frozenset({"the", "and", "by", "of"})


def test_classify_branches() -> None:
    assert classify(0.95, 0.50, 0.70, 0.35) is MatchKind.FUZZY_AND_FRAGMENT
    assert classify(0.10, 0.35, 0.70, 0.35) is MatchKind.FRAGMENT
    assert classify(0.70, 0.00, 0.70, 0.35) is MatchKind.FUZZY
    assert classify(0.69, 0.34, 0.70, 0.35) is MatchKind.NONE


def test_effective_thresholds_escalate_for_predictable_text() -> None:
    config = GuardConfig()
    assert effective_thresholds(1.2, config) == (0.90, 0.70, True)
    assert effective_thresholds(2.5, config) == (0.70, 0.35, False)


def test_prepare_counts_words_before_noise_removal() -> None:
    prepared = prepare("The cost of the Falcon launch", NOISE)
    assert prepared.normalized == "the cost of the falcon launch"
    assert prepared.signal == "cost falcon launch"
    assert prepared.words == 6


def test_evaluate_skips_short_text_without_entropy() -> None:
    verdict = evaluate("thanks see you later bye", GuardConfig(), NOISE, ())
    assert verdict.skip_reason is SkipReason.LENGTH
    assert verdict.explanation == "Too short (5 words) - allowed"
    assert verdict.entropy_bits == 0.0
    assert not verdict.blocked


def test_evaluate_skips_noise_only_text() -> None:
    verdict = evaluate("the and the and the and the and the and the and the", GuardConfig(), NOISE, ())
    assert verdict.skip_reason is SkipReason.NOISE
    assert verdict.explanation == "Only noise words - no signal to match"
    assert not verdict.blocked


def test_evaluate_with_no_records_allows() -> None:
    text = "Q3 revenue grew by 14.2 million, driven by the Falcon project launch."
    verdict = evaluate(text, GuardConfig(), NOISE, ())
    assert verdict.skip_reason is None
    assert verdict.match_kind is MatchKind.NONE
    assert verdict.explanation == "No significant match found"
    assert verdict.entropy_bits > 0


def test_evaluate_takes_best_score_over_all_records() -> None:
    config = GuardConfig()
    text = "Q3 revenue grew by 14.2 million, driven by the Falcon project launch."
    other = "Please water the tomato plants beside the garden fence tonight, thanks."
    records = [
        build_record(prepare(other, NOISE), config, 0.0),
        build_record(prepare(text, NOISE), config, 0.0),
    ]
    verdict = evaluate(text, config, NOISE, records)
    assert verdict.blocked
    assert verdict.fuzzy_score == 1.0
    assert verdict.fragment_score == 1.0
    assert verdict.match_kind is MatchKind.FUZZY_AND_FRAGMENT
