from __future__ import annotations

from core.fingerprint import (
    fragment_similarity,
    fuzzy_similarity,
    shingles,
    simhash,
    token_hash,
)


def test_token_hash_uses_signed_32_bit_rolling_hash() -> None:
    assert token_hash("aa") == 3104
    assert token_hash("bb") == 3136
    assert token_hash("falcon") == -1281896239
    assert token_hash("") == 0


def test_simhash_width_and_tie_breaking() -> None:
    assert simhash("", 64) == (1,) * 64
    assert simhash("anything", 0) == ()
    assert len(simhash("q3 revenue grew", 96)) == 96


def test_simhash_bits_repeat_every_32_positions() -> None:
    bits = simhash("q3 revenue grew falcon project", 64)
    assert bits[:32] == bits[32:]


def test_simhash_single_token_mirrors_hash_bits() -> None:
    bits = simhash("aa", 32)
    # 3104 = 0b110000100000
    expected = tuple(1 if j in (5, 10, 11) else 0 for j in range(32))
    assert bits == expected


def test_fuzzy_similarity() -> None:
    a = simhash("q3 revenue grew falcon project", 64)
    assert fuzzy_similarity(a, a) == 1.0
    assert fuzzy_similarity(a, a[:32]) == 0.0
    assert fuzzy_similarity((), ()) == 0.0
    assert fuzzy_similarity((1, 0, 1, 0), (1, 1, 1, 1)) == 0.5


def test_shingles_of_short_or_invalid_input_are_empty() -> None:
    assert shingles("one two three", 5) == frozenset()
    assert shingles("one two three", 0) == frozenset()
    assert shingles("", 1) == frozenset()


def test_shingles_are_distinct_word_runs() -> None:
    assert shingles("a b a b", 2) == frozenset({"a b", "b a"})
    assert shingles("one two three", 3) == frozenset({"one two three"})


def test_fragment_similarity_uses_smaller_set() -> None:
    small = frozenset({"x", "y"})
    large = frozenset({"x", "y", "z", "w"})
    assert fragment_similarity(small, large) == 1.0
    assert fragment_similarity(large, small) == 1.0
    assert fragment_similarity(frozenset({"x", "q"}), large) == 0.5
    assert fragment_similarity(frozenset(), large) == 0.0


def test_simhash_is_deterministic_across_calls() -> None:
    text = "q3 revenue grew 142 million driven falcon project launch region"
    first = simhash(text, 64)
    second = simhash(text, 64)
    assert first == second
    assert fuzzy_similarity(first, second) == 1.0
