import pytest
from evilhangman.datasets import alphabet_for
from evilhangman.guessers import create_guesser, get_guesser_ids
from evilhangman.guessers.mask_match import matches


def test_registry():
    assert get_guesser_ids() == ["letter_freq", "mask_match", "random_letter"]
    with pytest.raises(ValueError, match="Available"):
        create_guesser("nope")


def test_letter_freq_picks_most_common():
    g = create_guesser("letter_freq")
    g.reset(dictionary=["cat", "cow", "cup"], seed=1)
    assert g.next_letter({"remaining": alphabet_for("en")}) == "c"
    assert g.next_letter({"remaining": [c for c in alphabet_for("en") if c != "c"]}) in {"a", "t", "o", "w", "u", "p"}


def test_random_letter_stays_in_remaining():
    g = create_guesser("random_letter")
    g.reset(dictionary=["cat"], seed=3)
    for _ in range(20):
        assert g.next_letter({"remaining": ["x", "y"]}) in {"x", "y"}


@pytest.mark.parametrize("word,pattern,guessed,expected", [
    ("cat", "_a_", {"a"}, True),
    ("aat", "_a_", {"a"}, False),
    ("cot", "_a_", {"a"}, False),
    ("cart", "_a_", {"a"}, False),
    ("cat", "___", {"e"}, True),
])
def test_matches(word, pattern, guessed, expected):
    assert matches(word, pattern, guessed) is expected


def test_mask_match_uses_matching_words():
    g = create_guesser("mask_match")
    g.reset(dictionary=["cat", "cot", "dot", "dog"], seed=5)
    remaining = [c for c in alphabet_for("en") if c != "o"]
    # cot, dot, dog match "_o_": 'd' and 't' appear twice
    assert g.next_letter({"pattern": "_o_", "guessed": ["o"], "remaining": remaining}) in {"d", "t"}
