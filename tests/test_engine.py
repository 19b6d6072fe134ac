import pytest
from evilhangman.engine import (CandidateWord, rank, score_word, letter_frequency, guess,
                                pattern_of, partition, filter_pool, mask_word, compact_mask,
                                wrong_guesses, is_won, is_lost, MAX_WRONG_GUESSES)
from evilhangman.datasets import alphabet_for, load_words

ALPHABET = alphabet_for("en")


def _pool(*words):
    """Pool in exactly the given order (no ranking)."""
    return [CandidateWord.from_text(w) for w in words]


def _words(pool):
    return [w.word for w in pool]


# --- ranking ---
def test_char_count():
    assert CandidateWord.from_text("banana").char_count == {"b": 1, "a": 3, "n": 2}


def test_rank_scores_distinct_letters():
    pool = rank(["aa", "ab", "c"])
    # freq: a=3, b=1, c=1; 'aa' scores 3 (not 6)
    assert [(w.word, w.score) for w in pool] == [("ab", 4), ("aa", 3), ("c", 1)]


def test_rank_ties_keep_input_order():
    assert _words(rank(["bc", "cb", "a"])) == ["bc", "cb", "a"]
    assert _words(rank(["cb", "bc", "a"])) == ["cb", "bc", "a"]


def test_rank_keeps_duplicates_and_tokens_verbatim():
    pool = rank(["Cat", "cat", "cat"])
    assert sorted(_words(pool)) == ["Cat", "cat", "cat"]


def test_letter_frequency_and_score_word():
    freq = letter_frequency(_pool("bat", "cat", "car"))
    assert freq["a"] == 3 and freq["t"] == 2 and freq["r"] == 1
    assert score_word("cat", freq) == 7
    assert score_word("zzz", freq) == 0


def test_rank_empty():
    assert rank([]) == []


# --- pattern / partition ---
@pytest.mark.parametrize("word,letter,expected", [
    ("banana", "a", ".a.a.a"),
    ("banana", "b", "b....."),
    ("cat", "z", "..."),
])
def test_pattern_of(word, letter, expected):
    assert pattern_of(word, letter) == expected


def test_partition_keeps_pool_order():
    classes = partition(_pool("ab", "ba", "ac", "ca"), "a")
    assert list(classes) == ["a.", ".a"]
    assert _words(classes["a."]) == ["ab", "ac"]


# --- adversarial filter ---
def test_all_share_pattern_pool_unchanged():
    pool = rank(["bat", "cat", "car"])
    res = guess(pool, ALPHABET, [], "a")
    assert sorted(_words(res.pool)) == ["bat", "car", "cat"]
    assert res.mask == "_ a _ "
    assert res.accepted and res.revealed


def test_deny_when_any_word_lacks_letter():
    res = guess(_pool("bat", "dog"), ALPHABET, [], "t")
    assert _words(res.pool) == ["dog"]
    assert res.mask == "_ _ _ "
    assert res.guessed == ["t"] and "t" not in res.remaining
    assert res.accepted and not res.revealed


def test_denial_beats_bigger_reveal_class():
    res = guess(_pool("aaa", "aab", "aba", "bbb"), ALPHABET, [], "a")
    assert _words(res.pool) == ["bbb"]


def test_forced_reveal_keeps_largest_class():
    res = guess(_pool("ab", "xa", "ya", "za"), ALPHABET, [], "a")
    assert _words(res.pool) == ["xa", "ya", "za"]
    assert res.mask == "_ a "


@pytest.mark.parametrize("order,expected", [
    (("ab", "ba", "ac", "ca"), ["ab", "ac"]),
    (("ba", "ab", "ac", "ca"), ["ba", "ca"]),
])
def test_equal_classes_prefer_earliest_member(order, expected):
    assert _words(filter_pool(_pool(*order), "a")) == expected


@pytest.mark.parametrize("letter", ["a", "1", "é"])
def test_unavailable_letter_is_noop(letter):
    pool = _pool("bat", "cat")
    remaining = [c for c in ALPHABET if c != "a"]
    res = guess(pool, remaining, ["a"], letter)
    assert not res.accepted
    assert res.pool == pool and res.remaining == remaining and res.guessed == ["a"]
    assert res.mask == "_ a _ "


def test_inputs_not_mutated():
    pool = _pool("bat", "dog")
    remaining = list(ALPHABET)
    guessed = []
    guess(pool, remaining, guessed, "t")
    assert _words(pool) == ["bat", "dog"] and remaining == ALPHABET and guessed == []


def test_guess_preconditions():
    with pytest.raises(ValueError):
        guess([], ALPHABET, [], "a")
    with pytest.raises(ValueError):
        guess(_pool("cat"), ALPHABET, [], "ab")


def test_single_word_pool_never_empties():
    pool = _pool("cat")
    remaining, guessed = list(ALPHABET), []
    for letter in "zqcat":
        res = guess(pool, remaining, guessed, letter)
        pool, remaining, guessed = res.pool, res.remaining, res.guessed
        assert _words(pool) == ["cat"]


def test_shrink_and_consistency_on_bundled_list():
    pool = rank(load_words("en"))
    remaining, guessed = list(ALPHABET), []
    for letter in "eaionrtslcu":
        res = guess(pool, remaining, guessed, letter)
        assert res.pool
        assert len(res.pool) <= len(pool)
        before = {id(w) for w in pool}
        assert all(id(w) in before for w in res.pool)
        pool, remaining, guessed = res.pool, res.remaining, res.guessed

        for g in guessed:
            absent = all(g not in w.word for w in pool)
            same = len({pattern_of(w.word, g) for w in pool}) == 1
            assert absent or same

        first = pool[0].word
        assert res.mask == mask_word(first, guessed)
        assert len(res.mask) == 2 * len(first)


# --- view ---
def test_mask_word():
    assert mask_word("cat", []) == "_ _ _ "
    assert mask_word("cat", ["a", "x"]) == "_ a _ "
    assert compact_mask("cat", ["a"]) == "_a_"


def test_wrong_guesses_counts_only_misses():
    assert wrong_guesses("cat", ["a", "x", "y"]) == 2


def test_loss_after_max_wrong():
    misses = list("bdefghijkl")
    assert len(misses) == MAX_WRONG_GUESSES
    assert not is_lost("cat", misses[:-1])
    assert is_lost("cat", misses)


def test_win_when_all_letters_guessed():
    assert is_won("banana", ["n", "b", "a", "z"])
    assert not is_won("banana", ["n", "a"])


def test_loss_takes_precedence_over_win():
    guessed = list("bdefghijkl") + ["c", "a", "t"]
    assert is_lost("cat", guessed) and not is_won("cat", guessed)
