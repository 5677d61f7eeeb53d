import itertools

import pytest

from wordle_infogain.patterns import (
    FeedbackPattern,
    filter_words,
    render_feedback,
    validate_feedback,
)
from wordle_infogain.words import encode_word, words_to_arrays


E = encode_word("eeeee")[0]


@pytest.mark.parametrize("guess,answer,expected", [
    ("belle", "level", "bgyyy"),
    ("level", "level", "ggggg"),
    ("lemon", "level", "ggbbb"),
    ("cools", "scoop", "yygby"),
    ("raise", "crane", "yybbg"),
    ("stare", "crane", "bbgyg"),
    ("sheep", "fable", "bbybb"),
    ("there", "their", "gggyb"),
    ("which", "their", "bgybb"),
])
def test_render_feedback(guess, answer, expected):
    assert render_feedback(encode_word(guess), encode_word(answer)) == expected


def test_pattern_matches_its_own_truth(vocab):
    for guess, truth in itertools.product(vocab, repeat=2):
        assert FeedbackPattern.from_truth(guess, truth).matches(truth)


def test_pattern_matches_exactly_words_with_same_feedback(vocab):
    for guess, truth in itertools.product(vocab, repeat=2):
        pattern = FeedbackPattern.from_truth(guess, truth)
        feedback = render_feedback(guess, truth)
        for word in vocab:
            assert pattern.matches(word) == (render_feedback(guess, word) == feedback)


def test_same_feedback_gives_equal_patterns(vocab):
    for guess, t1, t2 in itertools.product(vocab, repeat=3):
        if render_feedback(guess, t1) == render_feedback(guess, t2):
            assert FeedbackPattern.from_truth(guess, t1) == FeedbackPattern.from_truth(guess, t2)


def test_feedback_string_rebuilds_truth_pattern(vocab):
    for guess, truth in itertools.product(vocab, repeat=2):
        from_truth = FeedbackPattern.from_truth(guess, truth)
        from_string = FeedbackPattern.from_feedback(guess, render_feedback(guess, truth))
        assert from_string == from_truth
        assert hash(from_string) == hash(from_truth)


def test_duplicate_guess_letter_against_single_copy():
    guess, truth = encode_word("sheep"), encode_word("fable")
    pattern = FeedbackPattern.from_truth(guess, truth)

    assert pattern.min_counts[E] == 1
    assert pattern.max_counts[E] == 1
    assert render_feedback(guess, truth)[2:4] == "yb"
    assert not pattern.matches(encode_word("geese"))


def test_absent_copy_does_not_undercut_later_present_copy():
    # First "e" absent, second "e" exact: the word still has one "e".
    pattern = FeedbackPattern.from_feedback(encode_word("geese"), "bbbbg")
    assert pattern.min_counts[E] == 1
    assert pattern.max_counts[E] == 1
    assert pattern.correct == (False, False, False, False, True)


def test_unconstrained_letters_default_to_five():
    pattern = FeedbackPattern.from_feedback(encode_word("crane"), "ggggg")
    assert pattern.correct == (True,) * 5
    assert pattern.max_counts == (5,) * 26


def test_equality_ignores_guess():
    a = FeedbackPattern.from_feedback(encode_word("stare"), "bbbbb")
    b = FeedbackPattern.from_feedback(encode_word("tears"), "bbbbb")
    assert a.guess != b.guess
    assert a == b
    assert len({a, b}) == 1


@pytest.mark.parametrize("feedback", ["ggg", "gggggg", "ggxgg", ""])
def test_invalid_feedback_rejected(feedback):
    with pytest.raises(ValueError, match="feedback must be"):
        FeedbackPattern.from_feedback(encode_word("crane"), feedback)


def test_validate_feedback_normalizes():
    assert validate_feedback(" GYBbg\n") == "gybbg"


def test_match_mask_agrees_with_matches(vocab):
    letters, counts = words_to_arrays(vocab)
    for guess, truth in itertools.product(vocab, repeat=2):
        pattern = FeedbackPattern.from_truth(guess, truth)
        expected = [pattern.matches(w) for w in vocab]
        assert pattern.match_mask(letters, counts).tolist() == expected


def test_filter_words_is_idempotent(vocab):
    guess = encode_word("raise")
    pattern = FeedbackPattern.from_feedback(guess, render_feedback(guess, encode_word("stare")))
    once = filter_words(vocab, pattern)
    assert encode_word("stare") in once
    assert encode_word("raise") not in once
    assert filter_words(once, pattern) == once
