import pytest

from wordle_infogain.entropy import AGGREGATORS, aggregate_max, aggregate_sum
from wordle_infogain.patterns import render_feedback
from wordle_infogain.search import DEFAULT_CHUNK_SIZE
from wordle_infogain.session import Session
from wordle_infogain.words import encode_word


def test_apply_feedback_narrows_solutions_only(vocab):
    session = Session(vocab, vocab, workers=1)
    guess, answer = encode_word("raise"), encode_word("stare")
    session.apply_feedback(guess, render_feedback(guess, answer))

    assert answer in session.solutions
    assert guess not in session.solutions
    assert session.guesses == vocab
    assert session.history == [(guess, "yybyg")]
    assert not session.solved


def test_hard_mode_narrows_guesses_too(vocab):
    session = Session(vocab, vocab, hard_mode=True, workers=1)
    guess, answer = encode_word("raise"), encode_word("stare")
    session.apply_feedback(guess, render_feedback(guess, answer))
    assert session.guesses == session.solutions


def test_narrowing_twice_changes_nothing(vocab):
    session = Session(vocab, vocab, workers=1)
    guess = encode_word("sheep")
    session.apply_feedback(guess, "bbybb")
    once = list(session.solutions)
    session.apply_feedback(guess, "bbybb")
    assert session.solutions == once


def test_objective_follows_mode(vocab):
    assert Session(vocab, vocab).aggregator is aggregate_sum
    assert Session(vocab, vocab, adversarial=True).aggregator is aggregate_max
    assert Session(vocab, vocab).aggregator is AGGREGATORS["average"]


def test_inconsistent_feedback_exhausts_session(vocab):
    session = Session(vocab, vocab[1:], workers=1)
    session.apply_feedback(vocab[0], "ggggg")
    assert session.solved
    assert session.exhausted
    with pytest.raises(ValueError, match="no remaining solution"):
        session.recommend()


@pytest.mark.parametrize("adversarial", [False, True])
@pytest.mark.parametrize("answer", ["eerie", "level", "which", "speed"])
def test_plays_to_the_answer(vocab, answer, adversarial):
    answer = encode_word(answer)
    session = Session(vocab, vocab, adversarial=adversarial, workers=1)

    for _ in range(len(vocab)):
        guess, _ = session.recommend()
        session.apply_feedback(guess, render_feedback(guess, answer))
        if session.solved:
            break

    assert session.solved
    assert session.history[-1][0] == answer
    assert session.solutions == [answer]


def test_search_settings_are_kept(vocab):
    assert Session(vocab, vocab).chunk_size == DEFAULT_CHUNK_SIZE
    session = Session(vocab, vocab, workers=2, chunk_size=4)
    assert (session.workers, session.chunk_size) == (2, 4)
