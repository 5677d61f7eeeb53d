"""
entropy.py

Information values and per-guess scoring.

The information value of a feedback pattern is log2 of how many remaining
solutions are consistent with it, i.e. how many bits of uncertainty are
left after seeing that feedback. A guess is scored by folding the value of
every possible truth through an aggregator: summing them gives the
expected remaining entropy (after dividing by the number of solutions),
taking the max gives the worst case. Lower scores are better guesses.
"""

import numpy as np

from .patterns import FeedbackPattern


def information_value(count):
    """Bits of uncertainty left when `count` candidates remain."""
    if count < 1:
        raise ValueError(f"information value needs at least one candidate, got {count}")
    return float(np.log2(count))


def aggregate_sum(total, value):
    return total + value


def aggregate_max(total, value):
    return max(total, value)


AGGREGATORS = {
    "average": aggregate_sum,
    "adversarial": aggregate_max,
}


def normalize_score(score, aggregator, n_solutions):
    """
    Turn a raw aggregate into the reported score.

    Sums become the expected entropy in bits; maxima are already in bits.
    """
    if aggregator is aggregate_sum:
        return score / n_solutions
    return score


def score_guess(guess, solutions, letters, counts, aggregator, cutoff=None):
    """
    Aggregate information value of `guess` over every solution.

    `letters` and `counts` are the `words_to_arrays` form of `solutions`.
    `cutoff`, when given, is called after each new pattern and returns the
    best aggregate seen so far by anyone; once the running total exceeds it
    this guess cannot win and scoring stops early.

    Returns:
        (score, complete) where `complete` is False if scoring stopped early
    """
    total = 0.0
    # Patterns of a single guess only, so equality ignoring the guess is safe.
    memo = {}

    for truth in solutions:
        pattern = FeedbackPattern.from_truth(guess, truth)
        value = memo.get(pattern)
        if value is not None:
            total = aggregator(total, value)
            continue

        value = information_value(int(pattern.match_mask(letters, counts).sum()))
        memo[pattern] = value
        total = aggregator(total, value)

        if cutoff is not None and total > cutoff():
            return total, False

    return total, True
