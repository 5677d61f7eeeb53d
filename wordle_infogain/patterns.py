"""
patterns.py

Feedback patterns for Wordle guesses.

Instead of storing the coloured tiles, a FeedbackPattern stores what the
feedback proves about the hidden word:

    correct     which positions hold the guessed letter
    min_counts  for each letter, how many copies the word has at least
    max_counts  for each letter, how many copies the word can have at most

This makes testing whether another word is still possible a handful of
comparisons, and it lets patterns be compared and hashed directly so
entropy values can be memoized per pattern.
"""

from collections import Counter

import numpy as np

from .words import ALPHABET_SIZE, UNCONSTRAINED, WORD_LENGTH, letter_counts


FEEDBACK_EXACT = "g"
FEEDBACK_PRESENT = "y"
FEEDBACK_ABSENT = "b"
FEEDBACK_SYMBOLS = FEEDBACK_EXACT + FEEDBACK_PRESENT + FEEDBACK_ABSENT
SOLVED_FEEDBACK = FEEDBACK_EXACT * WORD_LENGTH


def render_feedback(guess, answer) -> str:
    """
    Colour string ("g"/"y"/"b" per tile) for a (guess, answer) pair.

    Standard duplicate-letter rules: greens first, each consuming one copy
    of the letter from the answer, then yellows only while unused copies
    remain.
    """
    result = [FEEDBACK_ABSENT] * WORD_LENGTH
    counts = Counter(answer)

    for i in range(WORD_LENGTH):
        if guess[i] == answer[i]:
            result[i] = FEEDBACK_EXACT
            counts[guess[i]] -= 1

    for i in range(WORD_LENGTH):
        if result[i] == FEEDBACK_ABSENT and counts[guess[i]] > 0:
            result[i] = FEEDBACK_PRESENT
            counts[guess[i]] -= 1

    return "".join(result)


def validate_feedback(feedback: str) -> str:
    feedback = feedback.strip().lower()
    if len(feedback) != WORD_LENGTH or any(c not in FEEDBACK_SYMBOLS for c in feedback):
        raise ValueError(
            f"feedback must be {WORD_LENGTH} characters from "
            f"{{{', '.join(FEEDBACK_SYMBOLS)}}}: {feedback!r}"
        )
    return feedback


class FeedbackPattern:
    """
    Constraint summary obtained from one guess.

    Equality and hashing ignore `guess`: two patterns are only ever compared
    when they come from the same guess.
    """

    __slots__ = ("guess", "correct", "min_counts", "max_counts")

    def __init__(self, guess, correct, min_counts, max_counts):
        self.guess = tuple(guess)
        self.correct = tuple(correct)
        self.min_counts = tuple(min_counts)
        self.max_counts = tuple(max_counts)

    @classmethod
    def from_truth(cls, guess, truth):
        """Pattern a player would learn by guessing `guess` when the answer is `truth`."""
        correct = [g == t for g, t in zip(guess, truth)]
        guess_counts = letter_counts(guess)
        truth_counts = letter_counts(truth)

        min_counts = [0] * ALPHABET_SIZE
        max_counts = [UNCONSTRAINED] * ALPHABET_SIZE
        for c in range(ALPHABET_SIZE):
            if guess_counts[c] <= truth_counts[c]:
                min_counts[c] = guess_counts[c]
            else:
                # Some copy of the letter came back absent, so the count is exact.
                min_counts[c] = truth_counts[c]
                max_counts[c] = truth_counts[c]

        return cls(guess, correct, min_counts, max_counts)

    @classmethod
    def from_feedback(cls, guess, feedback):
        """Rebuild the pattern from a colour string such as "bygbb"."""
        feedback = validate_feedback(feedback)
        correct = [False] * WORD_LENGTH
        min_counts = [0] * ALPHABET_SIZE
        max_counts = [UNCONSTRAINED] * ALPHABET_SIZE

        for i, symbol in enumerate(feedback):
            if symbol == FEEDBACK_EXACT:
                correct[i] = True
                min_counts[guess[i]] += 1
            elif symbol == FEEDBACK_PRESENT:
                min_counts[guess[i]] += 1

        # Caps go in a second pass so an absent copy never undercuts
        # copies of the same letter marked further right.
        for i, symbol in enumerate(feedback):
            if symbol == FEEDBACK_ABSENT:
                max_counts[guess[i]] = min_counts[guess[i]]

        return cls(guess, correct, min_counts, max_counts)

    @property
    def key(self):
        return (self.correct, self.min_counts, self.max_counts)

    def __eq__(self, other):
        if not isinstance(other, FeedbackPattern):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __repr__(self):
        return (
            f"FeedbackPattern(guess={self.guess!r}, correct={self.correct!r}, "
            f"min_counts={self.min_counts!r}, max_counts={self.max_counts!r})"
        )

    def matches(self, word) -> bool:
        """True if `word` would have produced this same feedback."""
        counts = [0] * ALPHABET_SIZE
        for i in range(WORD_LENGTH):
            if (word[i] == self.guess[i]) != self.correct[i]:
                return False
            counts[word[i]] += 1
            if counts[word[i]] > self.max_counts[word[i]]:
                return False

        return all(counts[c] >= self.min_counts[c] for c in self.guess)

    def match_mask(self, letters: np.ndarray, counts: np.ndarray) -> np.ndarray:
        """
        Vectorized `matches` over arrays built by `words_to_arrays`.

        Returns a boolean mask with one entry per row.
        """
        guess = np.asarray(self.guess, dtype=np.uint8)
        correct = np.asarray(self.correct, dtype=bool)
        min_counts = np.asarray(self.min_counts, dtype=np.uint8)
        max_counts = np.asarray(self.max_counts, dtype=np.uint8)

        positions_ok = ((letters == guess) == correct).all(axis=1)
        counts_ok = ((counts >= min_counts) & (counts <= max_counts)).all(axis=1)
        return positions_ok & counts_ok


def filter_words(words, pattern):
    """Keep only the words consistent with `pattern`."""
    return [w for w in words if pattern.matches(w)]
