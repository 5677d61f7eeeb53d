"""
session.py

State of one multi-round solving session: the words that may still be
guessed, the words that may still be the answer, and what was learned.
"""

from .entropy import AGGREGATORS
from .patterns import SOLVED_FEEDBACK, FeedbackPattern, filter_words, validate_feedback
from .search import DEFAULT_CHUNK_SIZE, select_best


class Session:
    """
    Narrows candidate sets round by round.

    In hard mode every guess must stay consistent with all feedback seen so
    far, so the guess list is filtered along with the solutions.
    """

    def __init__(
        self,
        guesses,
        solutions,
        freq_data=None,
        hard_mode=False,
        adversarial=False,
        workers=None,
        chunk_size=DEFAULT_CHUNK_SIZE,
    ):
        self.guesses = list(guesses)
        self.solutions = list(solutions)
        self.freq_data = freq_data or {}
        self.hard_mode = hard_mode
        self.adversarial = adversarial
        self.workers = workers
        self.chunk_size = chunk_size
        self.history = []

    @property
    def aggregator(self):
        return AGGREGATORS["adversarial" if self.adversarial else "average"]

    @property
    def solved(self):
        return bool(self.history) and self.history[-1][1] == SOLVED_FEEDBACK

    @property
    def exhausted(self):
        """True once no word is consistent with the feedback received."""
        return not self.solutions or not self.guesses

    def recommend(self, progress=False):
        """Best next guess and its score for the current candidate sets."""
        if not self.solutions:
            raise ValueError("no remaining solution is consistent with the feedback")
        if not self.guesses:
            raise ValueError("no allowed guess is consistent with the feedback")

        return select_best(
            self.guesses,
            self.solutions,
            self.freq_data,
            self.aggregator,
            workers=self.workers,
            chunk_size=self.chunk_size,
            progress=progress,
        )

    def apply_feedback(self, guess, feedback):
        """Record the feedback for `guess` and drop every inconsistent word."""
        feedback = validate_feedback(feedback)
        pattern = FeedbackPattern.from_feedback(guess, feedback)
        self.history.append((guess, feedback))

        self.solutions = filter_words(self.solutions, pattern)
        if self.hard_mode:
            self.guesses = filter_words(self.guesses, pattern)
        return pattern
