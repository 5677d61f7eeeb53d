import pytest

from wordle_infogain.words import encode_word


VOCAB = [
    "abbey", "belle", "cools", "crane", "eerie", "fable", "geese", "lemon",
    "level", "raise", "scoop", "sheep", "speed", "stare", "their", "there",
    "which",
]


@pytest.fixture
def vocab():
    return sorted(encode_word(t) for t in VOCAB)
