"""
words.py

Handles the Word value type and loading of word lists and frequency data.

A Word is a tuple of 5 letter codes in [0, 26). Tuples are immutable,
hashable and ordered lexicographically, which is all the solver needs.
"""

import numpy as np


WORD_LENGTH = 5
ALPHABET_SIZE = 26
UNCONSTRAINED = WORD_LENGTH


def encode_word(text):
    """Convert a 5-letter lowercase string into a Word."""
    token = text.strip()
    if len(token) != WORD_LENGTH:
        raise ValueError(
            f"word must have exactly {WORD_LENGTH} letters: {token!r}"
        )

    word = tuple(ord(c) - ord("a") for c in token)
    if any(not 0 <= code < ALPHABET_SIZE for code in word):
        raise ValueError(
            f"tried to read in word with letter outside of a-z range: {token!r}"
        )

    return word


def decode_word(word):
    return "".join(chr(code + ord("a")) for code in word)


def letter_counts(word):
    counts = [0] * ALPHABET_SIZE
    for code in word:
        counts[code] += 1
    return counts


def words_to_arrays(words):
    """
    Stack words into numpy arrays for vectorized matching.

    Returns:
        letters: (n, 5) uint8 array of letter codes
        counts: (n, 26) uint8 array of per-letter occurrence counts
    """
    letters = np.array(words, dtype=np.uint8).reshape(len(words), WORD_LENGTH)
    counts = np.zeros((len(words), ALPHABET_SIZE), dtype=np.uint8)
    rows = np.arange(len(words))
    for col in range(WORD_LENGTH):
        counts[rows, letters[:, col]] += 1
    return letters, counts


def load_word_list(path):
    """
    Load a whitespace-separated word list into a sorted list of Words.

    Any malformed token aborts the load; a partially read list would skew
    every later entropy computation.
    """
    with open(path, "r") as f:
        tokens = f.read().split()
    return sorted(encode_word(token) for token in tokens)


def load_freq_data(path):
    """
    Load `word weight` pairs into a dict keyed by Word.

    Later lines overwrite earlier weights for the same word.
    """
    freqs = {}
    with open(path, "r") as f:
        for lineno, line in enumerate(f, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 2:
                raise ValueError(
                    f"{path}:{lineno}: expected 'word weight', got {line.strip()!r}"
                )

            try:
                word = encode_word(fields[0])
                weight = float(fields[1])
            except ValueError as exc:
                raise ValueError(f"{path}:{lineno}: {exc}") from exc

            if weight < 0:
                raise ValueError(f"{path}:{lineno}: negative weight {weight}")
            freqs[word] = weight
    return freqs
