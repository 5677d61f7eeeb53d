"""
wordle_solver.py

Interactive Wordle solver.

Each round prints the guess that leaves the least expected (or, in
adversarial mode, worst-case) entropy, then asks for the colours the game
showed:

    g = right letter, right spot
    y = letter elsewhere in the word
    b = letter not in the word (beyond copies already marked)

Usage:
    wordle_solver.py guess_list.txt word_list.txt [hard mode = 0/1]
                     [adversarial = 0/1] [freq_data.txt]

Optional:
-workers N: worker processes for scoring (default: CPU count).
-chunk-size N: guesses per worker task.
-progress: show a progress bar while scoring.
"""

import argparse
import sys
import time

from wordle_infogain.patterns import validate_feedback
from wordle_infogain.search import DEFAULT_CHUNK_SIZE
from wordle_infogain.session import Session
from wordle_infogain.words import decode_word, load_freq_data, load_word_list


SHOW_REMAINING_BELOW = 10
PROMPT = "Response (b|y|g) * 5: "


class _UsageParser(argparse.ArgumentParser):
    """Any argument problem prints usage and exits cleanly."""

    def error(self, message):
        self.print_usage(sys.stdout)
        self.exit(0)


def parse_args(argv=None):
    parser = _UsageParser(
        prog="wordle_solver.py",
        description="Entropy-based Wordle solver.",
    )
    parser.add_argument("guess_list", help="Words that may be guessed.")
    parser.add_argument("word_list", help="Words that may be the answer.")
    parser.add_argument(
        "hard_mode",
        nargs="?",
        type=int,
        default=0,
        help="1 to only guess words consistent with earlier feedback.",
    )
    parser.add_argument(
        "adversarial",
        nargs="?",
        type=int,
        default=0,
        help="1 to minimize worst-case instead of average entropy.",
    )
    parser.add_argument(
        "freq_data",
        nargs="?",
        default=None,
        help="Optional 'word weight' file used to break ties.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Worker processes for scoring (default: CPU count).",
    )
    parser.add_argument(
        "-chunk-size",
        type=int,
        default=DEFAULT_CHUNK_SIZE,
        help=f"Guesses per worker task (default: {DEFAULT_CHUNK_SIZE}).",
    )
    parser.add_argument(
        "-progress",
        action="store_true",
        help="Show a progress bar while scoring guesses.",
    )
    return parser.parse_args(argv)


def read_feedback(read):
    """
    Prompt until a well-formed colour string is entered.

    Returns None when input runs out.
    """
    while True:
        try:
            response = read(PROMPT)
        except EOFError:
            return None

        try:
            return validate_feedback(response)
        except ValueError as exc:
            print(exc)


def run_session(session, read=None, progress=False):
    if read is None:
        read = input

    while True:
        if session.exhausted:
            print("No consistent word remains.")
            return

        start = time.time()
        guess, entropy = session.recommend(progress=progress)
        elapsed_ms = (time.time() - start) * 1000

        kind = "maximum" if session.adversarial else "average"
        print(f'Best guess is "{decode_word(guess)}" with {kind} entropy {entropy:.4f}.')
        print(f"Computation took {elapsed_ms:.0f} ms.")

        feedback = read_feedback(read)
        if feedback is None:
            print("\nNo more input.")
            return

        session.apply_feedback(guess, feedback)
        if session.solved:
            print(f"Solved in {len(session.history)} guesses!")
            return

        if len(session.solutions) < SHOW_REMAINING_BELOW:
            remaining = " ".join(decode_word(w) for w in session.solutions)
            print(f"Remaining words: {remaining}")


def main(argv=None):
    args = parse_args(argv)

    try:
        guess_list = load_word_list(args.guess_list)
        print(f"Loaded guess list with {len(guess_list)} words!")

        word_list = load_word_list(args.word_list)
        print(f"Loaded word list with {len(word_list)} words!")

        freq_data = {}
        if args.freq_data is not None:
            freq_data = load_freq_data(args.freq_data)
            print(f"Loaded word frequency data for {len(freq_data)} words!")
    except (OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    session = Session(
        guess_list,
        word_list,
        freq_data,
        hard_mode=args.hard_mode > 0,
        adversarial=args.adversarial > 0,
        workers=args.workers,
        chunk_size=args.chunk_size,
    )
    run_session(session, progress=args.progress)


if __name__ == "__main__":
    main()
