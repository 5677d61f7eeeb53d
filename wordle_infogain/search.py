"""
search.py

Parallel search for the guess that leaves the least uncertainty.

Every allowed guess is scored independently (see `entropy.score_guess`),
so guesses are split into chunks and handed to a process pool. The only
shared state is one "current best" record:

    (aggregate score, not a possible solution, -frequency, position)

Workers read only its score without the lock, to prune guesses that can
no longer win, and take the lock to claim a new best, comparing the full
record once they hold it. A guess may be scored against a slightly stale best;
that only delays pruning, it never lets a worse guess win.

Ties are settled by the record itself, never by which worker finished
first: a guess that could be the answer beats one that cannot, then the
more frequent word wins, then the one listed first.
"""

import multiprocessing as mp
import os

from tqdm import tqdm

from .entropy import aggregate_sum, normalize_score, score_guess
from .words import words_to_arrays


DEFAULT_CHUNK_SIZE = 16
NO_BEST = (float("inf"), float("inf"), float("inf"), float("inf"))


_WORKER_STATE = {}


def _init_worker(allowed, solutions, freq_data, aggregator, shared_best):
    letters, counts = words_to_arrays(solutions)
    _WORKER_STATE["allowed"] = allowed
    _WORKER_STATE["solutions"] = solutions
    _WORKER_STATE["solution_set"] = frozenset(solutions)
    _WORKER_STATE["letters"] = letters
    _WORKER_STATE["counts"] = counts
    _WORKER_STATE["freq_data"] = freq_data
    _WORKER_STATE["aggregator"] = aggregator
    _WORKER_STATE["shared_best"] = shared_best


def _offer_best(shared_best, key):
    """Claim the shared best record for `key` if it beats the incumbent."""
    record = shared_best.get_obj()
    # Only the score is read unlocked; the other fields may be mid-write.
    if key[0] > record[0]:
        return False

    with shared_best.get_lock():
        if key < tuple(record):
            record[:] = key
            return True
    return False


def _worker_chunk(task):
    start, end = task
    allowed = _WORKER_STATE["allowed"]
    solutions = _WORKER_STATE["solutions"]
    solution_set = _WORKER_STATE["solution_set"]
    letters = _WORKER_STATE["letters"]
    counts = _WORKER_STATE["counts"]
    freq_data = _WORKER_STATE["freq_data"]
    aggregator = _WORKER_STATE["aggregator"]
    shared_best = _WORKER_STATE["shared_best"]
    record = shared_best.get_obj()

    def current_best():
        return record[0]

    pruned = 0
    for idx in range(start, end):
        guess = allowed[idx]
        score, complete = score_guess(
            guess, solutions, letters, counts, aggregator, cutoff=current_best
        )
        if not complete or score > current_best():
            pruned += 1
            continue

        key = (
            score,
            float(guess not in solution_set),
            -freq_data.get(guess, 0.0),
            float(idx),
        )
        _offer_best(shared_best, key)

    return {"evaluated": end - start, "pruned": pruned}


def select_best(
    allowed_guesses,
    remaining_solutions,
    freq_data=None,
    aggregator=aggregate_sum,
    workers=None,
    chunk_size=DEFAULT_CHUNK_SIZE,
    progress=False,
):
    """
    Pick the guess that minimizes the aggregated remaining entropy.

    Args:
        allowed_guesses: Words that may be guessed (non-empty)
        remaining_solutions: Words still consistent with all feedback (non-empty)
        freq_data: optional Word -> weight mapping used as a tie-breaker
        aggregator: `aggregate_sum` (average case) or `aggregate_max` (worst case)
        workers: worker processes (default: CPU count, 1 runs in-process)
        chunk_size: guesses per worker task
        progress: show a tqdm progress bar

    Returns:
        (guess, score) where score is the expected remaining entropy in bits
        for `aggregate_sum` and the worst-case remaining entropy otherwise
    """
    allowed = list(allowed_guesses)
    solutions = list(remaining_solutions)
    if not allowed:
        raise ValueError("select_best needs at least one allowed guess")
    if not solutions:
        raise ValueError("select_best needs at least one remaining solution")

    freq_data = dict(freq_data) if freq_data else {}
    chunk_size = max(1, int(chunk_size))
    tasks = [
        (start, min(start + chunk_size, len(allowed)))
        for start in range(0, len(allowed), chunk_size)
    ]
    worker_count = workers if workers is not None else (os.cpu_count() or 1)
    worker_count = max(1, min(int(worker_count), len(tasks)))

    start_methods = mp.get_all_start_methods()
    start_method = "fork" if "fork" in start_methods else "spawn"
    ctx = mp.get_context(start_method)
    shared_best = ctx.Array("d", NO_BEST)
    initargs = (allowed, solutions, freq_data, aggregator, shared_best)

    pruned = 0
    with tqdm(total=len(allowed), desc="Scoring guesses", disable=not progress) as bar:
        if worker_count == 1:
            _init_worker(*initargs)
            try:
                for task in tasks:
                    result = _worker_chunk(task)
                    pruned += result["pruned"]
                    bar.update(result["evaluated"])
                    bar.set_postfix(pruned=pruned)
            finally:
                _WORKER_STATE.clear()
        else:
            with ctx.Pool(
                processes=worker_count,
                initializer=_init_worker,
                initargs=initargs,
            ) as pool:
                for result in pool.imap_unordered(_worker_chunk, tasks, chunksize=1):
                    pruned += result["pruned"]
                    bar.update(result["evaluated"])
                    bar.set_postfix(pruned=pruned)

    score, _, _, idx = tuple(shared_best.get_obj())
    return allowed[int(idx)], normalize_score(score, aggregator, len(solutions))
