"""
Batch evaluation of the solver against known answers.

- run_case:  solve one puzzle (one hidden answer) with a programmatic oracle.
- run_batch: run many puzzles in sequence (optionally a sample prefix).
- summarize: aggregate a batch into solved count / mean / worst / histogram.

These functions are UI-agnostic so they can be reused by the CLI, a
notebook, or tests.
"""

from __future__ import annotations

import logging
import time
from collections import Counter
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from tqdm import tqdm

from ..engine import GuessLimitExceeded, NoCandidatesError, solve, to_pattern
from ..engine.feedback import Feedback
from ..oracles import ProgrammaticOracle

log = logging.getLogger(__name__)


def run_case(
        words: Sequence[str],
        answer: str,
        *,
        max_guesses: Optional[int] = None,
) -> Dict:
    """
    Play one game against `answer` until solved or the solver gives up.

    Args:
        words:        candidate word list (the solver's universe)
        answer:       the hidden word for this case
        max_guesses:  optional cap on the number of guesses

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str), error (str)
    """
    oracle = ProgrammaticOracle(answer)
    history: List[Tuple[str, str]] = []

    def recording_oracle(guess: str) -> Feedback:
        fb = oracle(guess)
        history.append((guess, to_pattern(fb)))
        return fb

    error = ""
    t0 = time.perf_counter()
    try:
        solve(words, recording_oracle, max_guesses=max_guesses)
        success = True
    except (NoCandidatesError, GuessLimitExceeded) as e:
        log.warning("case %s failed: %s", answer, e)
        success = False
        error = type(e).__name__
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "answer": oracle.secret,
        "success": success,
        "guesses": len(history),
        "time_ms": dt,
        "history": history,
        "error": error,
    }


def run_batch(
        words: Sequence[str],
        answers: Iterable[str],
        *,
        sample: Optional[int] = None,
        max_guesses: Optional[int] = None,
        progress: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is provided, only the first K
    answers are used to speed up quick experiments.
    """
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    iterator = tqdm(pool, ncols=80, desc="Solving", unit="game") if progress else pool
    return [run_case(words, ans, max_guesses=max_guesses) for ans in iterator]


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate batch results.

    Mean and worst case are computed over solved games only.
    """
    solved = [r["guesses"] for r in results if r["success"]]
    return {
        "games": len(results),
        "solved": len(solved),
        "mean_guesses": (sum(solved) / len(solved)) if solved else 0.0,
        "worst": max(solved) if solved else 0,
        "histogram": dict(sorted(Counter(solved).items())),
    }
