"""
Feedback computed against a known secret word.

Each position is compared independently:
  - same letter at the same position -> CORRECT
  - letter occurs anywhere in secret -> PRESENT
  - otherwise                        -> ABSENT

Letters of the secret are not "consumed" by matches, so a repeated letter in
the guess can be marked PRESENT/CORRECT more than once even when the secret
holds a single copy. Standard Wordle caps these by multiplicity; this oracle
does not.
"""

from __future__ import annotations

from ..engine.feedback import Feedback, Verdict


def compare(guess: str, secret: str) -> Feedback:
    """
    Compute feedback for `guess` against `secret`.

    Preconditions:
      - len(guess) == len(secret)  (a mismatch raises ValueError)

    Examples:
      compare("abc", "dea") -> (PRESENT, ABSENT, ABSENT)
    """
    if len(guess) != len(secret):
        raise ValueError(f"Guess {guess!r} and secret have different lengths "
                         f"({len(guess)} != {len(secret)})")

    out = []
    for g, s in zip(guess, secret):
        if g == s:
            out.append(Verdict.CORRECT)
        elif g in secret:
            out.append(Verdict.PRESENT)
        else:
            out.append(Verdict.ABSENT)
    return tuple(out)


class ProgrammaticOracle:
    """Callable oracle that knows the secret; counts how often it was asked."""

    def __init__(self, secret: str):
        self.secret = secret.strip().lower()
        self.calls = 0

    def __call__(self, guess: str) -> Feedback:
        self.calls += 1
        return compare(guess, self.secret)
