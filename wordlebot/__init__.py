"""wordlebot: an automated player for Wordle-style word-guessing games."""

from .engine import Knowledge, Solution, Verdict, make_guess, solve

__version__ = "0.1.0"

__all__ = ["Knowledge", "Solution", "Verdict", "make_guess", "solve"]
