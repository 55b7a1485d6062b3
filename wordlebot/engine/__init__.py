from .feedback import Verdict, Feedback, WORD_LENGTH, is_winning, parse_response, to_pattern
from .knowledge import Knowledge, apply_learning
from .guess import NoCandidatesError, filter_candidates, make_guess
from .solve import GuessLimitExceeded, Solution, solve

__all__ = [
    "Verdict", "Feedback", "WORD_LENGTH", "is_winning", "parse_response", "to_pattern",
    "Knowledge", "apply_learning",
    "NoCandidatesError", "filter_candidates", "make_guess",
    "GuessLimitExceeded", "Solution", "solve",
]
