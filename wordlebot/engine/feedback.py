"""
Per-letter feedback for a single guess.

Conventions:
  - CORRECT : letter matches the secret at this position
  - PRESENT : letter occurs in the secret, but not at this position
  - ABSENT  : letter does not occur in the secret

A Feedback is a tuple of Verdicts, one per letter position. Two textual
encodings are supported:

  - the response typed by a human player: 'y' correct, '.' present, 'x' absent
  - the report pattern written to CSVs:   'G' correct, 'Y' present, '-' absent
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable, Tuple

# Default word length for the game and the word lists.
WORD_LENGTH = 5


class Verdict(Enum):
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


Feedback = Tuple[Verdict, ...]


class InvalidResponseError(ValueError):
    """A typed response contains a character outside the response alphabet."""


RESPONSE_CHARS: Dict[str, Verdict] = {
    "y": Verdict.CORRECT,
    ".": Verdict.PRESENT,
    "x": Verdict.ABSENT,
}

PATTERN_CHARS: Dict[Verdict, str] = {
    Verdict.CORRECT: "G",
    Verdict.PRESENT: "Y",
    Verdict.ABSENT: "-",
}


def is_winning(feedback: Iterable[Verdict]) -> bool:
    """True iff every position is CORRECT (an empty feedback never wins)."""
    verdicts = tuple(feedback)
    return bool(verdicts) and all(v is Verdict.CORRECT for v in verdicts)


def parse_response(text: str) -> Feedback:
    """
    Parse a typed response such as "y.x.x" into a Feedback.

    Raises InvalidResponseError on the first unknown character. Length is
    not checked here; callers know the expected word length.
    """
    out = []
    for ch in text:
        try:
            out.append(RESPONSE_CHARS[ch])
        except KeyError:
            raise InvalidResponseError(f"Invalid character: {ch!r}") from None
    return tuple(out)


def to_pattern(feedback: Iterable[Verdict]) -> str:
    """
    Render feedback as a G/Y/- pattern string.

    Example:
      to_pattern((CORRECT, PRESENT, ABSENT)) -> "GY-"
    """
    return "".join(PATTERN_CHARS[v] for v in feedback)
