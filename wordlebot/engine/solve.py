"""
The guessing loop.

  guess = make_guess(words, knowledge)
  feedback = oracle(guess)
  knowledge = apply_learning(knowledge, guess, feedback)

repeated until the feedback is all-correct. The oracle is any callable
mapping a guess to a Feedback: a human at a prompt, or a comparator that
knows the secret.

The loop only terminates on its own if the secret is in the word list and
the oracle is consistent. Otherwise the valid set eventually empties and
`make_guess` raises NoCandidatesError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from .feedback import Feedback, is_winning, to_pattern
from .guess import make_guess
from .knowledge import Knowledge, apply_learning

log = logging.getLogger(__name__)

# Anything that turns a guess into feedback.
Oracle = Callable[[str], Feedback]


class GuessLimitExceeded(RuntimeError):
    """The loop used up its `max_guesses` budget without a win."""

    def __init__(self, message: str, knowledge: Knowledge):
        super().__init__(message)
        self.knowledge = knowledge


@dataclass(frozen=True)
class Solution:
    """Full transcript of a solved game, winning guess last."""
    guess_sequence: Tuple[str, ...]

    @property
    def guesses(self) -> int:
        return len(self.guess_sequence)

    @property
    def answer(self) -> str:
        return self.guess_sequence[-1]


def solve(candidate_words: Sequence[str], feedback_oracle: Oracle, *,
          max_guesses: Optional[int] = None) -> Solution:
    """
    Guess until `feedback_oracle` reports an all-correct response.

    Args:
      candidate_words : same-length alphabetic words, in preference order
      feedback_oracle : callable(guess) -> Feedback
      max_guesses     : optional cap; None runs until solved

    Raises:
      NoCandidatesError  : the word list ran out of consistent words
      GuessLimitExceeded : `max_guesses` was reached without a win
      ValueError         : the oracle returned feedback of the wrong length
    """
    knowledge = Knowledge.empty()
    while True:
        if max_guesses is not None and len(knowledge.guessed_words) >= max_guesses:
            raise GuessLimitExceeded(
                f"Not solved within {max_guesses} guesses: {list(knowledge.guessed_words)}",
                knowledge)

        guess = make_guess(candidate_words, knowledge)
        feedback = tuple(feedback_oracle(guess))
        log.debug("guess %s -> %s", guess, to_pattern(feedback))
        knowledge = apply_learning(knowledge, guess, feedback)

        if is_winning(feedback):
            return Solution(guess_sequence=knowledge.guessed_words)
