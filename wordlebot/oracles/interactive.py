"""
Feedback typed by a human player.

The oracle shows the guess, then reads one line per attempt:

    y : correct letter, correct position
    . : letter is in the word, elsewhere
    x : letter is not in the word

A response of the wrong length, or with any other character, gets a
diagnostic and a new prompt. The oracle never hands an error back to the
solver; end-of-input (EOFError) is left to propagate so the user can quit.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..engine.feedback import WORD_LENGTH, Feedback, InvalidResponseError, parse_response


class InteractiveOracle:
    def __init__(self, word_length: int = WORD_LENGTH, *,
                 input_fn: Optional[Callable[[str], str]] = None,
                 output_fn: Optional[Callable[[str], None]] = None):
        self.word_length = int(word_length)
        self._input = input_fn or input
        self._output = output_fn or print

    def __call__(self, guess: str) -> Feedback:
        self._output(f"Guess: {guess}")
        self._output(f"Type a {self.word_length} letter response - "
                     f"y: correct, . - in word, x - not involved")

        while True:
            response = self._input("> ").strip()
            if len(response) != self.word_length:
                self._output(f"Enter exactly {self.word_length} characters, got {len(response)}")
                continue
            try:
                return parse_response(response)
            except InvalidResponseError as e:
                self._output(f"Invalid response: {e}")
