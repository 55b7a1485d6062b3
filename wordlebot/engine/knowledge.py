"""
Knowledge accumulated from past guesses.

Knowledge is an immutable value. Each piece of feedback produces a brand-new
Knowledge through `apply_learning`; nothing is mutated in place, so a single
`solve` call can thread it through its loop without any shared state.

Fields:
  - guessed_words     : words guessed so far, in guess order
  - correct_letters   : (letter, position) pairs confirmed CORRECT
  - contained_letters : letter -> positions where it was tried and came back
                        PRESENT (the letter is in the secret, but not there)

Every update is monotonic: the output holds every fact of the input.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Tuple

from .feedback import Verdict


@dataclass(frozen=True)
class Knowledge:
    guessed_words: Tuple[str, ...] = ()
    correct_letters: FrozenSet[Tuple[str, int]] = frozenset()
    # Read-only view; left out of the hash since mapping views are unhashable.
    contained_letters: Mapping[str, Tuple[int, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Accept lists/sets from callers but store immutable containers.
        object.__setattr__(self, "guessed_words", tuple(self.guessed_words))
        object.__setattr__(self, "correct_letters", frozenset(self.correct_letters))
        object.__setattr__(self, "contained_letters", MappingProxyType(
            {ch: tuple(pos) for ch, pos in self.contained_letters.items()}))

    @classmethod
    def empty(cls) -> "Knowledge":
        return cls()

    def known_letters(self) -> FrozenSet[str]:
        """Letters confirmed to be in the secret (correct or contained)."""
        return frozenset(self.contained_letters) | {ch for ch, _ in self.correct_letters}

    def excluded_positions(self) -> Iterable[Tuple[str, int]]:
        """Yield every (letter, position) pair the letter is known NOT to occupy."""
        for ch, positions in self.contained_letters.items():
            for pos in positions:
                yield ch, pos


def _merge_contained(original: Mapping[str, Tuple[int, ...]],
                     tried: Iterable[Tuple[str, int]]) -> Dict[str, Tuple[int, ...]]:
    """Copy `original` and append each newly tried position to its letter's entry."""
    merged: Dict[str, Tuple[int, ...]] = dict(original)
    for ch, pos in tried:
        positions = tuple(merged.get(ch, ()))
        if pos not in positions:
            merged[ch] = positions + (pos,)
    return merged


def apply_learning(knowledge: Knowledge, guess: str, feedback: Iterable[Verdict]) -> Knowledge:
    """
    Fold the feedback for `guess` into a new Knowledge value.

    Preconditions:
      - len(guess) == len(feedback)  (a mismatch raises ValueError)
    """
    verdicts = tuple(feedback)
    if len(guess) != len(verdicts):
        raise ValueError(
            f"Feedback length {len(verdicts)} does not match guess {guess!r} ({len(guess)} letters)")

    correct = {(ch, i) for i, (ch, v) in enumerate(zip(guess, verdicts)) if v is Verdict.CORRECT}
    present = [(ch, i) for i, (ch, v) in enumerate(zip(guess, verdicts)) if v is Verdict.PRESENT]

    return Knowledge(
        guessed_words=knowledge.guessed_words + (guess,),
        correct_letters=knowledge.correct_letters | correct,
        contained_letters=_merge_contained(knowledge.contained_letters, present),
    )

