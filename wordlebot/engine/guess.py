"""
Guess selection from the current Knowledge.

Two steps:
  1) Filter the full word list down to the words still consistent with
     everything learned so far (the valid set).
  2) Pick the next guess from the valid set:
       - one or two words left: take the first one (word-list order)
       - three or more: take the word covering the most frequent letters

Scoring:
  - A letter histogram is built over the valid set (raw character counts,
    so a word with a doubled letter contributes it twice).
  - A word scores the sum of the histogram values of its DISTINCT letters.
  - A letter that already appeared in a previous guess scores 0, unless it
    is known to be in the secret. Re-testing letters we already spent a
    guess on tells us nothing new.
  - Ties go to the earliest word in the valid set.

The heuristic is greedy; it does not minimize the expected number of turns.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Optional

from .knowledge import Knowledge

log = logging.getLogger(__name__)


class NoCandidatesError(RuntimeError):
    """
    No word in the list is consistent with the feedback seen so far.

    Either the word list does not contain the secret, or the feedback was
    contradictory. There is no sensible guess to make.
    """


def is_valid(word: str, knowledge: Knowledge) -> bool:
    """Return True if `word` agrees with every fact in `knowledge`."""
    # Confirmed letters must sit at their confirmed positions
    if any(word[pos] != ch for ch, pos in knowledge.correct_letters):
        return False

    # Present letters must appear somewhere...
    if any(ch not in word for ch in knowledge.contained_letters):
        return False

    # ...but not where they were already tried
    if any(word[pos] == ch for ch, pos in knowledge.excluded_positions()):
        return False

    return word not in knowledge.guessed_words


def filter_candidates(words: Iterable[str], knowledge: Knowledge) -> List[str]:
    """
    Keep only the words consistent with `knowledge` (order preserved).

    Filtering is idempotent: filtering the output again with the same
    knowledge returns the same list.
    """
    return [w for w in words if is_valid(w, knowledge)]


def letter_frequency(words: Iterable[str]) -> Counter:
    """Raw letter counts across all `words`."""
    return Counter("".join(words))


def word_score(word: str, frequency: Counter, knowledge: Knowledge) -> int:
    """
    Sum letter frequencies, counting each letter at most once per word.

    Letters that showed up in an earlier guess score nothing unless they are
    already known to be in the secret.
    """
    known = knowledge.known_letters()
    s = 0
    for ch in set(word):
        if ch not in known and any(ch in g for g in knowledge.guessed_words):
            continue
        s += frequency[ch]
    return s


def revealing_word(words: List[str], knowledge: Knowledge) -> str:
    """Return the first word with the maximal score."""
    frequency = letter_frequency(words)

    best_word: Optional[str] = None
    best_score = -1
    for w in words:
        s = word_score(w, frequency, knowledge)
        if s > best_score:
            best_word, best_score = w, s
    if best_word is None:
        raise NoCandidatesError("No words to choose a guess from")
    return best_word


def make_guess(candidate_words: Iterable[str], knowledge: Knowledge) -> str:
    """
    Choose the next guess.

    Raises:
      NoCandidatesError: no word in `candidate_words` fits `knowledge`.
    """
    valid = filter_candidates(candidate_words, knowledge)
    if not valid:
        raise NoCandidatesError(
            f"No candidate word fits the feedback after {len(knowledge.guessed_words)} guess(es): "
            f"{list(knowledge.guessed_words)}")

    if len(valid) > 2:
        guess = revealing_word(valid, knowledge)
        log.info("%d possibilities, trying %s", len(valid), guess)
        return guess

    return valid[0]
