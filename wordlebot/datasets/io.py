from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

from ..engine.feedback import WORD_LENGTH


def clean_words(tokens: Iterable[str], word_length: int = WORD_LENGTH) -> List[str]:
    """
    Keep tokens that are exactly `word_length` alphabetic characters,
    lowercased. Order is kept; later duplicates are dropped.
    """
    seen, out = set(), []
    for tok in tokens:
        w = tok.strip().lower()
        if len(w) != word_length or not w.isalpha() or w in seen:
            continue
        seen.add(w)
        out.append(w)
    return out


def read_word_list(p: Path | str, word_length: int = WORD_LENGTH) -> List[str]:
    """
    Load a dictionary file (whitespace-separated words, usually one per line)
    and return only the clean `word_length`-letter words.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return clean_words(p.read_text(encoding="utf-8").split(), word_length)


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
