"""
Word-list validator.

What this module does:
- Validate a word list for a given word length N before the solver uses it.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

The solver itself only needs clean words (see datasets.io.read_word_list,
which silently drops the rest); this report tells you how much was dropped.

Typical use:
    from wordlebot.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("words_alpha.txt", 5)
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordListReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    N: int               # required word length
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # lines that are not a clean N-letter word
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase alphabetic
      - must have exact length N
      - empty/whitespace-only lines are skipped (not counted as invalid)

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w == w.lower() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(path: str, N: int) -> Dict:
    """
    Validate a word list for length N.

    Returns a JSON-serializable dict (see WordListReport) whose `passed`
    flag requires at least one valid word and no duplicates. Lines of other
    lengths are reported but do not fail the check: general dictionaries are
    expected to hold words of every length.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(path, N, False, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    rep = WordListReport(
        path=str(p),
        N=N,
        exists=True,
        count=len(words),
        unique_count=len(set(words)),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
    )

    if rep.count == 0:
        rep.issues.append(f"word list contains 0 valid {N}-letter words")
    if invalid:
        rep.issues.append(f"{invalid} line(s) are not clean {N}-letter words (ignored)")
    if rep.count != rep.unique_count:
        rep.issues.append("word list contains duplicate words")

    rep.passed = rep.count > 0 and rep.count == rep.unique_count
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=15918 (uniq=15918, sha=abc123...) | ignored=354187 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, sha={sha}) "
        f"| ignored={report['invalid_lines']} | {status}"
    )
