"""
Report files for batch runs.

- write_csv:  one row per solved (or abandoned) game, with the guess
              transcript spread over guess_i / patt_i columns.
- RunReport:  what a batch run was, and how it went; saved as JSON next
              to the CSV.

Pattern cells start with an apostrophe so spreadsheets keep "-GYY-" as text.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Optional
import csv
import json

from .core import summarize

BASE_COLUMNS = ["answer", "success", "guesses", "time_ms", "error"]


def _transcript_columns(history, turns: int) -> Dict[str, str]:
    cells: Dict[str, str] = {}
    for i in range(turns):
        guess, patt = history[i] if i < len(history) else ("", "")
        cells[f"guess_{i + 1}"] = guess
        cells[f"patt_{i + 1}"] = f"'{patt}" if patt else ""
    return cells


def write_csv(results: List[Dict], path: str, max_turns: Optional[int] = None) -> str:
    """
    Write `results` (as returned by run_batch) to `path`.

    The transcript gets `max_turns` guess/pattern column pairs; without it,
    enough pairs for the longest game in the batch. Returns the path written.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turns = max_turns
    if turns is None:
        turns = max((len(r["history"]) for r in results), default=0)
    columns = BASE_COLUMNS + [f"{kind}_{i}" for i in range(1, turns + 1) for kind in ("guess", "patt")]

    with p.open("w", newline="", encoding="utf-8") as f:
        out = csv.DictWriter(f, fieldnames=columns)
        out.writeheader()
        for r in results:
            row = {c: r.get(c, "") for c in BASE_COLUMNS}
            row["time_ms"] = round(float(r["time_ms"]), 3)
            row.update(_transcript_columns(r["history"], turns))
            out.writerow(row)

    return str(p)


@dataclass
class RunReport:
    """Configuration, word-list check and outcome of one batch run."""
    run_id: str
    git_commit: str
    config: Dict
    wordlist: Dict            # datasets.validate_wordlist(...) output
    summary: Dict = field(default_factory=dict)
    failed: List[str] = field(default_factory=list)

    @classmethod
    def from_results(cls, results: List[Dict], *, run_id: str, git_commit: str,
                     config: Dict, wordlist: Dict) -> "RunReport":
        return cls(
            run_id=run_id,
            git_commit=git_commit,
            config=dict(config),
            wordlist=wordlist,
            summary=summarize(results),
            failed=[r["answer"] for r in results if not r["success"]],
        )

    def write(self, path: str) -> str:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(asdict(self), indent=2) + "\n", encoding="utf-8")
        return str(p)
