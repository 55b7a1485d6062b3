import csv
import json
from wordlebot.harness import RunReport, run_batch, run_case, summarize, write_csv

WORDS = ["crane", "raise", "stare", "trace", "cared"]


def test_run_case_smoke():
    r = run_case(WORDS, "crane")
    assert r["success"] is True
    assert r["history"][-1] == ("crane", "GGGGG")
    assert r["guesses"] == len(r["history"])


def test_run_case_answer_not_in_list():
    r = run_case(["abc", "abd", "abe"], "abf")
    assert r["success"] is False
    assert r["error"] == "NoCandidatesError"
    assert [g for g, _ in r["history"]] == ["abc", "abd", "abe"]


def test_run_case_guess_cap():
    r = run_case(["abc", "abd", "abe"], "abe", max_guesses=1)
    assert r["success"] is False and r["error"] == "GuessLimitExceeded"


def test_run_batch_sample_and_summary():
    results = run_batch(WORDS, WORDS, sample=3)
    assert [r["answer"] for r in results] == WORDS[:3]
    s = summarize(results)
    assert s["games"] == 3 and s["solved"] == 3
    assert sum(s["histogram"].values()) == 3
    assert s["worst"] >= s["mean_guesses"] >= 1


def test_write_csv_columns(tmp_path):
    results = run_batch(WORDS, ["stare"])
    path = write_csv(results, str(tmp_path / "out" / "run.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["answer"] == "stare"
    n = len(results[0]["history"])
    assert rows[0][f"guess_{n}"] == "stare"
    assert rows[0][f"patt_{n}"] == "'GGGGG"


def test_run_report_records_summary_and_failures(tmp_path):
    results = [run_case(WORDS, "crane"), run_case(WORDS, "zzzzz")]
    report = RunReport.from_results(results, run_id="20260101T000000Z", git_commit="abc1234",
                                    config={"sample": None}, wordlist={"passed": True})
    assert report.summary["games"] == 2 and report.summary["solved"] == 1
    assert report.failed == ["zzzzz"]

    path = report.write(str(tmp_path / "out" / "run.json"))
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    assert data["run_id"] == "20260101T000000Z"
    assert data["failed"] == ["zzzzz"]
    assert data["summary"]["solved"] == 1
