"""
Batch run reports.

A self-play run writes two files side by side:

  run_<id>.csv            one row per game: answer, outcome and the
                          guess/feedback pair of every turn
  run_<id>_manifest.json  solver, word list, command line and the
                          win/guess summary of the run

Feedback cells hold the '!~x' string with a leading apostrophe. Spreadsheet
apps would otherwise read a cell like '!x~x~' as a formula.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
from collections import Counter
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from mrdle import __version__
from mrdle.datasets.wordstore import WordStore
from mrdle.engine import Hint, encode_feedback

GAME_FIELDS = ["solver", "answer", "word_length", "success", "guesses", "time_ms"]


def turn_fields(max_turns: int) -> List[str]:
    """guess_1, feedback_1, ..., guess_<max_turns>, feedback_<max_turns>"""
    fields: List[str] = []
    for turn in range(1, max_turns + 1):
        fields += [f"guess_{turn}", f"feedback_{turn}"]
    return fields


def game_row(result: Dict, max_turns: int) -> Dict:
    """Flatten one run_case() result; turns after the last guess stay empty."""
    history: Sequence[Hint] = result["history"]
    if len(history) > max_turns:
        raise ValueError(f"game for {result['answer']!r} has {len(history)} guesses; max_turns is {max_turns}")

    row = {
        "solver": result.get("solver_id", "?"),
        "answer": result["answer"],
        "word_length": len(result["answer"]),
        "success": result["success"],
        "guesses": len(history),
        "time_ms": round(float(result["time_ms"]), 3),
    }
    for turn in range(1, max_turns + 1):
        if turn <= len(history):
            hint = history[turn - 1]
            row[f"guess_{turn}"] = hint.guess
            row[f"feedback_{turn}"] = "'" + encode_feedback(hint.feedback)
        else:
            row[f"guess_{turn}"] = ""
            row[f"feedback_{turn}"] = ""
    return row


def write_games_csv(results: Iterable[Dict], path: Path | str, *, max_turns: int) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=GAME_FIELDS + turn_fields(max_turns))
        w.writeheader()
        w.writerows(game_row(r, max_turns) for r in results)
    return p


def summarize(results: Sequence[Dict]) -> Dict:
    """
    Outcome of a batch.

    guess_distribution counts won games by number of guesses, the way the
    game's own statistics screen does. Keys are strings so the dict goes
    straight into JSON.
    """
    wins = [r for r in results if r["success"]]
    dist = Counter(r["guesses"] for r in wins)
    return {
        "games": len(results),
        "wins": len(wins),
        "losses": len(results) - len(wins),
        "mean_guesses": sum(r["guesses"] for r in wins) / len(wins) if wins else 0.0,
        "guess_distribution": {str(n): dist[n] for n in sorted(dist)},
        "unsolved": sorted(r["answer"] for r in results if not r["success"]),
    }


def build_manifest(
        run_id: str,
        *,
        solver_id: str,
        store: WordStore,
        results: Sequence[Dict],
        config: Dict,
        wordlist_report: Dict | None = None,
) -> Dict:
    """wordlist_report is the validate_wordlist() dict when the run used a word file."""
    wordlist = {
        "source": config.get("word_file") or "built-in",
        "words": store.count(),
        "word_length": store.word_length(),
    }
    if wordlist_report is not None:
        wordlist["report"] = wordlist_report
    return {
        "run_id": run_id,
        "version": __version__,
        "solver_id": solver_id,
        "config": config,
        "wordlist": wordlist,
        "summary": summarize(results),
    }


def write_manifest(manifest: Dict, path: Path | str) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2)
    return p


def new_run_id() -> str:
    """UTC timestamp for report file names, e.g. 20261019T142501Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
