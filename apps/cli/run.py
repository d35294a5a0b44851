# apps/cli/run.py
"""
Batch self-play: let a solver play every word of a list and record the games.

This script:
  1) Validates the word list (prints counts + SHA, uniform length check).
  2) Loads it into a WordStore and instantiates the requested solver.
  3) Runs a batch of games with a progress bar and writes:
       - CSV:  per-case results + guess/feedback history columns
       - JSON: manifest with config, word-list report, win rate, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import List

from tqdm import tqdm

from mrdle.datasets import WordStore, validate_wordlist, pretty_summary
from mrdle.engine import InvalidWordList
from mrdle.harness import MAX_TURNS, run_batch
from mrdle.harness.io import build_manifest, new_run_id, summarize, write_games_csv, write_manifest
from mrdle.solvers import create_solver, get_solver_ids

log = logging.getLogger("mrdle.run")

DEFAULT_SEED = 123


def main(argv: List[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="mrdle: batch self-play")
    ap.add_argument("--solver", default="random_consistent",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--word-file", default="",
                    help="word list (default: built-in list)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of words (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=DEFAULT_SEED, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--no-progress", action="store_true", help="hide the progress bar")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(name)s: %(message)s")

    # 1) Validate and load the word list
    rep = None
    try:
        if args.word_file:
            rep = validate_wordlist(args.word_file)
            print(pretty_summary(rep))
            store = WordStore.from_file(args.word_file, seed=args.seed)
        else:
            store = WordStore.default(seed=args.seed)
    except InvalidWordList as e:
        log.error("Invalid word file: %s", e)
        return 1
    if store.count() == 0:
        log.error("Word list is empty")
        return 1

    # 2) Instantiate solver by id
    try:
        solver = create_solver(args.solver)
    except ValueError as e:
        log.error("%s", e)
        return 1

    # 3) Choose cases (deterministic sample by seed)
    cases = store.words()
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]

    # 4) Run batch with live progress
    progress = tqdm(cases, ncols=80, desc="Running", unit="game", disable=args.no_progress)
    results = run_batch(solver, progress, store=store, max_turns=MAX_TURNS, seed=args.seed)

    summary = summarize(results)
    print(f"{solver.id}: {summary['wins']}/{summary['games']} solved, "
          f"mean guesses {summary['mean_guesses']:.2f}")

    # 5) Write outputs (CSV + manifest)
    run_id = new_run_id()
    outdir = Path(args.outdir)
    csv_path = write_games_csv(results, outdir / f"run_{run_id}.csv", max_turns=MAX_TURNS)
    manifest = build_manifest(run_id, solver_id=solver.id, store=store, results=results,
                              config=vars(args), wordlist_report=rep)
    manifest_path = write_manifest(manifest, outdir / f"run_{run_id}_manifest.json")

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
