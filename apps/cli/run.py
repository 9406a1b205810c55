# apps/cli/run.py
"""
Batch runner: automated solvers against the adversary.

This script:
  1) Validates the dictionary for the requested length (prints counts + SHA).
  2) Loads the dictionary and, for each requested solver, plays --games games
     (one RNG seed per game) with a live progress indicator.
  3) Writes, per solver, under <outdir>/<solver_id>/:
       - CSV:  per-game results + guess/pattern/remaining history columns
       - JSON: manifest with config, dictionary report, summary, git commit

Usage:
    python -m apps.cli.run --dict dictionary.txt --N 5 --solvers ALL --games 20
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from absurdle.datasets import load_words, validate_wordlist, pretty_summary
from absurdle.harness import run_batch, summarize
from absurdle.harness.core import MAX_ROUNDS
from absurdle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from absurdle.solvers import create_solver, get_solver_ids


def _run_one_solver(solver_id: str, words: list[str], *, args, report: dict) -> tuple[str, str]:
    solver = create_solver(solver_id)

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    bar = tqdm(total=args.games, ncols=80, desc=solver_id, unit="game", disable=not show_bar)

    def _tick(idx: int, result: dict) -> None:
        result["solver_id"] = solver.id  # stamp id for downstream tools
        bar.update(1)

    try:
        results = run_batch(solver, words, N=args.N, games=args.games, seed=args.seed,
                            max_rounds=args.max_rounds, on_game=_tick)
    finally:
        bar.close()

    summary = summarize(results)

    run_id = timestamp_id()
    sdir = Path(args.outdir) / solver_id
    sdir.mkdir(parents=True, exist_ok=True)
    csv_path = sdir / f"run_{run_id}.csv"
    manifest_path = sdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), N=args.N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "dictionary": report,
        "summary": summary,
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    mean = summary["mean_rounds"]
    print(f"{solver_id}: win rate {summary['win_rate']:.0%}, "
          f"mean rounds {mean if mean is None else round(mean, 2)}, max {summary['max_rounds']}")
    return str(csv_path), str(manifest_path)


def main(argv: list[str] | None = None) -> int:
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="absurdle — run automated solvers against the adversary")
    ap.add_argument("--dict", dest="dictionary", required=True, help="dictionary file")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--solvers", nargs="+", default=["random_consistent"],
                    help=f"solver ids or 'ALL'. Registered: {', '.join(registered)}")
    ap.add_argument("--games", type=int, default=10, help="games per solver (one seed each)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--max-rounds", type=int, default=MAX_ROUNDS,
                    help="give up on a game after this many rounds")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the dictionary and print a one-liner summary
    report = validate_wordlist(args.N, args.dictionary)
    print(pretty_summary(report))
    if not report["passed"]:
        for issue in report["issues"]:
            print(f"  - {issue}", file=sys.stderr)
        return 2

    # 2) Expand solver ids
    if len(args.solvers) == 1 and args.solvers[0].lower() == "all":
        todo = registered
    else:
        todo = args.solvers
        missing = [s for s in todo if s not in registered]
        if missing:
            raise SystemExit(f"Unknown solver ids: {missing}. Registered: {registered}")

    # 3) Run each solver on the same dictionary
    words = load_words(args.dictionary)
    for sid in todo:
        csv_path, manifest_path = _run_one_solver(sid, words, args=args, report=report)
        print(f"Wrote: {csv_path}")
        print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
