"""
Experiment harness core primitives.

- run_case:  play one game of an automated solver against the adversary.
- run_batch: play many games (one per seed) with the same solver.
- summarize: aggregate round counts across a batch.

There is no hidden answer: the adversary decides as it goes, so a game is
fully determined by the dictionary, N, and the solver's RNG seed. A round
cap guards against solvers that never converge.

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or future services without changes.
"""

from __future__ import annotations
import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

import numpy as np

from absurdle.engine import render
from absurdle.harness.session import GameSession

log = logging.getLogger(__name__)

# Safety cap for automated games; the game itself is unbounded.
MAX_ROUNDS = 100


def run_case(
        solver,
        words: Iterable[str],
        *,
        N: int,
        seed: int | None = None,
        max_rounds: int = MAX_ROUNDS,
) -> Dict:
    """
    Play one game until the solver wins or `max_rounds` is reached.

    Args:
        solver:     an object implementing BaseSolver with next_guess(state)
        words:      the raw dictionary (pruned to length N here)
        N:          word length
        seed:       RNG seed to make solver tie-breaks reproducible
        max_rounds: give up after this many rounds

    Returns:
        dict with keys:
            success (bool), rounds (int), time_ms (float), start_size (int),
            history (list[(guess, plain pattern, remaining)])
    """
    if max_rounds < 1:
        raise ValueError(f"max_rounds must be positive; got {max_rounds}")

    session = GameSession.start(words, N)
    allowed = sorted(session.candidates)
    solver.reset(allowed=allowed, N=N, seed=seed)

    start_size = session.remaining
    history = []

    t0 = time.perf_counter()
    for turn in range(1, max_rounds + 1):
        state = {
            "turn": turn,
            "N": N,
            "candidates": sorted(session.candidates),
            "allowed": allowed,
            "history": [(g, p) for g, p, _ in history],
        }
        guess = solver.next_guess(state)
        patt = session.guess(guess)
        history.append((guess, render(patt, "plain"), session.remaining))
        if session.solved:
            break

    dt = (time.perf_counter() - t0) * 1000.0
    if not session.solved:
        log.warning("%s gave up after %d rounds (%d candidates left)",
                    getattr(solver, "id", "?"), max_rounds, session.remaining)
    return {
        "success": session.solved,
        "rounds": session.rounds,
        "time_ms": dt,
        "start_size": start_size,
        "history": history,
    }


def run_batch(
        solver,
        words: List[str],
        *,
        N: int,
        games: int,
        seed: int | None = None,
        max_rounds: int = MAX_ROUNDS,
        on_game: Optional[Callable[[int, Dict], None]] = None,
) -> List[Dict]:
    """
    Run `games` games back-to-back.

    Each game's seed is derived from the base seed (seed + index) to make
    runs reproducible but not identical across games. `on_game(idx, result)`
    is called after each game (progress reporting).
    """
    out: List[Dict] = []
    for idx in range(1, games + 1):
        game_seed = None if seed is None else (seed + idx)
        r = run_case(solver, words, N=N, seed=game_seed, max_rounds=max_rounds)
        r["seed"] = game_seed
        out.append(r)
        if on_game is not None:
            on_game(idx, r)
    return out


def summarize(results: List[Dict]) -> Dict:
    """
    Aggregate a batch: games, win rate, and round statistics over won games.
    """
    if not results:
        return {"games": 0, "win_rate": 0.0, "mean_rounds": None,
                "median_rounds": None, "max_rounds": None}

    won = np.array([r["rounds"] for r in results if r["success"]], dtype=float)
    return {
        "games": len(results),
        "win_rate": float(len(won) / len(results)),
        "mean_rounds": float(won.mean()) if won.size else None,
        "median_rounds": float(np.median(won)) if won.size else None,
        "max_rounds": int(won.max()) if won.size else None,
    }
