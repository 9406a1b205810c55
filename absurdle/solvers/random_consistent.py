"""
Random Consistent solver.

Strategy:
  - Choose uniformly at random from the CURRENT candidate set (words still
    consistent with all feedback so far).

Against the adversary this always terminates: the guessed word sits alone in
the all-EXACT group, so every round removes at least that word unless it is
the last one standing.
"""

from __future__ import annotations

from typing import List
from .base import BaseSolver, register


@register
class RandomConsistentSolver(BaseSolver):
    id = "random_consistent"
    name = "Random Consistent"
    version = "1.0.0"

    def next_guess(self, state: dict) -> str:
        """
        Pick any candidate uniformly at random (seeded RNG).

        Args:
            state: dict with keys:
                - "candidates": current candidate set, sorted (List[str])
        """
        candidates: List[str] = state["candidates"]
        return candidates[self.rng.randrange(len(candidates))]
