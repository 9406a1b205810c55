"""
Minimize Worst Bucket.

Idea:
  The adversary always keeps the LARGEST feedback bucket, so the value of a
  guess g is exactly its worst bucket size against the current candidates.
  Pick the guess with the smallest worst bucket.
  Tie-break: prefer guesses that are still candidates (they can win), then RNG.

When the candidate set is large, the pool is the allowed words with the best
distinct-letter coverage over the candidates, capped at POOL_CAP.
"""

from __future__ import annotations
from typing import Dict, List
from .base import BaseSolver, register
from absurdle.engine import bucket_sizes


def _worst_bucket(guess: str, candidates: List[str]) -> int:
    sizes = bucket_sizes(guess, candidates)
    return max(sizes.values()) if sizes else 0


@register
class MinWorstSolver(BaseSolver):
    id = "min_worst"
    name = "Minimize Worst Bucket"
    version = "1.0.0"

    CANDIDATE_ONLY_LIMIT = 100
    POOL_CAP = 200

    def _distinct_letter_score(self, w: str, alpha: Dict[str, int]) -> int:
        return sum(alpha.get(ch, 0) for ch in set(w))

    def _select_pool(self, candidates: List[str], allowed: List[str]) -> List[str]:
        if len(candidates) <= self.CANDIDATE_ONLY_LIMIT:
            return candidates
        alpha: Dict[str, int] = {}
        for w in candidates:
            for ch in set(w):
                alpha[ch] = alpha.get(ch, 0) + 1
        ranked = sorted(allowed, key=lambda w: self._distinct_letter_score(w, alpha), reverse=True)
        return ranked[: self.POOL_CAP]

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        allowed: List[str] = state["allowed"]
        live = set(candidates)

        best_key = None
        best: List[str] = []
        for g in self._select_pool(candidates, allowed):
            # (worst bucket, 0 if g can still win else 1): smaller is better
            key = (_worst_bucket(g, candidates), 0 if g in live else 1)
            if best_key is None or key < best_key:
                best_key, best = key, [g]
            elif key == best_key:
                best.append(g)

        return best[self.rng.randrange(len(best))]
