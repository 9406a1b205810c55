"""
One game of Absurdle.

`GameSession` is the per-game context: word length, the live candidate set,
and the patterns reported so far. Nothing about a game lives at module level,
so any number of sessions can run side by side as long as each keeps its own
object.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Set, Tuple

from absurdle.engine import (
    InvalidConfiguration, InvalidGuess, Pattern, is_solved, prune_dictionary, render, select,
)
from absurdle.engine.feedback import DEFAULT_STYLE

log = logging.getLogger(__name__)


class GameSession:
    def __init__(self, candidates: Set[str], length: int):
        self.length = length
        self.candidates = candidates
        self.history: List[Tuple[str, Pattern]] = []

    @classmethod
    def start(cls, words: Iterable[str], length: int) -> "GameSession":
        """
        Seed a session from a raw word list. Words are stripped and lowercased,
        the same way `guess` treats its input.

        Raises InvalidConfiguration if length < 1 or no word has that length.
        """
        candidates = prune_dictionary((w.strip().lower() for w in words), length)
        if not candidates:
            raise InvalidConfiguration(f"Dictionary has no words of length {length}")
        log.info("new game: N=%d, %d candidates", length, len(candidates))
        return cls(candidates, length)

    @property
    def remaining(self) -> int:
        return len(self.candidates)

    @property
    def rounds(self) -> int:
        return len(self.history)

    @property
    def patterns(self) -> List[Pattern]:
        return [p for _, p in self.history]

    @property
    def solved(self) -> bool:
        return bool(self.history) and is_solved(self.history[-1][1])

    def guess(self, word: str) -> Pattern:
        """
        Play one round. The guess is stripped and lowercased, then handed to
        the adversary, which narrows `self.candidates`.

        Raises InvalidGuess on a wrong-length guess or once the game is won.
        """
        if self.solved:
            raise InvalidGuess("Game is already solved")
        w = word.strip().lower()
        if len(w) != self.length:
            raise InvalidGuess(f"Guess {w!r} has length {len(w)}, expected {self.length}")

        patt = select(w, self.candidates)
        self.history.append((w, patt))
        if is_solved(patt):
            log.info("solved in %d round(s): %s", self.rounds, w)
        return patt

    def summary(self, style: str = DEFAULT_STYLE) -> str:
        """
        End-of-game text:

            Absurdle 3/∞

            ⬜⬜🟨⬜⬜
            ...
        """
        lines = [f"Absurdle {self.rounds}/∞", ""]
        lines += [render(p, style) for p in self.patterns]
        return "\n".join(lines)
