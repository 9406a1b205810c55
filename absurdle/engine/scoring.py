"""
Feedback computation for a single (candidate, guess) pair.

Algorithm (two-pass, canonical for Wordle):
  1) Count every letter of the candidate.
  2) First pass marks all EXACT positions and consumes one count for each.
  3) Second pass marks PARTIAL only if the guessed letter still has a
     remaining count, consuming it; everything else stays ABSENT.

The EXACT pass must finish before any PARTIAL is handed out, otherwise an
early duplicate would steal a count that belongs to a later exact match:

  evaluate("ELITE", "EERIE") -> EXACT, ABSENT, ABSENT, PARTIAL, EXACT

Comparison is per character and case-sensitive; normalizing input is the
caller's job (see harness.session).
"""

from collections import Counter
from typing import List

from .errors import InvalidGuess
from .feedback import Mark, Pattern


def evaluate(candidate: str, guess: str) -> Pattern:
    """
    Feedback `guess` would receive if `candidate` were the secret.

    Preconditions:
      - len(candidate) == len(guess), else InvalidGuess

    Examples:
      evaluate("ABCDE", "AABBC") -> (EXACT, ABSENT, PARTIAL, ABSENT, PARTIAL)
      evaluate("crane", "crane") -> (EXACT,) * 5
    """
    if len(candidate) != len(guess):
        raise InvalidGuess(
            f"Guess {guess!r} has length {len(guess)}, expected {len(candidate)}")

    marks: List[Mark] = [Mark.ABSENT] * len(guess)
    remaining = Counter(candidate)

    # Pass 1: exact matches consume their letter first.
    for i, (c, g) in enumerate(zip(candidate, guess)):
        if c == g:
            marks[i] = Mark.EXACT
            remaining[c] -= 1

    # Pass 2: partials, capped by what is left of each letter.
    for i, g in enumerate(guess):
        if marks[i] is Mark.EXACT:
            continue
        if remaining[g] > 0:
            marks[i] = Mark.PARTIAL
            remaining[g] -= 1

    return tuple(marks)
