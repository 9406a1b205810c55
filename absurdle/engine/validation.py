"""
Lightweight guess validation for drivers.

The engine itself only cares about length (and raises InvalidGuess when it
is wrong). A console driver wants a cheap yes/no before calling into the
engine so it can re-prompt instead. A guess is acceptable iff:
  - it is a string
  - it has exact length N after stripping whitespace
  - it is in `allowed`, when an allowed list is given

Unlike a real Wordle, the adversary happily accepts words outside its
dictionary, so `allowed` is optional.
"""

from typing import Iterable, Optional, Set


def validate_guess(word: str, N: int, allowed: Optional[Iterable[str]] = None) -> bool:
    """
    Return True if `word` is a playable guess for length N.

    Notes:
      - Membership is checked case-insensitively. A set passed as `allowed`
        is used as-is, so it must already be lowercase.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != N:
        return False

    if allowed is None:
        return True
    allowed_set: Set[str] = allowed if isinstance(allowed, set) else {a.strip().lower() for a in allowed}
    return w in allowed_set
