"""
The adversary.

For a guess, every candidate is bucketed by the feedback it would produce.
The adversary keeps the largest bucket and throws the rest away, so the
guesser learns as little as possible this round. It is greedy on purpose:
no lookahead over future guesses.

Ties go to the smallest pattern in tuple order (ABSENT < PARTIAL < EXACT),
i.e. the first maximal key when the buckets are iterated in sorted order.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Set

from .errors import InvalidGuess
from .feedback import Pattern
from .scoring import evaluate

log = logging.getLogger(__name__)


def partition(guess: str, candidates: Iterable[str]) -> Dict[Pattern, List[str]]:
    """
    Group candidates by the pattern `guess` would receive against each.

    Returns:
      dict with keys in ascending pattern order; each member list is sorted.
      Every candidate appears in exactly one group.
    """
    buckets: Dict[Pattern, List[str]] = defaultdict(list)
    for w in sorted(set(candidates)):
        buckets[evaluate(w, guess)].append(w)
    return {p: buckets[p] for p in sorted(buckets)}


def bucket_sizes(guess: str, candidates: Iterable[str]) -> Dict[Pattern, int]:
    """Size of each group `partition` would build. Does not mutate anything."""
    sizes: Dict[Pattern, int] = defaultdict(int)
    for w in set(candidates):
        sizes[evaluate(w, guess)] += 1
    return dict(sizes)


def _check_round(guess: str, candidates: Set[str]) -> None:
    if not candidates:
        raise InvalidGuess("No candidates left to choose from")
    length = len(next(iter(candidates)))
    if len(guess) != length:
        raise InvalidGuess(f"Guess {guess!r} has length {len(guess)}, expected {length}")


def select(guess: str, candidates: Set[str]) -> Pattern:
    """
    Play one adversarial round.

    Args:
      guess      : the guesser's word (same length as the candidates)
      candidates : the current candidate set; narrowed IN PLACE to the
                   chosen group

    Returns:
      The pattern reported to the guesser.

    Raises:
      InvalidGuess if `candidates` is empty or `guess` has the wrong length.
    """
    _check_round(guess, candidates)

    groups = partition(guess, candidates)

    # First maximal key in sorted order wins ties.
    chosen = None
    for patt, members in groups.items():
        if chosen is None or len(members) > len(groups[chosen]):
            chosen = patt

    before = len(candidates)
    candidates.clear()
    candidates.update(groups[chosen])
    log.debug("guess=%s groups=%d kept=%d/%d", guess, len(groups), len(candidates), before)
    return chosen
