"""
Dictionary filtering: turn a raw word list into the starting candidate set.

Only exact length matters here. Normalization (case, whitespace, blanks) is
done when the list is read from disk, see datasets.io.load_words.
"""

from typing import Iterable, Set

from .errors import InvalidConfiguration


def prune_dictionary(words: Iterable[str], length: int) -> Set[str]:
    """
    Keep only the words of exactly `length` characters.

    Returns:
      a set (duplicates collapse by construction)

    Raises:
      InvalidConfiguration if length < 1.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidConfiguration(f"Word length must be an integer; got {length!r}")
    if length < 1:
        raise InvalidConfiguration(f"Word length must be at least 1; got {length}")
    return {w for w in words if len(w) == length}
