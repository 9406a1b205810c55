"""
Feedback marks and patterns.

A pattern is a tuple of `Mark` values, one per letter of the guess. Marks are
an IntEnum so that patterns compare as plain tuples:

    ABSENT (0) < PARTIAL (1) < EXACT (2)

The selector relies on this ordering to break ties between equally large
groups, so an all-EXACT pattern is never preferred in a tie.

Glyphs are only used at the boundary (console, CSV):
  - 'emoji' : 🟩 exact, 🟨 partial, ⬜ absent
  - 'plain' : 'G' exact, 'Y' partial, '-' absent
"""

from enum import IntEnum
from typing import Dict, Tuple


class Mark(IntEnum):
    ABSENT = 0
    PARTIAL = 1
    EXACT = 2


Pattern = Tuple[Mark, ...]

GLYPHS: Dict[str, Dict[Mark, str]] = {
    "emoji": {Mark.EXACT: "🟩", Mark.PARTIAL: "🟨", Mark.ABSENT: "⬜"},
    "plain": {Mark.EXACT: "G", Mark.PARTIAL: "Y", Mark.ABSENT: "-"},
}
DEFAULT_STYLE = "emoji"


def _glyph_table(style: str) -> Dict[Mark, str]:
    try:
        return GLYPHS[style]
    except KeyError as e:
        raise ValueError(f"Unknown glyph style: {style}. Available: {sorted(GLYPHS)}") from e


def render(pattern: Pattern, style: str = DEFAULT_STYLE) -> str:
    """
    Render a pattern as a string of glyphs.

    Example:
      render((Mark.EXACT, Mark.ABSENT, Mark.PARTIAL), "plain") -> "G-Y"
    """
    table = _glyph_table(style)
    return "".join(table[m] for m in pattern)


def parse(text: str, style: str = "plain") -> Pattern:
    """
    Inverse of `render`. Raises ValueError on an unknown glyph.
    """
    reverse = {g: m for m, g in _glyph_table(style).items()}
    out = []
    for ch in text:
        if ch not in reverse:
            raise ValueError(f"Unknown {style} glyph {ch!r} in pattern {text!r}")
        out.append(reverse[ch])
    return tuple(out)


def is_solved(pattern: Pattern) -> bool:
    """True iff every position is EXACT (the guesser has won)."""
    return len(pattern) > 0 and all(m is Mark.EXACT for m in pattern)
