"""
Dictionary validator for absurdle.

What this module does:
- Check a dictionary file against a requested word length N before a game.
- Count words, words of length N, unique playable words, duplicates, and
  words with non-alphabetic characters; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

A dictionary is allowed to contain words of other lengths (the game prunes
them), so those are reported but never fail validation. It fails when the
file is missing, N < 1, or no word of length N survives.

Typical use:
    from absurdle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "dictionary.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List
import hashlib

from .io import load_words


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class ValidationReport:
    """Validation result for one dictionary file and one word length."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    total: int           # words read (after lowercasing, blanks dropped)
    playable: int        # words of exactly length N
    unique_playable: int # distinct words of length N (starting candidate count)
    other_lengths: int   # words pruned for having another length
    non_alpha: int       # playable words containing non a–z characters
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _as_dict(rep: ValidationReport) -> Dict:
    """Dataclass → plain dict (stable ordering)."""
    return asdict(rep)


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for games of word length N.

    Parameters
    ----------
    N : int
        Word length the game will be played with.
    path : str
        Dictionary file (whitespace-separated words).

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema).
        `passed` is strict only about what makes a game impossible; the
        remaining checks are surfaced in `issues` as warnings.
    """
    issues: List[str] = []
    p = Path(path)

    if N < 1:
        issues.append(f"word length must be at least 1; got {N}")
    if not p.exists():
        issues.append(f"dictionary file not found: {path}")
    if issues:
        return _as_dict(ValidationReport(
            N=N, path=path, exists=p.exists(), sha256="", total=0, playable=0,
            unique_playable=0, other_lengths=0, non_alpha=0, passed=False, issues=issues,
        ))

    words = load_words(p)
    playable = [w for w in words if len(w) == N]
    unique = set(playable)
    non_alpha = sum(1 for w in playable if not w.isalpha())

    if not playable:
        issues.append(f"dictionary contains 0 words of length {N}")
    if len(playable) != len(unique):
        issues.append(f"dictionary has {len(playable) - len(unique)} duplicate word(s) of length {N}")
    if non_alpha:
        issues.append(f"dictionary has {non_alpha} word(s) with non-alphabetic characters")

    rep = ValidationReport(
        N=N,
        path=str(p),
        exists=True,
        sha256=_sha256_file(p),
        total=len(words),
        playable=len(playable),
        unique_playable=len(unique),
        other_lengths=len(words) - len(playable),
        non_alpha=non_alpha,
        passed=bool(playable),
        issues=issues,
    )
    return _as_dict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        N=5 | words=9 (playable=5, uniq=5, sha=abc123def456) | pruned=4 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['total']} "
        f"(playable={report['playable']}, uniq={report['unique_playable']}, sha={sha}) "
        f"| pruned={report['other_lengths']} | {status}"
    )
