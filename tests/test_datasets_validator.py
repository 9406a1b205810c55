from pathlib import Path
from absurdle.datasets import validate_wordlist, pretty_summary, load_words


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_words_normalizes(tmp_path: Path):
    d = tmp_path / "dict.txt"
    _write(d, ["Crane raise", "", "  STARE  "])
    assert load_words(d) == ["crane", "raise", "stare"]


def test_validate_wordlist_happy_path(tmp_path: Path):
    d = tmp_path / "dict.txt"
    _write(d, ["crane", "raise", "stare", "cat", "elephant"])

    rep = validate_wordlist(5, str(d))
    assert rep["passed"] is True
    assert rep["playable"] == 3 and rep["other_lengths"] == 2
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "N=5" in s and "playable=3" in s and s.endswith("OK")


def test_validate_wordlist_warns_but_passes(tmp_path: Path):
    d = tmp_path / "dict.txt"
    d.write_text("Crane\nraise stare\ncat\ncrane\nab1de\n", encoding="utf-8")

    rep = validate_wordlist(5, str(d))
    assert rep["passed"] is True
    assert rep["total"] == 6
    assert rep["playable"] == 5 and rep["unique_playable"] == 4
    assert rep["non_alpha"] == 1
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("non-alphabetic" in msg for msg in rep["issues"])


def test_validate_wordlist_no_playable_words(tmp_path: Path):
    d = tmp_path / "dict.txt"
    _write(d, ["cat", "dog"])

    rep = validate_wordlist(5, str(d))
    assert rep["passed"] is False
    assert any("0 words" in msg for msg in rep["issues"])
    assert pretty_summary(rep).endswith("FAIL")


def test_validate_wordlist_missing_file_and_bad_length(tmp_path: Path):
    rep = validate_wordlist(0, str(tmp_path / "nope.txt"))
    assert rep["passed"] is False and rep["exists"] is False
    assert any("not found" in msg for msg in rep["issues"])
    assert any("at least 1" in msg for msg in rep["issues"])
