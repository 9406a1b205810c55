import io
from pathlib import Path

from apps.cli import play, run


def _dict(tmp_path: Path) -> Path:
    d = tmp_path / "dict.txt"
    d.write_text("cat dog a cot\n", encoding="utf-8")
    return d


def test_play_full_game(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ca\ncat\ndog\n"))
    rc = play.main(["--dict", str(_dict(tmp_path)), "--length", "3",
                    "--glyphs", "plain", "--show-remaining"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Invalid guess" in out
    assert ": ---" in out and "(1 word(s) left)" in out
    assert out.rstrip().endswith("Absurdle 2/∞\n\n---\nGGG")


def test_play_prompts_for_settings(tmp_path, monkeypatch, capsys):
    stdin = f"{_dict(tmp_path)}\nthree\n3\ncat\ndog\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    assert play.main([]) == 0
    assert "Absurdle 2/∞" in capsys.readouterr().out


def test_play_bad_length_and_eof(tmp_path, monkeypatch, capsys):
    assert play.main(["--dict", str(_dict(tmp_path)), "--length", "0"]) == 2
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert play.main(["--dict", str(_dict(tmp_path)), "--length", "3"]) == 1


def test_run_writes_reports(tmp_path, capsys):
    d = tmp_path / "dict.txt"
    d.write_text("crane raise stare trace cared adieu\n", encoding="utf-8")
    outdir = tmp_path / "reports"
    rc = run.main(["--dict", str(d), "--N", "5", "--solvers", "ALL", "--games", "2",
                   "--outdir", str(outdir), "--progress", "off"])
    assert rc == 0
    for sid in ["min_worst", "random_consistent"]:
        assert len(list((outdir / sid).glob("run_*.csv"))) == 1
        assert len(list((outdir / sid).glob("run_*_manifest.json"))) == 1


def test_run_rejects_unplayable_dictionary(tmp_path):
    d = tmp_path / "dict.txt"
    d.write_text("cat dog\n", encoding="utf-8")
    assert run.main(["--dict", str(d), "--N", "5", "--outdir", str(tmp_path)]) == 2


def test_play_strict_rejects_unknown_words(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("zzz\ncat\ndog\n"))
    rc = play.main(["--dict", str(_dict(tmp_path)), "--length", "3", "--strict"])
    out = capsys.readouterr().out
    assert rc == 0
    assert "Not in the dictionary: 'zzz'" in out
    assert "Absurdle 2/∞" in out
