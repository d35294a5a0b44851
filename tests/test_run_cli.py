import json
from pathlib import Path

from apps.cli import run as run_cli


def test_batch_run_writes_reports(tmp_path: Path, capsys):
    rc = run_cli.main(["--sample", "3", "--outdir", str(tmp_path), "--no-progress", "--seed", "9"])
    assert rc == 0
    assert "/3 solved" in capsys.readouterr().out

    manifests = list(tmp_path.glob("run_*_manifest.json"))
    assert len(manifests) == 1
    data = json.loads(manifests[0].read_text(encoding="utf-8"))
    assert data["summary"]["games"] == 3
    assert data["solver_id"] == "random_consistent"
    assert len(list(tmp_path.glob("run_*.csv"))) == 1


def test_batch_run_unknown_solver(tmp_path: Path):
    assert run_cli.main(["--solver", "nope", "--outdir", str(tmp_path), "--no-progress"]) == 1


def test_batch_run_word_file_report(tmp_path: Path):
    words = tmp_path / "words.txt"
    words.write_text("arise\nroute\nrules\nrebus\n", encoding="utf-8")
    rc = run_cli.main(["--word-file", str(words), "--outdir", str(tmp_path / "out"), "--no-progress"])
    assert rc == 0

    data = json.loads(next((tmp_path / "out").glob("run_*_manifest.json")).read_text(encoding="utf-8"))
    assert data["wordlist"]["source"] == str(words)
    assert data["wordlist"]["report"]["passed"] is True
    assert data["summary"]["games"] == 4

    header = next((tmp_path / "out").glob("run_*.csv")).read_text(encoding="utf-8").splitlines()[0]
    assert header.endswith("guess_6,feedback_6")
