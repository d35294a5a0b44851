import io
from pathlib import Path

import pytest
from apps.cli import play as cli

WORDS = ["arise", "route", "rules", "rebus"]


@pytest.fixture
def word_file(tmp_path: Path) -> str:
    p = tmp_path / "words.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return str(p)


def test_list_with_hints(word_file, capsys):
    rc = cli.main(["--word-file", word_file, "--list",
                   "--hint", "arise", "x~x~~", "--hint", "route", "!x~x~", "--hint", "rules", "!~x~!"])
    assert rc == 0
    assert capsys.readouterr().out == "rebus\n"


def test_list_without_hints_prints_all_sorted(word_file, capsys):
    assert cli.main(["--word-file", word_file, "--list"]) == 0
    assert capsys.readouterr().out.split() == sorted(WORDS)


def test_list_no_match(word_file, capsys):
    assert cli.main(["--word-file", word_file, "--list", "--hint", "rebus", "xxxxx"]) == 0
    assert capsys.readouterr().out == "<No words matched>\n"


def test_list_invalid_hint(word_file, capsys):
    assert cli.main(["--word-file", word_file, "--list", "--hint", "arise", "x~?~~"]) == 1
    assert capsys.readouterr().out == ""


def test_bad_word_file(tmp_path: Path):
    p = tmp_path / "bad.txt"
    p.write_text("cat\ndog\nmouse\n", encoding="utf-8")
    assert cli.main(["--word-file", str(p), "--list"]) == 1


def test_word_stats(capsys):
    assert cli.main(["--word-stats"]) == 0
    assert "Words: 476" in capsys.readouterr().out


def test_rules(capsys):
    assert cli.main(["--rules"]) == 0
    assert "!" in capsys.readouterr().out


def test_play_win(word_file):
    store = cli.load_store(word_file)
    out = io.StringIO()
    won = cli.play(store, "rebus", color=False, inp=io.StringIO("zzzzz\n\narise\nrebus\n"), out=out)
    text = out.getvalue()
    assert won is True
    assert "Not a word" in text
    assert "x~x~~" in text
    assert "Magnificent" in text


def test_play_loss(word_file):
    store = cli.load_store(word_file, seed=0)
    out = io.StringIO()
    won = cli.play(store, "rebus", color=False, inp=io.StringIO("arise\n" * 6), out=out)
    assert won is False
    assert "The word was: rebus" in out.getvalue()


def test_play_eof(word_file):
    store = cli.load_store(word_file)
    assert cli.play(store, "rebus", color=False, inp=io.StringIO(""), out=io.StringIO()) is False


def test_hint_alone_lists_words(word_file, capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["--word-file", word_file, "--no-color", "--hint", "arise", "x~x~~"]) == 0
    out = capsys.readouterr().out
    assert out.split() == ["rebus", "rules"]
    assert "1: " not in out
