"""Tests for the command-line entry point."""

from wordsieve._cli import main


def _files(tmp_path, stop_words, text):
    sw = tmp_path / "stopwords.txt"
    sw.write_text(stop_words)
    tx = tmp_path / "text.txt"
    tx.write_text(text)
    return str(sw), str(tx)


def test_counts_terms(tmp_path, capsys):
    sw, tx = _files(tmp_path, "the\nand\n", "The cat and the hat.\n")
    assert main([sw, tx]) == 0
    assert capsys.readouterr().out.strip() == "2 terms found."


def test_print_terms(tmp_path, capsys):
    sw, tx = _files(tmp_path, "the\n", "The Quick fox")
    assert main([sw, tx, "--print-terms"]) == 0
    assert capsys.readouterr().out.splitlines() == ["quick", "fox", "2 terms found."]


def test_long_terms_skipped(tmp_path, capsys):
    sw, tx = _files(tmp_path, "", "short extraordinarily long")
    assert main([sw, tx, "--max-term-length", "5"]) == 0
    assert capsys.readouterr().out.strip() == "2 terms found."


def test_missing_stop_words(tmp_path, capsys):
    _, tx = _files(tmp_path, "", "text")
    assert main([str(tmp_path / "missing.txt"), tx]) == 1
    assert "Cannot read file" in capsys.readouterr().err


def test_missing_text(tmp_path, capsys):
    sw, _ = _files(tmp_path, "the\n", "")
    assert main([sw, str(tmp_path / "missing.txt")]) == 1
    assert "Cannot read file" in capsys.readouterr().err


def test_bad_max_term_length(tmp_path):
    sw, tx = _files(tmp_path, "", "")
    assert main([sw, tx, "--max-term-length", "0"]) == 2
