import logging
from pathlib import Path

import pytest
from wordlescore.datasets import read_words
from wordlescore.engine import InputReadFailure


def test_read_words_trims_and_drops_blanks(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("  crane\n\nTRACE \n   \ncrane\n", encoding="utf-8")
    assert read_words(p) == ["crane", "trace", "crane"]


def test_read_words_skips_non_five_letter_entries(tmp_path: Path, caplog):
    p = tmp_path / "words.txt"
    p.write_text("crane\ncranes\nab\nc4ane\nstare\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert read_words(str(p)) == ["crane", "stare"]
    assert "Skipped 3 entries" in caplog.text


def test_read_words_missing_file(tmp_path: Path):
    with pytest.raises(InputReadFailure):
        read_words(tmp_path / "nope.txt")


def test_read_words_undecodable(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"\xff\xfe\x00crane\n")
    with pytest.raises(InputReadFailure):
        read_words(p)
