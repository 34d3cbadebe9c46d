from pathlib import Path

import pytest
from boggle.settings import Settings


def test_defaults(monkeypatch):
    for name in ("BOARD_SIZE", "MIN_WORD_LENGTH", "VOWELS", "DICTIONARY_PATH"):
        monkeypatch.delenv(name, raising=False)
    cfg = Settings()
    assert cfg.BOARD_SIZE == 5
    assert cfg.MIN_WORD_LENGTH == 3
    assert cfg.VOWELS == "aeiouy"
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "words_alpha.txt"


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("BOARD_SIZE", "6")
    monkeypatch.setenv("MIN_WORD_LENGTH", "4")
    monkeypatch.setenv("VOWELS", "aeiou")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "words.txt"))
    cfg = Settings()
    assert cfg.BOARD_SIZE == 6
    assert cfg.MIN_WORD_LENGTH == 4
    assert cfg.VOWELS == "aeiou"
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "words.txt")


@pytest.mark.parametrize("raw, expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("no", False)])
def test_env_bool_override(monkeypatch, raw, expected):
    monkeypatch.setenv("USE_TRIE_SOLVER", raw)
    assert Settings().USE_TRIE_SOLVER is expected


def test_env_bad_int_raises(monkeypatch):
    monkeypatch.setenv("BOARD_SIZE", "big")
    with pytest.raises(ValueError):
        Settings()


@pytest.mark.parametrize("name", ["BOARD_SIZE", "MIN_WORD_LENGTH"])
def test_env_below_minimum_raises(monkeypatch, name):
    monkeypatch.setenv(name, "1")
    with pytest.raises(ValueError, match=name):
        Settings()
