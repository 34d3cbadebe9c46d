import pytest
from boggle.board import Board, WordStatus
from boggle.dictionary import (
    compress_qu,
    expand_qu,
    filter_words,
    has_bare_q,
    has_vowel,
    load_words,
    normalize_word,
)


def test_compress_qu():
    assert compress_qu("quiet") == "qiet"
    assert compress_qu("equinox") == "eqinox"
    assert compress_qu("quoque") == "qoqe"
    assert compress_qu("stone") == "stone"


def test_qu_round_trip():
    for word in ["quiet", "equinox", "quoque", "stone", "", "aqua"]:
        assert expand_qu(compress_qu(word)) == word


def test_compress_does_not_merge_words_without_qu():
    words = ["stone", "notes", "tones", "onset"]
    assert [compress_qu(w) for w in words] == words


def test_normalize_word():
    assert normalize_word("  QUIT\n") == "qit"
    assert normalize_word("Stone") == "stone"


def test_has_vowel():
    assert has_vowel("rhythm")  # y counts
    assert has_vowel("cat")
    assert not has_vowel("brr")
    assert not has_vowel("rhythm", vowels="aeiou")


def test_filter_words_keeps_order():
    assert filter_words(4, ["cat", "stone", "dog", "quiet", "tree"]) == ["stone", "quiet", "tree"]


def test_load_words(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text(
        "\n".join(["Cat", "STONE", "brrr", "quit", "qu", "don't", "", "  garden  ", "stone", "café", "ab1c"]),
        encoding="utf-8",
    )
    words = load_words(dict_file, min_len=3)
    assert words == ["cat", "stone", "qit", "garden"]


def test_load_words_min_len_counts_compressed_letters(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("quit\nquiet\n")
    assert load_words(dict_file, min_len=4) == ["qiet"]


def test_load_words_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="missing.txt"):
        load_words(tmp_path / "missing.txt")


def test_has_bare_q():
    assert has_bare_q("qat")
    assert has_bare_q("faqir")
    assert has_bare_q("iraq")
    assert not has_bare_q("quiet")
    assert not has_bare_q("stone")


def test_load_words_skips_bare_q(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("qat\nfaqir\nQAID\nquiet\nquat\n")
    words = load_words(dict_file, min_len=3)
    assert words == ["qiet", "qat"]
    for word in words:
        assert compress_qu(expand_qu(word)) == word


def test_bare_q_word_is_not_accepted_as_qu_word(tmp_path):
    dict_file = tmp_path / "words.txt"
    dict_file.write_text("qat\n")
    words = load_words(dict_file, min_len=3)
    assert words == []

    board = Board.from_rows(["qat", "xxx", "xxx"], words=words)
    assert board.has_word("quat")
    assert board.judge_word("quat") is WordStatus.NOT_IN_DICTIONARY
    assert board.find_all_words() == []
