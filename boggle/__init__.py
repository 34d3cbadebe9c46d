"""Boggle-style word search: biased board generation and word-path search."""

from boggle.board import Board, WordStatus, random_board
from boggle.dictionary import compress_qu, expand_qu, load_words, normalize_word
from boggle.distribution import letter_distribution, sample_letter
from boggle.solver import Trie, build_trie, solve

__all__ = [
    "Board",
    "Trie",
    "WordStatus",
    "build_trie",
    "compress_qu",
    "expand_qu",
    "letter_distribution",
    "load_words",
    "normalize_word",
    "random_board",
    "sample_letter",
    "solve",
]
