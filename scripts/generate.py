"""
Board generator for the Boggle puzzle engine.

Usage:
    python -m scripts.generate [--dictionary PATH] [--size N] [--min-len N] [--seed N]

Examples:
    python -m scripts.generate --dictionary words_alpha.txt
    python -m scripts.generate --size 4 --min-len 4 --seed 7
    python -m scripts.generate --check quiet --check stone

This will:
  1. Load and filter the dictionary
  2. Generate a random board from the dictionary's letter frequencies
  3. Print the board and check any words given with --check
  4. List every dictionary word present on the board
"""
import argparse
import logging
import sys
from pathlib import Path

import numpy as np

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle.board import Board, WordStatus
from boggle.dictionary import load_words
from boggle.metrics import StageTimer
from boggle.settings import settings
from boggle.solver import solve


def main():
    parser = argparse.ArgumentParser(description="Boggle board generator")
    parser.add_argument("--dictionary", type=str, default=str(settings.DICTIONARY_PATH),
                        help=f"Word list, one word per line (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--size", type=int, default=settings.BOARD_SIZE,
                        help=f"Board size (default: {settings.BOARD_SIZE})")
    parser.add_argument("--min-len", type=int, default=settings.MIN_WORD_LENGTH,
                        help=f"Minimum word length (default: {settings.MIN_WORD_LENGTH})")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for a reproducible board")
    parser.add_argument("--check", action="append", default=[], metavar="WORD",
                        help="Check a word against the board (repeatable)")
    parser.add_argument("--trie", action="store_true", default=settings.USE_TRIE_SOLVER,
                        help="Use the trie solver to list all words")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.size < 2 or args.min_len < 2:
        print("Error: --size and --min-len must both be at least 2")
        sys.exit(1)

    timer = StageTimer()
    try:
        with timer.stage("load"):
            words = load_words(args.dictionary, args.min_len, settings.VOWELS)
        with timer.stage("generate"):
            board = Board.random(args.size, args.min_len, words, rng=np.random.default_rng(args.seed))
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    timer.record("dictionary_words", len(board.words))

    print(f"\nBoard ({board.size}x{board.size}, min length {board.min_len}):")
    print(board.render())

    for word in args.check:
        status = board.judge_word(word)
        print(f"\n{word}: {status.value}")
        if status is WordStatus.ACCEPTED:
            print(board.render(board.get_path(word)))

    with timer.stage("solve"):
        found = solve(board) if args.trie else board.find_all_words()
    timer.record("words_found", len(found))

    print(f"\n{len(found)} total words in puzzle:")
    for i, word in enumerate(found, start=1):
        print(f"  {i}. {word}")

    print(f"\nTimings: {timer.summary()}")


if __name__ == "__main__":
    main()
