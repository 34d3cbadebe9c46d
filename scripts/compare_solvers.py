"""Generate random boards and report where the per-word scan and the trie solver disagree."""
import argparse
import logging
import sys
from pathlib import Path

import numpy as np

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from boggle.board import Board
from boggle.dictionary import load_words
from boggle.settings import settings
from boggle.solver import build_trie, solve

parser = argparse.ArgumentParser(description=__doc__)
parser.add_argument("--dictionary", default=str(settings.DICTIONARY_PATH))
parser.add_argument("--boards", type=int, default=20)
parser.add_argument("--size", type=int, default=settings.BOARD_SIZE)
parser.add_argument("--min-len", type=int, default=settings.MIN_WORD_LENGTH)
parser.add_argument("--seed", type=int, default=0)
args = parser.parse_args()

logging.basicConfig(level=logging.WARNING, format="%(asctime)s %(name)s %(levelname)s %(message)s")

words = load_words(args.dictionary, args.min_len, settings.VOWELS)
trie = build_trie(words)
rng = np.random.default_rng(args.seed)

disagreements = []
for n in range(args.boards):
    board = Board.random(args.size, args.min_len, words, rng=rng)
    scanned = board.find_all_words()
    trie_found = solve(board, trie)
    if scanned != trie_found:
        only_scan = sorted(set(scanned) - set(trie_found))
        only_trie = sorted(set(trie_found) - set(scanned))
        disagreements.append((n, "".join(board.chars), only_scan, only_trie))

print(f"Boards checked: {args.boards}")
print(f"Total disagreements: {len(disagreements)}")
print()
for n, letters, only_scan, only_trie in disagreements:
    print(f"  board {n} {letters}: scan-only={only_scan} trie-only={only_trie}")
