"""Square letter board and the word-path search over it."""
from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from functools import cached_property

import numpy as np

from boggle.dictionary import expand_qu, filter_words, normalize_word
from boggle.distribution import ALPHABET, letter_distribution, sample_letter

logger = logging.getLogger("boggle")

# Fixed enumeration order of (dx, dy); decides which path wins when several exist.
# (0, 0) stays in the list: the current cell is always on the path by the
# time neighbors are requested, so the visited filter removes it.
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (1, 1), (1, 0), (1, -1),
    (0, 1), (0, 0), (0, -1),
    (-1, 1), (-1, 0), (-1, -1),
)

_default_rng = np.random.default_rng()


class WordStatus(enum.Enum):
    """Outcome of checking a player's word, in gate order."""

    ACCEPTED = "Word accepted"
    TOO_SHORT = "Word too short"
    NOT_IN_DICTIONARY = "Word not in dictionary"
    NOT_FOUND = "Word not found"


@dataclass(frozen=True)
class Board:
    """An immutable size x size grid of letters stored row-major (x + y*size).

    "q" on the board and in `words` stands for "qu".
    """

    size: int
    chars: tuple[str, ...]
    min_len: int = 3
    words: tuple[str, ...] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "chars", tuple(self.chars))
        object.__setattr__(self, "words", tuple(self.words))

        if self.size < 2:
            raise ValueError(f"Board size must be at least 2, got {self.size}")
        if self.min_len < 2:
            raise ValueError(f"Minimum word length must be at least 2, got {self.min_len}")
        if len(self.chars) != self.size * self.size:
            raise ValueError(
                f"Expected {self.size * self.size} letters for a {self.size}x{self.size} board, "
                f"got {len(self.chars)}"
            )
        invalid = {ch for ch in self.chars if len(ch) != 1 or ch not in ALPHABET}
        if invalid:
            raise ValueError(f"Board contains invalid letters: {sorted(invalid)}")

    @classmethod
    def from_rows(cls, rows: Iterable[str], min_len: int = 3, words: Iterable[str] = ()) -> "Board":
        """Build a board from row strings, e.g. ["ab", "cd"]."""
        rows = [r.strip().lower() for r in rows]
        return cls(size=len(rows), chars=tuple("".join(rows)), min_len=min_len, words=tuple(words))

    @classmethod
    def random(
        cls,
        size: int,
        min_len: int,
        words: Iterable[str],
        rng: np.random.Generator | None = None,
    ) -> "Board":
        """Draw every cell independently from the dictionary's letter distribution.

        Words shorter than `min_len` are dropped first. The board is not
        guaranteed to contain any word.
        """
        rng = _default_rng if rng is None else rng
        words = filter_words(min_len, words)
        dist = letter_distribution(words)
        chars = tuple(sample_letter(dist, rng.random()) for _ in range(size * size))
        board = cls(size=size, chars=chars, min_len=min_len, words=tuple(words))
        logger.debug("Generated %dx%d board: %s", size, size, "".join(chars))
        return board

    # Coordinates

    def to_index(self, x: int, y: int) -> int:
        return x + y * self.size

    def to_coords(self, i: int) -> tuple[int, int]:
        y, x = divmod(i, self.size)
        return x, y

    @cached_property
    def _adjacency(self) -> tuple[tuple[int, ...], ...]:
        # On-grid cells for every offset, in NEIGHBOR_OFFSETS order, per cell
        adjacency = []
        for i in range(self.size * self.size):
            x, y = self.to_coords(i)
            cells = []
            for dx, dy in NEIGHBOR_OFFSETS:
                nx, ny = x + dx, y + dy
                if 0 <= nx < self.size and 0 <= ny < self.size:
                    cells.append(self.to_index(nx, ny))
            adjacency.append(tuple(cells))
        return tuple(adjacency)

    def neighbors(self, i: int, visited: Iterable[int] = ()) -> list[int]:
        """Adjacent cells of `i` (including `i` itself) that are not in `visited`."""
        visited = set(visited)
        return [j for j in self._adjacency[i] if j not in visited]

    # Path search

    def _path_from(self, letters: str, i: int, path: list[int], used: set[int]) -> bool:
        """Depth-first match of `letters` starting at cell `i`.

        `path` and `used` are shared across the whole search; each branch
        pushes its cell and pops it again on failure.
        """
        if not letters:
            return True
        if self.chars[i] != letters[0]:
            return False

        path.append(i)
        used.add(i)
        tail = letters[1:]
        if not tail:
            return True
        for j in self._adjacency[i]:
            if j not in used and self._path_from(tail, j, path, used):
                return True
        used.discard(i)
        path.pop()
        return False

    def _find_path(self, letters: str) -> list[int] | None:
        """Search an already-normalized word from every start cell in row-major order."""
        if not letters:
            return []
        for i in range(self.size * self.size):
            path: list[int] = []
            if self._path_from(letters, i, path, set()):
                return path
        return None

    def get_path(self, word: str) -> list[int] | None:
        """Cells spelling `word` in order, or None when it cannot be traced."""
        return self._find_path(normalize_word(word))

    def has_word(self, word: str) -> bool:
        return self.get_path(word) is not None

    # Round scoring

    def find_all_words(self) -> list[str]:
        """Every dictionary word traceable on this board, in dictionary order, expanded."""
        found: dict[str, None] = {}
        for word in self.words:
            if word and word not in found and self._find_path(word) is not None:
                found[word] = None
        logger.debug("Found %d of %d dictionary words", len(found), len(self.words))
        return [expand_qu(w) for w in found]

    @cached_property
    def _word_set(self) -> frozenset[str]:
        return frozenset(self.words)

    def judge_word(self, word: str) -> WordStatus:
        """Run the length, dictionary and board gates in order; report the first failure."""
        word = normalize_word(word)
        if len(word) < self.min_len:
            status = WordStatus.TOO_SHORT
        elif word not in self._word_set:
            status = WordStatus.NOT_IN_DICTIONARY
        elif self._find_path(word) is None:
            status = WordStatus.NOT_FOUND
        else:
            return WordStatus.ACCEPTED
        logger.info("%s: %s", status.value, expand_qu(word))
        return status

    def check_word(self, word: str) -> bool:
        return self.judge_word(word) is WordStatus.ACCEPTED

    # Display

    def render(self, highlights: Sequence[int] = ()) -> str:
        """Plain-text grid; highlighted cells are bracketed."""
        marked = set(highlights)
        lines = []
        for y in range(self.size):
            cells = []
            for x in range(self.size):
                i = self.to_index(x, y)
                letter = "Qu" if self.chars[i] == "q" else self.chars[i].upper()
                cells.append(f"[{letter:<2}]" if i in marked else f" {letter:<2} ")
            lines.append("".join(cells).rstrip())
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()


def random_board(
    size: int,
    min_len: int,
    words: Iterable[str],
    rng: np.random.Generator | None = None,
) -> Board:
    return Board.random(size, min_len, words, rng=rng)
