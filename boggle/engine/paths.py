"""Adjacency rules and word-path search over a board."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Set

from ..core.constants import NEIGHBOR_STEPS, QU_TILE
from ..core.models import Position
from .board import Board
from .scoring import score_word


def is_adjacent(a: Position, b: Position) -> bool:
    """True when ``b`` is one of the eight cells surrounding ``a``."""

    return a != b and abs(a.row - b.row) <= 1 and abs(a.col - b.col) <= 1


def neighbors(position: Position, board_size: int) -> Set[Position]:
    result: Set[Position] = set()
    for dr, dc in NEIGHBOR_STEPS:
        row, col = position.row + dr, position.col + dc
        if 0 <= row < board_size and 0 <= col < board_size:
            result.add(Position(row, col))
    return result


def is_continuous_path(path: Sequence[Position], board_size: Optional[int] = None) -> bool:
    """Check that every step is adjacent, nothing repeats and all cells are on the board."""

    if len(set(path)) != len(path):
        return False
    if board_size is not None and any(
        not (0 <= pos.row < board_size and 0 <= pos.col < board_size) for pos in path
    ):
        return False
    return all(is_adjacent(prev, curr) for prev, curr in zip(path, path[1:]))


def word_from_path(path: Sequence[Position], board: Board) -> str:
    return "".join(board.character_at(pos) for pos in path)


def _match_length(character: str, word: str, index: int) -> int:
    """Number of word characters the tile consumes at ``index`` (0 if no match)."""

    letter = word[index]
    if character == QU_TILE:
        if letter != "q":
            return 0
        if index + 1 < len(word) and word[index + 1] == "u":
            return 2
        return 1
    return 1 if character.lower() == letter else 0


def is_path_realizable(word: str, board: Board) -> bool:
    """Whether ``word`` can be traced on ``board`` without reusing a cell.

    Depth-first search from every cell matching the first logical unit, with a
    visited set marked and unmarked per branch.
    """

    word = (word or "").strip().lower()
    if not word:
        return False

    visited: Set[Position] = set()

    def search(position: Position, index: int) -> bool:
        consumed = _match_length(board.character_at(position), word, index)
        if not consumed:
            return False
        next_index = index + consumed
        if next_index == len(word):
            return True
        visited.add(position)
        try:
            for neighbor in neighbors(position, board.size):
                if neighbor not in visited and search(neighbor, next_index):
                    return True
        finally:
            visited.discard(position)
        return False

    return any(search(cell.position, 0) for cell in board.iter_cells())


def find_words(board: Board, words: Iterable[str]) -> List[str]:
    """Return the candidate ``words`` that can be traced on ``board``.

    Used for hints and for auditing a finished game; results are ordered by
    score (highest first) and then alphabetically.
    """

    letters = {cell.character.lower() for cell in board.iter_cells()}
    if QU_TILE.lower() in letters:
        letters.update({"q", "u"})
    found = [
        word
        for word in {w.strip().lower() for w in words if w}
        if set(word) <= letters and is_path_realizable(word, board)
    ]
    return sorted(found, key=lambda word: (-score_word(word), word))
