"""Board representation and random board generation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import (
    STANDARD_BOARD_SIZE,
    SUPPORTED_BOARD_SIZES,
    Difficulty,
)
from ..core.exceptions import InvalidConfiguration
from ..core.models import Cell, Position
from ..data.normalization import normalize_tile
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


# Classic 16 dice, six faces each. "Q" faces become the QU tile.
STANDARD_DICE: Tuple[Tuple[str, ...], ...] = (
    ("R", "I", "F", "O", "B", "X"),
    ("I", "F", "E", "H", "E", "Y"),
    ("D", "E", "N", "O", "W", "S"),
    ("U", "T", "O", "K", "N", "D"),
    ("H", "M", "S", "R", "A", "O"),
    ("L", "U", "P", "E", "T", "S"),
    ("A", "C", "I", "T", "O", "A"),
    ("Y", "L", "G", "K", "U", "E"),
    ("Q", "B", "M", "J", "O", "A"),
    ("E", "H", "I", "S", "P", "N"),
    ("V", "E", "T", "I", "G", "N"),
    ("B", "A", "L", "I", "Y", "T"),
    ("E", "Z", "A", "V", "N", "D"),
    ("R", "A", "L", "E", "S", "C"),
    ("U", "W", "I", "L", "R", "G"),
    ("P", "A", "C", "E", "M", "D"),
)

LETTER_FREQUENCY: Dict[Difficulty, Tuple[Tuple[str, int], ...]] = {
    Difficulty.EASY: (
        ("A", 9), ("B", 2), ("C", 2), ("D", 4), ("E", 12), ("F", 2), ("G", 3),
        ("H", 2), ("I", 9), ("J", 1), ("K", 1), ("L", 4), ("M", 2), ("N", 6),
        ("O", 8), ("P", 2), ("Q", 1), ("R", 6), ("S", 4), ("T", 6), ("U", 4),
        ("V", 2), ("W", 2), ("X", 1), ("Y", 2), ("Z", 1),
    ),
    Difficulty.MEDIUM: (
        ("A", 8), ("B", 2), ("C", 3), ("D", 4), ("E", 10), ("F", 2), ("G", 3),
        ("H", 2), ("I", 9), ("J", 1), ("K", 2), ("L", 4), ("M", 3), ("N", 5),
        ("O", 7), ("P", 2), ("Q", 1), ("R", 6), ("S", 5), ("T", 6), ("U", 4),
        ("V", 2), ("W", 2), ("X", 1), ("Y", 2), ("Z", 1),
    ),
    Difficulty.HARD: (
        ("A", 6), ("B", 3), ("C", 3), ("D", 4), ("E", 8), ("F", 3), ("G", 3),
        ("H", 3), ("I", 7), ("J", 2), ("K", 2), ("L", 4), ("M", 3), ("N", 5),
        ("O", 6), ("P", 2), ("Q", 2), ("R", 5), ("S", 5), ("T", 5), ("U", 4),
        ("V", 3), ("W", 3), ("X", 2), ("Y", 2), ("Z", 2),
    ),
}


def validate_board_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int) or size not in SUPPORTED_BOARD_SIZES:
        raise InvalidConfiguration(
            f"Unsupported board size {size!r}; expected one of {SUPPORTED_BOARD_SIZES}"
        )
    return size


class Board:
    """An N x N grid of :class:`Cell`.

    The shape is fixed at construction; only the ``is_selected`` flags of the
    cells change while a word is being built.
    """

    def __init__(self, cells: List[List[Cell]]) -> None:
        size = len(cells)
        if size == 0 or any(len(row) != size for row in cells):
            raise InvalidConfiguration("Board must be a non-empty square grid")
        self.size = size
        self.cells = cells

    @classmethod
    def from_letters(cls, letters: Sequence[Sequence[str]]) -> "Board":
        cells = [
            [
                Cell(character=normalize_tile(letter), position=Position(row, col))
                for col, letter in enumerate(row_letters)
            ]
            for row, row_letters in enumerate(letters)
        ]
        return cls(cells)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """Build a board from one string per row, one letter per tile (``Q`` is QU)."""

        return cls.from_letters([list(row.strip()) for row in rows])

    def contains(self, position: Position) -> bool:
        return 0 <= position.row < self.size and 0 <= position.col < self.size

    def cell(self, position: Position) -> Cell:
        if not self.contains(position):
            raise IndexError(f"Position outside board: {position}")
        return self.cells[position.row][position.col]

    def character_at(self, position: Position) -> str:
        return self.cell(position).character

    def iter_cells(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def letters(self) -> List[List[str]]:
        return [[cell.character for cell in row] for row in self.cells]

    def reset_selection(self) -> None:
        for cell in self.iter_cells():
            cell.is_selected = False

    def to_jsonable(self) -> List[List[dict]]:
        return [
            [
                {
                    "character": cell.character,
                    "display": cell.display,
                    "position": cell.position.to_jsonable(),
                    "is_selected": cell.is_selected,
                }
                for cell in row
            ]
            for row in self.cells
        ]


@dataclass
class BoardConfig:
    """Tables driving board generation."""

    dice: Tuple[Tuple[str, ...], ...] = STANDARD_DICE
    letter_frequency: Optional[Dict[Difficulty, Tuple[Tuple[str, int], ...]]] = None

    def frequency_for(self, difficulty: Difficulty) -> Tuple[Tuple[str, int], ...]:
        table = (self.letter_frequency or LETTER_FREQUENCY).get(difficulty)
        if not table:
            raise InvalidConfiguration(f"No letter frequency table for {difficulty.value}")
        return table


class BoardGenerator:
    """Produces fresh boards from dice (4x4) or weighted letter draws."""

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or BoardConfig()
        self.rng = rng or random.Random(seed)

    def generate(self, size: int, difficulty: Difficulty | str) -> Board:
        size = validate_board_size(size)
        difficulty = Difficulty.parse(difficulty)
        if size == STANDARD_BOARD_SIZE and len(self.config.dice) == size * size:
            letters = self._roll_dice(size)
            LOGGER.debug("Rolled standard dice for %sx%s board", size, size)
        else:
            table = self.config.frequency_for(difficulty)
            letters = [[self._weighted_letter(table) for _ in range(size)] for _ in range(size)]
            LOGGER.debug("Drew %sx%s board from %s frequency table", size, size, difficulty.value)
        return Board.from_letters(letters)

    def _roll_dice(self, size: int) -> List[List[str]]:
        dice = list(self.config.dice)
        self.rng.shuffle(dice)
        faces = [self.rng.choice(die) for die in dice]
        return [faces[row * size:(row + 1) * size] for row in range(size)]

    def _weighted_letter(self, table: Tuple[Tuple[str, int], ...]) -> str:
        total = sum(weight for _, weight in table)
        remainder = self.rng.uniform(0, total)
        for letter, weight in table:
            remainder -= weight
            if remainder <= 0:
                return letter
        # Float rounding can leave a sliver of remainder; the last letter absorbs it.
        return table[-1][0]
