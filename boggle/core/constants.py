"""Shared constants and enumerations for the Boggle game core."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from .exceptions import InvalidConfiguration


class Difficulty(str, Enum):
    """Board difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: "Difficulty | str") -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            raise InvalidConfiguration(
                f"Unknown difficulty {value!r}; expected one of {[d.value for d in cls]}"
            ) from exc


class GameStatus(str, Enum):
    """Lifecycle states of a game session."""

    READY = "ready"
    ACTIVE = "active"
    PAUSED = "paused"
    FINISHED = "finished"


SUPPORTED_BOARD_SIZES: Tuple[int, ...] = (4, 5, 6)
STANDARD_BOARD_SIZE = 4

QU_TILE = "QU"
MIN_WORD_LENGTH = 3

DEFAULT_DURATION_SECONDS = 180
DEFAULT_LANGUAGE = "english"

RECENT_GAMES_LIMIT = 10
LEADERBOARD_LIMIT = 100

NEIGHBOR_STEPS: Tuple[Tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
