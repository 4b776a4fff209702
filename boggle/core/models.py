"""Data models shared by the board, validator and state machine."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

from .constants import QU_TILE


@dataclass(frozen=True, order=True)
class Position:
    """A (row, col) coordinate on the board."""

    row: int
    col: int

    def to_jsonable(self) -> Dict[str, int]:
        return {"row": self.row, "col": self.col}


@dataclass
class Cell:
    """One board tile. ``character`` is a single letter or the ``QU`` tile."""

    character: str
    position: Position
    is_selected: bool = False

    @property
    def is_qu(self) -> bool:
        return self.character == QU_TILE

    @property
    def display(self) -> str:
        return "Qu" if self.is_qu else self.character


@dataclass(frozen=True)
class Word:
    """A validated, scored word. ``text`` is always lowercase."""

    text: str
    path: Tuple[Position, ...]
    score: int
    found_at: float = 0.0

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "path": [pos.to_jsonable() for pos in self.path],
            "score": self.score,
            "found_at": self.found_at,
        }


@dataclass(frozen=True)
class MostValuableWord:
    word: str = ""
    score: int = 0


@dataclass(frozen=True)
class GameSummary:
    """Immutable post-game record used for statistics and the leaderboard."""

    id: str
    date: str
    score: int
    word_count: int
    longest_word: str
    most_valuable_word: MostValuableWord = field(default_factory=MostValuableWord)
    duration_seconds: int = 0
    board_size: int = 4
    difficulty: str = "medium"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GameSummary":
        mvw: Optional[Dict[str, Any]] = payload.get("most_valuable_word") or {}
        return cls(
            id=str(payload.get("id", "")),
            date=str(payload.get("date", "")),
            score=int(payload.get("score", 0)),
            word_count=int(payload.get("word_count", 0)),
            longest_word=str(payload.get("longest_word", "")),
            most_valuable_word=MostValuableWord(
                word=str(mvw.get("word", "")),
                score=int(mvw.get("score", 0)),
            ),
            duration_seconds=int(payload.get("duration_seconds", 0)),
            board_size=int(payload.get("board_size", 4)),
            difficulty=str(payload.get("difficulty", "medium")),
        )
