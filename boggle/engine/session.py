"""The mutable game session aggregate and its read-only snapshot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from ..core.constants import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_LANGUAGE,
    Difficulty,
    GameStatus,
)
from ..core.models import Position, Word
from .board import Board


@dataclass
class GameSession:
    """All mutable state of one game, owned by :class:`~boggle.engine.game.BoggleGame`.

    ``current_word`` is the uppercase concatenation of the characters of the
    cells in ``selection_path``; a QU tile contributes two letters.
    """

    board: Optional[Board] = None
    selection_path: List[Position] = field(default_factory=list)
    current_word: str = ""
    found_words: List[Word] = field(default_factory=list)
    score: int = 0
    time_remaining: int = DEFAULT_DURATION_SECONDS
    initial_duration: int = DEFAULT_DURATION_SECONDS
    status: GameStatus = GameStatus.READY
    difficulty: Difficulty = Difficulty.MEDIUM
    board_size: int = 4
    language_key: str = DEFAULT_LANGUAGE

    def clear_selection(self) -> None:
        if self.board is not None:
            for position in self.selection_path:
                self.board.cell(position).is_selected = False
        self.selection_path = []
        self.current_word = ""

    def has_found(self, text: str) -> bool:
        text = text.lower()
        return any(word.text == text for word in self.found_words)

    def is_selection_consistent(self) -> bool:
        if self.board is None:
            return not self.selection_path and not self.current_word
        expected = "".join(self.board.character_at(pos) for pos in self.selection_path)
        return expected == self.current_word

    def snapshot(self) -> "SessionSnapshot":
        letters: Tuple[Tuple[str, ...], ...] = ()
        if self.board is not None:
            letters = tuple(tuple(row) for row in self.board.letters())
        return SessionSnapshot(
            board=letters,
            selection_path=tuple(self.selection_path),
            current_word=self.current_word,
            found_words=tuple(self.found_words),
            score=self.score,
            time_remaining=self.time_remaining,
            initial_duration=self.initial_duration,
            status=self.status,
            difficulty=self.difficulty,
            board_size=self.board_size,
            language_key=self.language_key,
        )


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of a session for the render layer."""

    board: Tuple[Tuple[str, ...], ...]
    selection_path: Tuple[Position, ...]
    current_word: str
    found_words: Tuple[Word, ...]
    score: int
    time_remaining: int
    initial_duration: int
    status: GameStatus
    difficulty: Difficulty
    board_size: int
    language_key: str

    @property
    def selected(self) -> frozenset:
        return frozenset(self.selection_path)

    def to_jsonable(self) -> Dict[str, Any]:
        return {
            "board": [list(row) for row in self.board],
            "selection_path": [pos.to_jsonable() for pos in self.selection_path],
            "current_word": self.current_word,
            "found_words": [word.to_jsonable() for word in self.found_words],
            "score": self.score,
            "time_remaining": self.time_remaining,
            "initial_duration": self.initial_duration,
            "status": self.status.value,
            "difficulty": self.difficulty.value,
            "board_size": self.board_size,
            "language_key": self.language_key,
        }
