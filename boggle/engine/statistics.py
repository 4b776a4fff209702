"""Post-game summaries, running statistics and the leaderboard."""

from __future__ import annotations

import copy
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..core.constants import LEADERBOARD_LIMIT, RECENT_GAMES_LIMIT
from ..core.models import GameSummary, MostValuableWord
from ..data.store import KeyValueStore, MemoryStore
from ..utils.logger import get_logger
from .session import GameSession


LOGGER = get_logger(__name__)

STATISTICS_KEY = "statistics"
LEADERBOARD_KEY = "leaderboard"


def _new_id(now: datetime) -> str:
    return f"{now.strftime('%Y%m%dT%H%M%S')}_{uuid.uuid4().hex[:8]}"


def summarize(session: GameSession, now: Optional[datetime] = None) -> Optional[GameSummary]:
    """Derive the summary of a finished session, or ``None`` if nothing was found.

    Ties for longest and most valuable word go to the word found first.
    """

    if not session.found_words:
        return None
    now = now or datetime.now(timezone.utc)
    # max() keeps the first maximal element, i.e. the earliest found word.
    longest = max(session.found_words, key=lambda word: len(word.text))
    valuable = max(session.found_words, key=lambda word: word.score)
    return GameSummary(
        id=_new_id(now),
        date=now.isoformat(),
        score=session.score,
        word_count=len(session.found_words),
        longest_word=longest.text,
        most_valuable_word=MostValuableWord(word=valuable.text, score=valuable.score),
        duration_seconds=max(0, session.initial_duration - session.time_remaining),
        board_size=session.board_size,
        difficulty=session.difficulty.value,
    )


@dataclass
class GameStatistics:
    """Running totals across every recorded game."""

    games_played: int = 0
    total_score: int = 0
    highest_score: int = 0
    average_score: float = 0.0
    longest_word: str = ""
    most_words_in_game: int = 0
    most_valuable_word: MostValuableWord = field(default_factory=MostValuableWord)
    recent_games: List[GameSummary] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "games_played": self.games_played,
            "total_score": self.total_score,
            "highest_score": self.highest_score,
            "average_score": self.average_score,
            "longest_word": self.longest_word,
            "most_words_in_game": self.most_words_in_game,
            "most_valuable_word": {
                "word": self.most_valuable_word.word,
                "score": self.most_valuable_word.score,
            },
            "recent_games": [summary.to_dict() for summary in self.recent_games],
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "GameStatistics":
        mvw = payload.get("most_valuable_word") or {}
        return cls(
            games_played=int(payload.get("games_played", 0)),
            total_score=int(payload.get("total_score", 0)),
            highest_score=int(payload.get("highest_score", 0)),
            average_score=float(payload.get("average_score", 0.0)),
            longest_word=str(payload.get("longest_word", "")),
            most_words_in_game=int(payload.get("most_words_in_game", 0)),
            most_valuable_word=MostValuableWord(
                word=str(mvw.get("word", "")), score=int(mvw.get("score", 0))
            ),
            recent_games=[GameSummary.from_dict(item) for item in payload.get("recent_games", [])],
        )


class StatisticsAggregator:
    """Accumulates summaries into statistics and a bounded leaderboard.

    State is read from the store on first use and written back after every
    change. Totals only grow, except through :meth:`reset_all`.
    """

    def __init__(
        self,
        store: Optional[KeyValueStore] = None,
        recent_limit: int = RECENT_GAMES_LIMIT,
        leaderboard_limit: int = LEADERBOARD_LIMIT,
    ) -> None:
        self.store = store or MemoryStore()
        self.recent_limit = recent_limit
        self.leaderboard_limit = leaderboard_limit
        self._lock = threading.Lock()
        self._statistics: Optional[GameStatistics] = None
        self._leaderboard: List[GameSummary] = []

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------
    @property
    def statistics(self) -> GameStatistics:
        with self._lock:
            return copy.deepcopy(self._ensure_loaded())

    @property
    def leaderboard(self) -> List[GameSummary]:
        with self._lock:
            self._ensure_loaded()
            return list(self._leaderboard)

    def record(self, summary: GameSummary, add_to_leaderboard: bool = True) -> GameStatistics:
        with self._lock:
            stats = copy.deepcopy(self._ensure_loaded())
            stats.games_played += 1
            stats.total_score += summary.score
            stats.highest_score = max(stats.highest_score, summary.score)
            stats.average_score = stats.total_score / stats.games_played
            if len(summary.longest_word) > len(stats.longest_word):
                stats.longest_word = summary.longest_word
            if summary.most_valuable_word.score > stats.most_valuable_word.score:
                stats.most_valuable_word = summary.most_valuable_word
            stats.most_words_in_game = max(stats.most_words_in_game, summary.word_count)
            stats.recent_games = [summary, *stats.recent_games][: self.recent_limit]
            leaderboard = self._leaderboard
            if add_to_leaderboard:
                leaderboard = self._ranked_with(summary)
            self._commit(stats, leaderboard)
            LOGGER.info(
                "Recorded game %s: score=%s words=%s (games played: %s)",
                summary.id,
                summary.score,
                summary.word_count,
                stats.games_played,
            )
            return copy.deepcopy(stats)

    def add_leaderboard_entry(self, summary: GameSummary) -> List[GameSummary]:
        with self._lock:
            stats = self._ensure_loaded()
            self._commit(stats, self._ranked_with(summary))
            return list(self._leaderboard)

    def reset_all(self) -> None:
        with self._lock:
            self._commit(GameStatistics(), [])
        LOGGER.info("Statistics and leaderboard cleared")

    def clear_leaderboard(self) -> None:
        with self._lock:
            self._commit(self._ensure_loaded(), [])

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _ranked_with(self, summary: GameSummary) -> List[GameSummary]:
        # sorted() is stable: among equal scores earlier entries stay ahead.
        ranked = sorted([*self._leaderboard, summary], key=lambda entry: -entry.score)
        return ranked[: self.leaderboard_limit]

    def _ensure_loaded(self) -> GameStatistics:
        if self._statistics is not None:
            return self._statistics
        stats_payload = self.store.load(STATISTICS_KEY)
        board_payload = self.store.load(LEADERBOARD_KEY)
        try:
            self._statistics = (
                GameStatistics.from_dict(stats_payload) if stats_payload else GameStatistics()
            )
            self._leaderboard = [GameSummary.from_dict(item) for item in board_payload or []]
        except (TypeError, ValueError, AttributeError) as exc:
            LOGGER.warning("Stored statistics unreadable (%s); starting fresh", exc)
            self._statistics = GameStatistics()
            self._leaderboard = []
        return self._statistics

    def _commit(self, stats: GameStatistics, leaderboard: List[GameSummary]) -> None:
        """Write ``stats`` and ``leaderboard`` to the store, then adopt them.

        A failing store leaves the in-memory state as it was.
        """

        self.store.save(STATISTICS_KEY, stats.to_dict())
        self.store.save(LEADERBOARD_KEY, [entry.to_dict() for entry in leaderboard])
        self._statistics = stats
        self._leaderboard = leaderboard
