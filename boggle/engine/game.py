"""Game lifecycle state machine.

``READY -> ACTIVE -> {PAUSED <-> ACTIVE} -> FINISHED -> READY``

Every public method takes the game lock, so timer ticks, selections and
submissions never interleave. Transitions that are not allowed from the
current status are silent no-ops: rapid UI input must never corrupt state.
"""

from __future__ import annotations

import threading
import time
from concurrent.futures import Future
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple, Union

from ..core.constants import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_LANGUAGE,
    MIN_WORD_LENGTH,
    Difficulty,
    GameStatus,
)
from ..core.exceptions import InvalidConfiguration
from ..core.models import GameSummary, Position, Word
from ..data.dictionary import Dictionary, DictionaryService, background_executor
from ..data.normalization import normalize_key
from ..data.preferences import GamePreferences
from ..utils.logger import get_logger
from .board import BoardGenerator, validate_board_size
from .paths import is_adjacent
from .session import GameSession, SessionSnapshot
from .statistics import StatisticsAggregator, summarize
from .timer import Ticker
from .validator import REJECTION_MESSAGES, Rejection, RejectionReason, SubmissionResult, WordValidator


LOGGER = get_logger(__name__)

PositionLike = Union[Position, Tuple[int, int]]


@dataclass
class GameConfig:
    """Settings for one game; :meth:`validate` normalizes and checks them."""

    board_size: int = 4
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM
    duration_seconds: int = DEFAULT_DURATION_SECONDS
    language_key: str = DEFAULT_LANGUAGE

    def validate(self) -> "GameConfig":
        size = validate_board_size(self.board_size)
        difficulty = Difficulty.parse(self.difficulty)
        duration = self.duration_seconds
        if isinstance(duration, bool) or not isinstance(duration, int) or duration <= 0:
            raise InvalidConfiguration(f"Duration must be a positive number of seconds, got {duration!r}")
        language = normalize_key(self.language_key)
        if not language:
            raise InvalidConfiguration("Language key must not be empty")
        return GameConfig(
            board_size=size,
            difficulty=difficulty,
            duration_seconds=duration,
            language_key=language,
        )

    @classmethod
    def from_preferences(cls, preferences: GamePreferences) -> "GameConfig":
        return cls(
            board_size=preferences.default_board_size,
            difficulty=preferences.default_difficulty,
            duration_seconds=preferences.default_timer_duration,
            language_key=preferences.default_language,
        )


def _as_position(value: PositionLike) -> Position:
    if isinstance(value, Position):
        return value
    row, col = value
    return Position(int(row), int(col))


class BoggleGame:
    """Owns one :class:`GameSession` and applies every transition to it.

    Without an explicit ``dictionary_service`` the game loads word lists on the
    shared :func:`~boggle.data.dictionary.background_executor`, so slow sources
    never run under the game lock.
    """

    def __init__(
        self,
        dictionary_service: Optional[DictionaryService] = None,
        generator: Optional[BoardGenerator] = None,
        validator: Optional[WordValidator] = None,
        statistics: Optional[StatisticsAggregator] = None,
        timer: Optional[Ticker] = None,
        preferences: Optional[GamePreferences] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.dictionary_service = dictionary_service or DictionaryService(
            executor=background_executor()
        )
        self.generator = generator or BoardGenerator()
        self.validator = validator or WordValidator()
        self.statistics = statistics
        self.timer = timer
        self.preferences = (preferences or GamePreferences()).validate()
        self.clock = clock
        self._lock = threading.RLock()
        self._timer_run = 0
        self._dictionary_future: Optional["Future[Dictionary]"] = None
        self._finalized = False
        self._summary: Optional[GameSummary] = None
        self.session = self._ready_session(GameConfig.from_preferences(self.preferences).validate())

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    @property
    def status(self) -> GameStatus:
        return self.session.status

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self.session.snapshot()

    def available_languages(self) -> List[str]:
        return self.dictionary_service.available_languages()

    @property
    def dictionary_ready(self) -> bool:
        future = self._dictionary_future
        return future is not None and future.done()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start_game(
        self,
        board_size: Optional[int] = None,
        difficulty: Union[Difficulty, str, None] = None,
        duration_seconds: Optional[int] = None,
        language_key: Optional[str] = None,
    ) -> bool:
        """Start a new game from READY or FINISHED.

        Omitted settings fall back to the preferences. Raises
        :class:`InvalidConfiguration` for unusable settings, leaving the
        current session untouched.
        """

        with self._lock:
            if self.session.status not in (GameStatus.READY, GameStatus.FINISHED):
                LOGGER.debug("start_game ignored while %s", self.session.status.value)
                return False
            config = GameConfig(
                board_size=self.preferences.default_board_size if board_size is None else board_size,
                difficulty=self.preferences.default_difficulty if difficulty is None else difficulty,
                duration_seconds=(
                    self.preferences.default_timer_duration
                    if duration_seconds is None
                    else duration_seconds
                ),
                language_key=self.session.language_key if language_key is None else language_key,
            ).validate()
            board = self.generator.generate(config.board_size, config.difficulty)

            dictionary_future = self.dictionary_service.load_async(config.language_key)

            session = self._ready_session(config)
            session.board = board
            session.status = GameStatus.ACTIVE
            self.session = session
            self._dictionary_future = dictionary_future
            self._finalized = False
            self._summary = None
            self._start_timer()
            LOGGER.info(
                "Game started: %sx%s %s, %ss, language=%s",
                config.board_size,
                config.board_size,
                session.difficulty.value,
                config.duration_seconds,
                config.language_key,
            )
            return True

    def pause(self) -> bool:
        with self._lock:
            if self.session.status != GameStatus.ACTIVE:
                LOGGER.debug("pause ignored while %s", self.session.status.value)
                return False
            self._stop_timer()
            self.session.status = GameStatus.PAUSED
            return True

    def resume(self) -> bool:
        with self._lock:
            if self.session.status != GameStatus.PAUSED:
                LOGGER.debug("resume ignored while %s", self.session.status.value)
                return False
            self.session.status = GameStatus.ACTIVE
            self._start_timer()
            return True

    def end_game(self) -> bool:
        with self._lock:
            if self.session.status not in (GameStatus.ACTIVE, GameStatus.PAUSED):
                LOGGER.debug("end_game ignored while %s", self.session.status.value)
                return False
            self._finish("ended by player")
            return True

    def reset_game(self) -> bool:
        """Return to READY, ending a running game first. The board is discarded."""

        with self._lock:
            if self.session.status == GameStatus.READY:
                return False
            if self.session.status in (GameStatus.ACTIVE, GameStatus.PAUSED):
                self._finish("reset")
            previous = self.session
            self.session = self._ready_session(
                GameConfig(
                    board_size=previous.board_size,
                    difficulty=previous.difficulty,
                    duration_seconds=previous.initial_duration,
                    language_key=previous.language_key,
                )
            )
            self._finalized = False
            self._summary = None
            LOGGER.info("Game reset")
            return True

    def set_language(self, language_key: str) -> bool:
        """Switch the dictionary for the next game; ignored while a game runs."""

        with self._lock:
            if self.session.status in (GameStatus.ACTIVE, GameStatus.PAUSED):
                LOGGER.debug("set_language ignored while %s", self.session.status.value)
                return False
            key = normalize_key(language_key)
            if not key:
                raise InvalidConfiguration("Language key must not be empty")
            self.session.language_key = key
            self._request_dictionary(key)
            return True

    def tick(self) -> None:
        """Advance the clock by one second; reaching zero finishes the game."""

        with self._lock:
            if self.session.status != GameStatus.ACTIVE:
                return
            self.session.time_remaining = max(0, self.session.time_remaining - 1)
            if self.session.time_remaining == 0:
                self._finish("time expired")

    def finalize(self) -> Optional[GameSummary]:
        """Derive the summary of the finished game, once per game.

        Repeated calls return the same summary and never record it twice.
        Returns ``None`` before the game is finished or when no word was found.
        """

        with self._lock:
            if self.session.status != GameStatus.FINISHED:
                return None
            if self._finalized:
                return self._summary
            self._finalized = True
            self._summary = summarize(self.session, datetime.now(timezone.utc))
            if self._summary is not None and self.statistics is not None:
                self.statistics.record(self._summary)
            return self._summary

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_letter(self, position: PositionLike) -> bool:
        with self._lock:
            session = self.session
            if session.status != GameStatus.ACTIVE or session.board is None:
                return False
            position = _as_position(position)
            if not session.board.contains(position):
                LOGGER.debug("Selection %s outside board", position)
                return False
            if position in session.selection_path:
                LOGGER.debug("Selection %s already in path", position)
                return False
            if session.selection_path and not is_adjacent(session.selection_path[-1], position):
                LOGGER.debug("Selection %s not adjacent to %s", position, session.selection_path[-1])
                return False

            cell = session.board.cell(position)
            path = [*session.selection_path, position]
            word = session.current_word + cell.character
            cell.is_selected = True
            session.selection_path = path
            session.current_word = word
            return True

    def deselect_letter(self, position: PositionLike) -> bool:
        """Remove the last selected tile; interior tiles cannot be removed."""

        with self._lock:
            session = self.session
            if session.status != GameStatus.ACTIVE or session.board is None:
                return False
            position = _as_position(position)
            if not session.selection_path or session.selection_path[-1] != position:
                return False

            cell = session.board.cell(position)
            path = session.selection_path[:-1]
            word = session.current_word[: len(session.current_word) - len(cell.character)]
            cell.is_selected = False
            session.selection_path = path
            session.current_word = word
            return True

    def clear_selection(self) -> None:
        with self._lock:
            self.session.clear_selection()

    def submit_word(self) -> Optional[SubmissionResult]:
        """Validate the current selection; the selection is cleared either way.

        Returns the accepted :class:`Word`, a :class:`Rejection`, or ``None``
        when no game is active.
        """

        with self._lock:
            session = self.session
            if session.status != GameStatus.ACTIVE:
                return None
            if len(session.current_word) < MIN_WORD_LENGTH:
                text = session.current_word.lower()
                session.clear_selection()
                return Rejection(
                    RejectionReason.TOO_SHORT, text, REJECTION_MESSAGES[RejectionReason.TOO_SHORT]
                )
            try:
                result = self.validator.validate(
                    session, self._current_dictionary(), found_at=self.clock()
                )
            finally:
                session.clear_selection()

            if isinstance(result, Word):
                session.found_words.append(result)
                session.score += result.score
                LOGGER.info("Accepted %r for %s points (total %s)", result.text, result.score, session.score)
            return result

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _ready_session(config: GameConfig) -> GameSession:
        return GameSession(
            time_remaining=config.duration_seconds,
            initial_duration=config.duration_seconds,
            status=GameStatus.READY,
            difficulty=Difficulty.parse(config.difficulty),
            board_size=config.board_size,
            language_key=config.language_key,
        )

    def _finish(self, reason: str) -> None:
        self._stop_timer()
        self.session.clear_selection()
        self.session.status = GameStatus.FINISHED
        LOGGER.info(
            "Game finished (%s): score=%s words=%s",
            reason,
            self.session.score,
            len(self.session.found_words),
        )
        self.finalize()

    def _request_dictionary(self, language_key: str) -> None:
        self._dictionary_future = self.dictionary_service.load_async(language_key)

    def _current_dictionary(self) -> Optional[Dictionary]:
        """The loaded dictionary, the fallback after a failed load, or ``None`` while pending."""

        future = self._dictionary_future
        if future is None:
            self._request_dictionary(self.session.language_key)
            future = self._dictionary_future
        if future is None or not future.done():
            return None
        if future.cancelled() or future.exception() is not None:
            return self.dictionary_service.fallback()
        return future.result()

    def _start_timer(self) -> None:
        self._timer_run += 1
        if self.timer is None:
            return
        run = self._timer_run
        self.timer.start(lambda: self._on_timer(run))

    def _stop_timer(self) -> None:
        self._timer_run += 1
        if self.timer is not None:
            self.timer.stop()

    def _on_timer(self, run: int) -> None:
        with self._lock:
            # Ticks from a run that was stopped in the meantime are dropped.
            if run != self._timer_run:
                return
            self.tick()
