"""Word submission validation."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional, Sequence, Union

from ..core.constants import MIN_WORD_LENGTH
from ..core.models import Position, Word
from ..data.dictionary import Dictionary, contains
from ..utils.logger import get_logger
from .board import Board
from .paths import is_continuous_path, word_from_path
from .scoring import score_word

if TYPE_CHECKING:
    from .session import GameSession


LOGGER = get_logger(__name__)


class RejectionReason(str, Enum):
    TOO_SHORT = "too_short"
    DISCONTINUOUS_PATH = "discontinuous_path"
    PATH_MISMATCH = "path_mismatch"
    DICTIONARY_PENDING = "dictionary_pending"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    ALREADY_FOUND = "already_found"


REJECTION_MESSAGES = {
    RejectionReason.TOO_SHORT: "Word is too short (minimum 3 letters).",
    RejectionReason.DISCONTINUOUS_PATH: "Path is not continuous.",
    RejectionReason.PATH_MISMATCH: "Path does not form the given word.",
    RejectionReason.DICTIONARY_PENDING: "Dictionary is still loading, try again.",
    RejectionReason.NOT_IN_DICTIONARY: "Word not found in dictionary.",
    RejectionReason.ALREADY_FOUND: "Word has already been found.",
}


@dataclass(frozen=True)
class Rejection:
    """Feedback for a refused submission; the selection is cleared regardless."""

    reason: RejectionReason
    word: str
    message: str

    @property
    def ok(self) -> bool:
        return False


SubmissionResult = Union[Word, Rejection]


class _WordRejected(Exception):
    def __init__(self, reason: RejectionReason) -> None:
        super().__init__(REJECTION_MESSAGES[reason])
        self.reason = reason


class WordValidator:
    """Runs the ordered submission checks; the first failing check wins."""

    def __init__(self, min_length: int = MIN_WORD_LENGTH) -> None:
        self.min_length = min_length

    def validate(
        self,
        session: "GameSession",
        dictionary: Optional[Dictionary],
        found_at: Optional[float] = None,
    ) -> SubmissionResult:
        if session.board is None:
            return Rejection(
                RejectionReason.PATH_MISMATCH,
                session.current_word.lower(),
                REJECTION_MESSAGES[RejectionReason.PATH_MISMATCH],
            )
        return self.validate_word(
            session.current_word,
            session.selection_path,
            session.board,
            dictionary,
            (word.text for word in session.found_words),
            found_at=found_at,
        )

    def validate_word(
        self,
        text: str,
        path: Sequence[Position],
        board: Board,
        dictionary: Optional[Dictionary],
        found_words: Iterable[str],
        found_at: Optional[float] = None,
    ) -> SubmissionResult:
        word = text.lower()
        try:
            self._check_length(word)
            self._check_continuity(path, board)
            self._check_path_spells_word(path, board, word)
            self._check_dictionary(word, dictionary)
            self._check_not_found(word, found_words)
        except _WordRejected as exc:
            LOGGER.debug("Rejected %r: %s", word, exc.reason.value)
            return Rejection(exc.reason, word, str(exc))

        return Word(
            text=word,
            path=tuple(path),
            score=score_word(word),
            found_at=time.time() if found_at is None else found_at,
        )

    def _check_length(self, word: str) -> None:
        if len(word) < self.min_length:
            raise _WordRejected(RejectionReason.TOO_SHORT)

    @staticmethod
    def _check_continuity(path: Sequence[Position], board: Board) -> None:
        if not path or not is_continuous_path(path, board.size):
            raise _WordRejected(RejectionReason.DISCONTINUOUS_PATH)

    @staticmethod
    def _check_path_spells_word(path: Sequence[Position], board: Board, word: str) -> None:
        if word_from_path(path, board).lower() != word:
            raise _WordRejected(RejectionReason.PATH_MISMATCH)

    @staticmethod
    def _check_dictionary(word: str, dictionary: Optional[Dictionary]) -> None:
        if dictionary is None:
            raise _WordRejected(RejectionReason.DICTIONARY_PENDING)
        if not contains(dictionary, word):
            raise _WordRejected(RejectionReason.NOT_IN_DICTIONARY)

    @staticmethod
    def _check_not_found(word: str, found_words: Iterable[str]) -> None:
        if any(word == found.lower() for found in found_words):
            raise _WordRejected(RejectionReason.ALREADY_FOUND)


__all__ = [
    "RejectionReason",
    "Rejection",
    "SubmissionResult",
    "WordValidator",
    "score_word",
]
