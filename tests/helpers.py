"""Shared fixtures for the game core tests."""

from __future__ import annotations

from concurrent.futures import Future
from typing import Callable, List, Optional, Sequence, Tuple

from boggle.core.constants import Difficulty
from boggle.data.dictionary import DictionaryService
from boggle.data.sources import StaticWordListSource
from boggle.engine.board import Board, BoardGenerator, validate_board_size


# C A T S
# D O G E
# R H I N
# X Q L M   (Q is the QU tile)
BOARD_ROWS: Tuple[str, ...] = ("CATS", "DOGE", "RHIN", "XQLM")

QU_BOARD_ROWS: Tuple[str, ...] = ("QILT", "AEOR", "SNDP", "BCFG")

TEST_WORDS: Tuple[str, ...] = ("cat", "dog", "hot", "tag", "quilt")


class FixedBoardGenerator(BoardGenerator):
    """Always returns the same board layout, still validating the request."""

    def __init__(self, rows: Sequence[str] = BOARD_ROWS) -> None:
        super().__init__(seed=0)
        self.rows = list(rows)
        self.calls = 0

    def generate(self, size: int, difficulty) -> Board:
        validate_board_size(size)
        Difficulty.parse(difficulty)
        self.calls += 1
        return Board.from_rows(self.rows)


class DeferredExecutor:
    """Executor stand-in that only runs submitted work when told to."""

    def __init__(self) -> None:
        self.pending: List[Tuple[Callable, tuple]] = []

    def submit(self, fn: Callable, *args) -> Optional[Future]:
        self.pending.append((fn, args))
        return None

    def run_all(self) -> None:
        pending, self.pending = self.pending, []
        for fn, args in pending:
            fn(*args)


class CountingSource(StaticWordListSource):
    """Static source that records how often each key was fetched."""

    def __init__(self, lists=None) -> None:
        super().__init__(lists if lists is not None else {"english": TEST_WORDS})
        self.fetches: List[str] = []

    def fetch(self, key: str):
        self.fetches.append(key)
        return super().fetch(key)


class FailingSource:
    """Source whose every fetch fails with ``error``."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        self.fetches = 0

    def fetch(self, key: str):
        self.fetches += 1
        raise self.error

    def available_keys(self):
        return ["english"]


def make_service(words: Sequence[str] = TEST_WORDS, executor=None) -> DictionaryService:
    return DictionaryService(StaticWordListSource({"english": words}), executor=executor)


class FakeTimer:
    """Ticker that hands out its callbacks instead of running a thread."""

    def __init__(self) -> None:
        self.callbacks: List[Callable[[], None]] = []
        self.starts = 0
        self.stops = 0
        self.running = False

    def start(self, callback: Callable[[], None]) -> None:
        self.callbacks.append(callback)
        self.starts += 1
        self.running = True

    def stop(self) -> None:
        self.stops += 1
        self.running = False

    @property
    def latest(self) -> Callable[[], None]:
        return self.callbacks[-1]
