"""Game logic core for a single-player Boggle-style word game.

This package exposes the public API surface via:

- ``boggle.engine.game.BoggleGame``: the game lifecycle state machine.
- ``boggle.engine.board.BoardGenerator``: dice and letter-frequency boards.
- ``boggle.data.dictionary.DictionaryService``: cached word lists per language.
- ``boggle.engine.statistics.StatisticsAggregator``: summaries and leaderboard.

Rendering and persistence media are left to the embedding application.
"""

from .engine.game import BoggleGame, GameConfig
from .engine.board import Board, BoardGenerator
from .data.dictionary import Dictionary, DictionaryService
from .engine.statistics import StatisticsAggregator

__all__ = [
    "BoggleGame",
    "GameConfig",
    "Board",
    "BoardGenerator",
    "Dictionary",
    "DictionaryService",
    "StatisticsAggregator",
]

__version__ = "0.1.0"
