"""Pretty-print helpers for boards and game summaries."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterable, Optional

if TYPE_CHECKING:
    from ..core.models import GameSummary
    from ..engine.board import Board
    from ..engine.statistics import GameStatistics


def format_board(board: Board, *, show_selection: bool = True) -> str:
    """Render the board with row/column headers; selected tiles are bracketed."""

    width = board.size
    header_cells = [f"{c:>4}" for c in range(width)]
    lines = ["   " + "".join(header_cells)]
    lines.append("    " + "-" * (4 * width))
    for r, row in enumerate(board.cells):
        rendered = []
        for cell in row:
            text = cell.display
            if show_selection and cell.is_selected:
                text = f"[{text}]"
            rendered.append(f"{text:>4}")
        lines.append(f"{r:>2} |" + "".join(rendered))
    return "\n".join(lines)


def pretty_print_board(board: Board, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board), file=stream)


def format_summary(summary: GameSummary) -> str:
    lines = [
        f"Score:             {summary.score}",
        f"Words found:       {summary.word_count}",
        f"Longest word:      {summary.longest_word or '-'}",
        f"Most valuable:     {summary.most_valuable_word.word or '-'}"
        f" ({summary.most_valuable_word.score})",
        f"Duration:          {summary.duration_seconds}s",
        f"Board:             {summary.board_size}x{summary.board_size} {summary.difficulty}",
    ]
    return "\n".join(lines)


def format_statistics(statistics: GameStatistics) -> str:
    lines = [
        f"Games played:      {statistics.games_played}",
        f"Total score:       {statistics.total_score}",
        f"Average score:     {statistics.average_score:.1f}",
        f"Highest score:     {statistics.highest_score}",
        f"Longest word:      {statistics.longest_word or '-'}",
        f"Most words/game:   {statistics.most_words_in_game}",
    ]
    return "\n".join(lines)


def print_word_list(words: Iterable[str], *, stream=None, columns: Optional[int] = 6) -> None:
    stream = stream or sys.stdout
    words = list(words)
    if not words:
        print("(no words)", file=stream)
        return
    step = columns or len(words)
    for start in range(0, len(words), step):
        print("  ".join(f"{w:<12}" for w in words[start:start + step]).rstrip(), file=stream)
