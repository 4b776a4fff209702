"""CLI entrypoint: generate a Boggle board and optionally list its words."""

from __future__ import annotations

import argparse
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from boggle.core.constants import SUPPORTED_BOARD_SIZES, Difficulty
from boggle.data.dictionary import DictionaryService
from boggle.data.sources import FileWordListSource, HttpWordListSource, StaticWordListSource
from boggle.data.store import JsonFileStore
from boggle.engine.board import BoardGenerator
from boggle.engine.paths import find_words
from boggle.engine.scoring import score_word
from boggle.engine.statistics import StatisticsAggregator
from boggle.utils.logger import configure_logging, parse_level
from boggle.utils.pretty import (
    format_statistics,
    format_summary,
    pretty_print_board,
    print_word_list,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a Boggle board and list the dictionary words it contains",
    )
    parser.add_argument(
        "--size",
        type=int,
        choices=SUPPORTED_BOARD_SIZES,
        default=4,
        help="Board size (N x N)",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.MEDIUM.value,
        help="Letter distribution for non-standard boards",
    )
    parser.add_argument("--language", type=str, default="english", help="Word list key")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--dictionary-dir",
        type=Path,
        help="Directory with <language>.txt / <language>.json word lists",
    )
    parser.add_argument(
        "--dictionary-url",
        type=str,
        default=os.environ.get("BOGGLE_DICTIONARY_URL"),
        help="URL template for word lists, e.g. https://host/{key}.json",
    )
    parser.add_argument("--solve", action="store_true", help="List every word found on the board")
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--stats-dir",
        type=Path,
        help="Print the statistics and best game stored in this directory, then exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def build_dictionary_service(args: argparse.Namespace) -> DictionaryService:
    if args.dictionary_url:
        return DictionaryService(HttpWordListSource(args.dictionary_url))
    if args.dictionary_dir:
        return DictionaryService(FileWordListSource(args.dictionary_dir))
    return DictionaryService(StaticWordListSource())


def show_statistics(store_dir: Path) -> None:
    aggregator = StatisticsAggregator(JsonFileStore(store_dir))
    print(format_statistics(aggregator.statistics))
    leaderboard = aggregator.leaderboard
    if leaderboard:
        print("\nBest game:")
        print(format_summary(leaderboard[0]))


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(parse_level(args.log_level, default=logging.WARNING))

    if args.stats_dir:
        show_statistics(args.stats_dir)
        return

    board = BoardGenerator(seed=args.seed).generate(args.size, args.difficulty)
    payload: Dict[str, Any] = {
        "size": args.size,
        "difficulty": args.difficulty,
        "seed": args.seed,
        "board": board.to_jsonable(),
    }

    if args.solve:
        service = build_dictionary_service(args)
        dictionary = service.load_or_fallback(args.language)
        words = find_words(board, dictionary.words)
        payload["language"] = dictionary.key
        payload["words"] = [{"word": word, "score": score_word(word)} for word in words]
        payload["max_score"] = sum(score_word(word) for word in words)

    if args.output:
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        return

    pretty_print_board(board, label=f"{args.size}x{args.size} {args.difficulty} board")
    if args.solve:
        print(f"\n{len(payload['words'])} words, {payload['max_score']} points available:")
        print_word_list(word["word"] for word in payload["words"])


if __name__ == "__main__":  # pragma: no cover
    main()
