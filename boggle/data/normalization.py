"""Shared helpers for word, tile and dictionary key normalization."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from ..core.constants import MIN_WORD_LENGTH, QU_TILE

WORD_RE = re.compile(r"^[a-z]+$")
LIST_SPLIT_RE = re.compile(r"[,\s]+")


def clean_word(text: str, min_length: int = MIN_WORD_LENGTH) -> Optional[str]:
    """Return the lowercase form of ``text`` or ``None`` if it is not playable."""

    if not text:
        return None
    word = text.strip().lower()
    if len(word) < min_length or not WORD_RE.match(word):
        return None
    return word


def clean_words(words: Iterable[str], min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """Normalize ``words``, dropping unplayable entries and duplicates (order kept)."""

    seen = set()
    cleaned: List[str] = []
    for raw in words:
        word = clean_word(raw, min_length)
        if word is None or word in seen:
            continue
        seen.add(word)
        cleaned.append(word)
    return cleaned


def parse_custom_word_list(text: str, min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """Split a user-pasted list on commas and whitespace and normalize it."""

    if not text:
        return []
    return clean_words(LIST_SPLIT_RE.split(text), min_length)


def normalize_key(key: str) -> str:
    return (key or "").strip().lower()


def normalize_tile(letter: str) -> str:
    """Return the board character for ``letter``; any Q becomes the QU tile."""

    tile = (letter or "").strip().upper()
    if tile in ("Q", QU_TILE):
        return QU_TILE
    if len(tile) != 1 or not tile.isalpha():
        raise ValueError(f"Invalid board letter: {letter!r}")
    return tile


__all__ = [
    "clean_word",
    "clean_words",
    "parse_custom_word_list",
    "normalize_key",
    "normalize_tile",
]
