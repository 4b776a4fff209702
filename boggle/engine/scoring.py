"""Word scoring."""

from __future__ import annotations

from typing import Dict

RARE_LETTER_BONUS: Dict[str, int] = {"q": 2, "z": 3, "x": 2, "j": 2, "k": 1}


def length_score(length: int) -> int:
    if length <= 2:
        return 0
    if length <= 4:
        return 1
    if length == 5:
        return 2
    if length == 6:
        return 3
    if length == 7:
        return 5
    return 11


def score_word(word: str) -> int:
    """Length-based score plus a one-off bonus per rare letter present."""

    word = (word or "").lower()
    bonus = sum(points for letter, points in RARE_LETTER_BONUS.items() if letter in word)
    return length_score(len(word)) + bonus
