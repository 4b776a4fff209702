"""User preference defaults for new games."""

from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Optional

from ..core.constants import (
    DEFAULT_DURATION_SECONDS,
    DEFAULT_LANGUAGE,
    SUPPORTED_BOARD_SIZES,
    Difficulty,
)
from ..core.exceptions import InvalidConfiguration
from ..utils.logger import get_logger
from .normalization import normalize_key
from .store import KeyValueStore, MemoryStore


LOGGER = get_logger(__name__)

PREFERENCES_KEY = "preferences"


@dataclass(frozen=True)
class GamePreferences:
    """Defaults applied when a game is started without explicit settings."""

    default_board_size: int = 4
    default_difficulty: Difficulty = Difficulty.MEDIUM
    default_timer_duration: int = DEFAULT_DURATION_SECONDS
    default_language: str = DEFAULT_LANGUAGE

    def validate(self) -> "GamePreferences":
        if self.default_board_size not in SUPPORTED_BOARD_SIZES:
            raise InvalidConfiguration(
                f"Board size {self.default_board_size} not in {SUPPORTED_BOARD_SIZES}"
            )
        if self.default_timer_duration <= 0:
            raise InvalidConfiguration("Timer duration must be positive")
        if not normalize_key(self.default_language):
            raise InvalidConfiguration("Language key must not be empty")
        return replace(
            self,
            default_difficulty=Difficulty.parse(self.default_difficulty),
            default_language=normalize_key(self.default_language),
        )

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["default_difficulty"] = Difficulty.parse(self.default_difficulty).value
        return payload

    @classmethod
    def from_dict(cls, payload: dict) -> "GamePreferences":
        defaults = cls()
        return cls(
            default_board_size=int(payload.get("default_board_size", defaults.default_board_size)),
            default_difficulty=Difficulty.parse(
                payload.get("default_difficulty", defaults.default_difficulty)
            ),
            default_timer_duration=int(
                payload.get("default_timer_duration", defaults.default_timer_duration)
            ),
            default_language=str(payload.get("default_language", defaults.default_language)),
        ).validate()


class PreferencesRepository:
    """Reads and writes :class:`GamePreferences` through a key-value store."""

    def __init__(self, store: Optional[KeyValueStore] = None) -> None:
        self.store = store or MemoryStore()

    def load(self) -> GamePreferences:
        payload = self.store.load(PREFERENCES_KEY)
        if payload is None:
            return GamePreferences()
        try:
            return GamePreferences.from_dict(payload)
        except (InvalidConfiguration, TypeError, ValueError, AttributeError) as exc:
            LOGGER.warning("Stored preferences invalid (%s); using defaults", exc)
            return GamePreferences()

    def save(self, preferences: GamePreferences) -> GamePreferences:
        validated = preferences.validate()
        self.store.save(PREFERENCES_KEY, validated.to_dict())
        return validated

    def update(self, **changes: Any) -> GamePreferences:
        """Apply ``changes`` to the stored preferences and persist them."""

        return self.save(replace(self.load(), **changes))
