"""Key-value persistence used for statistics, leaderboard and preferences.

The game core only ever calls ``load(key)`` and ``save(key, value)`` with
JSON-compatible values; it does not know the storage medium.
"""

from __future__ import annotations

import copy
import json
import re
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/boggle")


class KeyValueStore(Protocol):
    def load(self, key: str) -> Optional[Any]:
        ...

    def save(self, key: str, value: Any) -> None:
        ...


class MemoryStore:
    """Dictionary-backed store, handy for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def load(self, key: str) -> Optional[Any]:
        value = self._data.get(key)
        return copy.deepcopy(value)

    def save(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)


class JsonFileStore:
    """Persist each key as a JSON document under ``store_dir``.

    Unreadable or corrupt documents are logged and reported as absent so the
    game starts from defaults instead of failing.
    """

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    def load(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            LOGGER.debug("Store miss: %s", path.name)
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            LOGGER.warning("Store read error (%s): %s", path.name, exc)
            return None

    def save(self, key: str, value: Any) -> None:
        path = self._path(key)
        path.write_text(json.dumps(value, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.debug("Store saved: %s", path.name)

    def _path(self, key: str) -> Path:
        slug = re.sub(r"_+", "_", re.sub(r"[^a-z0-9]", "_", key.lower())).strip("_")
        if not slug:
            raise ValueError(f"Invalid store key: {key!r}")
        return self.store_dir / f"{slug}.json"
