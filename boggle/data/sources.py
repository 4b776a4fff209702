"""Word list sources consumed by :class:`~boggle.data.dictionary.DictionaryService`."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Protocol, Sequence

import requests

from ..core.exceptions import DictionaryUnavailable
from ..utils.logger import get_logger
from .normalization import normalize_key
from .word_lists import BUILTIN_WORD_LISTS


LOGGER = get_logger(__name__)


class WordListSource(Protocol):
    """Protocol implemented by every raw word list provider."""

    def fetch(self, key: str) -> Iterable[str]:
        ...

    def available_keys(self) -> Sequence[str]:
        ...


class StaticWordListSource:
    """Serves in-memory word lists, by default the bundled vocabularies."""

    def __init__(self, lists: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        source = BUILTIN_WORD_LISTS if lists is None else lists
        self._lists = {normalize_key(key): tuple(words) for key, words in source.items()}

    def fetch(self, key: str) -> Iterable[str]:
        words = self._lists.get(normalize_key(key))
        if words is None:
            raise DictionaryUnavailable(
                f"No word list for {key!r}; known lists: {', '.join(self._lists)}"
            )
        return words

    def available_keys(self) -> Sequence[str]:
        return list(self._lists)


def parse_word_payload(text: str) -> List[str]:
    """Parse a bulk word file.

    Accepts a JSON object keyed by word (``{"aardvark": 1, ...}``), a JSON
    list of words, or plain text with one word per line where blank lines
    and ``#`` comments are skipped.
    """

    stripped = text.lstrip()
    if stripped.startswith("{") or stripped.startswith("["):
        try:
            payload: Any = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DictionaryUnavailable(f"Malformed JSON word list: {exc}") from exc
        if not isinstance(payload, (dict, list)):
            raise DictionaryUnavailable("JSON word list must be an object or a list")
        # Iterating a dict yields its keys, which are the words.
        return [str(word) for word in payload]

    entries: List[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


class FileWordListSource:
    """Reads ``<key>.txt`` or ``<key>.json`` files from a directory."""

    SUFFIXES = (".txt", ".json")

    def __init__(self, directory: Path | str) -> None:
        self.directory = Path(directory)

    def _path_for(self, key: str) -> Optional[Path]:
        for suffix in self.SUFFIXES:
            candidate = self.directory / f"{normalize_key(key)}{suffix}"
            if candidate.exists():
                return candidate
        return None

    def fetch(self, key: str) -> Iterable[str]:
        path = self._path_for(key)
        if path is None:
            raise DictionaryUnavailable(f"Missing word list for {key!r} in {self.directory}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DictionaryUnavailable(f"Cannot read {path}: {exc}") from exc
        return parse_word_payload(text)

    def available_keys(self) -> Sequence[str]:
        if not self.directory.is_dir():
            return []
        keys = {
            path.stem
            for path in self.directory.iterdir()
            if path.suffix in self.SUFFIXES and path.is_file()
        }
        return sorted(keys)


class HttpWordListSource:
    """Fetches bulk word files over HTTP.

    ``url_template`` is formatted with ``key`` (``https://host/{key}.json``).
    Any transport or HTTP status failure surfaces as
    :class:`DictionaryUnavailable` so callers can fall back.
    """

    def __init__(
        self,
        url_template: str,
        keys: Sequence[str] = tuple(BUILTIN_WORD_LISTS),
        timeout_seconds: float = 10.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.url_template = url_template
        self.keys = [normalize_key(key) for key in keys]
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    def fetch(self, key: str) -> Iterable[str]:
        url = self.url_template.format(key=normalize_key(key))
        LOGGER.info("Fetching word list %s from %s", key, url)
        try:
            response = self.session.get(url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise DictionaryUnavailable(f"Word list request failed for {key!r}: {exc}") from exc
        return parse_word_payload(response.text)

    def available_keys(self) -> Sequence[str]:
        return list(self.keys)


__all__ = [
    "WordListSource",
    "StaticWordListSource",
    "FileWordListSource",
    "HttpWordListSource",
    "parse_word_payload",
]
