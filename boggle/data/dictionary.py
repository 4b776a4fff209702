"""Dictionary loading, caching and membership queries."""

from __future__ import annotations

import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Set

from ..core.constants import MIN_WORD_LENGTH
from ..core.exceptions import DictionaryUnavailable
from ..utils.logger import get_logger
from .normalization import clean_words, normalize_key, parse_custom_word_list
from .sources import StaticWordListSource, WordListSource
from .word_lists import BUILTIN_WORD_LISTS, FALLBACK_KEY


LOGGER = get_logger(__name__)

_background_lock = threading.Lock()
_background_executor: Optional[ThreadPoolExecutor] = None


def background_executor() -> ThreadPoolExecutor:
    """Process-wide single worker used for dictionary loads by default."""

    global _background_executor
    with _background_lock:
        if _background_executor is None:
            _background_executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix="boggle-dictionary"
            )
        return _background_executor


@dataclass(frozen=True)
class Dictionary:
    """An immutable set of playable lowercase words for one language key."""

    key: str
    words: FrozenSet[str]
    is_fallback: bool = False

    def contains(self, word: str) -> bool:
        return (word or "").strip().lower() in self.words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self.words)


def contains(dictionary: Dictionary, word: str) -> bool:
    """Membership test used by validators (case-insensitive)."""

    return dictionary.contains(word)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary normalization and fallback."""

    min_length: int = MIN_WORD_LENGTH
    fallback_words: Sequence[str] = field(
        default_factory=lambda: BUILTIN_WORD_LISTS[FALLBACK_KEY]
    )


class DictionaryService:
    """Process-scoped cache of dictionaries keyed by language/theme.

    A dictionary is fetched from the source at most once per key: concurrent
    ``load_async`` calls for a key that is already being fetched share the
    same in-flight :class:`~concurrent.futures.Future`. When an ``executor``
    is supplied fetches run on it, otherwise they run on the calling thread.
    Failed loads are not cached, so a later call retries the source.
    Fetches still running when :meth:`reset` is called finish into their
    future but are only cached if the key is requested again.
    """

    def __init__(
        self,
        source: Optional[WordListSource] = None,
        config: Optional[DictionaryConfig] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self.source = source or StaticWordListSource()
        self.config = config or DictionaryConfig()
        self.executor = executor
        self._lock = threading.Lock()
        self._cache: Dict[str, Dictionary] = {}
        self._in_flight: Dict[str, "Future[Dictionary]"] = {}
        self._orphaned: Set["Future[Dictionary]"] = set()
        self._custom_keys: List[str] = []
        self._fallback: Optional[Dictionary] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, key: str) -> Dictionary:
        """Return the dictionary for ``key``, fetching it if needed.

        Raises :class:`DictionaryUnavailable` when the source fails.
        """

        return self.load_async(key).result()

    def load_async(self, key: str) -> "Future[Dictionary]":
        key = normalize_key(key)
        with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                done: "Future[Dictionary]" = Future()
                done.set_result(cached)
                return done
            pending = self._in_flight.get(key)
            if pending is not None:
                self._orphaned.discard(pending)
                LOGGER.debug("Joining in-flight load for %s", key)
                return pending
            future: "Future[Dictionary]" = Future()
            self._in_flight[key] = future

        if self.executor is None:
            self._fetch_into(key, future)
        else:
            try:
                self.executor.submit(self._fetch_into, key, future)
            except RuntimeError as exc:
                self._fail(key, future, DictionaryUnavailable(f"Cannot schedule load for {key!r}: {exc}"))
        return future

    def load_or_fallback(self, key: str) -> Dictionary:
        try:
            return self.load(key)
        except DictionaryUnavailable as exc:
            LOGGER.warning("Dictionary %s unavailable (%s); using fallback words", key, exc)
            return self.fallback()

    def fallback(self) -> Dictionary:
        """Return the built-in minimal dictionary used when a load fails."""

        if self._fallback is None:
            words = clean_words(self.config.fallback_words, self.config.min_length)
            self._fallback = Dictionary(key=FALLBACK_KEY, words=frozenset(words), is_fallback=True)
        return self._fallback

    def _fetch_into(self, key: str, future: "Future[Dictionary]") -> None:
        if not future.set_running_or_notify_cancel():
            self._release(key, future)
            return
        try:
            try:
                dictionary = self._build(key, self.source.fetch(key))
            except DictionaryUnavailable:
                raise
            except Exception as exc:
                raise DictionaryUnavailable(f"Source failed for {key!r}: {exc}") from exc
        except DictionaryUnavailable as exc:
            self._fail(key, future, exc)
            return

        with self._lock:
            if self._in_flight.get(key) is future and future not in self._orphaned:
                self._cache[key] = dictionary
            self._release_locked(key, future)
        LOGGER.info("Dictionary %s loaded with %d words", key, len(dictionary))
        future.set_result(dictionary)

    def _fail(self, key: str, future: "Future[Dictionary]", error: DictionaryUnavailable) -> None:
        self._release(key, future)
        LOGGER.warning("Dictionary %s failed to load: %s", key, error)
        future.set_exception(error)

    def _release(self, key: str, future: "Future[Dictionary]") -> None:
        with self._lock:
            self._release_locked(key, future)

    def _release_locked(self, key: str, future: "Future[Dictionary]") -> None:
        if self._in_flight.get(key) is future:
            del self._in_flight[key]
        self._orphaned.discard(future)

    def _build(self, key: str, raw: Iterable[str]) -> Dictionary:
        words = clean_words(list(raw), self.config.min_length)
        if not words:
            raise DictionaryUnavailable(f"Word list {key!r} has no playable words")
        return Dictionary(key=key, words=frozenset(words))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def peek(self, key: str) -> Optional[Dictionary]:
        """Return the cached dictionary for ``key`` without loading it."""

        with self._lock:
            return self._cache.get(normalize_key(key))

    def is_loading(self, key: str) -> bool:
        with self._lock:
            return normalize_key(key) in self._in_flight

    def register_words(self, key: str, words: str | Iterable[str]) -> Dictionary:
        """Install a custom word list (pasted text or an iterable) under ``key``."""

        key = normalize_key(key)
        if isinstance(words, str):
            cleaned = parse_custom_word_list(words, self.config.min_length)
        else:
            cleaned = clean_words(words, self.config.min_length)
        if not cleaned:
            raise DictionaryUnavailable(f"Custom list {key!r} has no playable words")
        dictionary = Dictionary(key=key, words=frozenset(cleaned))
        with self._lock:
            self._cache[key] = dictionary
            if key not in self._custom_keys:
                self._custom_keys.append(key)
        LOGGER.info("Custom dictionary %s registered with %d words", key, len(dictionary))
        return dictionary

    def available_languages(self) -> List[str]:
        keys = [normalize_key(key) for key in self.source.available_keys()]
        for key in self._custom_keys:
            if key not in keys:
                keys.append(key)
        return keys

    def reset(self) -> None:
        """Drop every cached dictionary and custom list.

        Loads still in flight keep running; they only reach the cache if their
        key is requested again before they finish.
        """

        with self._lock:
            self._cache.clear()
            self._orphaned.update(self._in_flight.values())
            self._custom_keys.clear()
            self._fallback = None
