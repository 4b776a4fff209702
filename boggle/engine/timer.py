"""Periodic tick sources driving the game clock."""

from __future__ import annotations

import threading
from typing import Callable, Optional, Protocol

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class Ticker(Protocol):
    """Anything that can call ``callback`` periodically until stopped."""

    def start(self, callback: Callable[[], None]) -> None:
        ...

    def stop(self) -> None:
        ...


class IntervalTimer:
    """Calls a callback every ``interval_seconds`` from a daemon thread.

    ``stop()`` only signals the worker and never joins it, because it is
    usually invoked while the game lock is held and the worker may be waiting
    for that lock. Use :meth:`join` when a caller needs to wait.
    """

    def __init__(self, interval_seconds: float = 1.0, name: str = "boggle-timer") -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self.interval_seconds = interval_seconds
        self.name = name
        self._stop_event: Optional[threading.Event] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._stop_event is not None and not self._stop_event.is_set()

    def start(self, callback: Callable[[], None]) -> None:
        self.stop()
        stop_event = threading.Event()
        thread = threading.Thread(
            target=self._run,
            args=(callback, stop_event),
            name=self.name,
            daemon=True,
        )
        self._stop_event = stop_event
        self._thread = thread
        thread.start()
        LOGGER.debug("Timer %s started (%.3fs)", self.name, self.interval_seconds)

    def stop(self) -> None:
        if self._stop_event is not None and not self._stop_event.is_set():
            self._stop_event.set()
            LOGGER.debug("Timer %s stopped", self.name)

    def join(self, timeout: Optional[float] = None) -> None:
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self, callback: Callable[[], None], stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval_seconds):
            callback()
