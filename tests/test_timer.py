import threading
import time
import unittest

from boggle.core.constants import GameStatus
from boggle.engine.game import BoggleGame
from boggle.engine.timer import IntervalTimer
from tests.helpers import FixedBoardGenerator, make_service


class IntervalTimerTests(unittest.TestCase):
    def test_invalid_interval(self) -> None:
        for interval in (0, -1):
            with self.assertRaises(ValueError):
                IntervalTimer(interval)

    def test_ticks_until_stopped(self) -> None:
        timer = IntervalTimer(0.01)
        ticks = []
        enough = threading.Event()

        def callback() -> None:
            ticks.append(1)
            if len(ticks) >= 3:
                enough.set()

        timer.start(callback)
        self.assertTrue(timer.is_running)
        self.assertTrue(enough.wait(2))
        timer.stop()
        timer.join(1)
        self.assertFalse(timer.is_running)
        count = len(ticks)
        time.sleep(0.05)
        self.assertEqual(len(ticks), count)

    def test_restart_replaces_previous_run(self) -> None:
        timer = IntervalTimer(0.01)
        first, second = [], threading.Event()
        timer.start(lambda: first.append(1))
        timer.start(second.set)
        self.assertTrue(second.wait(2))
        timer.stop()
        timer.join(1)
        count = len(first)
        time.sleep(0.05)
        self.assertEqual(len(first), count)

    def test_stop_without_start(self) -> None:
        timer = IntervalTimer(0.5)
        timer.stop()
        timer.join(0.1)
        self.assertFalse(timer.is_running)


class TimerDrivenGameTests(unittest.TestCase):
    def test_game_finishes_when_clock_runs_out(self) -> None:
        timer = IntervalTimer(0.01)
        game = BoggleGame(
            dictionary_service=make_service(),
            generator=FixedBoardGenerator(),
            timer=timer,
        )
        game.start_game(duration_seconds=3)
        deadline = time.monotonic() + 2
        while game.status != GameStatus.FINISHED and time.monotonic() < deadline:
            time.sleep(0.01)
        timer.join(1)
        snap = game.snapshot()
        self.assertEqual(snap.status, GameStatus.FINISHED)
        self.assertEqual(snap.time_remaining, 0)
        self.assertFalse(timer.is_running)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
