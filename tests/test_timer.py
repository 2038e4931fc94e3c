"""Tests for the pause-aware ElapsedTimer (sitstand.core.timer_state)."""

import os
import tempfile
import time
import unittest
from unittest.mock import patch

os.environ.setdefault("SITSTAND_HOME", tempfile.mkdtemp(prefix="sitstand-tests-"))


class FakeClock:
    """Stand-in for time.monotonic() that only moves when told to."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class TestElapsedTimerRealClock(unittest.TestCase):

    def test_new_timer_starts_running_near_zero(self):
        from sitstand.core.timer_state import ElapsedTimer
        timer = ElapsedTimer()
        self.assertTrue(timer.running)
        self.assertLess(timer.current_elapsed, 0.1)

    def test_reset_then_immediate_query(self):
        from sitstand.core.timer_state import ElapsedTimer
        timer = ElapsedTimer()
        time.sleep(0.05)
        timer.reset()
        self.assertTrue(timer.running)
        self.assertLess(timer.current_elapsed, 0.1)

    def test_elapsed_grows_while_running(self):
        from sitstand.core.timer_state import ElapsedTimer
        timer = ElapsedTimer()
        first = timer.current_elapsed
        time.sleep(0.02)
        self.assertGreater(timer.current_elapsed, first)


class TestElapsedTimerFakeClock(unittest.TestCase):

    def setUp(self):
        self.clock = FakeClock()
        self._patcher = patch("sitstand.core.timer_state.time.monotonic", side_effect=self.clock)
        self._patcher.start()
        from sitstand.core.timer_state import ElapsedTimer
        self.timer = ElapsedTimer()

    def tearDown(self):
        self._patcher.stop()

    def test_running_elapsed_tracks_clock(self):
        self.clock.advance(42.5)
        self.assertAlmostEqual(self.timer.current_elapsed, 42.5)

    def test_pause_freezes_elapsed(self):
        self.clock.advance(10)
        self.timer.pause()
        self.assertFalse(self.timer.running)
        self.clock.advance(500)
        self.assertAlmostEqual(self.timer.current_elapsed, 10)

    def test_pause_is_idempotent(self):
        self.clock.advance(10)
        self.timer.pause()
        self.clock.advance(30)
        self.timer.pause()
        self.assertAlmostEqual(self.timer.current_elapsed, 10)

    def test_resume_keeps_banked_time(self):
        self.clock.advance(10)
        self.timer.pause()
        self.clock.advance(300)
        self.timer.resume()
        self.assertTrue(self.timer.running)
        self.clock.advance(5)
        self.assertAlmostEqual(self.timer.current_elapsed, 15)

    def test_resume_is_idempotent(self):
        self.clock.advance(10)
        self.timer.resume()
        self.clock.advance(10)
        self.assertAlmostEqual(self.timer.current_elapsed, 20)

    def test_pause_resume_round_trip_matches_never_pausing(self):
        from sitstand.core.timer_state import ElapsedTimer
        untouched = ElapsedTimer()
        self.clock.advance(7)
        self.timer.pause()
        self.timer.resume()
        self.clock.advance(3)
        self.assertAlmostEqual(self.timer.current_elapsed, untouched.current_elapsed)

    def test_multiple_segments_accumulate(self):
        for _ in range(3):
            self.clock.advance(4)
            self.timer.pause()
            self.clock.advance(100)
            self.timer.resume()
        self.assertAlmostEqual(self.timer.current_elapsed, 12)

    def test_reset_discards_everything_and_runs(self):
        self.clock.advance(60)
        self.timer.pause()
        self.timer.reset()
        self.assertTrue(self.timer.running)
        self.assertEqual(self.timer.current_elapsed, 0.0)
        self.clock.advance(2)
        self.assertAlmostEqual(self.timer.current_elapsed, 2)

    def test_clock_going_backwards_never_goes_negative(self):
        self.clock.advance(-50)
        self.assertEqual(self.timer.current_elapsed, 0.0)
        self.timer.pause()
        self.assertEqual(self.timer.elapsed, 0.0)

    def test_paused_query_far_in_future_is_constant(self):
        self.clock.advance(3)
        self.timer.pause()
        self.clock.advance(10 ** 12)
        self.assertAlmostEqual(self.timer.current_elapsed, 3)


if __name__ == "__main__":
    unittest.main()
