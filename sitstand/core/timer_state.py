import time
from sitstand.common.logger import log

# This object handles the actual time tracking for the active sitting/standing phase. It uses monotonic seconds for
# accuracy (clock change immunity), and unlike a plain stopwatch it starts out running.
class ElapsedTimer:

    def __init__(self):
        self.elapsed = 0.0
        self.running = True
        self._mono = time.monotonic()

    # Returns how much time has been banked plus the live segment, if any. Never negative, even if the clock
    # misbehaves.
    @property
    def current_elapsed(self):
        if self.running and self._mono is not None:
            return self.elapsed + max(0.0, time.monotonic() - self._mono)
        return self.elapsed

    # Pause and resume are both idempotent.
    def pause(self):
        if self.running:
            now = time.monotonic()
            self.elapsed += max(0.0, now - self._mono)
            self.running = False
            self._mono = None
            log.debug(f"Paused timer at mono {now}, banked {self.elapsed:.3f}s")
    def resume(self):
        if not self.running:
            self.running = True
            self._mono = time.monotonic()
            log.debug(f"Resumed timer at mono {self._mono}, with {self.elapsed:.3f}s already banked")

    # Throws away everything and starts again from 0:00, running.
    def reset(self):
        self.elapsed = 0.0
        self.running = True
        self._mono = time.monotonic()
        log.debug(f"Reset timer to 0.0 at mono {self._mono}")

    def __repr__(self):
        state = "running" if self.running else "paused"
        return f"ElapsedTimer({state}, elapsed={self.current_elapsed:.3f})"
