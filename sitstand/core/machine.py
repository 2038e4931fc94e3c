"""Sit/stand reminder state machine: pure logic, no UI.

The host loop owns exactly one ``ReminderStateMachine``.  It feeds it
``Command`` values one at a time through ``apply()``, which mutates the
machine and returns a ``Step``: an optional follow-up command that must be
applied before the next input is read, plus any desktop notifications the
transition asked for.  The machine never delivers notifications itself.
"""

import enum
from dataclasses import dataclass
from sitstand.common.logger import log
from sitstand.core.config import (
    DEFAULT_SITTING,
    DEFAULT_STANDING,
    MAX_DURATION,
    MIN_DURATION,
    STEP,
    clamp_duration,
)
from sitstand.core.timer_state import ElapsedTimer
from sitstand.util.misc import clock_after, format_remaining


class Phase(enum.Enum):
    SITTING = "sitting"
    STANDING = "standing"

    @property
    def opposite(self):
        return Phase.STANDING if self is Phase.SITTING else Phase.SITTING


# Which on-screen panel the Increase/Decrease/Reset/Next keys currently act on.
class Focus(enum.Enum):
    TIMER = "timer"
    SITTING = "sitting"
    STANDING = "standing"

_FOCUS_ORDER = (Focus.TIMER, Focus.SITTING, Focus.STANDING)
_FOCUS_PHASE = {Focus.SITTING: Phase.SITTING, Focus.STANDING: Phase.STANDING}


class Command(enum.Enum):
    QUIT = "quit"
    PAUSE = "pause"
    RESUME = "resume"
    INCREASE = "increase"
    DECREASE = "decrease"
    NAVIGATE_FORWARD = "navigate_forward"
    NAVIGATE_BACKWARD = "navigate_backward"
    RESET = "reset"
    NEXT = "next"
    TIMER_FINISHED = "timer_finished"


@dataclass(frozen=True)
class Notification:
    """Request to tell the user a new phase just started and how long it lasts."""
    phase: Phase
    duration: int


@dataclass(frozen=True)
class Step:
    """Outcome of one ``apply()`` call."""
    follow_up: Command | None = None
    notifications: tuple = ()


@dataclass(frozen=True)
class ReminderSnapshot:
    """Read-only view of everything the renderer needs for one frame."""
    phase: Phase
    paused: bool
    focus: Focus
    sitting_duration: int
    standing_duration: int
    elapsed: float
    progress: float
    remaining: float
    sitting_fraction: float
    standing_fraction: float


class ReminderStateMachine:

    def __init__(self, sitting_duration=DEFAULT_SITTING, standing_duration=DEFAULT_STANDING, phase=Phase.SITTING):
        self.phase = phase
        self.paused = False
        self.focus = Focus.TIMER
        self.finished = False
        self.sitting_duration = clamp_duration(sitting_duration)
        self.standing_duration = clamp_duration(standing_duration)
        self.timer = ElapsedTimer()
        log.debug(f"Initialized state machine in phase '{phase.value}' with sitting={self.sitting_duration}s, "
                  f"standing={self.standing_duration}s")

    #region === Durations ===

    def duration_for(self, phase):
        return self.sitting_duration if phase is Phase.SITTING else self.standing_duration

    @property
    def active_duration(self):
        return self.duration_for(self.phase)

    def _set_duration(self, phase, seconds):
        seconds = clamp_duration(seconds)
        if phase is Phase.SITTING:
            self.sitting_duration = seconds
        else:
            self.standing_duration = seconds
        log.debug(f"Set {phase.value} duration to {seconds}s")

    #endregion === Durations ===

    #region === Transitions ===

    def apply(self, command):
        log.debug(f"Applying {command.name} (phase={self.phase.value}, focus={self.focus.value}, paused={self.paused})")

        if command is Command.QUIT:
            self.finished = True
        elif command is Command.PAUSE:
            self.paused = True
            self.timer.pause()
        elif command is Command.RESUME:
            self.paused = False
            self.timer.resume()
        elif command is Command.INCREASE or command is Command.DECREASE:
            phase = _FOCUS_PHASE.get(self.focus)
            if phase is None:
                log.debug(f"Ignoring {command.name}, timer panel has no duration to adjust")
            else:
                delta = STEP if command is Command.INCREASE else -STEP
                self._set_duration(phase, self.duration_for(phase) + delta)
        elif command is Command.NAVIGATE_FORWARD:
            self.focus = _FOCUS_ORDER[(_FOCUS_ORDER.index(self.focus) + 1) % len(_FOCUS_ORDER)]
        elif command is Command.NAVIGATE_BACKWARD:
            self.focus = _FOCUS_ORDER[(_FOCUS_ORDER.index(self.focus) - 1) % len(_FOCUS_ORDER)]
        elif command is Command.RESET:
            if self.focus is Focus.TIMER:
                self._reset_timer()
            else:
                log.debug("Ignoring RESET outside of the timer panel")
        elif command is Command.NEXT:
            if self.focus is Focus.TIMER:
                self._switch_phase()
            else:
                log.debug("Ignoring NEXT outside of the timer panel")
        elif command is Command.TIMER_FINISHED:
            self._switch_phase()
            return Step(notifications=(Notification(self.phase, self.active_duration),))

        return Step()

    # Periodic check run once per host loop iteration. Returns TIMER_FINISHED once the active phase has run out.
    def tick(self):
        if not self.paused and self.timer.current_elapsed > self.active_duration:
            return Command.TIMER_FINISHED
        return None

    # Restarts the timer from zero. A reset never un-pauses: if we're paused, the fresh timer is paused too.
    def _reset_timer(self):
        self.timer.reset()
        if self.paused:
            self.timer.pause()

    def _switch_phase(self):
        self.phase = self.phase.opposite
        self._reset_timer()
        duration = self.active_duration
        log.info(f"Now {self.phase.value} for {format_remaining(duration)}, until {clock_after(duration)}")

    #endregion === Transitions ===

    #region === Derived values ===

    def progress(self):
        return max(0.0, min(1.0, self.timer.current_elapsed / self.active_duration))

    def remaining(self):
        return max(0.0, self.active_duration - self.timer.current_elapsed)

    def setting_fraction(self, phase):
        return (self.duration_for(phase) - MIN_DURATION) / (MAX_DURATION - MIN_DURATION)

    def snapshot(self):
        elapsed = self.timer.current_elapsed
        duration = self.active_duration
        return ReminderSnapshot(
            phase = self.phase,
            paused = self.paused,
            focus = self.focus,
            sitting_duration = self.sitting_duration,
            standing_duration = self.standing_duration,
            elapsed = elapsed,
            progress = max(0.0, min(1.0, elapsed / duration)),
            remaining = max(0.0, duration - elapsed),
            sitting_fraction = self.setting_fraction(Phase.SITTING),
            standing_fraction = self.setting_fraction(Phase.STANDING),
        )

    #endregion === Derived values ===
