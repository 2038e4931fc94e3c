from dataclasses import dataclass

#region === Constants ===

# All durations are whole seconds.
MIN_DURATION = 5 * 60
MAX_DURATION = 4 * 60 * 60
STEP = 5 * 60

DEFAULT_SITTING = 60 * 60
DEFAULT_STANDING = 30 * 60

# How long the host loop waits for a key before running the tick check again. This is also the worst-case latency
# for noticing that a phase has run out.
POLL_INTERVAL = 1.0

#endregion === Constants ===

#region === Schedules ===

# Clamps the given number of seconds into [MIN_DURATION, MAX_DURATION].
def clamp_duration(seconds):
    return int(max(MIN_DURATION, min(MAX_DURATION, seconds)))

# The only schedule we support: the same sitting and standing lengths every time. It's consulted exactly once, at
# startup, to seed the state machine, after which the durations only change through the UI.
@dataclass(frozen=True)
class FixedSchedule:
    sitting: int = DEFAULT_SITTING
    standing: int = DEFAULT_STANDING

    @classmethod
    def from_minutes(cls, sitting_minutes=None, standing_minutes=None):
        sitting = DEFAULT_SITTING if sitting_minutes is None else sitting_minutes * 60
        standing = DEFAULT_STANDING if standing_minutes is None else standing_minutes * 60
        return cls(sitting=sitting, standing=standing)

    def initial_durations(self):
        return clamp_duration(self.sitting), clamp_duration(self.standing)

#endregion === Schedules ===
