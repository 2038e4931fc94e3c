from datetime import datetime, timedelta


# Formats remaining/elapsed seconds for the timer gauge, e.g. 15m13s or 1h02m05s. Negative values clamp to zero.
def format_remaining(seconds):
    seconds = max(0, int(seconds))
    h, rem = divmod(seconds, 3600)
    m, s = divmod(rem, 60)
    if h:
        return f"{h}h{m:02d}m{s:02d}s"
    return f"{m}m{s:02d}s"


# Formats a configured phase length for the settings gauges, always as XhYYm (1h00m, 0h30m).
def format_setting(seconds):
    seconds = max(0, int(seconds))
    h, rem = divmod(seconds, 3600)
    return f"{h}h{rem // 60:02d}m"


# Simply returns the local wall-clock time the given number of seconds from now, as HH:MM:SS.
def clock_after(seconds, now=None):
    now = now or datetime.now()
    return (now + timedelta(seconds=max(0, int(seconds)))).strftime("%H:%M:%S")
