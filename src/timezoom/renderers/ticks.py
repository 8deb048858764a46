from datetime import timezone, tzinfo

import numpy as np

from timezoom.timestamps import MS_PER_DAY, MS_PER_HOUR, from_ms
from timezoom.viewport.window import Window

# (view duration must exceed, tick interval), coarsest first
TICK_INTERVALS = (
    (MS_PER_DAY * 3, MS_PER_DAY),
    (MS_PER_DAY * 1.5, MS_PER_HOUR * 12),
    (MS_PER_HOUR * 8, MS_PER_HOUR * 6),
    (MS_PER_HOUR * 4, MS_PER_HOUR * 3),
)
FINEST_INTERVAL = MS_PER_HOUR


def select_interval(view_duration: float) -> int:
    """Tick interval for a visible duration. Wider windows get coarser ticks."""
    for threshold, interval in TICK_INTERVALS:
        if view_duration > threshold:
            return interval
    return FINEST_INTERVAL


def generate_ticks(window: Window, interval: int) -> np.ndarray:
    """Tick timestamps aligned to whole multiples of interval, within [window.start, window.end]."""
    aligned_start = (window.start // interval) * interval
    ticks = np.arange(aligned_start, window.end + 1, interval, dtype=np.int64)
    return ticks[ticks >= window.start]


def _short_date(time) -> str:
    return f"{time.strftime('%b')} {time.day}"


def format_tick_label(timestamp: int, interval: int, tz: tzinfo = timezone.utc) -> str:
    """Date label ("Jan 2") for day ticks, "HH:MM" otherwise. Midnight time ticks get the date on a second line."""
    time = from_ms(timestamp, tz)
    if interval >= MS_PER_DAY:
        return _short_date(time)
    label = time.strftime("%H:%M")
    if time.hour == 0 and time.minute == 0:
        return f"{label}\n{_short_date(time)}"
    return label
