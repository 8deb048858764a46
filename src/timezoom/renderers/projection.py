"""
Projection of ticks, events and the trailing no-data region onto the visible window.

All positions are percentages of the container width (0 = window start, 100 = window end)
so the rendering layer can scale them to any pixel width.
"""

from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import Iterable, Optional, Sequence, Tuple, Union

import numpy as np

from timezoom.renderers.ticks import format_tick_label, generate_ticks, select_interval
from timezoom.viewport.window import EventInterval, Window


class EventSet:
    """Immutable event collection backed by numpy start/end arrays."""

    def __init__(self, events: Iterable[EventInterval] = ()) -> None:
        self.events: Tuple[EventInterval, ...] = tuple(events)
        self.starts: np.ndarray = np.fromiter((e.start for e in self.events), dtype=np.int64, count=len(self.events))
        self.ends: np.ndarray = np.fromiter((e.end for e in self.events), dtype=np.int64, count=len(self.events))
        self.starts.setflags(write=False)
        self.ends.setflags(write=False)

    def __len__(self) -> int:
        return len(self.events)

    def __iter__(self):
        return iter(self.events)

    def __getitem__(self, index: int) -> EventInterval:
        return self.events[index]

    @property
    def data_end(self) -> Optional[int]:
        """Latest event end, None when empty."""
        if not self.events:
            return None
        return int(self.ends.max())

    def overlapping(self, window: Window) -> np.ndarray:
        """Indices of events overlapping the window (inclusive bounds)."""
        mask = (self.ends >= window.start) & (self.starts <= window.end)
        return np.flatnonzero(mask)


@dataclass(frozen=True)
class Tick:
    timestamp: int
    label: str
    percent: float


@dataclass(frozen=True)
class EventMarker:
    index: int  # position in the EventSet
    percent: float


@dataclass(frozen=True)
class EndCap:
    left_percent: float
    width_percent: float


@dataclass(frozen=True)
class TimelineFrame:
    """Everything the rendering layer needs for one window snapshot."""

    window: Window
    interval: int
    ticks: Tuple[Tick, ...] = ()
    markers: Tuple[EventMarker, ...] = ()
    end_cap: Optional[EndCap] = None
    renderable: bool = True


def compute_frame(
    window: Window,
    events: Union[EventSet, Sequence[EventInterval]],
    tz: tzinfo = timezone.utc,
) -> TimelineFrame:
    """Derive ticks, event markers and end cap from a window and an event set. Pure."""
    if not isinstance(events, EventSet):
        events = EventSet(events)

    view_duration = window.duration
    interval = select_interval(view_duration)
    if view_duration <= 0:
        return TimelineFrame(window=window, interval=interval, renderable=False)

    # percent_of works elementwise on the int64 arrays
    tick_times = generate_ticks(window, interval)
    tick_percents = window.percent_of(tick_times)
    ticks = tuple(
        Tick(timestamp=t, label=format_tick_label(t, interval, tz), percent=p)
        for t, p in zip(tick_times.tolist(), tick_percents.tolist())
    )

    indices = events.overlapping(window)
    marker_percents = window.percent_of(events.starts[indices])
    markers = tuple(
        EventMarker(index=i, percent=p)
        for i, p in zip(indices.tolist(), marker_percents.tolist())
    )

    data_end = events.data_end
    if data_end is None:
        data_end = window.end
    cap_left = window.percent_of(data_end)
    cap_width = (window.end - data_end) / view_duration * 100
    end_cap = EndCap(left_percent=cap_left, width_percent=cap_width) if cap_left < 100 else None

    return TimelineFrame(
        window=window,
        interval=interval,
        ticks=ticks,
        markers=markers,
        end_cap=end_cap,
    )
