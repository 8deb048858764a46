"""
timezoom public API.

The viewport model below has no Qt dependency. The PySide6 widgets live in
timezoom.widgets, timezoom.colors and timezoom.timeline_app_widget.
"""

from .timestamps import MS_PER_MINUTE, MS_PER_HOUR, MS_PER_DAY, to_ms, from_ms
from .config import ViewportConfig
from .viewport import AbsoluteRange, Window, EventInterval, InvalidRangeError, ViewportEngine, ViewportEvent, PanState
from .renderers.ticks import select_interval, generate_ticks, format_tick_label
from .renderers.projection import EventSet, Tick, EventMarker, EndCap, TimelineFrame, compute_frame
from .selection import RangeSelector

__all__ = [
    "MS_PER_MINUTE",
    "MS_PER_HOUR",
    "MS_PER_DAY",
    "to_ms",
    "from_ms",
    "ViewportConfig",
    "AbsoluteRange",
    "Window",
    "EventInterval",
    "InvalidRangeError",
    "ViewportEngine",
    "ViewportEvent",
    "PanState",
    "select_interval",
    "generate_ticks",
    "format_tick_label",
    "EventSet",
    "Tick",
    "EventMarker",
    "EndCap",
    "TimelineFrame",
    "compute_frame",
    "RangeSelector",
]
