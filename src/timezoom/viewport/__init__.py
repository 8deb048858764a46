from .window import AbsoluteRange, Window, EventInterval, InvalidRangeError
from .engine import ViewportEngine, ViewportEvent, PanState

__all__ = [
    "AbsoluteRange",
    "Window",
    "EventInterval",
    "InvalidRangeError",
    "ViewportEngine",
    "ViewportEvent",
    "PanState",
]
