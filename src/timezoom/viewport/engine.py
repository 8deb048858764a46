import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from timezoom.config import ViewportConfig
from timezoom.renderers.projection import TimelineFrame, compute_frame
from timezoom.viewport.window import AbsoluteRange, InvalidRangeError, Window

logger = logging.getLogger(__name__)


class ViewportEvent(Enum):
    """Notifications emitted to the rendering layer."""

    RANGE_CHANGED = "range-changed"
    WINDOW_CHANGED = "window-changed"
    PAN_STARTED = "pan-started"
    PAN_ENDED = "pan-ended"


@dataclass
class PanState:
    """Transient drag state, scoped to a single drag gesture."""

    is_panning: bool = False
    last_pointer_x: float = 0.0

    def start(self, pointer_x: float) -> None:
        self.is_panning = True
        self.last_pointer_x = pointer_x

    def move(self, pointer_x: float) -> float:
        """Record new pointer position and return the pixel delta since the last one."""
        delta_x = pointer_x - self.last_pointer_x
        self.last_pointer_x = pointer_x
        return delta_x

    def end(self) -> None:
        self.is_panning = False


class ViewportEngine:
    """
    Owns the visible window of a timeline and the zoom/pan gestures that move it.

    The window always satisfies
    ``range.start <= window.start < window.end <= range.end``
    (``<=`` for a zero-length range). Every gesture replaces the window with a new
    ``Window`` instance so derived computations always see a consistent snapshot.

    Without a valid absolute range the engine is *unavailable*: ``window`` is None and
    every gesture is a no-op.
    """

    def __init__(self, config: Optional[ViewportConfig] = None) -> None:
        """Create engine in the unavailable state. Call set_range() to initialize."""
        self.config: ViewportConfig = config or ViewportConfig()
        self._range: Optional[AbsoluteRange] = None
        self._window: Optional[Window] = None
        self.pan_state: PanState = PanState()
        self._listeners: list[Callable[[ViewportEvent], None]] = []
        self._frame_window: Optional[Window] = None
        self._frame_events = None
        self._frame: Optional[TimelineFrame] = None

    # ------------------------------------------------------------------ state

    @property
    def absolute_range(self) -> Optional[AbsoluteRange]:
        return self._range

    @property
    def window(self) -> Optional[Window]:
        return self._window

    @property
    def available(self) -> bool:
        return self._range is not None

    @property
    def min_visible_duration(self) -> int:
        return self.config.min_visible_duration

    @property
    def max_visible_duration(self) -> float:
        if self._range is None:
            return 0.0
        return self._range.span * self.config.max_range_multiple

    def set_range(self, start: Optional[int], end: Optional[int]) -> None:
        """Initialize the window to the full [start, end] range, discarding zoom and pan state.

        Raises InvalidRangeError (and leaves the engine unavailable) for a malformed range.
        """
        self.pan_end()
        try:
            self._range = AbsoluteRange.validated(start, end)
        except InvalidRangeError:
            logger.warning("Rejected timeline range start=%r end=%r", start, end)
            self._range = None
            self._window = None
            self._emit(ViewportEvent.RANGE_CHANGED)
            raise
        self._window = Window(self._range.start, self._range.end)
        logger.info("Timeline range set to [%d, %d] (%d ms)", self._range.start, self._range.end, self._range.span)
        self._emit(ViewportEvent.RANGE_CHANGED)
        self._emit(ViewportEvent.WINDOW_CHANGED)

    def clear_range(self) -> None:
        """Drop the absolute range and become unavailable."""
        self.pan_end()
        self._range = None
        self._window = None
        self._emit(ViewportEvent.RANGE_CHANGED)

    def set_window(self, start: int, end: int) -> bool:
        """Show [start, end], clipped to the absolute range. Returns True if the window changed."""
        if self._range is None:
            return False
        start = max(int(start), self._range.start)
        end = min(int(end), self._range.end)
        if end <= start and self._range.span > 0:
            raise ValueError(f"Window [{start}, {end}] is empty inside the timeline range")
        return self._set_window(Window(start, end))

    def reset_zoom(self) -> bool:
        """Zoom all the way out to the full absolute range."""
        if self._range is None:
            return False
        return self._set_window(Window(self._range.start, self._range.end))

    # ------------------------------------------------------------------ zoom

    def zoom(self, pointer_x: float, container_width: float, direction: float) -> bool:
        """Zoom around the time under pointer_x. direction < 0 zooms in, > 0 zooms out.

        Returns True if the window changed.
        """
        if self._window is None or not container_width or container_width <= 0 or direction == 0:
            logger.debug("Zoom ignored: window=%s width=%s direction=%s", self._window, container_width, direction)
            return False

        view = self._window
        bounds = self._range
        percent = pointer_x / container_width
        time_at_cursor = view.time_at(percent)

        zoom_factor = self.config.zoom_in_factor if direction < 0 else self.config.zoom_out_factor
        new_duration = view.duration * zoom_factor

        if new_duration < self.min_visible_duration or new_duration > self.max_visible_duration:
            logger.debug("Zoom ignored: duration %.0f ms outside [%d, %.0f]", new_duration, self.min_visible_duration, self.max_visible_duration)
            return False

        new_start = time_at_cursor - (time_at_cursor - view.start) * zoom_factor
        new_end = new_start + new_duration

        # Clamp to the range, then restore the requested duration from the end if one side was cut
        if new_start < bounds.start:
            new_start = bounds.start
        if new_end > bounds.end:
            new_end = bounds.end
        if new_end - new_start < new_duration:
            new_start = new_end - new_duration
            if new_start < bounds.start:
                new_start = bounds.start

        return self._set_window(Window(round(new_start), round(new_end)))

    # ------------------------------------------------------------------ pan

    def pan_start(self, pointer_x: float) -> None:
        """Begin a drag gesture at pointer_x."""
        if self._window is None:
            return
        self.pan_state.start(pointer_x)
        self._emit(ViewportEvent.PAN_STARTED)

    def pan_move(self, pointer_x: float, container_width: float) -> bool:
        """Translate the window so content follows the pointer. Returns True if the window changed."""
        if not self.pan_state.is_panning or self._window is None:
            return False
        if not container_width or container_width <= 0:
            logger.debug("Pan ignored: container width %s", container_width)
            return False

        delta_x = self.pan_state.move(pointer_x)
        view = self._window
        bounds = self._range
        duration = view.duration
        time_delta = (delta_x / container_width) * duration
        new_start = view.start - time_delta
        new_end = view.end - time_delta

        if new_start <= bounds.start:
            window = Window(bounds.start, bounds.start + duration)
        elif new_end >= bounds.end:
            window = Window(bounds.end - duration, bounds.end)
        else:
            start = round(new_start)
            window = Window(start, start + duration)
        return self._set_window(window)

    def pan_end(self) -> None:
        """End a drag gesture. Also used for pointer-leave."""
        if not self.pan_state.is_panning:
            return
        self.pan_state.end()
        self._emit(ViewportEvent.PAN_ENDED)

    # ------------------------------------------------------------------ derived

    def frame(self, events) -> Optional[TimelineFrame]:
        """Ticks, event markers and end cap for the current window, or None when unavailable.

        events is an EventSet or a sequence of EventInterval. The result is cached until
        the window or the events object changes.
        """
        if self._window is None:
            return None
        if self._frame is None or self._frame_window != self._window or self._frame_events is not events:
            self._frame = compute_frame(self._window, events, self.config.tz)
            self._frame_window = self._window
            self._frame_events = events
        return self._frame

    # ------------------------------------------------------------------ listeners

    def subscribe(self, callback: Callable[[ViewportEvent], None]) -> None:
        """Register callback(event) for range, window and pan notifications."""
        if callback not in self._listeners:
            self._listeners.append(callback)

    def unsubscribe(self, callback: Callable[[ViewportEvent], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _emit(self, event: ViewportEvent) -> None:
        for callback in list(self._listeners):
            callback(event)

    def _set_window(self, window: Window) -> bool:
        if window == self._window:
            return False
        self._window = window
        self._emit(ViewportEvent.WINDOW_CHANGED)
        return True
