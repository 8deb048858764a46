import logging
from typing import Callable, Iterable, Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QHBoxLayout

from timezoom.colors.modes import ColorMap
from timezoom.config import ViewportConfig
from timezoom.selection.range_selector import RangeSelector
from timezoom.viewport.engine import ViewportEngine
from timezoom.viewport.window import AbsoluteRange, EventInterval, InvalidRangeError
from timezoom.widgets import DatePickerWidget, TimelineWidget

logger = logging.getLogger(__name__)

EventProvider = Callable[[int, int], Iterable[EventInterval]]


class TimelineAppWidget(QWidget):
    """
    Main composite widget: a date range picker above a zoomable timeline.

    When the picker completes a range, event_provider(start, end) is asked for the
    events of that range and the timeline engine is re-initialized to show all of it.
    The picker and the timeline share nothing but the AbsoluteRange handed over.
    """

    def __init__(self, color_map: ColorMap, event_provider: EventProvider, config: Optional[ViewportConfig] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.color_map = color_map
        self.event_provider = event_provider
        self.config = config or ViewportConfig()

        self.engine = ViewportEngine(self.config)
        self.selector = RangeSelector(tz=self.config.tz)
        self.picker = DatePickerWidget(self.selector, color_map, self)
        self.timeline = TimelineWidget(self.engine, color_map, self)
        self.picker.range_selected.connect(self.set_range)

        picker_row = QHBoxLayout()
        picker_row.addStretch(1)
        picker_row.addWidget(self.picker)
        picker_row.addStretch(1)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)
        layout.addLayout(picker_row)
        layout.addWidget(self.timeline, 1)

    def set_range(self, selected: AbsoluteRange) -> None:
        """Load events for the range and show the whole of it."""
        events = list(self.event_provider(selected.start, selected.end))
        logger.info("Loaded %d events for range [%d, %d]", len(events), selected.start, selected.end)
        self.timeline.set_events(events)
        try:
            self.engine.set_range(selected.start, selected.end)
        except InvalidRangeError as exc:
            # Engine is unavailable now; the timeline paints its placeholder
            logger.error("Cannot show range: %s", exc)
        self.timeline.update()
