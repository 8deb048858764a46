import logging
from typing import Iterable, Optional, Union

from PySide6.QtCore import Qt, QRectF, QLineF
from PySide6.QtGui import QPainter, QPen, QBrush
from PySide6.QtWidgets import QWidget

from timezoom.colors.modes import ColorMap
from timezoom.renderers.projection import EventSet
from timezoom.viewport.engine import ViewportEngine, ViewportEvent
from timezoom.viewport.window import EventInterval

logger = logging.getLogger(__name__)

PLACEHOLDER_TEXT = "Please select a date range to display the timeline."


class TimelineWidget(QWidget):
    """
    Host adapter between Qt input/painting and a ViewportEngine.

    Key behaviors:
    - Wheel zooms around the mouse position (wheel up zooms in)
    - Left button drag pans, release or leaving the widget ends the drag
    - Double click zooms back out to the full range
    - Paints the ruler ticks, one vertical line per visible event start and the end cap
    """

    RULER_HEIGHT = 36

    def __init__(self, engine: ViewportEngine, color_map: ColorMap, parent: Optional[QWidget] = None) -> None:
        """Create timeline view for engine. Call set_events() to supply the data."""
        super().__init__(parent)
        self.engine: ViewportEngine = engine
        self.color_map: ColorMap = color_map
        self.events: EventSet = EventSet()
        self.engine.subscribe(self._on_viewport_event)
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.setMinimumHeight(120)
        self.setMouseTracking(True)

    def set_events(self, events: Union[EventSet, Iterable[EventInterval]]) -> None:
        """Replace the displayed events."""
        self.events = events if isinstance(events, EventSet) else EventSet(events)
        logger.debug("Timeline got %d events", len(self.events))
        self.update()

    def _on_viewport_event(self, event: ViewportEvent) -> None:
        if event is ViewportEvent.PAN_STARTED:
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
        elif event is ViewportEvent.PAN_ENDED:
            self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(QBrush(self.color_map.get_object_color("surface-lower")))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRect(self.rect())

        frame = self.engine.frame(self.events)
        if frame is None or not frame.renderable:
            painter.setPen(QPen(self.color_map.get_object_color("text-muted"), 1))
            painter.drawText(QRectF(self.rect()), Qt.AlignmentFlag.AlignCenter, PLACEHOLDER_TEXT)
            return

        width = self.width()
        height = self.height()
        ruler_height = self.RULER_HEIGHT

        # Ruler
        painter.fillRect(QRectF(0, 0, width, ruler_height), self.color_map.get_object_color("surface-base"))
        painter.setPen(QPen(self.color_map.get_object_color("border-intense"), 1))
        painter.drawLine(0, ruler_height, width, ruler_height)
        for tick in frame.ticks:
            x = tick.percent / 100 * width
            painter.setPen(QPen(self.color_map.get_object_color("border-intense"), 1))
            painter.drawLine(QLineF(x, ruler_height - 6, x, ruler_height))
            painter.setPen(QPen(self.color_map.get_object_color("border"), 1))
            painter.drawLine(QLineF(x, ruler_height, x, height))
            painter.setPen(QPen(self.color_map.get_object_color("text-base"), 1))
            painter.drawText(QRectF(x - 40, 2, 80, ruler_height - 8), Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignTop, tick.label)

        # Data area
        painter.setClipRect(QRectF(0, ruler_height, width, height - ruler_height))
        if frame.markers:
            painter.setPen(QPen(self.color_map.get_timeline_color("event-marker"), 1))
            painter.drawLines([
                QLineF(marker.percent / 100 * width, ruler_height, marker.percent / 100 * width, height)
                for marker in frame.markers
            ])

        if frame.end_cap is not None:
            left = frame.end_cap.left_percent / 100 * width
            cap_width = frame.end_cap.width_percent / 100 * width
            painter.fillRect(QRectF(left, ruler_height, cap_width, height - ruler_height), self.color_map.get_timeline_color("end-cap"))

    def wheelEvent(self, event):
        delta = event.angleDelta().y()
        if delta == 0:
            event.ignore()
            return
        # Wheel up (positive angle delta) zooms in
        self.engine.zoom(event.position().x(), self.width(), -delta)
        event.accept()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.engine.pan_start(event.position().x())

    def mouseMoveEvent(self, event):
        self.engine.pan_move(event.position().x(), self.width())

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.engine.pan_end()

    def leaveEvent(self, event):
        self.engine.pan_end()
        super().leaveEvent(event)

    def mouseDoubleClickEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.engine.reset_zoom()
