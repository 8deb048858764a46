import logging
import random

from PySide6.QtWidgets import QMainWindow

from timezoom import EventInterval, MS_PER_DAY, MS_PER_MINUTE
from timezoom.colors import ColorMap
from timezoom.timeline_app_widget import TimelineAppWidget

EVENTS_PER_DAY = 500


def generate_events(start, end):
    """Random 1-6 minute events, about EVENTS_PER_DAY per day of the range."""
    span = end - start
    events = []
    for _ in range(int(span / MS_PER_DAY * EVENTS_PER_DAY)):
        event_start = start + int(random.random() * span)
        duration = int((random.random() * 5 + 1) * MS_PER_MINUTE)
        events.append(EventInterval(event_start, event_start + duration))
    return events


class TimelineWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("High-Fidelity Interactive Timeline")
        self.setMinimumSize(900, 560)
        self.color_map = ColorMap(darkmode=True)
        self.widget = TimelineAppWidget(self.color_map, generate_events, parent=self)
        self.setCentralWidget(self.widget)


if __name__ == "__main__":
    import sys
    from PySide6.QtWidgets import QApplication
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    window = TimelineWindow()
    window.show()
    sys.exit(app.exec())
