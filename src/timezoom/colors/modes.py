from typing import Literal, Optional
from PySide6.QtGui import QColor


ObjectColorName = Literal["surface-base", "surface-lower", "surface-raised", "border", "border-intense", "text-base", "text-muted"]
TimelineColorName = Literal["event-marker", "end-cap", "selected-day", "in-range-day", "start-node"]


class ColorMap:

    # Ruler, calendar and text colors for light & dark mode
    _object_colors: dict[str, list[QColor]] = {
        "surface-base": [QColor(255, 255, 255), QColor(20, 24, 31)],
        "surface-lower": [QColor(237, 240, 242), QColor(0, 0, 0)],
        "surface-raised": [QColor(255, 255, 255), QColor(31, 38, 51)],
        "border": [QColor(225, 229, 234), QColor(39, 49, 63)],
        "border-intense": [QColor(195, 206, 215), QColor(66, 82, 102)],
        "text-base": [QColor(24, 29, 37), QColor(237, 239, 243)],
        "text-muted": [QColor(146, 159, 177), QColor(138, 150, 163)],
    }

    # Timeline accents for light & dark mode
    _timeline_colors: dict[str, list[QColor]] = {
        "event-marker": [QColor(30, 136, 229, 160), QColor(100, 181, 246, 160)],
        "end-cap": [QColor(96, 110, 128, 50), QColor(182, 191, 201, 40)],
        "selected-day": [QColor(30, 136, 229), QColor(66, 165, 245)],
        "in-range-day": [QColor(187, 222, 251), QColor(21, 67, 112)],
        "start-node": [QColor(255, 143, 0), QColor(255, 183, 77)],
    }

    def __init__(self, darkmode: bool = True) -> None:
        """Create color map. darkmode=True for dark theme, False for light theme."""
        self.darkmode: bool = darkmode

    def get_object_color(self, name: ObjectColorName, darkmode: Optional[bool] = None) -> QColor:
        """Get ruler and calendar color (surface, border, text). Uses instance darkmode if not specified."""
        return ColorMap._object_colors[name][self._mode_loc(darkmode)]

    def get_timeline_color(self, name: TimelineColorName, darkmode: Optional[bool] = None) -> QColor:
        """Get color for event markers, the end cap and date picker highlights."""
        return ColorMap._timeline_colors[name][self._mode_loc(darkmode)]

    def _mode_loc(self, darkmode: Optional[bool]) -> int:
        if darkmode is None:
            darkmode = self.darkmode
        return 1 if darkmode else 0
