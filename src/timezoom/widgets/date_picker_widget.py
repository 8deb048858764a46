from typing import Optional

from PySide6.QtCore import Qt, QRectF, Signal
from PySide6.QtGui import QPainter, QPen, QBrush
from PySide6.QtWidgets import QWidget

from timezoom.colors.modes import ColorMap
from timezoom.selection.range_selector import DAY_NAMES, RangeSelector
from timezoom.viewport.window import AbsoluteRange


class DatePickerWidget(QWidget):
    """
    Painted month calendar for picking an absolute range.

    Layout, top to bottom: month header with previous/next arrows, weekday names,
    a 6x7 day grid and a From/To info row. Clicks are delegated to a RangeSelector.
    """

    range_selected = Signal(object)  # AbsoluteRange

    CELL = 36
    HEADER_HEIGHT = 32
    NAMES_HEIGHT = 22
    INFO_HEIGHT = 26
    ROWS = 6

    def __init__(self, selector: Optional[RangeSelector] = None, color_map: Optional[ColorMap] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.selector: RangeSelector = selector or RangeSelector()
        self.color_map: ColorMap = color_map or ColorMap()
        self.setFixedSize(
            7 * self.CELL,
            self.HEADER_HEIGHT + self.NAMES_HEIGHT + self.ROWS * self.CELL + self.INFO_HEIGHT,
        )

    def _prev_rect(self) -> QRectF:
        return QRectF(0, 0, self.CELL, self.HEADER_HEIGHT)

    def _next_rect(self) -> QRectF:
        return QRectF(self.width() - self.CELL, 0, self.CELL, self.HEADER_HEIGHT)

    def _cell_rect(self, index: int) -> QRectF:
        row, column = divmod(index, 7)
        top = self.HEADER_HEIGHT + self.NAMES_HEIGHT + row * self.CELL
        return QRectF(column * self.CELL, top, self.CELL, self.CELL)

    def _cell_at(self, x: float, y: float) -> Optional[int]:
        top = self.HEADER_HEIGHT + self.NAMES_HEIGHT
        if x < 0 or y < top or x >= 7 * self.CELL:
            return None
        row = int((y - top) // self.CELL)
        if row >= self.ROWS:
            return None
        return row * 7 + int(x // self.CELL)

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), self.color_map.get_object_color("surface-raised"))
        text_pen = QPen(self.color_map.get_object_color("text-base"), 1)
        muted_pen = QPen(self.color_map.get_object_color("text-muted"), 1)

        painter.setPen(text_pen)
        painter.drawText(self._prev_rect(), Qt.AlignmentFlag.AlignCenter, "‹")
        painter.drawText(self._next_rect(), Qt.AlignmentFlag.AlignCenter, "›")
        painter.drawText(QRectF(0, 0, self.width(), self.HEADER_HEIGHT), Qt.AlignmentFlag.AlignCenter, self.selector.title)

        painter.setPen(muted_pen)
        for column, name in enumerate(DAY_NAMES):
            painter.drawText(QRectF(column * self.CELL, self.HEADER_HEIGHT, self.CELL, self.NAMES_HEIGHT), Qt.AlignmentFlag.AlignCenter, name)

        for index, day in enumerate(self.selector.month_grid()):
            if day is None:
                continue
            rect = self._cell_rect(index).adjusted(2, 2, -2, -2)
            state = self.selector.day_state(day)
            fill = None
            if state.start_node:
                fill = self.color_map.get_timeline_color("start-node")
            elif state.selected:
                fill = self.color_map.get_timeline_color("selected-day")
            elif state.in_range:
                fill = self.color_map.get_timeline_color("in-range-day")
            if fill is not None:
                painter.setPen(Qt.PenStyle.NoPen)
                painter.setBrush(QBrush(fill))
                painter.drawRoundedRect(rect, 4, 4)
            painter.setPen(text_pen)
            painter.drawText(rect, Qt.AlignmentFlag.AlignCenter, str(day))

        info_top = self.height() - self.INFO_HEIGHT
        range_from = self.selector.range_from.isoformat() if self.selector.range_from else "..."
        range_to = self.selector.range_to.isoformat() if self.selector.range_to else "..."
        painter.setPen(muted_pen)
        half = self.width() / 2
        painter.drawText(QRectF(0, info_top, half, self.INFO_HEIGHT), Qt.AlignmentFlag.AlignCenter, f"From: {range_from}")
        painter.drawText(QRectF(half, info_top, half, self.INFO_HEIGHT), Qt.AlignmentFlag.AlignCenter, f"To: {range_to}")

    def mousePressEvent(self, event):
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        if self._prev_rect().contains(pos):
            self.selector.change_month(-1)
        elif self._next_rect().contains(pos):
            self.selector.change_month(1)
        else:
            self.click_cell(self._cell_at(pos.x(), pos.y()))
        self.update()

    def click_cell(self, index: Optional[int]) -> Optional[AbsoluteRange]:
        """Click the grid cell at index (row * 7 + column). Blank and out-of-grid cells are ignored."""
        grid = self.selector.month_grid()
        if index is None or index >= len(grid) or grid[index] is None:
            return None
        selected = self.selector.click_day(grid[index])
        if selected is not None:
            self.range_selected.emit(selected)
        self.update()
        return selected
