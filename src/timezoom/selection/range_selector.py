import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timezone, tzinfo
from typing import Callable, List, Literal, Optional, Tuple

from timezoom.timestamps import to_ms
from timezoom.viewport.window import AbsoluteRange

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]


@dataclass(frozen=True)
class DayState:
    selected: bool = False
    in_range: bool = False
    start_node: bool = False


class RangeSelector:
    """
    Month calendar model with a two-click range selection.

    The first click sets a candidate start and clears the end, the second click sets
    the end. The finished pair is always ordered so that start <= end and is emitted
    as an AbsoluteRange covering whole days: 00:00:00.000 of the first day to
    23:59:59.999 of the last day in tz.
    """

    def __init__(self, today: Optional[date] = None, tz: tzinfo = timezone.utc, on_range_select: Optional[Callable[[AbsoluteRange], None]] = None) -> None:
        today = today or datetime.now(tz).date()
        self.tz: tzinfo = tz
        self.year: int = today.year
        self.month: int = today.month
        self.range_from: Optional[date] = None
        self.range_to: Optional[date] = None
        self.selecting: Literal["from", "to"] = "from"
        self.on_range_select = on_range_select

    @property
    def displayed_month(self) -> Tuple[int, int]:
        return self.year, self.month

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    def change_month(self, offset: int) -> None:
        """Move the displayed month by offset months (negative goes back)."""
        index = self.year * 12 + (self.month - 1) + offset
        self.year, month_index = divmod(index, 12)
        self.month = month_index + 1

    def month_grid(self) -> List[Optional[int]]:
        """Leading None blanks up to the first weekday (Sunday first), then day numbers."""
        first_weekday, days_in_month = calendar.monthrange(self.year, self.month)
        blanks = (first_weekday + 1) % 7  # monthrange counts from Monday
        return [None] * blanks + list(range(1, days_in_month + 1))

    def click_day(self, day: int) -> Optional[AbsoluteRange]:
        """Handle a click on day of the displayed month. Returns the range when the selection completes."""
        clicked = date(self.year, self.month, day)
        if self.selecting == "from":
            self.range_from = clicked
            self.range_to = None
            self.selecting = "to"
            return None

        first, last = sorted((self.range_from, clicked))
        self.range_from, self.range_to = first, last
        self.selecting = "from"
        selected = self.absolute_range()
        logger.info("Selected range %s to %s", first.isoformat(), last.isoformat())
        if self.on_range_select:
            self.on_range_select(selected)
        return selected

    def absolute_range(self) -> Optional[AbsoluteRange]:
        """The completed selection as whole days in epoch milliseconds, None while incomplete."""
        if self.range_from is None or self.range_to is None:
            return None
        start = to_ms(datetime.combine(self.range_from, time.min), self.tz)
        end = to_ms(datetime.combine(self.range_to, time(23, 59, 59, 999000)), self.tz)
        return AbsoluteRange.validated(start, end)

    def day_state(self, day: int) -> DayState:
        """Highlight flags of a day in the displayed month."""
        current = date(self.year, self.month, day)
        selected = current in (self.range_from, self.range_to)
        in_range = (
            self.range_from is not None
            and self.range_to is not None
            and self.range_from < current < self.range_to
        )
        start_node = self.selecting == "to" and current == self.range_from
        return DayState(selected=selected, in_range=in_range, start_node=start_node)
