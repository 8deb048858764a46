from .range_selector import RangeSelector, DayState, MONTH_NAMES, DAY_NAMES

__all__ = ["RangeSelector", "DayState", "MONTH_NAMES", "DAY_NAMES"]
