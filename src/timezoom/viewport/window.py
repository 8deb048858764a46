from dataclasses import dataclass
from typing import Optional


class InvalidRangeError(ValueError):
    """Raised when an absolute range is missing a bound or has start > end."""


@dataclass(frozen=True)
class AbsoluteRange:
    """Full time span [start, end] the timeline can ever show, in epoch milliseconds."""

    start: int
    end: int

    @classmethod
    def validated(cls, start: Optional[int], end: Optional[int]) -> "AbsoluteRange":
        """Create range, raising InvalidRangeError for missing bounds or start > end."""
        if start is None or end is None:
            raise InvalidRangeError(f"Range bounds are missing: start={start!r}, end={end!r}")
        if start > end:
            raise InvalidRangeError(f"Range start {start} is after end {end}")
        return cls(int(start), int(end))

    @property
    def span(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Window:
    """Visible sub-interval of the absolute range. Replaced on every gesture, never mutated."""

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    def time_at(self, percent: float) -> float:
        """Time value at fraction percent (0..1) of the window."""
        return self.start + self.duration * percent

    def percent_of(self, timestamp: float) -> Optional[float]:
        """Horizontal position of timestamp in percent of the window, None for a zero-length window."""
        if self.duration == 0:
            return None
        return (timestamp - self.start) / self.duration * 100


@dataclass(frozen=True)
class EventInterval:
    """Externally supplied time-stamped interval."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Event start {self.start} is after end {self.end}")
