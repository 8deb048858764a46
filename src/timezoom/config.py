"""Viewport configuration."""

from dataclasses import dataclass, field
from datetime import timezone, tzinfo

from timezoom.timestamps import MS_PER_HOUR


@dataclass(frozen=True)
class ViewportConfig:
    """Zoom step sizes, visible duration limits and display time zone."""

    zoom_in_factor: float = 0.85
    zoom_out_factor: float = 1.15
    min_visible_duration: int = MS_PER_HOUR
    max_range_multiple: float = 2.0  # max visible duration as a multiple of the absolute range span
    tz: tzinfo = field(default=timezone.utc)

    def __post_init__(self) -> None:
        if not 0 < self.zoom_in_factor < 1:
            raise ValueError(f"zoom_in_factor must be in (0, 1), got {self.zoom_in_factor}")
        if self.zoom_out_factor <= 1:
            raise ValueError(f"zoom_out_factor must be > 1, got {self.zoom_out_factor}")
        if self.min_visible_duration <= 0:
            raise ValueError(f"min_visible_duration must be positive, got {self.min_visible_duration}")
        if self.max_range_multiple < 1:
            raise ValueError(f"max_range_multiple must be >= 1, got {self.max_range_multiple}")
