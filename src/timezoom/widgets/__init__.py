from .timeline_widget import TimelineWidget
from .date_picker_widget import DatePickerWidget

__all__ = ['TimelineWidget', 'DatePickerWidget']
