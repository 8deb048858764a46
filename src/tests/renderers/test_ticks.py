import unittest
from datetime import datetime, timedelta, timezone

from timezoom.renderers.ticks import format_tick_label, generate_ticks, select_interval
from timezoom.timestamps import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, to_ms
from timezoom.viewport.window import Window

JAN_1 = to_ms(datetime(2024, 1, 1, tzinfo=timezone.utc))
JAN_2 = JAN_1 + MS_PER_DAY


class TestSelectInterval(unittest.TestCase):
    def test_thresholds(self):
        cases = [
            (4 * MS_PER_DAY, MS_PER_DAY),
            (3 * MS_PER_DAY + 1, MS_PER_DAY),
            (3 * MS_PER_DAY, 12 * MS_PER_HOUR),
            (2 * MS_PER_DAY, 12 * MS_PER_HOUR),
            (36 * MS_PER_HOUR, 6 * MS_PER_HOUR),
            (MS_PER_DAY, 6 * MS_PER_HOUR),
            (8 * MS_PER_HOUR, 3 * MS_PER_HOUR),
            (5 * MS_PER_HOUR, 3 * MS_PER_HOUR),
            (4 * MS_PER_HOUR, MS_PER_HOUR),
            (MS_PER_HOUR, MS_PER_HOUR),
            (0, MS_PER_HOUR),
        ]
        for duration, expected in cases:
            with self.subTest(duration=duration):
                self.assertEqual(expected, select_interval(duration))


class TestGenerateTicks(unittest.TestCase):
    def test_ticks_align_to_interval(self):
        window = Window(JAN_1 + 30 * MS_PER_MINUTE, JAN_1 + 5 * MS_PER_HOUR + 30 * MS_PER_MINUTE)
        ticks = generate_ticks(window, MS_PER_HOUR)
        self.assertEqual([JAN_1 + h * MS_PER_HOUR for h in range(1, 6)], ticks.tolist())
        for tick in ticks.tolist():
            self.assertEqual(0, tick % MS_PER_HOUR)

    def test_window_end_is_inclusive(self):
        ticks = generate_ticks(Window(JAN_1, JAN_1 + 3 * MS_PER_HOUR), MS_PER_HOUR)
        self.assertEqual(4, len(ticks))
        self.assertEqual(JAN_1, ticks[0])
        self.assertEqual(JAN_1 + 3 * MS_PER_HOUR, ticks[-1])

    def test_no_tick_inside_short_window(self):
        window = Window(JAN_1 + 10 * MS_PER_MINUTE, JAN_1 + 50 * MS_PER_MINUTE)
        self.assertEqual(0, len(generate_ticks(window, MS_PER_HOUR)))


class TestFormatTickLabel(unittest.TestCase):
    def test_day_interval_uses_short_date(self):
        self.assertEqual("Jan 2", format_tick_label(JAN_2, MS_PER_DAY))
        self.assertEqual("Jan 2", format_tick_label(JAN_2 + 6 * MS_PER_HOUR, MS_PER_DAY))

    def test_hour_interval_uses_time(self):
        self.assertEqual("13:30", format_tick_label(JAN_2 + 13 * MS_PER_HOUR + 30 * MS_PER_MINUTE, MS_PER_HOUR))
        self.assertEqual("06:00", format_tick_label(JAN_2 + 6 * MS_PER_HOUR, 6 * MS_PER_HOUR))

    def test_midnight_adds_date_line(self):
        self.assertEqual("00:00\nJan 2", format_tick_label(JAN_2, 12 * MS_PER_HOUR))

    def test_labels_follow_time_zone(self):
        plus_two = timezone(timedelta(hours=2))
        self.assertEqual("00:00\nJan 2", format_tick_label(JAN_2 - 2 * MS_PER_HOUR, MS_PER_HOUR, plus_two))
        self.assertEqual("Dec 31", format_tick_label(JAN_1, MS_PER_DAY, timezone(timedelta(hours=-5))))


if __name__ == '__main__':
    unittest.main()
