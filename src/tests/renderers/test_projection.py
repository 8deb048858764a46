import unittest
from datetime import datetime, timezone

from timezoom.renderers.projection import EndCap, EventSet, compute_frame
from timezoom.timestamps import MS_PER_DAY, MS_PER_HOUR, MS_PER_MINUTE, to_ms
from timezoom.viewport.window import EventInterval, Window

JAN_1 = to_ms(datetime(2024, 1, 1, tzinfo=timezone.utc))


class TestEventSet(unittest.TestCase):
    def test_arrays_and_data_end(self):
        events = EventSet([EventInterval(10, 20), EventInterval(5, 40), EventInterval(30, 35)])
        self.assertEqual(3, len(events))
        self.assertEqual([10, 5, 30], events.starts.tolist())
        self.assertEqual(40, events.data_end)
        self.assertIsNone(EventSet().data_end)

    def test_overlapping_uses_inclusive_bounds(self):
        events = EventSet([EventInterval(0, 10), EventInterval(10, 20), EventInterval(21, 30), EventInterval(31, 40)])
        self.assertEqual([0, 1, 2], events.overlapping(Window(10, 30)).tolist())

    def test_window_percent_of(self):
        window = Window(100, 300)
        self.assertEqual(25.0, window.percent_of(150))
        self.assertEqual(-50.0, window.percent_of(0))
        self.assertIsNone(Window(100, 100).percent_of(100))

    def test_event_must_not_end_before_start(self):
        with self.assertRaises(ValueError):
            EventInterval(20, 10)


class TestComputeFrame(unittest.TestCase):
    def test_four_day_range_gets_daily_date_ticks(self):
        frame = compute_frame(Window(JAN_1, JAN_1 + 4 * MS_PER_DAY), [])
        self.assertEqual(MS_PER_DAY, frame.interval)
        self.assertEqual(["Jan 1", "Jan 2", "Jan 3", "Jan 4", "Jan 5"], [tick.label for tick in frame.ticks])
        self.assertEqual([0.0, 25.0, 50.0, 75.0, 100.0], [tick.percent for tick in frame.ticks])

    def test_exactly_three_days_uses_twelve_hour_ticks(self):
        frame = compute_frame(Window(JAN_1, JAN_1 + 3 * MS_PER_DAY), [])
        self.assertEqual(12 * MS_PER_HOUR, frame.interval)
        self.assertEqual(7, len(frame.ticks))
        self.assertEqual("00:00\nJan 1", frame.ticks[0].label)
        self.assertEqual("12:00", frame.ticks[1].label)

    def test_event_appears_when_window_reaches_it(self):
        x = JAN_1 + 2 * MS_PER_DAY
        events = EventSet([EventInterval(x, x + MS_PER_MINUTE)])

        frame = compute_frame(Window(JAN_1, JAN_1 + MS_PER_DAY), events)
        self.assertEqual((), frame.markers)

        window = Window(x - 6 * MS_PER_HOUR, x + 2 * MS_PER_HOUR)
        frame = compute_frame(window, events)
        self.assertEqual(1, len(frame.markers))
        self.assertEqual(0, frame.markers[0].index)
        self.assertAlmostEqual((x - window.start) / window.duration * 100, frame.markers[0].percent)
        self.assertAlmostEqual(75.0, frame.markers[0].percent)

    def test_event_overlapping_window_start_is_kept(self):
        events = [EventInterval(JAN_1 - MS_PER_HOUR, JAN_1 + MS_PER_HOUR)]
        frame = compute_frame(Window(JAN_1, JAN_1 + 4 * MS_PER_HOUR), events)
        self.assertEqual(1, len(frame.markers))
        self.assertAlmostEqual(-25.0, frame.markers[0].percent)

    def test_end_cap_covers_window_after_last_event(self):
        window = Window(JAN_1, JAN_1 + 4 * MS_PER_HOUR)
        events = [EventInterval(JAN_1, JAN_1 + MS_PER_HOUR), EventInterval(JAN_1 + MS_PER_HOUR, JAN_1 + 2 * MS_PER_HOUR)]
        frame = compute_frame(window, events)
        self.assertEqual(EndCap(left_percent=50.0, width_percent=50.0), frame.end_cap)

    def test_no_end_cap_when_data_reaches_window_end(self):
        window = Window(JAN_1, JAN_1 + 4 * MS_PER_HOUR)
        self.assertIsNone(compute_frame(window, []).end_cap)
        self.assertIsNone(compute_frame(window, [EventInterval(JAN_1, JAN_1 + 5 * MS_PER_HOUR)]).end_cap)

    def test_tick_percent(self):
        window = Window(JAN_1 + 30 * MS_PER_MINUTE, JAN_1 + 2 * MS_PER_HOUR + 30 * MS_PER_MINUTE)
        frame = compute_frame(window, [])
        self.assertEqual([JAN_1 + MS_PER_HOUR, JAN_1 + 2 * MS_PER_HOUR], [tick.timestamp for tick in frame.ticks])
        self.assertEqual([25.0, 75.0], [tick.percent for tick in frame.ticks])

    def test_compute_frame_is_idempotent(self):
        window = Window(JAN_1 + 17 * MS_PER_MINUTE, JAN_1 + 9 * MS_PER_HOUR)
        events = EventSet(EventInterval(JAN_1 + i * 7 * MS_PER_MINUTE, JAN_1 + i * 7 * MS_PER_MINUTE + MS_PER_MINUTE) for i in range(60))
        self.assertEqual(compute_frame(window, events), compute_frame(window, events))

    def test_zero_length_window_is_not_renderable(self):
        frame = compute_frame(Window(JAN_1, JAN_1), [EventInterval(JAN_1, JAN_1)])
        self.assertFalse(frame.renderable)
        self.assertEqual((), frame.ticks)
        self.assertEqual((), frame.markers)
        self.assertIsNone(frame.end_cap)


if __name__ == '__main__':
    unittest.main()
